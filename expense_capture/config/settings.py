"""
Parser configuration: keyword tables, defaults and the reference clock.

Configuration is an explicit value handed to the parser, so deployments can
tune keyword lists per region and tests can pin them, without touching the
extraction rules. Values come from (in order of precedence) a JSON file named
by RECEIPT_PARSER_CONFIG, environment variables (optionally from a .env file)
and the built-in defaults.
"""

import datetime as dt
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dateutil import tz
from dateutil.parser import isoparse
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..exceptions import ConfigurationError
from ..models import PaymentMethod
from ..utils.logging_config import logger
from ..utils.normalization import normalize_keywords
from . import defaults


class ParserConfig(BaseModel):
    """
    Options recognised by the receipt parser.

    The camelCase names (``categoryKeywords``, ``merchantKeywords``,
    ``defaultCategory``, ``defaultPaymentMethod``, ``acceptedPaymentMethods``)
    are accepted as aliases so that configuration files shared with the
    mobile client can be used unchanged.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, validate_default=True)

    category_keywords: Dict[str, List[str]] = Field(
        default_factory=lambda: dict(defaults.CATEGORY_KEYWORDS), alias="categoryKeywords"
    )
    merchant_keywords: List[str] = Field(
        default_factory=lambda: list(defaults.MERCHANT_KEYWORDS), alias="merchantKeywords"
    )
    merchant_skip_lines: List[str] = Field(
        default_factory=lambda: list(defaults.MERCHANT_SKIP_LINES), alias="merchantSkipLines"
    )
    merchant_scan_lines: int = Field(
        default=defaults.MERCHANT_SCAN_LINES, ge=3, le=5, alias="merchantScanLines"
    )
    default_category: str = Field(default=defaults.DEFAULT_CATEGORY, alias="defaultCategory")
    payment_keywords: Dict[PaymentMethod, List[str]] = Field(
        default_factory=lambda: dict(defaults.PAYMENT_KEYWORDS), alias="paymentKeywords"
    )
    default_payment_method: PaymentMethod = Field(
        default=defaults.DEFAULT_PAYMENT_METHOD, alias="defaultPaymentMethod"
    )
    accepted_payment_methods: List[PaymentMethod] = Field(
        default_factory=lambda: list(defaults.ACCEPTED_PAYMENT_METHODS), alias="acceptedPaymentMethods"
    )
    timezone: Optional[str] = None

    @field_validator('category_keywords')
    @classmethod
    def validate_category_keywords(cls, v):
        """Normalizes keywords while keeping the configured priority order."""
        cleaned = {}
        for label, keywords in v.items():
            label = label.strip()
            if not label:
                raise ValueError("Category labels must not be empty")
            cleaned[label] = normalize_keywords(keywords)
        return cleaned

    @field_validator('payment_keywords')
    @classmethod
    def validate_payment_keywords(cls, v):
        return {method: normalize_keywords(keywords) for method, keywords in v.items()}

    @field_validator('merchant_keywords', 'merchant_skip_lines')
    @classmethod
    def validate_keyword_list(cls, v):
        return normalize_keywords(v)

    @field_validator('default_category')
    @classmethod
    def validate_default_category(cls, v):
        if not v or not v.strip():
            raise ValueError("default_category must not be empty")
        return v.strip()

    @field_validator('timezone')
    @classmethod
    def validate_timezone(cls, v):
        if v and tz.gettz(v) is None:
            raise ValueError(f"Unknown timezone: {v}")
        return v or None

    @model_validator(mode='after')
    def validate_payment_methods(self):
        """The default and every keyword table entry must be an accepted method."""
        if not self.accepted_payment_methods:
            raise ValueError("accepted_payment_methods must not be empty")
        if self.default_payment_method not in self.accepted_payment_methods:
            raise ValueError(
                f"default_payment_method {self.default_payment_method.value} "
                f"is not an accepted payment method"
            )
        unknown = [m.value for m in self.payment_keywords if m not in self.accepted_payment_methods]
        if unknown:
            raise ValueError(f"payment_keywords names unaccepted methods: {', '.join(unknown)}")
        return self

    @property
    def categories(self) -> List[str]:
        """Every label the parser can return, in priority order, default last."""
        labels = list(self.category_keywords)
        if self.default_category not in labels:
            labels.append(self.default_category)
        return labels

    def today(self) -> dt.date:
        """Today's date in the configured timezone."""
        return reference_today(self.timezone)


def build_config(data: Optional[Dict[str, Any]] = None) -> ParserConfig:
    """Validates a configuration mapping, raising ConfigurationError on bad values."""
    try:
        return ParserConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid parser configuration: {e}") from e


def load_config(path: Union[str, Path]) -> ParserConfig:
    """Loads a parser configuration from a JSON file."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read parser configuration {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Parser configuration {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Parser configuration {path} must be a JSON object")

    config = build_config(data)
    logger.info(f"Loaded parser configuration from {path} ({len(config.category_keywords)} categories)")
    return config


def config_from_env() -> ParserConfig:
    """
    Builds the configuration from the environment.

    Reads a .env file from the working directory if present, then:
    - RECEIPT_PARSER_CONFIG: path to a JSON configuration file
    - RECEIPT_TIMEZONE: timezone used to compute "today" (e.g. Asia/Kolkata)
    """
    load_dotenv(find_dotenv(usecwd=True))

    data: Dict[str, Any] = {}
    config_path = os.getenv('RECEIPT_PARSER_CONFIG')
    if config_path:
        data = load_config(config_path).model_dump()

    timezone_name = os.getenv('RECEIPT_TIMEZONE')
    if timezone_name:
        data['timezone'] = timezone_name

    return build_config(data)


def reference_today(timezone_name: Optional[str] = None) -> dt.date:
    """
    Returns the date used as "today" for receipts without a printed date.

    Supports RECEIPT_REFERENCE_DATE for deterministic runs:
    - YYYYMMDD format (e.g., "20240207")
    - ISO format (e.g., "2024-02-07T00:00:00Z")

    Defaults to the current date in ``timezone_name`` (local time if unset).
    """
    ref_str = os.getenv("RECEIPT_REFERENCE_DATE")

    if ref_str:
        try:
            return isoparse(ref_str.strip()).date()
        except ValueError as e:
            logger.warning(f"Invalid RECEIPT_REFERENCE_DATE '{ref_str}': {e}")

    zone = tz.gettz(timezone_name) if timezone_name else tz.tzlocal()
    return dt.datetime.now(zone).date()
