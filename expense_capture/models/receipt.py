"""
Data models for receipt capture.

This module defines the record produced by the receipt parser and the
fragment type reported by the OCR collaborator, validated via Pydantic.
"""

import datetime as dt
import re
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class PaymentMethod(str, Enum):
    """Payment instruments recognised on a receipt."""
    UPI = "UPI"
    CASH = "CASH"
    CARD = "CARD"


class OcrFragment(BaseModel):
    """A single piece of text reported by the OCR engine."""
    model_config = ConfigDict(extra="ignore")

    text: str = ""

    @field_validator('text', mode='before')
    @classmethod
    def coerce_missing_text(cls, v):
        """Engines occasionally report a detection with no text."""
        return "" if v is None else str(v)


class ReceiptFields(BaseModel):
    """
    Structured fields derived from one receipt's OCR text.

    Instances are immutable; a UI that lets the user edit the draft works
    on a validated copy from ``edited()``.
    """
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    text: str = ""
    amount: str = ""
    merchant: str = ""
    date: str
    category: str
    invoice_number: str = ""
    payment_method: PaymentMethod

    @field_validator('amount')
    @classmethod
    def validate_amount(cls, v):
        """Amounts are digits with at most one decimal point."""
        if v and not re.fullmatch(r"[0-9]+(?:\.[0-9]+)?", v):
            raise ValueError(f"Amount must be a plain decimal string, got {v!r}")
        return v

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        """Dates are always real ISO calendar dates."""
        if not re.fullmatch(r"[0-9]{4}-[0-9]{2}-[0-9]{2}", v):
            raise ValueError(f"Date must be YYYY-MM-DD, got {v!r}")
        dt.date.fromisoformat(v)
        return v

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        if not v or not v.strip():
            raise ValueError("Category must not be empty")
        return v

    @computed_field(alias="hasFields")
    @property
    def has_fields(self) -> bool:
        """hasFields is defined by amount/merchant alone."""
        return bool(self.amount or self.merchant)

    def edited(self, **changes: Any) -> "ReceiptFields":
        """Returns a copy with ``changes`` applied, validated like a parsed record."""
        return type(self).model_validate({**self.model_dump(), **changes})

    def to_dict(self) -> Dict[str, Any]:
        """Serialises the fields using the external key names (``hasFields``)."""
        return self.model_dump(by_alias=True)
