"""
Mapping of confirmed receipt fields onto the remote expense form.

The expense sheet is fed through a web form whose inputs have opaque
names (``entry.<id>``). FormFieldMap holds those names; build_form_payload
produces the key/value pairs the submission transport posts.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ConfigurationError
from ..models import ReceiptFields
from ..utils.logging_config import logger

DEFAULT_FORM_URL = (
    "https://docs.google.com/forms/u/0/d/e/"
    "1FAIpQLSffdtbhXtg4knRt47GmAMH1F3HE-V3Slm4LY2-PPi4AapIqdw/formResponse"
)


class FormFieldMap(BaseModel):
    """Remote input names for each receipt field; None means "not sent"."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    form_url: str = Field(default=DEFAULT_FORM_URL, alias="formUrl")
    category: Optional[str] = "entry.523033456"        # EXPENSE TYPE
    date: Optional[str] = "entry.926892012"            # EXPENSE DATE
    amount: Optional[str] = "entry.719826681"          # AMOUNT IN INR
    merchant: Optional[str] = "entry.243879780"        # MERCHANT
    invoice_number: Optional[str] = "entry.968931037"  # INVOICE NUMBER
    payment_method: Optional[str] = None

    def mapped_fields(self) -> Dict[str, str]:
        """Receipt field name -> remote input name, for every mapped field."""
        names = self.model_dump(exclude={'form_url'})
        return {field: remote for field, remote in names.items() if remote}


def build_form_payload(fields: ReceiptFields,
                       field_map: Optional[FormFieldMap] = None) -> Dict[str, str]:
    """
    Builds the form submission body for a confirmed receipt.

    Every mapped field is sent, empty values included, so the remote sheet
    always receives a full row.
    """
    field_map = field_map or FormFieldMap()
    values = fields.model_dump()

    payload = {remote: str(values[field] or "") for field, remote in field_map.mapped_fields().items()}
    logger.debug(f"Built form payload with {len(payload)} fields for {field_map.form_url}")
    return payload


def load_form_map(path: Union[str, Path]) -> FormFieldMap:
    """Loads remote input names from a JSON file (``{"formUrl": ..., "fields": {...}}`` or flat)."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot load form configuration {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Form configuration {path} must be a JSON object")

    # The mobile client nests the input names under "fields"
    if isinstance(data.get('fields'), dict):
        data = {**{k: v for k, v in data.items() if k != 'fields'}, **data['fields']}

    try:
        return FormFieldMap.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid form configuration {path}: {e}") from e
