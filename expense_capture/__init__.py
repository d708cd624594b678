"""
Expense Capture

Turns the OCR text of a photographed or uploaded receipt into editable
expense fields (amount, date, merchant, category, payment method, invoice
number) ready for submission to the expense sheet.
"""

__version__ = "1.0.0"

from expense_capture.config import ParserConfig, config_from_env, load_config
from expense_capture.exceptions import ExpenseCaptureError, InvalidArgumentError
from expense_capture.models import PaymentMethod, ReceiptFields
from expense_capture.parsers import ReceiptParser, parse

__all__ = [
    "ParserConfig",
    "config_from_env",
    "load_config",
    "ExpenseCaptureError",
    "InvalidArgumentError",
    "PaymentMethod",
    "ReceiptFields",
    "ReceiptParser",
    "parse",
]
