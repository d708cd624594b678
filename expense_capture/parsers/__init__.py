"""
Receipt field extraction.
"""

from .receipt_parser import ReceiptParser, parse

__all__ = ["ReceiptParser", "parse"]
