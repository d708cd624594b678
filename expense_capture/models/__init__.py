"""
Data models for receipt capture.
"""

from .receipt import OcrFragment, PaymentMethod, ReceiptFields

__all__ = ["OcrFragment", "PaymentMethod", "ReceiptFields"]
