"""
Shared helpers: logging setup and text/amount normalization.
"""

from .logging_config import logger, setup_logging
from .normalization import amount_value, normalize_amount, normalize_keywords, split_lines

__all__ = ["logger", "setup_logging", "amount_value", "normalize_amount", "normalize_keywords", "split_lines"]
