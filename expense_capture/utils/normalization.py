"""
Centralized normalization utilities for receipt text and amounts.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

_SEPARATORS = ".,"


def normalize_amount(raw: str) -> str:
    """
    Turns a printed price such as '1,250.00' or '1.250,00' into '1250.00'.

    The last separator is treated as the decimal point, every earlier
    separator as a thousands separator. Returns '' for empty input.
    """
    if not raw:
        return ""

    raw = raw.strip()
    last_sep = max(raw.rfind(sep) for sep in _SEPARATORS)
    if last_sep < 0:
        return re.sub(r'[^0-9]', '', raw)

    whole = re.sub(r'[^0-9]', '', raw[:last_sep])
    fraction = re.sub(r'[^0-9]', '', raw[last_sep + 1:])
    return f"{whole}.{fraction}" if fraction else whole


def amount_value(normalized: str) -> Optional[Decimal]:
    """Numeric value of a normalized amount string, None if it is not a number."""
    try:
        return Decimal(normalized)
    except (InvalidOperation, TypeError):
        return None


def normalize_keywords(keywords: Iterable[str]) -> List[str]:
    """
    Lower-cases and strips keywords, dropping blanks and duplicates.

    Order is preserved so that configured priority survives normalization.
    """
    seen = []
    for kw in keywords or []:
        kw = (kw or "").strip().lower()
        if kw and kw not in seen:
            seen.append(kw)
    return seen


def split_lines(text: str, min_length: int = 3) -> List[str]:
    """Trimmed lines of the text that are at least ``min_length`` characters long."""
    lines = (line.strip() for line in text.split('\n'))
    return [line for line in lines if len(line) >= min_length]
