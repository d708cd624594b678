"""
Receipt field extraction for raw OCR text.

This module provides the ReceiptParser class which turns the noisy text an
OCR engine reports for one receipt into a ReceiptFields record: amount,
date, merchant, category, payment method and invoice number.
"""

import datetime as dt
from typing import Callable, List, Optional

from ..config import ParserConfig
from ..exceptions import InvalidArgumentError
from ..models import PaymentMethod, ReceiptFields
from ..utils.logging_config import logger
from ..utils.normalization import amount_value, normalize_amount, split_lines
from .patterns import (
    AMOUNT_CUE_PATTERN,
    BARE_PRICE_PATTERN,
    DATE_PATTERN,
    INVOICE_PATTERN,
    PHONE_PATTERN,
)


class ReceiptParser:
    """
    Heuristic parser for Indian retail and wallet receipts.

    Design:
    - Pure: the result depends only on the text, the configuration and the
      clock used for undated receipts. No I/O, no state between calls.
    - Forgiving: a field that cannot be found comes back empty (or as its
      default) so a half-readable scan still yields an editable draft.
    - Configurable: keyword tables live in ParserConfig, not in the rules.
    """

    def __init__(self, config: Optional[ParserConfig] = None,
                 clock: Optional[Callable[[], dt.date]] = None):
        """
        Args:
            config: Keyword tables and defaults. Built-in defaults when omitted.
            clock: Returns "today" for receipts without a printed date.
                Defaults to ``config.today``.
        """
        self.config = config or ParserConfig()
        self.clock = clock or self.config.today

    def parse(self, raw_text: str) -> ReceiptFields:
        """
        Main entry point: derive ReceiptFields from one receipt's OCR text.

        Empty or whitespace-only text is not an error; it yields the blank
        draft so the user can proceed to manual entry.

        Raises:
            InvalidArgumentError: if ``raw_text`` is not a string.
        """
        if not isinstance(raw_text, str):
            raise InvalidArgumentError(
                f"Receipt text must be a string, got {type(raw_text).__name__}"
            )

        if not raw_text.strip():
            logger.debug("Empty OCR text, returning blank receipt fields")
            return self.blank_fields(raw_text)

        logger.debug(f"Parsing receipt text ({len(raw_text)} chars):\n{raw_text}")

        fields = ReceiptFields(
            text=raw_text,
            amount=self.extract_amount(raw_text),
            merchant=self.extract_merchant(raw_text),
            date=self.extract_date(raw_text) or self._today(),
            category=self.extract_category(raw_text),
            invoice_number=self.extract_invoice_number(raw_text),
            payment_method=self.extract_payment_method(raw_text),
        )

        logger.info(
            f"Parsed receipt: merchant={fields.merchant!r} amount={fields.amount!r} "
            f"date={fields.date} category={fields.category} method={fields.payment_method}"
        )
        return fields

    def blank_fields(self, raw_text: str = "") -> ReceiptFields:
        """The draft used when OCR found nothing to parse."""
        return ReceiptFields(
            text=raw_text,
            date=self._today(),
            category=self.config.default_category,
            payment_method=self.config.default_payment_method,
        )

    def extract_amount(self, text: str) -> str:
        """
        Finds the transaction total.

        Cued amounts ('TOTAL', 'Rs', '₹', ...) win, and among those the last
        one, since grand totals are printed below the itemised lines. Without
        any cue, the largest price-shaped number is taken.
        """
        cued = AMOUNT_CUE_PATTERN.findall(text)
        if cued:
            logger.debug(f"Cued amounts {cued}, taking the last")
            return normalize_amount(cued[-1])

        best, best_value = "", None
        for candidate in BARE_PRICE_PATTERN.findall(text):
            normalized = normalize_amount(candidate)
            value = amount_value(normalized)
            if value is not None and (best_value is None or value > best_value):
                best, best_value = normalized, value

        if best:
            logger.debug(f"No cued amount, largest bare price is {best}")
        return best

    def extract_date(self, text: str) -> Optional[str]:
        """
        Finds the first printed date and returns it as YYYY-MM-DD.

        'DD/MM/YY[YY]' is read day-first (two-digit years are 20YY);
        'YYYY-MM-DD' is read year-first. Matches that are not real calendar
        dates are skipped. Returns None when no date is printed.
        """
        for match in DATE_PATTERN.finditer(text):
            if match.group(1):
                day, month, year = match.group(1), match.group(2), match.group(3)
                if len(year) == 2:
                    year = "20" + year
            else:
                year, month, day = match.group(4), match.group(5), match.group(6)

            if len(year) != 4:
                continue
            try:
                return dt.date(int(year), int(month), int(day)).isoformat()
            except ValueError:
                logger.debug(f"Skipping impossible date {match.group(0)!r}")
        return None

    def extract_category(self, text: str) -> str:
        """First category, in configured priority order, with a keyword in the text."""
        text_lower = text.lower()
        for category, keywords in self.config.category_keywords.items():
            if any(keyword in text_lower for keyword in keywords):
                return category
        return self.config.default_category

    def extract_merchant(self, text: str) -> str:
        """
        Picks the merchant name from the top of the receipt.

        A line naming a known wallet or chain (and not carrying a phone
        number) among the first few lines wins; otherwise the first line
        that is not a printed header such as 'RECEIPT' or 'TAX INVOICE'.
        """
        lines = split_lines(text)
        if not lines:
            return ""

        for line in lines[:self.config.merchant_scan_lines]:
            line_lower = line.lower()
            if (any(keyword in line_lower for keyword in self.config.merchant_keywords)
                    and not PHONE_PATTERN.search(line)):
                return line

        return self._first_non_header_line(lines)

    def extract_invoice_number(self, text: str) -> str:
        match = INVOICE_PATTERN.search(text)
        return match.group(1) if match else ""

    def extract_payment_method(self, text: str) -> PaymentMethod:
        """First payment method, in configured priority order, mentioned in the text."""
        text_lower = text.lower()
        for method, keywords in self.config.payment_keywords.items():
            if any(keyword in text_lower for keyword in keywords):
                return method
        return self.config.default_payment_method

    def _first_non_header_line(self, lines: List[str]) -> str:
        skip = self.config.merchant_skip_lines
        for line in lines:
            if line.lower().strip(" :-*#") not in skip:
                return line
        return lines[0]

    def _today(self) -> str:
        return self.clock().isoformat()


def parse(raw_text: str, config: Optional[ParserConfig] = None) -> ReceiptFields:
    """Parses receipt text with the given configuration (built-in defaults if omitted)."""
    return ReceiptParser(config).parse(raw_text)
