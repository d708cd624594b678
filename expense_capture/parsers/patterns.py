"""
Centralized regex patterns for the ReceiptParser.

Numeric patterns are ASCII-only so that normalized amounts and dates never
carry non-Latin digits.
"""

import re

# A money value right after a currency or total label: 'TOTAL: 1,250.00', 'Rs 85.00', '₹1.499,00'
AMOUNT_CUE_PATTERN = re.compile(
    r'(?:RS|INR|₹|TOTAL|AMOUNT|AMT)\s*[:=]?\s*(\d{1,3}(?:[.,]\d{3})*[.,]\d{2})',
    re.IGNORECASE | re.ASCII,
)

# Any price-shaped token: '45.00', '120,50'
BARE_PRICE_PATTERN = re.compile(r'\b\d{1,5}[.,]\d{2}\b', re.ASCII)

# Day-first 'DD/MM/YY[YY]' or year-first 'YYYY-MM-DD' ('/' and '-' both accepted)
DATE_PATTERN = re.compile(
    r'(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})'
    r'|(\d{4})[/-](\d{1,2})[/-](\d{1,2})',
    re.ASCII,
)

# 'Invoice No: INV-2024/118', 'TXN ID 84512379', 'Bill # A1209'
# The cue must not run into another letter ('INVOICE' is not 'INV' + 'OICE',
# 'BILLING' is not a cue); the reference itself is upper-case letters, digits, '/' and '-'.
INVOICE_PATTERN = re.compile(
    r'(?:INVOICE|INV|TRANSACTION|TXN|BILL|RECEIPT|REF)(?![A-Z])'
    r'\s*(?:NO|ID|NUMBER)?\.?\s*[:#=]*\s*'
    r'((?-i:[A-Z0-9/-]{4,}))',
    re.IGNORECASE | re.ASCII,
)

# A run of ten digits, i.e. a mobile number printed next to a wallet name
PHONE_PATTERN = re.compile(r'\d{10}', re.ASCII)
