import sys
import os
import datetime as dt

import pytest

# Ensure the project root is in the python path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from expense_capture.config import ParserConfig
from expense_capture.parsers import ReceiptParser

FIXED_TODAY = dt.date(2024, 3, 15)


@pytest.fixture
def today():
    """The date every parser built by these fixtures treats as today."""
    return FIXED_TODAY


@pytest.fixture
def config():
    """Built-in keyword tables."""
    return ParserConfig()


@pytest.fixture
def parser(config):
    """Parser with default tables and a pinned clock."""
    return ReceiptParser(config, clock=lambda: FIXED_TODAY)


@pytest.fixture
def clean_env(monkeypatch):
    """Keeps a developer's .env or shell settings out of the tests."""
    for name in ("RECEIPT_PARSER_CONFIG", "RECEIPT_TIMEZONE", "RECEIPT_REFERENCE_DATE"):
        # setenv first so the variable is also removed again if a .env file sets it
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
