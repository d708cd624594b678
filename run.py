"""
Command-line launcher for the receipt parser.

Reads the OCR text of one receipt from a file (or stdin), parses it and
prints the extracted fields as JSON.

Examples:
  python run.py scan.txt
  ocr-tool image.jpg | python run.py --payload
  python run.py scan.txt --config parser.json --verbose
"""

import argparse
import json
import logging
import sys

from expense_capture.config import config_from_env, load_config
from expense_capture.exceptions import ConfigurationError
from expense_capture.parsers import ReceiptParser
from expense_capture.submission import build_form_payload, load_form_map
from expense_capture.utils.logging_config import logger, set_level


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Extract expense fields from receipt OCR text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?",
                        help="Text file with the OCR output (default: stdin)")
    parser.add_argument("--config",
                        help="Parser configuration JSON (default: RECEIPT_PARSER_CONFIG or built-in tables)")
    parser.add_argument("--payload", action="store_true",
                        help="Print the remote form payload instead of the parsed fields")
    parser.add_argument("--form-config",
                        help="Form field mapping JSON used with --payload")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show parsing decisions")
    args = parser.parse_args(argv)

    set_level(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config) if args.config else config_from_env()
        field_map = load_form_map(args.form_config) if args.form_config else None
    except ConfigurationError as e:
        logger.error(str(e))
        return 2

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            raw_text = f.read()
    else:
        raw_text = sys.stdin.read()

    fields = ReceiptParser(config).parse(raw_text)

    if args.payload:
        output = build_form_payload(fields, field_map)
    else:
        output = fields.to_dict()
        output.pop("text", None)

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
