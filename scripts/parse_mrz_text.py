#!/usr/bin/env python3
"""
MRZ Text Parser

Reads OCR text from a file (or stdin), extracts the MRZ and prints the
result as JSON. Exit code is 0 when a valid record was produced, 1 otherwise.

Usage:
    python scripts/parse_mrz_text.py --input scan.txt
    tesseract card.png - | python scripts/parse_mrz_text.py
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.mrz import MRZProcessor


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Extract and validate MRZ data from OCR text",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Path to OCR text file (reads stdin if omitted)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to MRZ config YAML (bundled defaults if omitted)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.input:
        text = Path(args.input).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    config_path = Path(args.config) if args.config else None
    processor = MRZProcessor(config_path=config_path)
    result = processor.process(text)

    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.is_pass() else 1


if __name__ == "__main__":
    sys.exit(main())
