#!/usr/bin/env python3

import argparse
from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Invoice field extraction CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  extract <file.ocr.json>    Extract total payment amount and due date from OCR JSON
  scan <image>               Run OCR on an invoice image, then extract
  evaluate <truth.csv>       Compare extraction against ground-truth CSV

Notes:
  OCR JSON is the Google Vision images:annotate response format.
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    trace_parent = argparse.ArgumentParser(add_help=False)
    trace_parent.add_argument("--trace", action="store_true", help="Print every strategy step to stdout")
    trace_parent.add_argument(
        "--drop-oversized",
        action="store_true",
        help="Ignore annotations larger than a single token (e.g. the whole-page block)",
    )

    extract_parser = subparsers.add_parser("extract", parents=[trace_parent], help="Extract fields from OCR JSON")
    extract_parser.add_argument("ocr_json", help="Path to OCR JSON file")

    scan_parser = subparsers.add_parser("scan", parents=[trace_parent], help="OCR an invoice image and extract")
    scan_parser.add_argument("image", help="Path to invoice image")
    scan_parser.add_argument("--api-key", default=None, help="Vision API key (default: GRINVOICE_VISION_API_KEY)")
    scan_parser.add_argument("--no-save", action="store_true", help="Do not save the raw OCR JSON")

    evaluate_parser = subparsers.add_parser("evaluate", help="Compare extraction against ground truth")
    evaluate_parser.add_argument("truth_csv", help="CSV with columns file,total,due_date")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "extract":
        from grinvoice.cli.invoice import cmd_extract

        return cmd_extract(args)
    elif args.command == "scan":
        from grinvoice.cli.invoice import cmd_scan

        return cmd_scan(args)
    elif args.command == "evaluate":
        from grinvoice.cli.invoice import cmd_evaluate

        return cmd_evaluate(args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
