"""Invoice command handlers used by the unified CLI."""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from grinvoice.application.invoices import (
    InvoiceExtractRequest,
    InvoiceScanRequest,
    run_ground_truth_evaluation,
    run_invoice_extract,
    run_invoice_scan,
)
from grinvoice.domain.invoice import InvoiceFields
from grinvoice.invoice.tracing import StreamTracer, Tracer
from grinvoice.runtime import get_logger, get_settings

logger = get_logger(__name__)

NOT_FOUND = "not found"


def _tracer(args: argparse.Namespace) -> Tracer | None:
    return StreamTracer(sys.stdout) if getattr(args, "trace", False) else None


def print_fields(fields: InvoiceFields) -> None:
    print(f"Total payment amount: {fields.total_payment_amount_text or NOT_FOUND}")
    print(f"Due date: {fields.due_date_text or NOT_FOUND}")


def cmd_extract(args: argparse.Namespace) -> int:
    """Extract fields from a saved OCR JSON file."""
    result = run_invoice_extract(
        InvoiceExtractRequest(
            ocr_json_path=Path(args.ocr_json),
            drop_oversized=args.drop_oversized,
            tracer=_tracer(args),
        )
    )
    if result.status != "extracted" or result.fields is None:
        logger.error("%s", result.error)
        print(f"Error: {result.error}")
        return 1

    print_fields(result.fields)
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """Send an invoice image to the OCR service, then extract fields."""
    settings = get_settings()
    if args.api_key:
        settings = replace(settings, vision_api_key=args.api_key)

    result = run_invoice_scan(
        InvoiceScanRequest(
            image_path=Path(args.image),
            settings=settings,
            save_json=not args.no_save,
            drop_oversized=args.drop_oversized,
            tracer=_tracer(args),
        )
    )

    if result.status == "file_not_found":
        print(f"Error: {result.error}")
        return 1

    if result.status == "ocr_unavailable":
        print(f"OCR service unavailable: {result.error}")
        return 1

    if result.ocr_json_path is not None:
        print(f"Saved OCR JSON to: {result.ocr_json_path}")

    if result.status != "extracted" or result.fields is None:
        print(f"Error: {result.error}")
        return 1

    print_fields(result.fields)
    return 0


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Compare extraction results against a ground-truth CSV."""
    result = run_ground_truth_evaluation(Path(args.truth_csv))
    if result.status != "evaluated" or result.report is None:
        print(f"Error: {result.error}")
        return 1

    report = result.report
    for comparison in report.rows:
        total_mark = "ok" if comparison.total_matches else "MISMATCH"
        date_mark = "ok" if comparison.due_date_matches else "MISMATCH"
        print(f"{comparison.row.ocr_json_path}")
        if comparison.error:
            print(f"  error: {comparison.error}")
        print(
            f"  total: expected {comparison.row.total or '-'}, "
            f"got {comparison.extracted_total or NOT_FOUND} [{total_mark}]"
        )
        print(
            f"  due date: expected {comparison.row.due_date or '-'}, "
            f"got {comparison.extracted_due_date or NOT_FOUND} [{date_mark}]"
        )

    print("=" * 60)
    print(f"Invoices: {len(report.rows)}")
    print(f"Total payment amount accuracy: {report.total_accuracy:.1%}")
    print(f"Due date accuracy: {report.due_date_accuracy:.1%}")
    return 0
