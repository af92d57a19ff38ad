"""Invoice field extraction from positioned OCR text.

Pipeline:
    OCR JSON -> annotations -> decimal/numeric-date/written-date merges
    -> label-anchored strategies -> InvoiceFields

Usage:
    from grinvoice.invoice import extract_invoice_fields

    fields = extract_invoice_fields(ocr_json)
    print(fields.total_payment_amount_text, fields.due_date_text)
"""

from .date_parser import parse_date
from .extractor import extract_fields, extract_invoice_fields, find_due_date, find_total_payment_amount
from .ocr_annotations import annotations_from_ocr_json, create_annotations

__all__ = [
    "annotations_from_ocr_json",
    "create_annotations",
    "extract_fields",
    "extract_invoice_fields",
    "find_due_date",
    "find_total_payment_amount",
    "parse_date",
]
