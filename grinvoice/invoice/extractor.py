"""Invoice field extraction entry point."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from grinvoice.domain.annotation import Annotation
from grinvoice.domain.invoice import InvoiceFields
from grinvoice.runtime.logging import get_logger

from .annotation_normalization import AnnotationNormalizationOp
from .date_parser import parse_date
from .ocr_annotations import create_annotations
from .strategies import due_date_strategy, total_payment_amount_strategy
from .tracing import NullTracer, Tracer

logger = get_logger(__name__)


def find_total_payment_amount(annotations: Sequence[Annotation], tracer: Tracer | None = None) -> Annotation | None:
    return total_payment_amount_strategy(tracer).find(annotations)


def find_due_date(annotations: Sequence[Annotation], tracer: Tracer | None = None) -> Annotation | None:
    return due_date_strategy(tracer).find(annotations)


def extract_fields(annotations: Sequence[Annotation], tracer: Tracer | None = None) -> InvoiceFields:
    """
    Extract invoice fields from a canonical (already merged) annotation list.

    Args:
        annotations: Post-merge annotations
        tracer: Optional diagnostic sink; never affects the result

    Returns:
        InvoiceFields with None for every field that was not found
    """
    tracer = tracer or NullTracer()
    total_payment_amount = find_total_payment_amount(annotations, tracer)
    due_date = find_due_date(annotations, tracer)
    fields = InvoiceFields(
        total_payment_amount=total_payment_amount,
        due_date=due_date,
        due_date_value=parse_date(due_date.description) if due_date is not None else None,
    )
    logger.debug(
        "Extracted total payment amount=%s, due date=%s",
        fields.total_payment_amount_text or "not found",
        fields.due_date_text or "not found",
    )
    return fields


def extract_invoice_fields(
    ocr_json: dict[str, Any],
    tracer: Tracer | None = None,
    *,
    operations: Sequence[AnnotationNormalizationOp] | None = None,
) -> InvoiceFields:
    """Build annotations from Vision OCR JSON and extract invoice fields."""
    return extract_fields(create_annotations(ocr_json, operations=operations), tracer)
