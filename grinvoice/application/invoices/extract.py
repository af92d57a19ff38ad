"""Extract invoice fields from a saved OCR JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from grinvoice.domain.geometry import InvalidInputError
from grinvoice.domain.invoice import InvoiceFields
from grinvoice.invoice.annotation_normalization import select_reasonably_sized
from grinvoice.invoice.extractor import extract_invoice_fields
from grinvoice.invoice.tracing import Tracer
from grinvoice.runtime.ocr_service import load_ocr_json

ExtractStatus = Literal["extracted", "file_not_found", "invalid_ocr_json"]


@dataclass(frozen=True)
class InvoiceExtractRequest:
    """Inputs for running extraction over one OCR JSON file."""

    ocr_json_path: Path
    drop_oversized: bool = False
    tracer: Tracer | None = None


@dataclass(frozen=True)
class InvoiceExtractResult:
    """Outcome from the extraction workflow."""

    status: ExtractStatus
    fields: InvoiceFields | None = None
    error: str | None = None


def run_invoice_extract(request: InvoiceExtractRequest) -> InvoiceExtractResult:
    if not request.ocr_json_path.exists():
        return InvoiceExtractResult(
            status="file_not_found",
            error=f"OCR JSON file not found: {request.ocr_json_path}",
        )

    try:
        ocr_json = load_ocr_json(request.ocr_json_path)
        operations = [select_reasonably_sized] if request.drop_oversized else None
        fields = extract_invoice_fields(ocr_json, request.tracer, operations=operations)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, InvalidInputError) as exc:
        return InvoiceExtractResult(
            status="invalid_ocr_json",
            error=f"Invalid OCR JSON in {request.ocr_json_path}: {exc}",
        )

    return InvoiceExtractResult(status="extracted", fields=fields)
