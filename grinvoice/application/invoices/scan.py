"""Invoice scan workflow orchestration: OCR -> save JSON -> extract."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import httpx

from grinvoice.domain.geometry import InvalidInputError
from grinvoice.domain.invoice import InvoiceFields
from grinvoice.invoice.annotation_normalization import select_reasonably_sized
from grinvoice.invoice.extractor import extract_invoice_fields
from grinvoice.invoice.tracing import Tracer
from grinvoice.runtime.ocr_service import OCRServiceUnavailable, call_ocr_service, save_ocr_json
from grinvoice.runtime.settings import Settings

ScanStatus = Literal["file_not_found", "ocr_unavailable", "invalid_ocr_json", "extracted"]


@dataclass(frozen=True)
class InvoiceScanRequest:
    """Inputs for running the invoice scan workflow."""

    image_path: Path
    settings: Settings
    save_json: bool = True
    drop_oversized: bool = False
    tracer: Tracer | None = None
    client: httpx.Client | None = None


@dataclass(frozen=True)
class InvoiceScanResult:
    """Outcome from the invoice scan workflow."""

    status: ScanStatus
    fields: InvoiceFields | None = None
    ocr_json_path: Path | None = None
    error: str | None = None


def run_invoice_scan(request: InvoiceScanRequest) -> InvoiceScanResult:
    """Run scan flow: OCR -> optional save of raw JSON -> field extraction."""
    if not request.image_path.exists():
        return InvoiceScanResult(
            status="file_not_found",
            error=f"Invoice image not found: {request.image_path}",
        )

    try:
        raw_ocr_result = call_ocr_service(request.image_path, request.settings, client=request.client)
    except OCRServiceUnavailable as exc:
        return InvoiceScanResult(status="ocr_unavailable", error=str(exc))

    ocr_json_path = None
    if request.save_json:
        ocr_json_path = save_ocr_json(raw_ocr_result, request.image_path, request.settings)

    operations = [select_reasonably_sized] if request.drop_oversized else None
    try:
        fields = extract_invoice_fields(raw_ocr_result, request.tracer, operations=operations)
    except InvalidInputError as exc:
        return InvoiceScanResult(status="invalid_ocr_json", ocr_json_path=ocr_json_path, error=str(exc))

    return InvoiceScanResult(status="extracted", fields=fields, ocr_json_path=ocr_json_path)
