"""Compare extracted fields against a ground-truth CSV."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from grinvoice.domain.invoice import InvoiceFields
from grinvoice.invoice.date_parser import parse_date
from grinvoice.runtime.logging import get_logger

from .extract import InvoiceExtractRequest, run_invoice_extract

logger = get_logger(__name__)

EvaluationStatus = Literal["evaluated", "file_not_found", "invalid_csv"]

REQUIRED_COLUMNS = ("file", "total", "due_date")


@dataclass(frozen=True)
class GroundTruthRow:
    """One expected result: OCR JSON path plus expected field texts (empty = absent)."""

    ocr_json_path: Path
    total: str
    due_date: str


@dataclass(frozen=True)
class RowComparison:
    row: GroundTruthRow
    extracted_total: str | None
    extracted_due_date: str | None
    total_matches: bool
    due_date_matches: bool
    error: str | None = None


@dataclass
class EvaluationReport:
    rows: list[RowComparison] = field(default_factory=list)

    @property
    def total_accuracy(self) -> float:
        return _ratio(sum(r.total_matches for r in self.rows), len(self.rows))

    @property
    def due_date_accuracy(self) -> float:
        return _ratio(sum(r.due_date_matches for r in self.rows), len(self.rows))


@dataclass(frozen=True)
class EvaluationResult:
    status: EvaluationStatus
    report: EvaluationReport | None = None
    error: str | None = None


def _ratio(hits: int, count: int) -> float:
    return hits / count if count else 0.0


def _normalize_amount(text: str | None) -> str:
    return "".join((text or "").split())


def amounts_match(expected: str, extracted: str | None) -> bool:
    return _normalize_amount(expected) == _normalize_amount(extracted)


def dates_match(expected: str, extracted: str | None) -> bool:
    """Compare as dates when both sides parse, else as trimmed text."""
    expected = expected.strip()
    if not expected or extracted is None:
        return not expected and extracted is None
    expected_date = parse_date(expected)
    extracted_date = parse_date(extracted)
    if expected_date is not None and extracted_date is not None:
        return expected_date == extracted_date
    return expected == extracted.strip()


def read_ground_truth(csv_path: Path) -> list[GroundTruthRow]:
    """Read ``file,total,due_date`` rows; file paths are relative to the CSV."""
    with open(csv_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        missing = [column for column in REQUIRED_COLUMNS if column not in (reader.fieldnames or [])]
        if missing:
            raise ValueError(f"Ground-truth CSV is missing columns: {', '.join(missing)}")
        return [
            GroundTruthRow(
                ocr_json_path=csv_path.parent / row["file"],
                total=row["total"] or "",
                due_date=row["due_date"] or "",
            )
            for row in reader
        ]


def compare_row(row: GroundTruthRow, fields: InvoiceFields | None, error: str | None = None) -> RowComparison:
    extracted_total = fields.total_payment_amount_text if fields else None
    extracted_due_date = fields.due_date_text if fields else None
    return RowComparison(
        row=row,
        extracted_total=extracted_total,
        extracted_due_date=extracted_due_date,
        total_matches=error is None and amounts_match(row.total, extracted_total),
        due_date_matches=error is None and dates_match(row.due_date, extracted_due_date),
        error=error,
    )


def run_ground_truth_evaluation(csv_path: Path) -> EvaluationResult:
    if not csv_path.exists():
        return EvaluationResult(status="file_not_found", error=f"Ground-truth CSV not found: {csv_path}")

    try:
        rows = read_ground_truth(csv_path)
    except (OSError, csv.Error, ValueError) as exc:
        return EvaluationResult(status="invalid_csv", error=str(exc))

    report = EvaluationReport()
    for row in rows:
        result = run_invoice_extract(InvoiceExtractRequest(ocr_json_path=row.ocr_json_path))
        if result.status != "extracted":
            logger.warning("Skipping %s: %s", row.ocr_json_path, result.error)
        report.rows.append(compare_row(row, result.fields, result.error))

    logger.info(
        "Evaluated %d invoices: total %.0f%%, due date %.0f%%",
        len(report.rows),
        report.total_accuracy * 100,
        report.due_date_accuracy * 100,
    )
    return EvaluationResult(status="evaluated", report=report)
