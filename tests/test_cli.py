"""Tests for CLI commands and the application workflows behind them."""

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from grinvoice.application.invoices import (
    InvoiceExtractRequest,
    InvoiceScanRequest,
    run_ground_truth_evaluation,
    run_invoice_extract,
    run_invoice_scan,
)
from grinvoice.application.invoices.evaluate import amounts_match, dates_match
from grinvoice.cli.main import main
from grinvoice.runtime.settings import Settings


def _vision(text: str, x0: int, y0: int, x1: int, y1: int) -> dict[str, Any]:
    return {
        "description": text,
        "boundingPoly": {"vertices": [{"x": x0, "y": y0}, {"x": x1, "y": y0}, {"x": x1, "y": y1}, {"x": x0, "y": y1}]},
    }


INVOICE_OCR = {
    "responses": [
        {
            "textAnnotations": [
                _vision("Balance", 10, 100, 80, 120),
                _vision("Due", 90, 100, 120, 120),
                _vision("45", 300, 100, 320, 120),
                _vision(".", 320, 100, 324, 120),
                _vision("10", 324, 100, 340, 120),
                _vision("Due", 10, 150, 40, 170),
                _vision("Date", 45, 150, 80, 170),
                _vision("O4", 300, 150, 316, 170),
                _vision("/", 316, 150, 320, 170),
                _vision("30", 320, 150, 336, 170),
                _vision("/", 336, 150, 340, 170),
                _vision("2024", 340, 150, 372, 170),
            ]
        }
    ]
}


def _write_json(path: Path, data: dict[str, Any]) -> Path:
    path.write_text(json.dumps(data))
    return path


def test_extract_command_prints_fields(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_json(tmp_path / "invoice.ocr.json", INVOICE_OCR)

    assert main(["extract", str(path)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["Total payment amount: 45.10", "Due date: 04/30/2024"]


def test_extract_command_prints_not_found(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_json(tmp_path / "empty.ocr.json", {"responses": [{"textAnnotations": []}]})

    assert main(["extract", str(path)]) == 0

    assert capsys.readouterr().out.splitlines() == ["Total payment amount: not found", "Due date: not found"]


def test_extract_command_with_trace(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_json(tmp_path / "invoice.ocr.json", INVOICE_OCR)

    assert main(["extract", str(path), "--trace"]) == 0

    out = capsys.readouterr().out
    assert "Finding total payment amount to the right of 'pay'" in out
    assert out.rstrip().endswith("Due date: 04/30/2024")


def test_extract_command_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["extract", str(tmp_path / "missing.json")]) == 1
    assert "not found" in capsys.readouterr().out


def test_extract_workflow_reports_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    result = run_invoice_extract(InvoiceExtractRequest(ocr_json_path=path))

    assert result.status == "invalid_ocr_json"
    assert result.fields is None


def test_extract_workflow_reports_missing_vertices(tmp_path: Path) -> None:
    bad = {"responses": [{"textAnnotations": [{"description": "Total", "boundingPoly": {"vertices": []}}]}]}
    path = _write_json(tmp_path / "bad.json", bad)

    assert run_invoice_extract(InvoiceExtractRequest(ocr_json_path=path)).status == "invalid_ocr_json"


def test_extract_workflow_reports_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b'{"responses": "\xff\xfe"}')

    result = run_invoice_extract(InvoiceExtractRequest(ocr_json_path=path))

    assert result.status == "invalid_ocr_json"
    assert result.fields is None


def test_extract_workflow_reports_directory_path(tmp_path: Path) -> None:
    result = run_invoice_extract(InvoiceExtractRequest(ocr_json_path=tmp_path))

    assert result.status == "invalid_ocr_json"


def test_extract_command_exits_nonzero_on_malformed_structure(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = _write_json(tmp_path / "bad.json", {"responses": [{"textAnnotations": ["Total"]}]})

    assert main(["extract", str(path)]) == 1
    assert "Invalid OCR JSON" in capsys.readouterr().out


def test_no_command_prints_help() -> None:
    assert main([]) == 1


def test_scan_workflow_runs_ocr_and_saves_json(tmp_path: Path) -> None:
    image = tmp_path / "invoice.jpg"
    image.write_bytes(b"jpeg")
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=INVOICE_OCR)))
    settings = Settings(vision_api_key="k", ocr_json_dir=tmp_path / "ocr")

    result = run_invoice_scan(InvoiceScanRequest(image_path=image, settings=settings, client=client))

    assert result.status == "extracted"
    assert result.fields is not None
    assert result.fields.total_payment_amount_text == "45.10"
    assert result.ocr_json_path == tmp_path / "ocr" / "invoice.ocr.json"
    assert json.loads(result.ocr_json_path.read_text()) == INVOICE_OCR


def test_scan_workflow_reports_ocr_unavailable(tmp_path: Path) -> None:
    image = tmp_path / "invoice.jpg"
    image.write_bytes(b"jpeg")
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(500)))

    request = InvoiceScanRequest(image_path=image, settings=Settings(vision_api_key="k"), client=client)

    result = run_invoice_scan(request)

    assert result.status == "ocr_unavailable"
    assert result.ocr_json_path is None


def test_scan_command_missing_image(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", str(tmp_path / "nope.jpg"), "--api-key", "k"]) == 1
    assert "not found" in capsys.readouterr().out


def test_evaluate_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_json(tmp_path / "a.ocr.json", INVOICE_OCR)
    _write_json(tmp_path / "b.ocr.json", {"responses": [{"textAnnotations": []}]})
    truth = tmp_path / "truth.csv"
    truth.write_text("file,total,due_date\na.ocr.json,45.10,4/30/2024\nb.ocr.json,12.00,\n")

    assert main(["evaluate", str(truth)]) == 0

    out = capsys.readouterr().out
    assert "Total payment amount accuracy: 50.0%" in out
    assert "Due date accuracy: 100.0%" in out


def test_evaluation_rejects_csv_without_required_columns(tmp_path: Path) -> None:
    truth = tmp_path / "truth.csv"
    truth.write_text("file,amount\na.json,1.00\n")

    result = run_ground_truth_evaluation(truth)

    assert result.status == "invalid_csv"
    assert "total" in (result.error or "")


def test_evaluation_counts_unreadable_files_as_mismatches(tmp_path: Path) -> None:
    truth = tmp_path / "truth.csv"
    truth.write_text("file,total,due_date\nmissing.json,,\n")

    result = run_ground_truth_evaluation(truth)

    assert result.status == "evaluated"
    assert result.report is not None
    assert result.report.rows[0].error is not None
    assert result.report.total_accuracy == 0.0


def test_evaluation_reports_undecodable_row_and_continues(tmp_path: Path) -> None:
    (tmp_path / "bad.ocr.json").write_bytes(b"\xff")
    _write_json(tmp_path / "a.ocr.json", INVOICE_OCR)
    truth = tmp_path / "truth.csv"
    truth.write_text("file,total,due_date\nbad.ocr.json,1.00,\na.ocr.json,45.10,4/30/2024\n")

    result = run_ground_truth_evaluation(truth)

    assert result.status == "evaluated"
    assert result.report is not None
    assert [row.error is not None for row in result.report.rows] == [True, False]
    assert result.report.total_accuracy == 0.5


def test_evaluation_rejects_undecodable_csv(tmp_path: Path) -> None:
    truth = tmp_path / "truth.csv"
    truth.write_bytes(b"file,total,due_date\n\xff.json,1.00,\n")

    assert run_ground_truth_evaluation(truth).status == "invalid_csv"


def test_field_comparisons() -> None:
    assert amounts_match("1,200.00", "1,200. 00")
    assert not amounts_match("1,200.00", None)
    assert dates_match("2024-04-30", "2024-04-30")
    assert dates_match("4/30/2024", "04/30/2024")
    assert dates_match("", None)
    assert not dates_match("4/30/2024", None)
