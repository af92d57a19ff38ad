"""Invoice workflows."""

from grinvoice.application.invoices.evaluate import (
    EvaluationReport,
    EvaluationResult,
    run_ground_truth_evaluation,
)
from grinvoice.application.invoices.extract import (
    InvoiceExtractRequest,
    InvoiceExtractResult,
    run_invoice_extract,
)
from grinvoice.application.invoices.scan import InvoiceScanRequest, InvoiceScanResult, run_invoice_scan

__all__ = [
    "EvaluationReport",
    "EvaluationResult",
    "InvoiceExtractRequest",
    "InvoiceExtractResult",
    "InvoiceScanRequest",
    "InvoiceScanResult",
    "run_ground_truth_evaluation",
    "run_invoice_extract",
    "run_invoice_scan",
]
