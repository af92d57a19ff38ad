"""Extract total payment amount and due date from invoice OCR output."""

__version__ = "0.1.0"
