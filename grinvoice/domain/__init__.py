"""Core domain models for invoice field extraction.

This module provides the value types used throughout the project:
- Point, Bounds: image-space geometry
- Annotation: positioned OCR text token
- InvoiceFields: extraction result

Usage:
    from grinvoice.domain import Annotation, Bounds, Point
"""

from grinvoice.domain.annotation import Annotation, merge_annotations
from grinvoice.domain.geometry import Bounds, InvalidInputError, Point
from grinvoice.domain.invoice import InvoiceFields

__all__ = [
    "Annotation",
    "Bounds",
    "InvalidInputError",
    "InvoiceFields",
    "Point",
    "merge_annotations",
]
