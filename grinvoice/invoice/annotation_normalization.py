"""Annotation normalization pipeline.

This stage sits between OCR JSON parsing and token merging. The pipeline
defaults to no-op behavior; callers opt into operations explicitly.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from grinvoice.domain.annotation import Annotation

# Vision's first text annotation spans the whole page; real tokens are far smaller
REASONABLE_WIDTH = 200
REASONABLE_HEIGHT = 200

AnnotationNormalizationOp = Callable[[list[Annotation]], list[Annotation]]


def select_reasonably_sized(annotations: list[Annotation]) -> list[Annotation]:
    """Drop annotations wider or taller than a single token plausibly is."""
    return [
        annotation
        for annotation in annotations
        if annotation.bounds.width <= REASONABLE_WIDTH and annotation.bounds.height <= REASONABLE_HEIGHT
    ]


def normalize_annotations(
    annotations: Sequence[Annotation],
    *,
    operations: Sequence[AnnotationNormalizationOp] | None = None,
) -> list[Annotation]:
    """Run normalization operations in sequence.

    When `operations` is omitted, this is a no-op passthrough that returns
    the same annotations in the same order.
    """
    normalized = list(annotations)
    for operation in operations or ():
        normalized = operation(normalized)
    return normalized
