"""Fixed-order token merge pipeline."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from grinvoice.domain.annotation import Annotation
from grinvoice.runtime.logging import get_logger

from .decimal_number import merge_decimal_numbers
from .numeric_date import merge_numeric_dates
from .written_date import merge_written_dates

logger = get_logger(__name__)

Merger = Callable[[Sequence[Annotation]], list[Annotation]]

# Decimal numbers first, so merged amounts are never re-read as date digit runs
DEFAULT_MERGERS: tuple[Merger, ...] = (
    merge_decimal_numbers,
    merge_numeric_dates,
    merge_written_dates,
)


def merge_tokens(annotations: Sequence[Annotation], mergers: Sequence[Merger] = DEFAULT_MERGERS) -> list[Annotation]:
    """Run each merger over the previous merger's output and return the canonical list."""
    merged = list(annotations)
    for merger in mergers:
        merged = merger(merged)
    logger.debug("Merged %d raw tokens into %d annotations", len(annotations), len(merged))
    return merged
