"""Due date strategies."""

from __future__ import annotations

from collections.abc import Sequence

from grinvoice.domain.annotation import Annotation

from ..date_parser import is_date
from ..tracing import Tracer
from .base import FirstSuccessStrategy
from .label_search import ClosestToStrategy, LookBelowStrategy, LookToTheRightStrategy

# Label words in priority order
DUE_DATE_LABEL_WORDS = ("due", "date")


def look_to_the_right_for_date(label_word: str, tracer: Tracer | None = None) -> LookToTheRightStrategy:
    return LookToTheRightStrategy(label_word, is_date, value_name="date", tracer=tracer)


def look_below_for_date(label_word: str, tracer: Tracer | None = None) -> LookBelowStrategy:
    return LookBelowStrategy(label_word, is_date, value_name="date", tracer=tracer)


def closest_date_to(reference: Annotation, tracer: Tracer | None = None) -> ClosestToStrategy:
    return ClosestToStrategy(reference, is_date, value_name="date", tracer=tracer)


def due_date_strategy(
    tracer: Tracer | None = None, label_words: Sequence[str] = DUE_DATE_LABEL_WORDS
) -> FirstSuccessStrategy:
    """Search right of every label word first, then below every label word."""
    return FirstSuccessStrategy(
        [
            FirstSuccessStrategy([look_to_the_right_for_date(word, tracer) for word in label_words]),
            FirstSuccessStrategy([look_below_for_date(word, tracer) for word in label_words]),
        ]
    )
