"""Total payment amount strategies."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from grinvoice.domain.annotation import Annotation

from ..token_predicates import is_amount
from ..tracing import Tracer
from .base import FirstSuccessStrategy
from .label_search import LookToTheRightStrategy

# Label words in priority order
AMOUNT_LABEL_WORDS = ("pay", "due", "total", "balance")


def amount_value(annotation: Annotation) -> Decimal:
    """Numeric value of an amount annotation, ignoring thousands separators."""
    try:
        return Decimal(annotation.description.replace(",", ""))
    except InvalidOperation:
        return Decimal(0)


def largest_amount(picks: Sequence[Annotation]) -> Annotation | None:
    """Pick the largest amount; the first one wins a tie."""
    if not picks:
        return None
    return max(picks, key=amount_value)


def look_to_the_right_for_amount(label_word: str, tracer: Tracer | None = None) -> LookToTheRightStrategy:
    return LookToTheRightStrategy(
        label_word,
        is_amount,
        select=largest_amount,
        value_name="total payment amount",
        tracer=tracer,
    )


def total_payment_amount_strategy(
    tracer: Tracer | None = None, label_words: Sequence[str] = AMOUNT_LABEL_WORDS
) -> FirstSuccessStrategy:
    """Look to the right of each label word in priority order."""
    return FirstSuccessStrategy([look_to_the_right_for_amount(word, tracer) for word in label_words])
