"""Composable field-extraction strategies."""

from .base import FirstSuccessStrategy, Strategy
from .due_date import (
    DUE_DATE_LABEL_WORDS,
    closest_date_to,
    due_date_strategy,
    look_below_for_date,
    look_to_the_right_for_date,
)
from .label_search import ClosestToStrategy, LabelSearchStrategy, LookBelowStrategy, LookToTheRightStrategy
from .total_amount import (
    AMOUNT_LABEL_WORDS,
    largest_amount,
    look_to_the_right_for_amount,
    total_payment_amount_strategy,
)

__all__ = [
    "AMOUNT_LABEL_WORDS",
    "DUE_DATE_LABEL_WORDS",
    "ClosestToStrategy",
    "FirstSuccessStrategy",
    "LabelSearchStrategy",
    "LookBelowStrategy",
    "LookToTheRightStrategy",
    "Strategy",
    "closest_date_to",
    "due_date_strategy",
    "largest_amount",
    "look_below_for_date",
    "look_to_the_right_for_amount",
    "look_to_the_right_for_date",
    "total_payment_amount_strategy",
]
