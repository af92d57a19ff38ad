"""Finite-state token mergers."""

from .decimal_number import DecimalNumberStateMachine, merge_decimal_numbers
from .numeric_date import NumericDateStateMachine, merge_numeric_dates
from .pipeline import DEFAULT_MERGERS, Merger, merge_tokens
from .written_date import WrittenDateStateMachine, merge_written_dates

__all__ = [
    "DEFAULT_MERGERS",
    "DecimalNumberStateMachine",
    "Merger",
    "NumericDateStateMachine",
    "WrittenDateStateMachine",
    "merge_decimal_numbers",
    "merge_numeric_dates",
    "merge_tokens",
    "merge_written_dates",
]
