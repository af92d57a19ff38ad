"""Merge split numeric dates such as "3" "/" "15" "/" "2024" into "3/15/2024"."""

from collections.abc import Sequence
from enum import Enum

from grinvoice.domain.annotation import Annotation, merge_annotations

from ..token_predicates import is_date_separator, is_digit_run, letter_o_to_zero
from .common import TokenStateMachine, run_state_machine


class NumericDateState(Enum):
    START = "start"
    SEPARATOR_1 = "separator_1"
    MONTH = "month"
    SEPARATOR_2 = "separator_2"
    YEAR = "year"


class NumericDateStateMachine(TokenStateMachine[NumericDateState]):
    """
    Recognize ``digits SEP digits SEP digits`` with SEP one of ``, . - /``.

    The second separator must repeat the first one's text. A digit run where
    the first separator is expected restarts the match at that token. Each
    constituent of a completed date has any letter "O" rewritten to "0".
    """

    initial_state = NumericDateState.START

    def __init__(self) -> None:
        super().__init__()
        self._separator: str | None = None

    def _step(self, state: NumericDateState, annotation: Annotation) -> None:
        text = annotation.description
        if state is NumericDateState.START:
            if is_digit_run(text):
                self._advance(NumericDateState.SEPARATOR_1)
            else:
                self._reset()
        elif state is NumericDateState.SEPARATOR_1:
            if is_date_separator(text):
                self._separator = text
                self._advance(NumericDateState.MONTH)
            elif is_digit_run(text):
                self._resync(NumericDateState.SEPARATOR_1)
            else:
                self._reset()
        elif state is NumericDateState.MONTH:
            if is_digit_run(text):
                self._advance(NumericDateState.SEPARATOR_2)
            else:
                self._reset()
        elif state is NumericDateState.SEPARATOR_2:
            if text == self._separator:
                self._advance(NumericDateState.YEAR)
            else:
                self._reset()
        elif state is NumericDateState.YEAR:
            if is_digit_run(text):
                segments = [
                    segment.with_description(letter_o_to_zero(segment.description)) for segment in self._segments
                ]
                self._complete(merge_annotations(segments))
            else:
                self._reset()

    def _reset(self) -> None:
        super()._reset()
        self._separator = None


def merge_numeric_dates(annotations: Sequence[Annotation]) -> list[Annotation]:
    return run_state_machine(NumericDateStateMachine(), annotations)
