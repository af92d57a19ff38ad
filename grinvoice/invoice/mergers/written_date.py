"""Merge written dates such as "May" "3" "," "2024" into "May 3, 2024"."""

from collections.abc import Sequence
from enum import Enum

from grinvoice.domain.annotation import Annotation, merge_annotations

from ..token_predicates import is_comma, is_digit_run, is_month_word
from .common import TokenStateMachine, run_state_machine


class WrittenDateState(Enum):
    START = "start"
    MONTH = "month"
    DAY = "day"
    YEAR = "year"


class WrittenDateStateMachine(TokenStateMachine[WrittenDateState]):
    """
    Recognize ``month day [","] year``.

    MONTH means a month word was read and a day is expected, DAY means the
    day was read and a comma or the year is expected, YEAR means a comma was
    read and the year is expected. A second month word right after the first
    restarts the match at that token.
    """

    initial_state = WrittenDateState.START

    def _step(self, state: WrittenDateState, annotation: Annotation) -> None:
        text = annotation.description
        if state is WrittenDateState.START:
            if is_month_word(text):
                self._advance(WrittenDateState.MONTH)
            else:
                self._reset()
        elif state is WrittenDateState.MONTH:
            if is_digit_run(text):
                self._advance(WrittenDateState.DAY)
            elif is_month_word(text):
                self._resync(WrittenDateState.MONTH)
            else:
                self._reset()
        elif state is WrittenDateState.DAY:
            if is_digit_run(text):
                self._complete(_merge_with_spacing(self._segments))
            elif is_comma(text):
                self._advance(WrittenDateState.YEAR)
            else:
                self._reset()
        elif state is WrittenDateState.YEAR:
            if is_digit_run(text):
                self._complete(_merge_with_spacing(self._segments))
            else:
                self._reset()


def _merge_with_spacing(segments: list[Annotation]) -> Annotation:
    """Join month, day and year with spaces, fusing a comma onto the day."""
    if len(segments) == 4 and is_comma(segments[2].description):
        segments = [segments[0], merge_annotations(segments[1:3]), segments[3]]
    return merge_annotations(segments, separator=" ")


def merge_written_dates(annotations: Sequence[Annotation]) -> list[Annotation]:
    return run_state_machine(WrittenDateStateMachine(), annotations)
