"""Merge split decimal numbers such as "1" "," "234" "." "56" into "1,234.56"."""

from collections.abc import Sequence
from enum import Enum

from grinvoice.domain.annotation import Annotation, merge_annotations

from ..token_predicates import contains_digit, is_comma, is_decimal_point
from .common import TokenStateMachine, run_state_machine


class DecimalState(Enum):
    START = "start"
    LEFT_NUMBER = "left_number"
    COMMA = "comma"
    DECIMAL = "decimal"


class DecimalNumberStateMachine(TokenStateMachine[DecimalState]):
    """
    Recognize ``number ("," number)* "." number``.

    Any token containing a digit counts as a number. A break in the pattern
    flushes every buffered token, including the current one.
    """

    initial_state = DecimalState.START

    def _step(self, state: DecimalState, annotation: Annotation) -> None:
        text = annotation.description
        if state is DecimalState.START:
            if contains_digit(text):
                self._advance(DecimalState.LEFT_NUMBER)
            else:
                self._reset()
        elif state is DecimalState.LEFT_NUMBER:
            if is_decimal_point(text):
                self._advance(DecimalState.DECIMAL)
            elif is_comma(text):
                self._advance(DecimalState.COMMA)
            else:
                self._reset()
        elif state is DecimalState.COMMA:
            if contains_digit(text):
                self._advance(DecimalState.LEFT_NUMBER)
            else:
                self._reset()
        elif state is DecimalState.DECIMAL:
            if contains_digit(text):
                self._complete(merge_annotations(self._segments))
            else:
                self._reset()


def merge_decimal_numbers(annotations: Sequence[Annotation]) -> list[Annotation]:
    return run_state_machine(DecimalNumberStateMachine(), annotations)
