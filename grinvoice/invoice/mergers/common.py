"""Shared state-machine scaffolding for token mergers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import Generic, TypeVar

from grinvoice.domain.annotation import Annotation

StateT = TypeVar("StateT", bound=Enum)


class TokenStateMachine(ABC, Generic[StateT]):
    """Finite-state coalescer over an ordered annotation stream.

    One instance is owned by exactly one merge call. Every processed token is
    appended to the in-progress ``segments`` buffer; the subclass step handler
    then either advances the state, completes the match (replacing the buffer
    with a single merged annotation), resynchronizes, or resets. Resetting
    flushes the buffer unmerged, in original order, to the output.
    """

    initial_state: StateT

    def __init__(self) -> None:
        self._output: list[Annotation] = []
        self._segments: list[Annotation] = []
        self._state: StateT = self.initial_state

    def process(self, annotation: Annotation) -> None:
        self._segments.append(annotation)
        self._step(self._state, annotation)

    def finish(self) -> list[Annotation]:
        """Flush any buffered segments unmerged and return the output sequence."""
        self._reset()
        return list(self._output)

    @abstractmethod
    def _step(self, state: StateT, annotation: Annotation) -> None:
        """Consume one token: advance, complete, resync or reset."""

    def _advance(self, state: StateT) -> None:
        self._state = state

    def _complete(self, merged: Annotation) -> None:
        self._segments = [merged]
        self._reset()

    def _resync(self, state: StateT) -> None:
        """Flush only the oldest buffered segment and continue matching in ``state``."""
        self._output.append(self._segments.pop(0))
        self._state = state

    def _reset(self) -> None:
        self._output.extend(self._segments)
        self._segments = []
        self._state = self.initial_state


def run_state_machine(machine: TokenStateMachine, annotations: Iterable[Annotation]) -> list[Annotation]:
    """Feed every annotation to ``machine`` in order and return its output."""
    for annotation in annotations:
        machine.process(annotation)
    return machine.finish()
