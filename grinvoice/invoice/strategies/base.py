"""Strategy capability interface and first-success composition."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from grinvoice.domain.annotation import Annotation


class Strategy(Protocol):
    """Locate one field value in a canonical (post-merge) annotation list."""

    def find(self, annotations: Sequence[Annotation]) -> Annotation | None: ...


class FirstSuccessStrategy:
    """Try inner strategies in priority order and return the first non-None result.

    Later strategies are never consulted once an earlier one succeeds.
    """

    def __init__(self, strategies: Sequence[Strategy]) -> None:
        self.strategies: tuple[Strategy, ...] = tuple(strategies)

    def find(self, annotations: Sequence[Annotation]) -> Annotation | None:
        for strategy in self.strategies:
            result = strategy.find(annotations)
            if result is not None:
                return result
        return None
