"""Diagnostic tracing for field-extraction strategies.

Strategies report each step (label search, candidate filter, alignment
filter, directional filter, picks) to a tracer. Tracers only observe;
nothing they do can change an extraction result.

Usage:
    from grinvoice.invoice.tracing import StreamTracer

    fields = extract_invoice_fields(ocr_json, tracer=StreamTracer(sys.stdout))
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from typing import Protocol, TextIO

from grinvoice.domain.annotation import Annotation
from grinvoice.runtime.logging import get_logger

logger = get_logger(__name__)


class Tracer(Protocol):
    """Observer invoked at well-defined extraction steps."""

    def record(self, label: str, inputs: Sequence[Annotation], results: Sequence[Annotation]) -> None: ...

    def scope(self, label: str) -> AbstractContextManager[None]: ...


def summarize(annotations: Sequence[Annotation]) -> str:
    return ", ".join(str(annotation) for annotation in annotations)


class NullTracer:
    """Default tracer: ignores every step."""

    def record(self, label: str, inputs: Sequence[Annotation], results: Sequence[Annotation]) -> None:
        return None

    @contextmanager
    def scope(self, label: str) -> Iterator[None]:
        yield


class LoggingTracer:
    """Forward trace steps to the ``grinvoice`` logger at DEBUG level."""

    def record(self, label: str, inputs: Sequence[Annotation], results: Sequence[Annotation]) -> None:
        logger.debug("%s: %s -> %s", label, summarize(inputs), summarize(results))

    @contextmanager
    def scope(self, label: str) -> Iterator[None]:
        logger.debug("%s", label)
        yield


class StreamTracer:
    """Write an indented trace of every step to a text stream."""

    def __init__(self, io: TextIO) -> None:
        self._io = io
        self._scope_level = 0

    def record(self, label: str, inputs: Sequence[Annotation], results: Sequence[Annotation]) -> None:
        self._print(f"{label}: {summarize(inputs)}")
        self._print(f"{label} results: {summarize(results)}")

    @contextmanager
    def scope(self, label: str) -> Iterator[None]:
        self._print(label)
        self._scope_level += 1
        try:
            yield
        finally:
            self._scope_level -= 1

    def _print(self, message: str) -> None:
        self._io.write(f"{'  ' * self._scope_level}{message}\n")


@dataclass(frozen=True)
class TraceStep:
    label: str
    inputs: tuple[Annotation, ...]
    results: tuple[Annotation, ...]


class RecordingTracer:
    """Keep every reported step in memory, in report order."""

    def __init__(self) -> None:
        self.steps: list[TraceStep] = []

    def record(self, label: str, inputs: Sequence[Annotation], results: Sequence[Annotation]) -> None:
        self.steps.append(TraceStep(label, tuple(inputs), tuple(results)))

    @contextmanager
    def scope(self, label: str) -> Iterator[None]:
        yield

    def labels(self) -> list[str]:
        return [step.label for step in self.steps]
