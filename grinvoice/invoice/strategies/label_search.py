"""Label-anchored and reference-anchored search strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from grinvoice.domain.annotation import Annotation

from ..spatial import below, distance, horizontally_aligned, to_the_right_of, vertically_aligned
from ..tracing import NullTracer, Tracer

CandidatePredicate = Callable[[str], bool]
# Chooses the result among the per-label picks (one per matching label, in label order)
Selector = Callable[[Sequence[Annotation]], Annotation | None]


def first_pick(picks: Sequence[Annotation]) -> Annotation | None:
    return picks[0] if picks else None


class LabelSearchStrategy(ABC):
    """
    Find a value positioned relative to a label word.

    For every annotation whose description case-insensitively equals the
    label word, keep the candidate values aligned with the label, then those
    lying in the search direction, and take the first of them in input
    order. The selector then picks one result across all labels.

    Subclasses define the alignment and direction tests.
    """

    alignment_name = ""
    direction_name = ""

    def __init__(
        self,
        label_word: str,
        is_candidate: CandidatePredicate,
        *,
        select: Selector = first_pick,
        value_name: str = "value",
        tracer: Tracer | None = None,
    ) -> None:
        self.label_word = label_word.lower()
        self.is_candidate = is_candidate
        self.select = select
        self.value_name = value_name
        self.tracer: Tracer = tracer or NullTracer()

    def find(self, annotations: Sequence[Annotation]) -> Annotation | None:
        tracer = self.tracer
        with tracer.scope(f"Finding {self.value_name} {self.direction_name} '{self.label_word}'"):
            labels = self.labels(annotations)
            candidates = self.candidates(annotations)

            picks: list[Annotation] = []
            for label in labels:
                pick = self._pick_for_label(label, candidates)
                if pick is not None:
                    picks.append(pick)

            result = self.select(picks)
            tracer.record(f"Selecting {self.value_name}", picks, [result] if result is not None else [])
            return result

    def labels(self, annotations: Sequence[Annotation]) -> list[Annotation]:
        labels = [annotation for annotation in annotations if annotation.description.lower() == self.label_word]
        self.tracer.record(f"Finding all '{self.label_word}' labels", annotations, labels)
        return labels

    def candidates(self, annotations: Sequence[Annotation]) -> list[Annotation]:
        candidates = [annotation for annotation in annotations if self.is_candidate(annotation.description)]
        self.tracer.record(f"Finding {self.value_name} candidates", annotations, candidates)
        return candidates

    def _pick_for_label(self, label: Annotation, candidates: Sequence[Annotation]) -> Annotation | None:
        tracer = self.tracer
        with tracer.scope(f"Searching from label {label}"):
            # Candidate owns the span, the label's center is the probe
            aligned = [candidate for candidate in candidates if self.aligned(candidate, label)]
            tracer.record(f"Finding all {self.alignment_name} aligned with {label}", candidates, aligned)

            directed = [candidate for candidate in aligned if self.in_direction(label, candidate)]
            tracer.record(f"Finding all {self.direction_name} {label}", aligned, directed)

            pick = directed[0] if directed else None
            tracer.record(f"Finding the first {self.direction_name} {label}", directed, directed[:1])
            return pick

    @abstractmethod
    def aligned(self, candidate: Annotation, label: Annotation) -> bool:
        """Return True if the candidate lines up with the label."""

    @abstractmethod
    def in_direction(self, label: Annotation, candidate: Annotation) -> bool:
        """Return True if the candidate lies in the search direction from the label."""


class LookToTheRightStrategy(LabelSearchStrategy):
    """Values on the label's row, at or right of the label's center."""

    alignment_name = "horizontally"
    direction_name = "to the right of"

    def aligned(self, candidate: Annotation, label: Annotation) -> bool:
        return horizontally_aligned(candidate, label)

    def in_direction(self, label: Annotation, candidate: Annotation) -> bool:
        return to_the_right_of(label, candidate)


class LookBelowStrategy(LabelSearchStrategy):
    """Values in the label's column, at or below the label's center."""

    alignment_name = "vertically"
    direction_name = "below"

    def aligned(self, candidate: Annotation, label: Annotation) -> bool:
        return vertically_aligned(candidate, label)

    def in_direction(self, label: Annotation, candidate: Annotation) -> bool:
        return below(label, candidate)


class ClosestToStrategy:
    """Return the candidate nearest (center to center) to a reference annotation.

    The reference itself is never returned. Ties go to the first candidate
    in input order.
    """

    def __init__(
        self,
        reference: Annotation,
        is_candidate: CandidatePredicate,
        *,
        value_name: str = "value",
        tracer: Tracer | None = None,
    ) -> None:
        self.reference = reference
        self.is_candidate = is_candidate
        self.value_name = value_name
        self.tracer: Tracer = tracer or NullTracer()

    def find(self, annotations: Sequence[Annotation]) -> Annotation | None:
        candidates = [
            annotation
            for annotation in annotations
            if annotation != self.reference and self.is_candidate(annotation.description)
        ]
        self.tracer.record(f"Finding {self.value_name} candidates", annotations, candidates)
        if not candidates:
            return None

        closest = min(candidates, key=lambda candidate: distance(self.reference, candidate))
        self.tracer.record(f"Finding the {self.value_name} closest to {self.reference}", candidates, [closest])
        return closest
