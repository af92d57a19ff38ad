"""Annotation: a text token (or merged run of tokens) with its bounds."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from grinvoice.domain.geometry import Bounds, InvalidInputError


@dataclass(frozen=True)
class Annotation:
    """Immutable OCR token: description text plus bounding quadrilateral."""

    description: str
    bounds: Bounds

    def __post_init__(self) -> None:
        if not isinstance(self.description, str):
            raise InvalidInputError(f"Annotation description must be a string, got {self.description!r}")
        if not isinstance(self.bounds, Bounds):
            raise InvalidInputError("Annotation bounds must be a Bounds instance")

    def with_description(self, description: str) -> Annotation:
        return Annotation(description, self.bounds)

    def __str__(self) -> str:
        return f"{self.description} ({self.bounds.center})"


def merge_annotations(annotations: Sequence[Annotation], separator: str = "") -> Annotation:
    """
    Merge annotations into one.

    The description is the ordered concatenation of the constituent
    descriptions joined by ``separator``; the bounds is their envelope.

    Args:
        annotations: Non-empty sequence of annotations, in reading order
        separator: Text inserted between descriptions

    Returns:
        New merged Annotation
    """
    if not annotations:
        raise InvalidInputError("Cannot merge an empty annotation sequence")
    return Annotation(
        separator.join(annotation.description for annotation in annotations),
        Bounds.envelope([annotation.bounds for annotation in annotations]),
    )
