"""Geometry primitives for positioned OCR text."""

from __future__ import annotations

import math
from dataclasses import dataclass


class InvalidInputError(ValueError):
    """Raised when OCR geometry is malformed (missing vertex, non-finite coordinate)."""


@dataclass(frozen=True)
class Point:
    """A point in image coordinates (y grows downward)."""

    x: float
    y: float

    def __post_init__(self) -> None:
        for value in (self.x, self.y):
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise InvalidInputError(f"Point coordinates must be finite numbers, got ({self.x!r}, {self.y!r})")

    def distance(self, other: Point) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class Bounds:
    """Quadrilateral bounding box of an OCR token.

    Width and height are signed: a skewed or mirrored quadrilateral can
    produce negative values and callers must not assume positivity.
    """

    top_left: Point
    top_right: Point
    bottom_right: Point
    bottom_left: Point

    def __post_init__(self) -> None:
        for name in ("top_left", "top_right", "bottom_right", "bottom_left"):
            if not isinstance(getattr(self, name), Point):
                raise InvalidInputError(f"Bounds.{name} must be a Point")

    @property
    def width(self) -> float:
        return self.top_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_left.y - self.top_left.y

    @property
    def center(self) -> Point:
        return Point(self.top_left.x + self.width / 2.0, self.top_left.y + self.height / 2.0)

    @classmethod
    def from_box(cls, x0: float, y0: float, x1: float, y1: float) -> Bounds:
        """Build an axis-aligned rectangle from its corner coordinates."""
        return cls(Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1))

    @classmethod
    def envelope(cls, bounds: list[Bounds]) -> Bounds:
        """Return the axis-aligned envelope covering every bounds in ``bounds``.

        Each corner takes the extreme coordinates of the matching corners:
        left edges use the minimum x, right edges the maximum x, top edges the
        minimum y and bottom edges the maximum y.
        """
        if not bounds:
            raise InvalidInputError("Cannot build an envelope from no bounds")
        return cls(
            Point(min(b.top_left.x for b in bounds), min(b.top_left.y for b in bounds)),
            Point(max(b.top_right.x for b in bounds), min(b.top_right.y for b in bounds)),
            Point(max(b.bottom_right.x for b in bounds), max(b.bottom_right.y for b in bounds)),
            Point(min(b.bottom_left.x for b in bounds), max(b.bottom_left.y for b in bounds)),
        )
