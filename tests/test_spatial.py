"""Tests for spatial predicates."""

from grinvoice.domain import Annotation, Bounds
from grinvoice.invoice.spatial import (
    below,
    distance,
    horizontally_aligned,
    to_the_right_of,
    vertically_aligned,
)


def _ann(text: str, x0: float, y0: float, x1: float, y1: float) -> Annotation:
    return Annotation(text, Bounds.from_box(x0, y0, x1, y1))


def test_horizontal_alignment_uses_probe_center_against_span() -> None:
    label = _ann("Total", 0, 100, 50, 120)
    value = _ann("12.50", 200, 95, 260, 125)

    assert horizontally_aligned(value, label)


def test_horizontal_alignment_is_one_sided() -> None:
    tall = _ann("Total", 0, 0, 50, 200)
    short = _ann("12.50", 100, 10, 150, 30)

    assert horizontally_aligned(tall, short)
    assert not horizontally_aligned(short, tall)


def test_vertical_alignment_is_one_sided() -> None:
    wide = _ann("3/15/2024", 0, 150, 300, 170)
    narrow = _ann("Due", 10, 100, 40, 120)

    assert vertically_aligned(wide, narrow)
    assert not vertically_aligned(narrow, wide)


def test_span_edges_are_inclusive() -> None:
    span = _ann("a", 0, 0, 10, 10)
    probe = _ann("b", 20, 5, 30, 15)  # center y == 10

    assert horizontally_aligned(span, probe)


def test_directional_predicates_compare_centers() -> None:
    label = _ann("Due", 100, 100, 140, 120)

    assert to_the_right_of(label, _ann("x", 100, 0, 140, 10))  # same center x counts
    assert not to_the_right_of(label, _ann("x", 0, 100, 40, 120))
    assert below(label, _ann("x", 0, 100, 10, 120))
    assert not below(label, _ann("x", 0, 0, 10, 20))


def test_distance_between_centers() -> None:
    assert distance(_ann("a", 0, 0, 2, 2), _ann("b", 3, 4, 5, 6)) == 5.0
