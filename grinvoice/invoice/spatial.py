"""Spatial predicates over annotation bounds.

The alignment tests are one-sided: they check whether one annotation's
center falls inside the other's span, not whether the two spans overlap.
Argument order therefore matters.
"""

from grinvoice.domain.annotation import Annotation


def horizontally_aligned(span: Annotation, probe: Annotation) -> bool:
    """Return True if ``probe``'s vertical center lies within ``span``'s top-to-bottom extent."""
    center_y = probe.bounds.center.y
    return span.bounds.top_left.y <= center_y <= span.bounds.bottom_left.y


def vertically_aligned(span: Annotation, probe: Annotation) -> bool:
    """Return True if ``probe``'s horizontal center lies within ``span``'s left-to-right extent."""
    center_x = probe.bounds.center.x
    return span.bounds.top_left.x <= center_x <= span.bounds.top_right.x


def to_the_right_of(label: Annotation, candidate: Annotation) -> bool:
    return candidate.bounds.center.x >= label.bounds.center.x


def below(label: Annotation, candidate: Annotation) -> bool:
    return candidate.bounds.center.y >= label.bounds.center.y


def distance(a: Annotation, b: Annotation) -> float:
    """Euclidean distance between the two annotations' centers."""
    return a.bounds.center.distance(b.bounds.center)
