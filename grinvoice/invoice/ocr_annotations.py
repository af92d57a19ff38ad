"""Build annotations from Google Vision ``images:annotate`` JSON."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from grinvoice.domain.annotation import Annotation
from grinvoice.domain.geometry import Bounds, InvalidInputError, Point
from grinvoice.runtime.logging import get_logger

from .annotation_normalization import AnnotationNormalizationOp, normalize_annotations
from .mergers import DEFAULT_MERGERS, Merger, merge_tokens

logger = get_logger(__name__)


def text_annotations_json(ocr_json: dict[str, Any]) -> list[dict[str, Any]]:
    """
    Return ``responses[0].textAnnotations``, or an empty list when either is absent.

    Raises:
        InvalidInputError: if ``responses`` or ``textAnnotations`` is not a list,
            or an entry in either is not an object
    """
    responses = ocr_json.get("responses") if isinstance(ocr_json, dict) else None
    if not responses:
        return []
    if not isinstance(responses, list):
        raise InvalidInputError(f"responses must be a list, got {type(responses).__name__}")
    response = responses[0]
    if not isinstance(response, dict):
        raise InvalidInputError(f"Malformed response: {response!r}")

    text_annotations = response.get("textAnnotations")
    if not text_annotations:
        return []
    if not isinstance(text_annotations, list):
        raise InvalidInputError(f"textAnnotations must be a list, got {type(text_annotations).__name__}")
    for item in text_annotations:
        if not isinstance(item, dict):
            raise InvalidInputError(f"Malformed text annotation: {item!r}")
    return list(text_annotations)


def bounds_from_json(bounding_poly: dict[str, Any] | None) -> Bounds:
    """
    Build Bounds from a ``boundingPoly`` object.

    Vertices are read in order top-left, top-right, bottom-right,
    bottom-left. Vision omits zero-valued coordinates, so a missing ``x`` or
    ``y`` key reads as 0; a missing vertex is invalid input.

    Raises:
        InvalidInputError: if the polygon or any of its four vertices is missing
    """
    if not isinstance(bounding_poly, dict):
        raise InvalidInputError("Annotation has no boundingPoly")
    vertices = bounding_poly.get("vertices")
    if not isinstance(vertices, list) or len(vertices) < 4:
        raise InvalidInputError(f"boundingPoly needs four vertices, got {vertices!r}")

    points = []
    for vertex in vertices[:4]:
        if not isinstance(vertex, dict):
            raise InvalidInputError(f"Malformed vertex: {vertex!r}")
        points.append(Point(vertex.get("x", 0), vertex.get("y", 0)))
    return Bounds(*points)


def annotation_from_json(annotation_json: dict[str, Any]) -> Annotation:
    description = annotation_json.get("description")
    if not isinstance(description, str):
        raise InvalidInputError(f"Annotation has no description: {annotation_json!r}")
    return Annotation(description, bounds_from_json(annotation_json.get("boundingPoly")))


def annotations_from_ocr_json(ocr_json: dict[str, Any]) -> list[Annotation]:
    """Raw, unmerged annotations in OCR order."""
    return [annotation_from_json(item) for item in text_annotations_json(ocr_json)]


def create_annotations(
    ocr_json: dict[str, Any],
    *,
    operations: Sequence[AnnotationNormalizationOp] | None = None,
    mergers: Sequence[Merger] = DEFAULT_MERGERS,
) -> list[Annotation]:
    """Build the canonical annotation list: parse, normalize, then merge tokens."""
    raw = annotations_from_ocr_json(ocr_json)
    normalized = normalize_annotations(raw, operations=operations)
    logger.debug("Read %d OCR annotations (%d after normalization)", len(raw), len(normalized))
    return merge_tokens(normalized, mergers)
