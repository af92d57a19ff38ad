"""Google Vision OCR collaborator (non-core I/O)."""

from __future__ import annotations

import base64
import json
import time
from pathlib import Path
from typing import Any

import httpx

from grinvoice.runtime.logging import get_logger
from grinvoice.runtime.settings import Settings, get_settings

logger = get_logger(__name__)


class OCRServiceUnavailable(RuntimeError):
    """Raised when the OCR service cannot be reached or returns an error."""


def build_annotate_request(image_bytes: bytes) -> dict[str, Any]:
    """Build a DOCUMENT_TEXT_DETECTION request body for one image."""
    return {
        "requests": [
            {
                "image": {"content": base64.b64encode(image_bytes).decode("ascii")},
                "features": [{"type": "DOCUMENT_TEXT_DETECTION", "maxResults": 1}],
            }
        ]
    }


def call_ocr_service(
    image_path: Path,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """
    Send an image to the Vision ``images:annotate`` endpoint.

    Args:
        image_path: Image file to recognize
        settings: Endpoint/API key settings. If None, uses get_settings().
        client: Optional httpx client (tests inject a mock transport)

    Returns:
        Raw OCR response JSON

    Raises:
        OCRServiceUnavailable: on transport failure or a non-200 response
    """
    settings = settings or get_settings()
    if not settings.vision_api_key:
        raise OCRServiceUnavailable("No Vision API key configured (set GRINVOICE_VISION_API_KEY)")

    payload = build_annotate_request(image_path.read_bytes())
    logger.info("Sending %s to OCR service at %s...", image_path.name, settings.vision_url)

    owns_client = client is None
    http = client or httpx.Client(timeout=settings.request_timeout)
    try:
        start_time = time.time()
        response = http.post(settings.vision_url, params={"key": settings.vision_api_key}, json=payload)
        elapsed_time = time.time() - start_time
        logger.info("OCR service returned in %.2f seconds", elapsed_time)

        if response.status_code != 200:
            logger.error("OCR service error: %s", response.status_code)
            raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

        return response.json()
    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e
    finally:
        if owns_client:
            http.close()


def ocr_json_path_for(image_path: Path, settings: Settings | None = None) -> Path:
    settings = settings or get_settings()
    return settings.ocr_json_dir / f"{image_path.stem}.ocr.json"


def save_ocr_json(ocr_result: dict[str, Any], image_path: Path, settings: Settings | None = None) -> Path:
    """Save raw OCR JSON next to other OCR results for later re-extraction."""
    ocr_json_path = ocr_json_path_for(image_path, settings)
    ocr_json_path.parent.mkdir(parents=True, exist_ok=True)
    ocr_json_path.write_text(json.dumps(ocr_result, indent=2))
    logger.debug("OCR JSON saved to: %s", ocr_json_path)
    return ocr_json_path


def load_ocr_json(path: Path) -> dict[str, Any]:
    """Read an OCR JSON file. An empty or non-object document reads as {}."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}
