"""Tests for the Vision OCR collaborator."""

import base64
import json
from pathlib import Path

import httpx
import pytest

from grinvoice.runtime.ocr_service import (
    OCRServiceUnavailable,
    build_annotate_request,
    call_ocr_service,
    load_ocr_json,
    save_ocr_json,
)
from grinvoice.runtime.settings import Settings

OCR_RESPONSE = {"responses": [{"textAnnotations": []}]}


def _image(tmp_path: Path) -> Path:
    path = tmp_path / "invoice.png"
    path.write_bytes(b"\x89PNG fake image")
    return path


def test_build_annotate_request_encodes_image() -> None:
    body = build_annotate_request(b"abc")

    request = body["requests"][0]
    assert base64.b64decode(request["image"]["content"]) == b"abc"
    assert request["features"] == [{"type": "DOCUMENT_TEXT_DETECTION", "maxResults": 1}]


def test_call_ocr_service_posts_to_vision(tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["key"] = request.url.params["key"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=OCR_RESPONSE)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    settings = Settings(vision_url="https://vision.test/v1/images:annotate", vision_api_key="secret")

    result = call_ocr_service(_image(tmp_path), settings, client=client)

    assert result == OCR_RESPONSE
    assert seen["key"] == "secret"
    assert seen["body"]["requests"][0]["features"][0]["type"] == "DOCUMENT_TEXT_DETECTION"  # type: ignore[index]


def test_call_ocr_service_raises_on_http_error(tmp_path: Path) -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(403, json={})))

    with pytest.raises(OCRServiceUnavailable, match="403"):
        call_ocr_service(_image(tmp_path), Settings(vision_api_key="k"), client=client)


def test_call_ocr_service_raises_on_connection_error(tmp_path: Path) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))

    with pytest.raises(OCRServiceUnavailable, match="connection refused"):
        call_ocr_service(_image(tmp_path), Settings(vision_api_key="k"), client=client)


def test_call_ocr_service_requires_api_key(tmp_path: Path) -> None:
    with pytest.raises(OCRServiceUnavailable, match="API key"):
        call_ocr_service(_image(tmp_path), Settings())


def test_save_and_load_ocr_json(tmp_path: Path) -> None:
    settings = Settings(ocr_json_dir=tmp_path / "ocr")

    saved = save_ocr_json(OCR_RESPONSE, tmp_path / "scan-01.jpg", settings)

    assert saved == tmp_path / "ocr" / "scan-01.ocr.json"
    assert load_ocr_json(saved) == OCR_RESPONSE


def test_load_ocr_json_non_object_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[]")

    assert load_ocr_json(path) == {}
