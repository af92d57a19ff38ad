"""Runtime infrastructure for grinvoice.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Settings via get_settings(), Settings
- The Vision OCR collaborator via call_ocr_service()

Usage:
    from grinvoice.runtime import get_logger, get_settings

    logger = get_logger(__name__)
    settings = get_settings()
"""

from grinvoice.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from grinvoice.runtime.ocr_service import (
    OCRServiceUnavailable,
    call_ocr_service,
    load_ocr_json,
    save_ocr_json,
)
from grinvoice.runtime.settings import Settings, get_settings, load_settings, reset_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Settings
    "Settings",
    "get_settings",
    "load_settings",
    "reset_settings",
    # OCR collaborator
    "OCRServiceUnavailable",
    "call_ocr_service",
    "load_ocr_json",
    "save_ocr_json",
]
