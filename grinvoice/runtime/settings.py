"""Runtime settings for the OCR collaborator and file locations.

Sources, later wins:
1. Built-in defaults
2. TOML file at $GRINVOICE_CONFIG, or ./grinvoice.toml when present
3. Environment variables GRINVOICE_VISION_URL, GRINVOICE_VISION_API_KEY,
   GRINVOICE_OCR_JSON_DIR

Extraction heuristics are fixed constants and are not configurable here.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

from grinvoice.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_VISION_URL = "https://vision.googleapis.com/v1/images:annotate"
DEFAULT_CONFIG_FILE = "grinvoice.toml"


@dataclass(frozen=True)
class Settings:
    """Container for runtime settings."""

    vision_url: str = DEFAULT_VISION_URL
    vision_api_key: str | None = None
    ocr_json_dir: Path = Path("ocr-json")
    request_timeout: float = 60.0


def _config_path() -> Path | None:
    env_path = os.environ.get("GRINVOICE_CONFIG")
    if env_path:
        return Path(env_path)
    default_path = Path(DEFAULT_CONFIG_FILE)
    return default_path if default_path.exists() else None


def _apply_toml(settings: Settings, data: dict[str, Any]) -> Settings:
    vision = data.get("vision", {})
    paths = data.get("paths", {})
    updates: dict[str, Any] = {}
    if "url" in vision:
        updates["vision_url"] = str(vision["url"])
    if "api_key" in vision:
        updates["vision_api_key"] = str(vision["api_key"])
    if "timeout" in vision:
        updates["request_timeout"] = float(vision["timeout"])
    if "ocr_json_dir" in paths:
        updates["ocr_json_dir"] = Path(paths["ocr_json_dir"])
    return replace(settings, **updates)


def _apply_env(settings: Settings) -> Settings:
    updates: dict[str, Any] = {}
    if os.environ.get("GRINVOICE_VISION_URL"):
        updates["vision_url"] = os.environ["GRINVOICE_VISION_URL"]
    if os.environ.get("GRINVOICE_VISION_API_KEY"):
        updates["vision_api_key"] = os.environ["GRINVOICE_VISION_API_KEY"]
    if os.environ.get("GRINVOICE_OCR_JSON_DIR"):
        updates["ocr_json_dir"] = Path(os.environ["GRINVOICE_OCR_JSON_DIR"])
    return replace(settings, **updates)


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Load settings from defaults, a TOML file and the environment.

    Args:
        config_path: Optional TOML path override. If None, uses $GRINVOICE_CONFIG
            or ./grinvoice.toml.

    Returns:
        Resolved Settings
    """
    settings = Settings()
    path = config_path if config_path is not None else _config_path()
    if path is not None:
        if path.exists():
            with open(path, "rb") as f:
                settings = _apply_toml(settings, tomllib.load(f))
            logger.debug("Loaded settings from %s", path)
        else:
            logger.warning("Config file not found: %s", path)
    return _apply_env(settings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings (loaded once)."""
    return load_settings()


def reset_settings() -> None:
    """Forget cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()
