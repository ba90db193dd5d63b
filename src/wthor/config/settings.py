"""Environment-driven settings for the downloader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_BASE_URL_ENV = "WTHOR_BASE_URL"
_TIMEOUT_ENV = "WTHOR_TIMEOUT"

DEFAULT_BASE_URL = "https://www.ffothello.org/wthor/base/"
_TIMEOUT_DEFAULT = 30.0
_TIMEOUT_MIN = 1.0


@dataclass(frozen=True)
class DownloadSettings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = _TIMEOUT_DEFAULT


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_url(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    if not value.startswith(("http://", "https://")):
        logger.warning("Invalid URL for %s: %s; using default %s", name, raw, default)
        return default
    # File names are appended directly.
    return value if value.endswith("/") else value + "/"


def load_download_settings() -> DownloadSettings:
    """Build settings from WTHOR_* environment variables."""

    return DownloadSettings(
        base_url=_env_url(_BASE_URL_ENV, DEFAULT_BASE_URL),
        timeout=_env_float(_TIMEOUT_ENV, _TIMEOUT_DEFAULT, clamp_min=_TIMEOUT_MIN),
    )
