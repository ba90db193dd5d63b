"""Configuration helpers for file layouts and download settings."""

from .formats import (
    DEFAULT_CALCULATION_DEPTH,
    HEADER_SIZE,
    MOVES_SENTINEL,
    NAME_SENTINEL,
    FileFormat,
    get_format,
    iter_formats,
)
from .settings import DEFAULT_BASE_URL, DownloadSettings, load_download_settings

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CALCULATION_DEPTH",
    "DownloadSettings",
    "FileFormat",
    "HEADER_SIZE",
    "MOVES_SENTINEL",
    "NAME_SENTINEL",
    "get_format",
    "iter_formats",
    "load_download_settings",
]
