"""Fetch WTHOR database files over HTTP.

The downloader only retrieves bytes; decoding is delegated to the file models.
Requests are made once, with no retry and no caching.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from wthor.config import DownloadSettings, get_format, load_download_settings
from wthor.errors import StatusError, TransportError
from wthor.files import Jou, Trn, Wtb, Wtb10


logger = logging.getLogger(__name__)

_NAME_FILE_STEM = "WTHOR"
_GAME_FILE_STEM = "WTH_{year}"


def file_name_for(kind: str, year: Optional[int] = None) -> str:
    """Return the published file name for a format key.

    Name tables are ``WTHOR.JOU`` and ``WTHOR.TRN``; yearly game tables keep
    their lowercase ``.wtb`` extension (``WTH_2001.wtb``).
    """

    file_format = get_format(kind)
    if file_format.count_field == "names":
        return f"{_NAME_FILE_STEM}.{file_format.extension.upper()}"
    if year is None:
        raise ValueError(f"year is required for {file_format.key} files")
    return f"{_GAME_FILE_STEM.format(year=year).upper()}.{file_format.extension}"


class Downloader:
    """Async client for the public WTHOR archive."""

    def __init__(
        self,
        settings: DownloadSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or load_download_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.settings.timeout)

    async def __aenter__(self) -> "Downloader":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def url_for(self, file_name: str) -> str:
        return f"{self.settings.base_url}{file_name}"

    async def fetch(self, file_name: str) -> bytes:
        """GET one file and return its body, raising on transport or status failure."""

        url = self.url_for(file_name)
        logger.info("Downloading %s", url)
        try:
            response = await self._client.get(url)
        except httpx.TransportError as exc:
            logger.warning("Transport failure for %s: %s", url, exc)
            raise TransportError(f"GET {url} failed: {exc}") from exc
        if response.status_code != httpx.codes.OK:
            logger.warning("Unexpected status %s for %s", response.status_code, url)
            raise StatusError(url, response.status_code)
        return response.content

    async def jou(self) -> Jou:
        return Jou.read(await self.fetch(file_name_for("JOU")))

    async def trn(self) -> Trn:
        return Trn.read(await self.fetch(file_name_for("TRN")))

    async def wtb(self, year: int) -> Wtb:
        return Wtb.read(await self.fetch(file_name_for("WTB", year)))

    async def wtb10(self, year: int) -> Wtb10:
        return Wtb10.read(await self.fetch(file_name_for("WTB10", year)))


__all__ = ["Downloader", "file_name_for"]
