import httpx
import pytest

from wthor.config import DownloadSettings
from wthor.download import Downloader, file_name_for
from wthor.errors import FormatError, StatusError, TransportError
from wthor.files import Jou, Wtb
from wthor.models import Game, PlayerName

BASE_URL = "https://archive.test/wthor/"


def _downloader(handler) -> Downloader:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return Downloader(DownloadSettings(base_url=BASE_URL, timeout=5.0), client=client)


def test_file_names_follow_archive_convention():
    assert file_name_for("JOU") == "WTHOR.JOU"
    assert file_name_for("trn") == "WTHOR.TRN"
    assert file_name_for("WTB", 2001) == "WTH_2001.wtb"
    assert file_name_for("WTB10", 1990) == "WTH_1990.wtb"


def test_game_file_name_requires_year():
    with pytest.raises(ValueError):
        file_name_for("WTB")


@pytest.mark.asyncio
async def test_fetch_returns_body_and_decodes():
    jou = Jou(created_century=20, players=[PlayerName(value=b"ALICE")])
    wtb = Wtb(year=2001, games=[Game(tournament=0, black_player=0, white_player=0, score=40, theoretical_score=40)])
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        if request.url.path.endswith("WTHOR.JOU"):
            return httpx.Response(200, content=jou.to_bytes())
        return httpx.Response(200, content=wtb.to_bytes())

    async with _downloader(handler) as downloader:
        assert await downloader.jou() == jou
        assert await downloader.wtb(2001) == wtb

    assert seen == [BASE_URL + "WTHOR.JOU", BASE_URL + "WTH_2001.wtb"]


@pytest.mark.asyncio
async def test_fetch_non_success_status_raises_once():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(404)

    async with _downloader(handler) as downloader:
        with pytest.raises(StatusError) as excinfo:
            await downloader.fetch("WTHOR.TRN")

    assert excinfo.value.status_code == 404
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_fetch_transport_failure_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _downloader(handler) as downloader:
        with pytest.raises(TransportError) as excinfo:
            await downloader.trn()

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_invalid_body_surfaces_format_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"not a wthor file")

    async with _downloader(handler) as downloader:
        with pytest.raises(FormatError):
            await downloader.jou()


@pytest.mark.asyncio
async def test_injected_client_is_not_closed():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    async with Downloader(DownloadSettings(base_url=BASE_URL), client=client):
        pass
    assert not client.is_closed
    await client.aclose()
