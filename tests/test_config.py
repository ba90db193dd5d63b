import pytest

from wthor.config import get_format, iter_formats, load_download_settings


def test_get_format_is_case_insensitive():
    file_format = get_format("wtb")
    assert file_format.key == "WTB"
    assert file_format.record_width == 68
    assert file_format.board_sizes == (0, 8)


def test_record_widths_leave_room_for_fixed_fields():
    widths = {fmt.key: (fmt.record_width, fmt.record_capacity) for fmt in iter_formats()}
    assert widths == {
        "JOU": (20, 19),
        "TRN": (26, 25),
        "WTB": (68, 60),
        "WTB10": (104, 96),
    }


def test_get_format_missing_raises():
    with pytest.raises(KeyError):
        get_format("PGN")


def test_download_settings_defaults(monkeypatch):
    monkeypatch.delenv("WTHOR_BASE_URL", raising=False)
    monkeypatch.delenv("WTHOR_TIMEOUT", raising=False)

    settings = load_download_settings()
    assert settings.base_url == "https://www.ffothello.org/wthor/base/"
    assert settings.timeout == pytest.approx(30.0)


def test_download_settings_from_env(monkeypatch):
    monkeypatch.setenv("WTHOR_BASE_URL", "http://mirror.test/wthor")
    monkeypatch.setenv("WTHOR_TIMEOUT", "0.2")

    settings = load_download_settings()
    assert settings.base_url == "http://mirror.test/wthor/"
    assert settings.timeout == pytest.approx(1.0)


def test_download_settings_invalid_values_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("WTHOR_BASE_URL", "ftp://nope")
    monkeypatch.setenv("WTHOR_TIMEOUT", "soon")

    with caplog.at_level("WARNING"):
        settings = load_download_settings()

    assert settings.base_url == "https://www.ffothello.org/wthor/base/"
    assert settings.timeout == pytest.approx(30.0)
    assert "WTHOR_TIMEOUT" in caplog.text
