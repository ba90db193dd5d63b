"""Codec for the WTHOR Othello database files."""

from .download import Downloader, file_name_for
from .errors import (
    BufferLengthError,
    CountMismatchError,
    DownloadError,
    FormatError,
    StatusError,
    TransportError,
    WriteError,
    WthorError,
)
from .files import Jou, Trn, Wtb, Wtb10
from .header import Header
from .models import Game, Game10, PlayerName, TournamentName

__all__ = [
    "BufferLengthError",
    "CountMismatchError",
    "DownloadError",
    "Downloader",
    "FormatError",
    "Game",
    "Game10",
    "Header",
    "Jou",
    "PlayerName",
    "StatusError",
    "TournamentName",
    "TransportError",
    "WriteError",
    "WthorError",
    "Trn",
    "Wtb",
    "Wtb10",
    "file_name_for",
]
