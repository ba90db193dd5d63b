"""The 16-byte header shared by every WTHOR file kind."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterable, Tuple

from wthor.config import HEADER_SIZE
from wthor.errors import FormatError
from wthor.slicing import Buffer

# century, year, month, day, games count, names count, play year,
# board size, game type, calculation depth, padding
_HEADER = struct.Struct("<BBBBIHHBBBx")


@dataclass(frozen=True)
class Header:
    """Raw header fields; which ones matter depends on the file kind."""

    created_century: int = 0
    created_year: int = 0
    created_month: int = 0
    created_day: int = 0
    games_count: int = 0
    names_count: int = 0
    year: int = 0
    board_size: int = 0
    game_type: int = 0
    calculation_depth: int = 0

    @property
    def created(self) -> Tuple[int, int, int, int]:
        return (self.created_century, self.created_year, self.created_month, self.created_day)


def decode_header(data: Buffer) -> Header:
    """Reinterpret exactly 16 bytes as a :class:`Header` without validating it."""

    if len(data) != HEADER_SIZE:
        raise FormatError(
            f"header must be {HEADER_SIZE} bytes, got {len(data)}",
            reason="short-header",
        )
    return Header(*_HEADER.unpack(data))


def encode_header(header: Header) -> bytes:
    """Pack ``header`` into 16 bytes; the padding byte is always 0."""

    try:
        return _HEADER.pack(
            header.created_century,
            header.created_year,
            header.created_month,
            header.created_day,
            header.games_count,
            header.names_count,
            header.year,
            header.board_size,
            header.game_type,
            header.calculation_depth,
        )
    except struct.error as exc:
        raise ValueError(f"header field out of range: {exc}") from exc


def _reserved(header: Header, names: Iterable[str]) -> None:
    for name in names:
        if getattr(header, name) != 0:
            raise FormatError(f"reserved header field {name} is nonzero", reason="reserved-field")


def decode_names_header(data: Buffer) -> Header:
    """Decode a name-table header, rejecting any game-file field that is set."""

    header = decode_header(data)
    _reserved(header, ("games_count", "year", "board_size", "game_type"))
    return header


def decode_games_header(data: Buffer, board_sizes: Tuple[int, ...]) -> Header:
    """Decode a game-table header whose board-size byte must be in ``board_sizes``."""

    header = decode_header(data)
    _reserved(header, ("names_count", "game_type"))
    if header.board_size not in board_sizes:
        raise FormatError(
            f"board size {header.board_size} not in {board_sizes}",
            reason="board-size",
        )
    return header


def encode_names_header(created: Tuple[int, int, int, int], count: int) -> bytes:
    century, year, month, day = created
    return encode_header(
        Header(
            created_century=century,
            created_year=year,
            created_month=month,
            created_day=day,
            names_count=count,
        )
    )


def encode_games_header(
    created: Tuple[int, int, int, int],
    count: int,
    *,
    year: int,
    board_size: int,
    calculation_depth: int,
) -> bytes:
    century, created_year, month, day = created
    return encode_header(
        Header(
            created_century=century,
            created_year=created_year,
            created_month=month,
            created_day=day,
            games_count=count,
            year=year,
            board_size=board_size,
            calculation_depth=calculation_depth,
        )
    )


__all__ = [
    "Header",
    "decode_games_header",
    "decode_header",
    "decode_names_header",
    "encode_games_header",
    "encode_header",
    "encode_names_header",
]
