"""The four WTHOR file kinds: a 16-byte header followed by a record table.

Every kind exposes the same three operations:

* ``read(buffer)`` decodes a complete in-memory file and raises
  :class:`~wthor.errors.FormatError` for any malformed input;
* ``size()`` returns the exact number of bytes the value encodes to;
* ``write(buffer)`` fills a caller-provided buffer of exactly ``size()`` bytes.

Values are frozen; the record count written to the header is always the
length of the record tuple.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from wthor.config import DEFAULT_CALCULATION_DEPTH, HEADER_SIZE, FileFormat, get_format
from wthor.errors import BufferLengthError, CountMismatchError, FormatError
from wthor.games import decode_games, encode_games
from wthor.header import (
    Header,
    decode_games_header,
    decode_names_header,
    encode_games_header,
    encode_names_header,
)
from wthor.models import Game, Game10, GameRecord, NameRecord, PlayerName, TournamentName
from wthor.names import decode_names, encode_names
from wthor.slicing import Buffer, split_prefix, split_prefix_mut


logger = logging.getLogger(__name__)

F = TypeVar("F", bound="WthorFile")
NF = TypeVar("NF", bound="NameFile")
GF = TypeVar("GF", bound="GameFile")


class WthorFile(BaseModel):
    """Fields and operations shared by every file kind."""

    file_format: ClassVar[FileFormat]
    records_field: ClassVar[str]

    created_century: int = Field(default=0, ge=0, le=0xFF)
    created_year: int = Field(default=0, ge=0, le=0xFF)
    created_month: int = Field(default=0, ge=0, le=0xFF)
    created_day: int = Field(default=0, ge=0, le=0xFF)

    model_config = ConfigDict(frozen=True)

    @property
    def created(self) -> Tuple[int, int, int, int]:
        """Creation date bytes (century, year, month, day), exactly as stored."""

        return (self.created_century, self.created_year, self.created_month, self.created_day)

    @property
    def records(self) -> Tuple[BaseModel, ...]:
        return getattr(self, self.records_field)

    def size(self) -> int:
        return HEADER_SIZE + self.file_format.record_width * len(self.records)

    @classmethod
    def read(cls: Type[F], buffer: Buffer) -> F:
        """Decode a complete file held in ``buffer``."""

        try:
            header_bytes, body = split_prefix(buffer, HEADER_SIZE)
        except BufferLengthError as exc:
            raise FormatError(f"buffer too short for header: {exc}", reason="short-header") from exc
        value = cls._decode(header_bytes, body)
        logger.debug(
            "Read %s file with %s records (%s bytes)",
            cls.file_format.key,
            len(value.records),
            len(header_bytes) + len(body),
        )
        return value

    def write(self, buffer: Buffer, count: int | None = None) -> None:
        """Encode into ``buffer``, which must be exactly :meth:`size` bytes long.

        ``count`` optionally restates the expected record count; a mismatch
        raises :class:`~wthor.errors.CountMismatchError` before anything is
        written.
        """

        expected = self.size()
        if len(buffer) != expected:
            raise BufferLengthError(expected, len(buffer))
        records = self.records
        if count is not None and count != len(records):
            raise CountMismatchError(count, len(records))
        # The destination is only touched once the whole file is encoded.
        output = bytearray(expected)
        header_view, body = split_prefix_mut(output, HEADER_SIZE)
        header_view[:] = self._encode_header()
        self._encode_records(body)
        target, _ = split_prefix_mut(buffer, expected)
        target[:] = output
        logger.debug(
            "Wrote %s file with %s records (%s bytes)",
            self.file_format.key,
            len(records),
            expected,
        )

    def to_bytes(self) -> bytes:
        buffer = bytearray(self.size())
        self.write(buffer)
        return bytes(buffer)

    @classmethod
    def _decode(cls: Type[F], header_bytes: memoryview, body: memoryview) -> F:
        raise NotImplementedError

    def _encode_header(self) -> bytes:
        raise NotImplementedError

    def _encode_records(self, body: memoryview) -> None:
        raise NotImplementedError


class NameFile(WthorFile):
    name_type: ClassVar[Type[NameRecord]]

    @classmethod
    def _decode(cls: Type[NF], header_bytes: memoryview, body: memoryview) -> NF:
        header = decode_names_header(header_bytes)
        names = decode_names(body, header.names_count, cls.name_type)
        return cls._assemble(header, names)

    @classmethod
    def _assemble(cls: Type[NF], header: Header, names: Sequence[NameRecord]) -> NF:
        return cls(
            created_century=header.created_century,
            created_year=header.created_year,
            created_month=header.created_month,
            created_day=header.created_day,
            **{cls.records_field: tuple(names)},
        )

    def _encode_header(self) -> bytes:
        return encode_names_header(self.created, len(self.records))

    def _encode_records(self, body: memoryview) -> None:
        encode_names(self.records, len(self.records), body, self.name_type)


class Jou(NameFile):
    """Player names (``WTHOR.JOU``)."""

    file_format: ClassVar[FileFormat] = get_format("JOU")
    records_field: ClassVar[str] = "players"
    name_type: ClassVar[Type[NameRecord]] = PlayerName

    players: Tuple[PlayerName, ...] = Field(default=(), max_length=0xFFFF)


class Trn(NameFile):
    """Tournament names (``WTHOR.TRN``)."""

    file_format: ClassVar[FileFormat] = get_format("TRN")
    records_field: ClassVar[str] = "tournaments"
    name_type: ClassVar[Type[NameRecord]] = TournamentName

    tournaments: Tuple[TournamentName, ...] = Field(default=(), max_length=0xFFFF)


class GameFile(WthorFile):
    """Header fields shared by the 8x8 and 10x10 game tables."""

    records_field: ClassVar[str] = "games"
    game_type: ClassVar[Type[GameRecord]]
    board_size: ClassVar[int]

    year: int = Field(default=0, ge=0, le=0xFFFF)
    calculation_depth: int = Field(default=0, ge=0, le=0xFF)

    @property
    def effective_calculation_depth(self) -> int:
        """Depth used for ``theoretical_score``; a stored 0 means 22."""

        return self.calculation_depth or DEFAULT_CALCULATION_DEPTH

    @classmethod
    def _decode(cls: Type[GF], header_bytes: memoryview, body: memoryview) -> GF:
        header = decode_games_header(header_bytes, cls.file_format.board_sizes)
        games = decode_games(body, header.games_count, cls.game_type)
        return cls(
            created_century=header.created_century,
            created_year=header.created_year,
            created_month=header.created_month,
            created_day=header.created_day,
            year=header.year,
            calculation_depth=header.calculation_depth,
            games=tuple(games),
        )

    def _encode_header(self) -> bytes:
        return encode_games_header(
            self.created,
            len(self.records),
            year=self.year,
            board_size=self.board_size,
            calculation_depth=self.calculation_depth,
        )

    def _encode_records(self, body: memoryview) -> None:
        encode_games(self.records, len(self.records), body, self.game_type)


class Wtb(GameFile):
    """8x8 games played in one year (``WTH_<year>.wtb``).

    A board-size byte of 0 in older files is read as 8; 8 is always written.
    """

    file_format: ClassVar[FileFormat] = get_format("WTB")
    game_type: ClassVar[Type[GameRecord]] = Game
    board_size: ClassVar[int] = 8

    games: Tuple[Game, ...] = Field(default=(), max_length=0xFFFFFFFF)


class Wtb10(GameFile):
    """10x10 games played in one year."""

    file_format: ClassVar[FileFormat] = get_format("WTB10")
    game_type: ClassVar[Type[GameRecord]] = Game10
    board_size: ClassVar[int] = 10

    games: Tuple[Game10, ...] = Field(default=(), max_length=0xFFFFFFFF)


__all__ = [
    "GameFile",
    "Jou",
    "NameFile",
    "Trn",
    "WthorFile",
    "Wtb",
    "Wtb10",
]
