"""Game-result records for 8x8 and 10x10 tables."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from wthor.config import MOVES_SENTINEL, get_format


class GameRecord(BaseModel):
    """One game: name-table indices, scores and the raw move bytes.

    ``moves`` always holds exactly ``move_capacity`` bytes; shorter input is
    zero-padded and everything after the first end-of-moves sentinel is
    zeroed. Move bytes are not otherwise interpreted.
    """

    move_capacity: ClassVar[int]
    slot_width: ClassVar[int]

    tournament: int = Field(..., ge=0, le=0xFFFF)
    black_player: int = Field(..., ge=0, le=0xFFFF)
    white_player: int = Field(..., ge=0, le=0xFFFF)
    score: int = Field(..., ge=0, le=0xFF)
    theoretical_score: int = Field(..., ge=0, le=0xFF)
    moves: bytes = Field(default=b"", validate_default=True)

    model_config = ConfigDict(frozen=True)

    @field_validator("moves", mode="before")
    @classmethod
    def _coerce_moves(cls, value: Any) -> Any:
        if isinstance(value, (bytearray, memoryview, list, tuple)):
            return bytes(value)
        return value

    @field_validator("moves")
    @classmethod
    def _pad_moves(cls, value: bytes) -> bytes:
        if len(value) > cls.move_capacity:
            raise ValueError(f"{len(value)} move bytes exceed capacity {cls.move_capacity}")
        end = value.find(MOVES_SENTINEL)
        if end >= 0:
            value = value[:end]
        return value.ljust(cls.move_capacity, bytes([MOVES_SENTINEL]))

    @property
    def played_moves(self) -> bytes:
        """Move bytes up to (not including) the first end-of-moves sentinel."""

        end = self.moves.find(MOVES_SENTINEL)
        return self.moves if end < 0 else self.moves[:end]


class Game(GameRecord):
    move_capacity: ClassVar[int] = get_format("WTB").record_capacity
    slot_width: ClassVar[int] = get_format("WTB").record_width


class Game10(GameRecord):
    move_capacity: ClassVar[int] = get_format("WTB10").record_capacity
    slot_width: ClassVar[int] = get_format("WTB10").record_width
