"""Bounded name values stored in player and tournament tables."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, field_validator
from pydantic.config import ConfigDict

from wthor.config import NAME_SENTINEL, get_format


class NameRecord(BaseModel):
    """A name of at most ``capacity`` bytes that never contains the sentinel.

    Content is opaque bytes; ``str`` input is encoded as latin-1 so every
    character maps to exactly one stored byte.
    """

    capacity: ClassVar[int]
    slot_width: ClassVar[int]

    value: bytes

    model_config = ConfigDict(frozen=True)

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return value.encode("latin-1")
            except UnicodeEncodeError:
                raise ValueError("name text must be latin-1 encodable") from None
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        return value

    @field_validator("value")
    @classmethod
    def _check_capacity(cls, value: bytes) -> bytes:
        if len(value) > cls.capacity:
            raise ValueError(f"name is {len(value)} bytes, capacity is {cls.capacity}")
        if NAME_SENTINEL in value:
            raise ValueError(f"name must not contain the terminator byte {NAME_SENTINEL:#04x}")
        return value

    @property
    def text(self) -> str:
        return self.value.decode("latin-1")

    def __str__(self) -> str:
        return self.text


class PlayerName(NameRecord):
    capacity: ClassVar[int] = get_format("JOU").record_capacity
    slot_width: ClassVar[int] = get_format("JOU").record_width


class TournamentName(NameRecord):
    capacity: ClassVar[int] = get_format("TRN").record_capacity
    slot_width: ClassVar[int] = get_format("TRN").record_width
