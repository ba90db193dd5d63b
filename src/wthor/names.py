"""Fixed-width, sentinel-terminated name tables."""

from __future__ import annotations

from typing import List, Sequence, Type, TypeVar

from wthor.config import NAME_SENTINEL
from wthor.errors import BufferLengthError, CountMismatchError, FormatError
from wthor.models import NameRecord
from wthor.slicing import Buffer, as_chunks, as_chunks_mut

N = TypeVar("N", bound=NameRecord)


def _decode_slot(slot: memoryview, name_type: Type[N]) -> N:
    raw = slot.tobytes()
    end = raw.find(NAME_SENTINEL)
    if end < 0:
        raise FormatError("name slot has no terminator", reason="missing-sentinel")
    return name_type(value=raw[:end])


def decode_names(data: Buffer, count: int, name_type: Type[N]) -> List[N]:
    """Decode ``count`` slots of ``name_type.slot_width`` bytes each."""

    try:
        slots = as_chunks(data, name_type.slot_width, count)
    except BufferLengthError as exc:
        raise FormatError(f"name table length mismatch: {exc}", reason="record-length") from exc
    return [_decode_slot(slot, name_type) for slot in slots]


def encode_names(
    names: Sequence[NameRecord], count: int, buffer: Buffer, name_type: Type[NameRecord]
) -> None:
    """Write ``names`` into ``buffer``, which must hold exactly ``count`` slots.

    Each slot is rewritten completely: name bytes, one terminator, then zeros.
    """

    if len(names) != count:
        raise CountMismatchError(count, len(names))
    for name in names:
        if not isinstance(name, name_type):
            raise TypeError(f"expected {name_type.__name__}, got {type(name).__name__}")
    width = name_type.slot_width
    slots = as_chunks_mut(buffer, width, count)
    for slot, name in zip(slots, names):
        value = name.value
        slot[: len(value)] = value
        slot[len(value)] = NAME_SENTINEL
        slot[len(value) + 1 :] = bytes(width - len(value) - 1)


__all__ = ["decode_names", "encode_names"]
