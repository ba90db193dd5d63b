"""Bounds-checked views over byte buffers.

Every helper checks lengths before producing a view, so callers never see a
window that extends past (or stops short of) the backing storage. Views share
memory with the input; nothing is copied.
"""

from __future__ import annotations

from typing import List, Tuple, Union

from wthor.errors import BufferLengthError

Buffer = Union[bytes, bytearray, memoryview]


def _view(buffer: Buffer) -> memoryview:
    view = memoryview(buffer)
    if view.ndim != 1 or view.itemsize != 1:
        view = view.cast("B")
    return view


def _writable_view(buffer: Buffer) -> memoryview:
    view = _view(buffer)
    if view.readonly:
        raise TypeError("buffer must be writable (bytearray or writable memoryview)")
    return view


def split_prefix(buffer: Buffer, size: int) -> Tuple[memoryview, memoryview]:
    """Return views of the first ``size`` bytes and of the remainder."""

    view = _view(buffer)
    if len(view) < size:
        raise BufferLengthError(size, len(view), at_least=True)
    return view[:size], view[size:]


def as_chunks(buffer: Buffer, width: int, count: int) -> List[memoryview]:
    """Partition ``buffer`` into ``count`` windows of exactly ``width`` bytes."""

    view = _view(buffer)
    expected = width * count
    if len(view) != expected:
        raise BufferLengthError(expected, len(view))
    return [view[offset : offset + width] for offset in range(0, expected, width)]


def split_prefix_mut(buffer: Buffer, size: int) -> Tuple[memoryview, memoryview]:
    """Writable counterpart of :func:`split_prefix`."""

    return split_prefix(_writable_view(buffer), size)


def as_chunks_mut(buffer: Buffer, width: int, count: int) -> List[memoryview]:
    """Writable counterpart of :func:`as_chunks`."""

    return as_chunks(_writable_view(buffer), width, count)


__all__ = [
    "Buffer",
    "as_chunks",
    "as_chunks_mut",
    "split_prefix",
    "split_prefix_mut",
]
