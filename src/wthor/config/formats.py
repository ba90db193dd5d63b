"""Layout parameters for the supported WTHOR file kinds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Tuple

HEADER_SIZE = 16
NAME_SENTINEL = 0x30
MOVES_SENTINEL = 0
DEFAULT_CALCULATION_DEPTH = 22


@dataclass(frozen=True)
class FileFormat:
    key: str
    extension: str
    record_width: int
    record_capacity: int
    count_field: Literal["names", "games"]
    board_sizes: Tuple[int, ...] = (0,)

    @property
    def max_records(self) -> int:
        return 0xFFFF if self.count_field == "names" else 0xFFFFFFFF


_FORMATS: Dict[str, FileFormat] = {
    "JOU": FileFormat(
        key="JOU",
        extension="JOU",
        record_width=20,
        record_capacity=19,
        count_field="names",
    ),
    "TRN": FileFormat(
        key="TRN",
        extension="TRN",
        record_width=26,
        record_capacity=25,
        count_field="names",
    ),
    # 2 + 2 + 2 index bytes, 1 score, 1 theoretical score, then the moves.
    "WTB": FileFormat(
        key="WTB",
        extension="wtb",
        record_width=68,
        record_capacity=60,
        count_field="games",
        board_sizes=(0, 8),
    ),
    "WTB10": FileFormat(
        key="WTB10",
        extension="wtb",
        record_width=104,
        record_capacity=96,
        count_field="games",
        board_sizes=(10,),
    ),
}


def iter_formats() -> Iterable[FileFormat]:
    """Return an iterator of all known file formats."""

    return _FORMATS.values()


def get_format(key: str) -> FileFormat:
    """Fetch a format by key (case-insensitive), raising KeyError if missing."""

    normalized = key.upper()
    if normalized not in _FORMATS:
        raise KeyError(f"No file format configured for key={key!r}")
    return _FORMATS[normalized]
