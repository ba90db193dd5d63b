import struct

import pytest

from wthor.errors import FormatError
from wthor.header import (
    Header,
    decode_games_header,
    decode_header,
    decode_names_header,
    encode_games_header,
    encode_header,
    encode_names_header,
)


def _raw_header(**fields) -> bytes:
    header = Header(**fields)
    return struct.pack(
        "<BBBBIHHBBBB",
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
        0,
    )


def test_decode_header_is_little_endian():
    data = bytes.fromhex("14050615" "01020304" "0506" "d207" "08" "00" "16" "ff")
    header = decode_header(data)
    assert header.created == (20, 5, 6, 21)
    assert header.games_count == 0x04030201
    assert header.names_count == 0x0605
    assert header.year == 2002
    assert header.board_size == 8
    assert header.game_type == 0
    assert header.calculation_depth == 22


def test_encode_header_zeroes_padding():
    header = Header(created_century=20, games_count=3, year=1999, board_size=8, calculation_depth=22)
    data = encode_header(header)
    assert len(data) == 16
    assert data[15] == 0
    assert decode_header(data) == header


def test_decode_header_requires_sixteen_bytes():
    with pytest.raises(FormatError) as excinfo:
        decode_header(bytes(15))
    assert excinfo.value.reason == "short-header"


def test_encode_header_rejects_out_of_range_fields():
    with pytest.raises(ValueError):
        encode_header(Header(names_count=0x10000))


def test_names_header_ignores_byte_fourteen_and_padding():
    data = bytearray(encode_names_header((20, 5, 6, 21), 2))
    data[14] = 0x7F
    data[15] = 0xAA
    header = decode_names_header(data)
    assert header.names_count == 2
    assert header.created == (20, 5, 6, 21)


@pytest.mark.parametrize("offset", [4, 5, 6, 7, 10, 11, 12, 13])
def test_names_header_rejects_reserved_bytes(offset):
    data = bytearray(encode_names_header((20, 5, 6, 21), 2))
    data[offset] = 1
    with pytest.raises(FormatError):
        decode_names_header(data)


@pytest.mark.parametrize("offset", [8, 9, 13])
def test_games_header_rejects_reserved_bytes(offset):
    data = bytearray(
        encode_games_header((20, 5, 6, 21), 1, year=2005, board_size=8, calculation_depth=22)
    )
    data[offset] = 1
    with pytest.raises(FormatError) as excinfo:
        decode_games_header(data, (0, 8))
    assert excinfo.value.reason == "reserved-field"


@pytest.mark.parametrize("board_size", [0, 8])
def test_games_header_accepts_legacy_board_size(board_size):
    header = decode_games_header(_raw_header(games_count=4, year=1980, board_size=board_size), (0, 8))
    assert header.games_count == 4
    assert header.year == 1980


@pytest.mark.parametrize("board_size,allowed", [(10, (0, 8)), (6, (0, 8)), (0, (10,)), (8, (10,))])
def test_games_header_rejects_other_board_sizes(board_size, allowed):
    with pytest.raises(FormatError) as excinfo:
        decode_games_header(_raw_header(board_size=board_size), allowed)
    assert excinfo.value.reason == "board-size"
