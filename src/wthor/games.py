"""Fixed-width game-result tables."""

from __future__ import annotations

import struct
from typing import List, Sequence, Type, TypeVar

from wthor.errors import BufferLengthError, CountMismatchError, FormatError
from wthor.models import GameRecord
from wthor.slicing import Buffer, as_chunks, as_chunks_mut

G = TypeVar("G", bound=GameRecord)

# tournament, black player, white player, score, theoretical score
_GAME_PREFIX = struct.Struct("<HHHBB")


def _decode_slot(slot: memoryview, game_type: Type[G]) -> G:
    tournament, black, white, score, theoretical = _GAME_PREFIX.unpack_from(slot)
    return game_type(
        tournament=tournament,
        black_player=black,
        white_player=white,
        score=score,
        theoretical_score=theoretical,
        moves=slot[_GAME_PREFIX.size :].tobytes(),
    )


def decode_games(data: Buffer, count: int, game_type: Type[G]) -> List[G]:
    """Decode ``count`` slots of ``game_type.slot_width`` bytes each."""

    try:
        slots = as_chunks(data, game_type.slot_width, count)
    except BufferLengthError as exc:
        raise FormatError(f"game table length mismatch: {exc}", reason="record-length") from exc
    return [_decode_slot(slot, game_type) for slot in slots]


def encode_games(
    games: Sequence[GameRecord], count: int, buffer: Buffer, game_type: Type[GameRecord]
) -> None:
    """Write ``games`` into ``buffer``, which must hold exactly ``count`` slots."""

    if len(games) != count:
        raise CountMismatchError(count, len(games))
    for game in games:
        if not isinstance(game, game_type):
            raise TypeError(f"expected {game_type.__name__}, got {type(game).__name__}")
    slots = as_chunks_mut(buffer, game_type.slot_width, count)
    for slot, game in zip(slots, games):
        _GAME_PREFIX.pack_into(
            slot,
            0,
            game.tournament,
            game.black_player,
            game.white_player,
            game.score,
            game.theoretical_score,
        )
        # moves is already padded to the full capacity
        slot[_GAME_PREFIX.size :] = game.moves


__all__ = ["decode_games", "encode_games"]
