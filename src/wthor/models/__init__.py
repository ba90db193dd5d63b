"""Immutable record values shared by the codecs and file models."""

from .games import Game, Game10, GameRecord
from .names import NameRecord, PlayerName, TournamentName

__all__ = [
    "Game",
    "Game10",
    "GameRecord",
    "NameRecord",
    "PlayerName",
    "TournamentName",
]
