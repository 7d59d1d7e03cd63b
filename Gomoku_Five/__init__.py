"""Gomoku_Five package exports."""

from .Board import Board, Stone
from .GameService import GameService, GameState
from .Player import Player, HumanPlayer
from .ai.random_player import RandomPlayer
from .engine.errors import (
    GomokuError,
    IllegalMove,
    InvalidDimension,
    MalformedSerialization,
    OutOfBounds,
)

__all__ = [
    "Board",
    "Stone",
    "GameService",
    "GameState",
    "Player",
    "HumanPlayer",
    "RandomPlayer",
    "GomokuError",
    "IllegalMove",
    "InvalidDimension",
    "MalformedSerialization",
    "OutOfBounds",
]
