"""Core game state representation and rules."""

from .engine import MancalaEngine
from .game_state import (
    DEFAULT_INITIAL_STONES,
    DEFAULT_POCKETS_PER_SIDE,
    Capture,
    GameState,
    MoveOutcome,
    Player,
    PositionOutOfRangeError,
    TouchedCell,
)
from .rules import mirror_pit, sowing_path, is_terminal

__all__ = [
    "MancalaEngine",
    "DEFAULT_INITIAL_STONES",
    "DEFAULT_POCKETS_PER_SIDE",
    "Capture",
    "GameState",
    "MoveOutcome",
    "Player",
    "PositionOutOfRangeError",
    "TouchedCell",
    "mirror_pit",
    "sowing_path",
    "is_terminal",
]
