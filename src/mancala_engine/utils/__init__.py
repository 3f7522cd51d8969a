"""Utility modules for the Mancala engine."""

from .playout import PlayoutReport, check_move, random_playout
from .rich_display import BoardDisplay, describe_cell, setup_rich_logging

__all__ = [
    "PlayoutReport",
    "check_move",
    "random_playout",
    "BoardDisplay",
    "describe_cell",
    "setup_rich_logging",
]
