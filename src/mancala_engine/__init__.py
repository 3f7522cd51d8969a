"""Rules engine for two-row Mancala."""

from .core import MancalaEngine, Player

__version__ = "0.1.0"

__all__ = ["MancalaEngine", "Player", "__version__"]
