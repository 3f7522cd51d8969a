"""
Game state representation.

A Mancala board consists of:
- Two rows of pits, one per player
- Two stores, one per player
- The player whose turn it is

Layout for pockets_per_side=6 (player 2 sows right-to-left as drawn):

       P2 pits (5..0)
   [5][4][3][2][1][0]
[S2]                  [S1]  <- Stores
   [0][1][2][3][4][5]
       P1 pits (0..5)
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union

DEFAULT_POCKETS_PER_SIDE = 6
DEFAULT_INITIAL_STONES = 4


class Player(IntEnum):
    PLAYER_1 = 1
    PLAYER_2 = 2

    @property
    def index(self) -> int:
        """Row/store slot used for this player (0 or 1)."""
        return int(self) - 1

    @property
    def opponent(self) -> "Player":
        return Player.PLAYER_2 if self is Player.PLAYER_1 else Player.PLAYER_1

    def __str__(self) -> str:
        return f"Player {int(self)}"

    def __format__(self, format_spec: str) -> str:
        # IntEnum formats as a bare int otherwise
        return format(str(self), format_spec)


PlayerLike = Union[Player, int]


def as_player(player: PlayerLike) -> Player:
    """Coerce 1/2 (or a Player) to a Player, rejecting anything else."""
    try:
        return Player(player)
    except ValueError:
        raise ValueError(f"Invalid player {player!r}, must be 1 or 2") from None


def check_board_size(pockets_per_side: int, initial_stones: int) -> None:
    """Validate a board configuration, raising ValueError on misuse."""
    if isinstance(pockets_per_side, bool) or not isinstance(pockets_per_side, int):
        raise ValueError(f"pockets_per_side must be an integer, got {pockets_per_side!r}")
    if pockets_per_side <= 0:
        raise ValueError(f"pockets_per_side must be > 0, got {pockets_per_side}")
    if isinstance(initial_stones, bool) or not isinstance(initial_stones, int):
        raise ValueError(f"initial_stones must be an integer, got {initial_stones!r}")
    if initial_stones < 0:
        raise ValueError(f"initial_stones must be >= 0, got {initial_stones}")


@dataclass(frozen=True)
class TouchedCell:
    """One cell visited while sowing: a pit in a player's row, or their store."""

    player: Player
    position: Optional[int]  # Pit index, None for the store

    @property
    def is_store(self) -> bool:
        return self.position is None

    @classmethod
    def pit(cls, player: Player, position: int) -> "TouchedCell":
        return cls(player=player, position=position)

    @classmethod
    def store(cls, player: Player) -> "TouchedCell":
        return cls(player=player, position=None)

    def __str__(self) -> str:
        if self.is_store:
            return f"P{int(self.player)} store"
        return f"P{int(self.player)} pit {self.position}"


@dataclass(frozen=True)
class Capture:
    """Stones moved to the mover's store after landing in an empty own pit."""

    landing_position: int
    mirror_position: int
    stones: int  # Mirror pit contents plus the landing stone


@dataclass(frozen=True)
class MoveOutcome:
    """Result of a performed move."""

    keeps_turn: bool
    mover: Optional[Player] = None
    position: Optional[int] = None
    touched: Tuple[TouchedCell, ...] = ()
    capture: Optional[Capture] = None

    @property
    def performed(self) -> bool:
        """False when the move was rejected and nothing changed."""
        return bool(self.touched)


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of an engine's board.

    Rows are indexed by Player.index: pits[0] is player 1's row,
    pits[1] is player 2's row. Same for stores.
    """

    pockets_per_side: int
    pits: Tuple[Tuple[int, ...], Tuple[int, ...]]
    stores: Tuple[int, int]
    player: Player

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.pits) != 2 or len(self.stores) != 2:
            raise ValueError("A board has exactly two rows and two stores")
        for row in self.pits:
            if len(row) != self.pockets_per_side:
                raise ValueError(
                    f"Row size {len(row)} doesn't match expected {self.pockets_per_side}"
                )
        object.__setattr__(self, "player", as_player(self.player))
        if any(stones < 0 for row in self.pits for stones in row) or any(
            stones < 0 for stones in self.stores
        ):
            raise ValueError("Negative stone count not allowed")

    @property
    def total_stones(self) -> int:
        """Total stones on the board, stores included."""
        return sum(self.stones_in_pits(p) for p in Player) + sum(self.stores)

    def stones_in_pits(self, player: PlayerLike) -> int:
        """Stones remaining in a player's row (not in the store)."""
        return sum(self.get_player_pits(player))

    def get_player_pits(self, player: PlayerLike) -> Tuple[int, ...]:
        return self.pits[as_player(player).index]

    def get_player_store(self, player: PlayerLike) -> int:
        return self.stores[as_player(player).index]

    def __str__(self) -> str:
        """Human-readable board representation."""
        p2_pits = list(reversed(self.get_player_pits(Player.PLAYER_2)))
        p1_pits = list(self.get_player_pits(Player.PLAYER_1))
        p1_store = self.get_player_store(Player.PLAYER_1)
        p2_store = self.get_player_store(Player.PLAYER_2)

        pit_width = 3
        p2_str = " ".join(f"{s:>{pit_width}}" for s in p2_pits)
        p1_str = " ".join(f"{s:>{pit_width}}" for s in p1_pits)
        store_width = len(p2_str)

        return f"""
      {p2_str}
[{p2_store:>2}] {' ' * store_width} [{p1_store:>2}]
      {p1_str}

{self.player}'s turn
"""


class PositionOutOfRangeError(IndexError):
    """Raised when a pit position is outside [0, pockets_per_side)."""
    pass
