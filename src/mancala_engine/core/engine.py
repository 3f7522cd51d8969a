"""
Stateful Mancala move engine.

The engine owns both pit rows, both stores and the turn marker. Callers
query it, validate a pit, then either perform the move or preview it.
"""

import logging
from typing import Dict, List, Optional

from .game_state import (
    DEFAULT_INITIAL_STONES,
    DEFAULT_POCKETS_PER_SIDE,
    Capture,
    GameState,
    MoveOutcome,
    Player,
    PlayerLike,
    TouchedCell,
    as_player,
    check_board_size,
)
from .rules import check_position, find_capture, is_terminal, legal_positions, sowing_path

logger = logging.getLogger(__name__)


class MancalaEngine:
    """
    Game state and move engine for a two-row Mancala board.

    Each player sows from their own row; stones travel through the mover's
    row, into the mover's store, then through the opponent's row, skipping
    the opponent's store.
    """

    def __init__(
        self,
        pockets_per_side: int = DEFAULT_POCKETS_PER_SIDE,
        initial_stones: int = DEFAULT_INITIAL_STONES,
    ):
        """
        Initialize a fresh board.

        Args:
            pockets_per_side: Number of pits per player (> 0)
            initial_stones: Stones placed in every pit at start (>= 0)
        """
        check_board_size(pockets_per_side, initial_stones)
        self._pockets_per_side = pockets_per_side
        self._initial_stones = initial_stones
        self._rows: Dict[Player, List[int]] = {}
        self._stores: Dict[Player, int] = {}
        self._current_player = Player.PLAYER_1
        self._reset()

    @classmethod
    def from_state(
        cls, state: GameState, initial_stones: int = DEFAULT_INITIAL_STONES
    ) -> "MancalaEngine":
        """
        Build an engine positioned at an arbitrary snapshot.

        Args:
            state: Board to start from
            initial_stones: Per-pit count used by a later restart()

        Returns:
            MancalaEngine whose snapshot() equals state
        """
        engine = cls(state.pockets_per_side, initial_stones)
        for player in Player:
            engine._rows[player] = list(state.get_player_pits(player))
            engine._stores[player] = state.get_player_store(player)
        engine._current_player = state.player
        return engine

    def _reset(self) -> None:
        for player in Player:
            self._rows[player] = [self._initial_stones] * self._pockets_per_side
            self._stores[player] = 0
        self._current_player = Player.PLAYER_1

    @property
    def pockets_per_side(self) -> int:
        return self._pockets_per_side

    @property
    def initial_stones(self) -> int:
        return self._initial_stones

    @property
    def current_player(self) -> Player:
        """Player whose row may be sown next."""
        return self._current_player

    def stones_at(self, player: PlayerLike, position: int) -> int:
        """
        Get the number of stones in a pit.

        Raises:
            PositionOutOfRangeError: If position is outside [0, pockets_per_side)
        """
        player = as_player(player)
        check_position(position, self._pockets_per_side)
        return self._rows[player][position]

    def store_count(self, player: PlayerLike) -> int:
        return self._stores[as_player(player)]

    def is_valid_move(self, position: int) -> bool:
        """
        Check if the current player may sow from a pit.

        A move is valid if the position is on the board and the current
        player's pit there holds at least one stone. Never raises.
        """
        if isinstance(position, bool) or not isinstance(position, int):
            return False
        if not 0 <= position < self._pockets_per_side:
            return False
        return self._rows[self._current_player][position] > 0

    def legal_moves(self) -> List[int]:
        """All positions the current player may sow from, ascending."""
        return legal_positions(self._rows[self._current_player])

    def simulate_move(self, position: int) -> List[TouchedCell]:
        """
        Preview the cells a move would touch, without changing the board.

        Args:
            position: Pit in the current player's row

        Returns:
            Touched cells in deposit order, empty if the move is invalid
        """
        if not self.is_valid_move(position):
            return []

        stones = self._rows[self._current_player][position]
        return list(
            sowing_path(self._pockets_per_side, self._current_player, position, stones)
        )

    def perform_move(self, position: int) -> MoveOutcome:
        """
        Sow the stones from a pit of the current player's row.

        1. Pick up all stones from the chosen pit
        2. Sow forward one stone per cell, skipping the opponent's store
        3. If the last stone lands in an empty own pit with stones opposite: capture
        4. If the last stone lands in the mover's store: extra turn,
           otherwise the turn passes

        Args:
            position: Pit in the current player's row

        Returns:
            MoveOutcome; keeps_turn is False and nothing changes if the move is invalid
        """
        if not self.is_valid_move(position):
            logger.debug(f"Rejected move {position!r} for {self._current_player}")
            return MoveOutcome(keeps_turn=False)

        mover = self._current_player
        own_row = self._rows[mover]
        stones = own_row[position]
        own_row[position] = 0

        touched: List[TouchedCell] = []
        for cell in sowing_path(self._pockets_per_side, mover, position, stones):
            if cell.is_store:
                self._stores[cell.player] += 1
            else:
                self._rows[cell.player][cell.position] += 1
            touched.append(cell)

        last_cell = touched[-1]
        keeps_turn = last_cell.is_store

        capture = None
        if not keeps_turn:
            capture = self._apply_capture(mover, last_cell)
            self._current_player = mover.opponent

        logger.debug(
            f"{mover} sowed {stones} from pit {position}, last stone in {last_cell}"
            + (", extra turn" if keeps_turn else "")
        )
        return MoveOutcome(
            keeps_turn=keeps_turn,
            mover=mover,
            position=position,
            touched=tuple(touched),
            capture=capture,
        )

    def _apply_capture(self, mover: Player, last_cell: TouchedCell) -> Optional[Capture]:
        own_row = self._rows[mover]
        opponent_row = self._rows[mover.opponent]

        opposite = find_capture(own_row, opponent_row, mover, last_cell)
        if opposite is None:
            return None

        captured = opponent_row[opposite] + own_row[last_cell.position]
        opponent_row[opposite] = 0
        own_row[last_cell.position] = 0
        self._stores[mover] += captured

        logger.debug(
            f"{mover} captured {captured} stones "
            f"(pit {last_cell.position} opposite pit {opposite})"
        )
        return Capture(
            landing_position=last_cell.position,
            mirror_position=opposite,
            stones=captured,
        )

    def restart(self, initial_stones: Optional[int] = None) -> None:
        """
        Reset the board to its starting configuration.

        Args:
            initial_stones: New per-pit stone count (default: keep the current one)
        """
        if initial_stones is not None:
            check_board_size(self._pockets_per_side, initial_stones)
            self._initial_stones = initial_stones
        self._reset()
        logger.info(
            f"Restarted Mancala({self._pockets_per_side},{self._initial_stones})"
        )

    def snapshot(self) -> GameState:
        """Immutable copy of the current board."""
        return GameState(
            pockets_per_side=self._pockets_per_side,
            pits=(
                tuple(self._rows[Player.PLAYER_1]),
                tuple(self._rows[Player.PLAYER_2]),
            ),
            stores=(self._stores[Player.PLAYER_1], self._stores[Player.PLAYER_2]),
            player=self._current_player,
        )

    def is_terminal(self) -> bool:
        """True when either player's row is empty. The engine does not act on it."""
        return is_terminal(self._rows[Player.PLAYER_1], self._rows[Player.PLAYER_2])

    def final_scores(self) -> Dict[Player, int]:
        """
        Score a finished game.

        Stones left in a row count for that row's owner. The board itself
        is not modified.

        Returns:
            Mapping of player to final score
        """
        if not self.is_terminal():
            raise ValueError("Cannot score a game that has not ended")

        return {
            player: self._stores[player] + sum(self._rows[player]) for player in Player
        }

    def game_result(self) -> Optional[str]:
        """Human-readable result, or None if the game is still going."""
        if not self.is_terminal():
            return None

        scores = self.final_scores()
        value = scores[Player.PLAYER_1] - scores[Player.PLAYER_2]

        if value > 0:
            return f"Player 1 wins by {value}"
        elif value < 0:
            return f"Player 2 wins by {-value}"
        else:
            return "Tie game"
