"""
Mancala sowing rules.

Implements the rules shared by real moves and previews:
- Sowing forward through the mover's row, into the mover's store,
  then on through the opponent's row
- The opponent's store is always skipped
- Extra turn when the last stone lands in the mover's store
- Capture when the last stone lands in an empty own pit with stones opposite
"""

from typing import Iterator, List, Optional, Sequence

from .game_state import Player, PositionOutOfRangeError, TouchedCell


def check_position(position: int, pockets_per_side: int) -> None:
    """Raise PositionOutOfRangeError unless position is an int in [0, pockets_per_side)."""
    if isinstance(position, bool) or not isinstance(position, int):
        raise PositionOutOfRangeError(f"Position {position!r} is not a pit index")
    if not 0 <= position < pockets_per_side:
        raise PositionOutOfRangeError(
            f"Position {position} out of range [0, {pockets_per_side})"
        )


def mirror_pit(position: int, pockets_per_side: int) -> int:
    """
    Get the opponent's pit directly opposite a pit.

    Formula: mirror_pit(i) = pockets_per_side - 1 - i

    Args:
        position: Pit index in one player's row
        pockets_per_side: Number of pits per player

    Returns:
        Pit index in the other player's row
    """
    check_position(position, pockets_per_side)
    return pockets_per_side - 1 - position


def sowing_path(
    pockets_per_side: int, mover: Player, position: int, stones: int
) -> Iterator[TouchedCell]:
    """
    Yield the cells that receive one stone each, in deposit order.

    Both perform_move and simulate_move consume this generator, so a
    preview always matches the real move cell for cell.

    Args:
        pockets_per_side: Number of pits per player
        mover: Player sowing the stones
        position: Pit the stones were picked up from
        stones: Number of stones in hand

    Yields:
        TouchedCell for every deposit
    """
    row = mover
    current_pos = position

    while stones > 0:
        current_pos += 1

        if current_pos >= pockets_per_side:
            # Only the mover's own store is a sowing target
            if row == mover:
                yield TouchedCell.store(mover)
                stones -= 1
                if stones == 0:
                    break
            row = row.opponent
            current_pos = 0

        yield TouchedCell.pit(row, current_pos)
        stones -= 1


def find_capture(
    own_row: Sequence[int],
    opponent_row: Sequence[int],
    mover: Player,
    last_cell: TouchedCell,
) -> Optional[int]:
    """
    Check whether the final deposit captures.

    Args:
        own_row: Mover's row after sowing
        opponent_row: Opponent's row after sowing
        mover: Player who just sowed
        last_cell: Cell that received the final stone

    Returns:
        Mirror pit index to capture from, or None if no capture applies
    """
    if last_cell.is_store or last_cell.player != mover:
        return None
    if own_row[last_cell.position] != 1:  # Pit was not empty before the deposit
        return None

    opposite = mirror_pit(last_cell.position, len(own_row))
    if opponent_row[opposite] == 0:
        return None
    return opposite


def legal_positions(row: Sequence[int]) -> List[int]:
    """Pit indices of a row that hold at least one stone."""
    return [pos for pos, stones in enumerate(row) if stones > 0]


def is_terminal(p1_row: Sequence[int], p2_row: Sequence[int]) -> bool:
    """
    Check if the game has ended.

    Game ends when one player's row (all pits) is empty.
    """
    return not any(p1_row) or not any(p2_row)
