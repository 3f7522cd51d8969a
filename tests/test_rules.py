"""Tests for sowing rules."""

import pytest
from mancala_engine.core import (
    Player,
    PositionOutOfRangeError,
    TouchedCell,
    is_terminal,
    mirror_pit,
    sowing_path,
)
from mancala_engine.core.rules import find_capture, legal_positions

P1 = Player.PLAYER_1
P2 = Player.PLAYER_2


def test_mirror_pit():
    """Test opposite pit calculation."""
    # For pockets_per_side=6: 0<->5, 1<->4, 2<->3
    assert mirror_pit(0, 6) == 5
    assert mirror_pit(1, 6) == 4
    assert mirror_pit(2, 6) == 3
    assert mirror_pit(5, 6) == 0

    # Single pit faces itself
    assert mirror_pit(0, 1) == 0


def test_mirror_pit_out_of_range():
    with pytest.raises(PositionOutOfRangeError):
        mirror_pit(6, 6)
    with pytest.raises(IndexError):
        mirror_pit(-1, 6)


def test_sowing_path_ends_in_store():
    """4 stones from pit 2 on a 6-pit board end in the mover's store."""
    path = list(sowing_path(6, P1, 2, 4))

    assert path == [
        TouchedCell.pit(P1, 3),
        TouchedCell.pit(P1, 4),
        TouchedCell.pit(P1, 5),
        TouchedCell.store(P1),
    ]


def test_sowing_path_continues_into_opponent_row():
    """Stones after the store go to the opponent's row from index 0."""
    path = list(sowing_path(6, P1, 4, 4))

    assert path == [
        TouchedCell.pit(P1, 5),
        TouchedCell.store(P1),
        TouchedCell.pit(P2, 0),
        TouchedCell.pit(P2, 1),
    ]


def test_sowing_path_skips_opponent_store():
    """Player 2 sowing all the way round never touches player 1's store."""
    path = list(sowing_path(3, P2, 2, 9))

    assert path == [
        TouchedCell.store(P2),
        TouchedCell.pit(P1, 0),
        TouchedCell.pit(P1, 1),
        TouchedCell.pit(P1, 2),
        TouchedCell.pit(P2, 0),
        TouchedCell.pit(P2, 1),
        TouchedCell.pit(P2, 2),
        TouchedCell.store(P2),
        TouchedCell.pit(P1, 0),
    ]
    assert TouchedCell.store(P1) not in path


def test_sowing_path_length_matches_stones():
    """Every stone lands somewhere, one cell per stone."""
    for stones in range(1, 40):
        path = list(sowing_path(4, P1, 1, stones))
        assert len(path) == stones


def test_sowing_path_no_stones():
    assert list(sowing_path(6, P1, 0, 0)) == []


def test_find_capture():
    """Capture when the last stone lands in an empty own pit with stones opposite."""
    own_row = [0, 0, 1, 0, 0, 0]
    opponent_row = [4, 4, 4, 4, 4, 4]

    assert find_capture(own_row, opponent_row, P1, TouchedCell.pit(P1, 2)) == 3


def test_find_capture_requires_empty_landing_pit():
    own_row = [0, 0, 2, 0, 0, 0]
    opponent_row = [4] * 6

    assert find_capture(own_row, opponent_row, P1, TouchedCell.pit(P1, 2)) is None


def test_find_capture_requires_stones_opposite():
    own_row = [0, 0, 1, 0, 0, 0]
    opponent_row = [4, 4, 4, 0, 4, 4]

    assert find_capture(own_row, opponent_row, P1, TouchedCell.pit(P1, 2)) is None


def test_find_capture_ignores_opponent_row_and_store():
    """Landing in the opponent's row or a store never captures."""
    own_row = [1] * 6
    opponent_row = [1] * 6

    assert find_capture(own_row, opponent_row, P1, TouchedCell.pit(P2, 2)) is None
    assert find_capture(own_row, opponent_row, P1, TouchedCell.store(P1)) is None


def test_legal_positions():
    assert legal_positions([3, 0, 1, 0]) == [0, 2]
    assert legal_positions([0, 0]) == []


def test_terminal_state():
    """Test terminal state detection."""
    assert is_terminal([0, 0, 0, 0], [3, 3, 3, 3]) is True
    assert is_terminal([1, 0, 0, 0], [0, 0, 0, 0]) is True
    assert is_terminal([1, 0, 0, 0], [0, 0, 2, 0]) is False


def test_mirror_pit_rejects_non_integer_positions():
    with pytest.raises(PositionOutOfRangeError):
        mirror_pit(1.0, 6)
    with pytest.raises(PositionOutOfRangeError):
        mirror_pit(False, 6)
