"""
Seeded random playouts that check engine invariants on every move.

Used by scripts/validate_engine.py and the test suite.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..core import MancalaEngine, MoveOutcome

logger = logging.getLogger(__name__)


@dataclass
class PlayoutReport:
    """Summary of one random game."""

    moves: int = 0
    extra_turns: int = 0
    captures: int = 0
    finished: bool = False
    violations: List[str] = field(default_factory=list)


def check_move(engine: MancalaEngine, position: int) -> Tuple[MoveOutcome, List[str]]:
    """
    Perform one move and report every invariant it breaks.

    Checks conservation, non-negativity, preview/perform agreement,
    the opponent store skip and the turn-continuation law.

    Args:
        engine: Engine to move on (mutated)
        position: Pit to sow from

    Returns:
        (outcome, violation messages), violations empty if the move behaved
    """
    violations = []
    before = engine.snapshot()
    mover = engine.current_player
    opponent_store = engine.store_count(mover.opponent)

    preview = engine.simulate_move(position)
    outcome = engine.perform_move(position)
    # GameState validation rejects negative counts
    after = engine.snapshot()

    if list(outcome.touched) != preview:
        violations.append(f"preview of pit {position} differs from the performed move")
    if after.total_stones != before.total_stones:
        violations.append(
            f"stone count changed from {before.total_stones} to {after.total_stones}"
        )
    if engine.store_count(mover.opponent) != opponent_store:
        violations.append("stone sown into the opponent's store")

    landed_in_store = bool(outcome.touched) and outcome.touched[-1].is_store
    if outcome.keeps_turn != landed_in_store:
        violations.append("keeps_turn disagrees with the last deposit")
    expected_player = mover if outcome.keeps_turn else mover.opponent
    if outcome.performed and engine.current_player is not expected_player:
        violations.append(f"turn passed to {engine.current_player}, expected {expected_player}")

    return outcome, violations


def random_playout(
    pockets_per_side: int,
    initial_stones: int,
    rng: random.Random,
    max_moves: Optional[int] = None,
) -> PlayoutReport:
    """
    Play legal moves chosen uniformly at random until the board is terminal.

    Args:
        pockets_per_side: Number of pits per player
        initial_stones: Initial stones per pit
        rng: Random source (seed it for reproducible games)
        max_moves: Optional cap on moves

    Returns:
        PlayoutReport
    """
    engine = MancalaEngine(pockets_per_side, initial_stones)
    expected_total = 2 * pockets_per_side * initial_stones
    report = PlayoutReport()

    while not engine.is_terminal():
        if max_moves is not None and report.moves >= max_moves:
            break

        position = rng.choice(engine.legal_moves())
        outcome, violations = check_move(engine, position)
        report.moves += 1
        report.extra_turns += outcome.keeps_turn
        report.captures += outcome.capture is not None

        if violations:
            for violation in violations:
                logger.error(f"Move {report.moves} (pit {position}): {violation}")
            report.violations.extend(violations)
            break

        total = engine.snapshot().total_stones
        if total != expected_total:
            report.violations.append(f"total {total} != {expected_total}")
            break

    report.finished = engine.is_terminal()
    return report
