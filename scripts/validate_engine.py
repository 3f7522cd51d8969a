#!/usr/bin/env python3
"""
Validate the engine with seeded random playouts.

Every move of every game is checked for:
1. Stone conservation
2. Preview/perform agreement
3. Opponent store skip
4. Turn-continuation law
"""

import argparse
import logging
import random
import sys
import time

from tqdm import tqdm

from mancala_engine.utils import random_playout

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Random playout validation")
    parser.add_argument("--pockets", type=int, default=6, help="Number of pits per player")
    parser.add_argument("--stones", type=int, default=4, help="Initial stones per pit")
    parser.add_argument("--games", type=int, default=1000, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--max-moves", type=int, default=1000, help="Move cap per game")
    args = parser.parse_args()

    logger.info("=" * 70)
    logger.info(f"ENGINE VALIDATION - Mancala({args.pockets},{args.stones})")
    logger.info("=" * 70)
    logger.info(f"Games: {args.games:,}")
    logger.info(f"Seed: {args.seed}")
    logger.info("")

    rng = random.Random(args.seed)
    start_time = time.time()

    total_moves = 0
    extra_turns = 0
    captures = 0
    failed_games = 0
    unfinished = 0

    for game in tqdm(range(args.games), desc="Playouts", unit="game"):
        report = random_playout(args.pockets, args.stones, rng, max_moves=args.max_moves)
        total_moves += report.moves
        extra_turns += report.extra_turns
        captures += report.captures

        if report.violations:
            failed_games += 1
            logger.error(f"Game {game} failed after {report.moves} moves")
            for violation in report.violations:
                logger.error(f"   {violation}")
        elif not report.finished:
            unfinished += 1

    elapsed = time.time() - start_time

    logger.info("")
    logger.info("=" * 70)
    logger.info("VALIDATION RESULTS")
    logger.info("=" * 70)
    logger.info(f"Moves:       {total_moves:,}")
    logger.info(f"Extra turns: {extra_turns:,}")
    logger.info(f"Captures:    {captures:,}")
    logger.info(f"Unfinished:  {unfinished:,} (hit --max-moves)")
    logger.info(f"Time:        {elapsed:.1f}s")
    logger.info("")

    if failed_games:
        logger.error(f"VALIDATION FAILED - {failed_games} of {args.games} games broke an invariant")
        return 1

    logger.info("VALIDATION PASSED - all invariants held")
    return 0


if __name__ == "__main__":
    sys.exit(main())
