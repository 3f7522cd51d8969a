"""
Main CLI for the Mancala engine.
"""

import argparse
import logging
import sys
from typing import List

from rich.prompt import Prompt

from ..core import DEFAULT_INITIAL_STONES, DEFAULT_POCKETS_PER_SIDE, MancalaEngine
from ..core.game_state import check_board_size
from ..utils.rich_display import BoardDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_pit(text: str, pockets_per_side: int) -> int:
    """
    Turn a 1-based pit number typed by a user into a board position.

    Raises:
        ValueError: If the text is not a pit number on this board
    """
    try:
        pit = int(text)
    except ValueError:
        raise ValueError(f"'{text}' is not a pit number") from None
    if not 1 <= pit <= pockets_per_side:
        raise ValueError(f"Pit must be between 1 and {pockets_per_side}")
    return pit - 1


def parse_moves(text: str, pockets_per_side: int) -> List[int]:
    """Parse a comma-separated list of 1-based pit numbers."""
    return [parse_pit(part.strip(), pockets_per_side) for part in text.split(",") if part.strip()]


def play_command(args):
    """Play a hot-seat game in the terminal."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)

    engine = MancalaEngine(args.pockets, args.stones)
    display = BoardDisplay()
    display.show_header(engine.pockets_per_side, engine.initial_stones)
    display.log("[dim]Enter a pit number to sow, p<n> to preview, r to restart, q to quit[/dim]")

    while True:
        state = engine.snapshot()
        display.show_board(state)

        if engine.is_terminal():
            display.show_result(
                engine.final_scores(),
                engine.game_result(),
            )
            answer = Prompt.ask("Play again?", choices=["y", "n"], default="n")
            if answer == "n":
                break
            engine.restart()
            continue

        choice = Prompt.ask(f"{engine.current_player}").strip().lower()

        if choice in ("q", "quit"):
            break
        if choice in ("r", "restart"):
            engine.restart()
            display.log_info("Board reset")
            continue

        try:
            if choice.startswith("p"):
                position = parse_pit(choice[1:].strip(), engine.pockets_per_side)
                display.show_preview(state, position, engine.simulate_move(position))
                continue
            position = parse_pit(choice, engine.pockets_per_side)
        except ValueError as e:
            display.log_error(str(e))
            continue

        if not engine.is_valid_move(position):
            display.log_error(f"Pit {position + 1} is empty")
            continue

        outcome = engine.perform_move(position)
        logger.debug(f"Outcome: {outcome}")
        display.show_outcome(outcome)


def preview_command(args):
    """Preview a move on a fresh board."""
    setup_logging(args.log_level)

    engine = MancalaEngine(args.pockets, args.stones)
    display = BoardDisplay()

    try:
        position = parse_pit(args.pit, engine.pockets_per_side)
    except ValueError as e:
        display.log_error(str(e))
        sys.exit(1)

    display.show_preview(engine.snapshot(), position, engine.simulate_move(position))


def replay_command(args):
    """Apply a sequence of moves and show the final board."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    engine = MancalaEngine(args.pockets, args.stones)
    display = BoardDisplay()

    try:
        moves = parse_moves(args.moves, engine.pockets_per_side)
    except ValueError as e:
        display.log_error(str(e))
        sys.exit(1)

    logger.info(f"Replaying {len(moves)} moves on Mancala({args.pockets},{args.stones})")

    for number, position in enumerate(moves, start=1):
        mover = engine.current_player
        outcome = engine.perform_move(position)
        if not outcome.performed:
            display.log_error(f"Move {number}: {mover} cannot sow pit {position + 1}")
            display.show_board(engine.snapshot())
            sys.exit(1)

        display.log_info(f"Move {number}: {mover} sowed pit {position + 1}")
        display.show_outcome(outcome)

    display.show_board(engine.snapshot())
    if engine.is_terminal():
        display.log_success(engine.game_result())


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Mancala rules engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    board_args = argparse.ArgumentParser(add_help=False)
    board_args.add_argument(
        "--pockets", type=int, default=DEFAULT_POCKETS_PER_SIDE, help="Number of pits per player"
    )
    board_args.add_argument(
        "--stones", type=int, default=DEFAULT_INITIAL_STONES, help="Initial stones per pit"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", parents=[board_args], help="Play a hot-seat game")
    play_parser.set_defaults(func=play_command)

    preview_parser = subparsers.add_parser(
        "preview", parents=[board_args], help="Preview a move on a fresh board"
    )
    preview_parser.add_argument("pit", help="Pit number to sow (1-based)")
    preview_parser.set_defaults(func=preview_command)

    replay_parser = subparsers.add_parser(
        "replay", parents=[board_args], help="Apply a sequence of moves"
    )
    replay_parser.add_argument(
        "--moves", required=True, help="Comma-separated pit numbers (1-based), e.g. 3,6,1"
    )
    replay_parser.set_defaults(func=replay_command)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        check_board_size(args.pockets, args.stones)
    except ValueError as e:
        parser.error(str(e))

    args.func(args)


if __name__ == "__main__":
    main()
