"""
Rich-based board display.

Provides clean, formatted output with:
- Board table (player 2's row on top, stores at the ends)
- Move preview highlighting
- Status lines
"""

import logging
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core import GameState, MoveOutcome, Player, TouchedCell

console = Console()

PLAYER_STYLES = {
    Player.PLAYER_1: "cyan",
    Player.PLAYER_2: "magenta",
}


def describe_cell(cell: TouchedCell) -> str:
    """Label a cell the way the board shows it (1-based pits)."""
    if cell.is_store:
        return f"P{int(cell.player)} store"
    return f"P{int(cell.player)} pit {cell.position + 1}"


class BoardDisplay:
    """
    Rich-based display for a Mancala board.

    Only reads snapshots; it never talks to the engine directly.
    """

    def __init__(self, output: Optional[Console] = None):
        self.console = output or console

    def log(self, message: str, style: str = ""):
        self.console.print(message, style=style)

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, pockets_per_side: int, initial_stones: int):
        self.console.rule(f"[bold blue]Mancala({pockets_per_side},{initial_stones})[/bold blue]")
        self.console.print()

    def board_table(
        self, state: GameState, highlight: Iterable[TouchedCell] = ()
    ) -> Table:
        """
        Build the board table.

        Args:
            state: Snapshot to draw
            highlight: Cells to mark (e.g. a move preview), drawn with their visit order

        Returns:
            Rich Table
        """
        order = {}
        for step, cell in enumerate(highlight, start=1):
            order.setdefault(cell, []).append(step)

        def cell_text(count: int, cell: TouchedCell) -> str:
            text = str(count)
            if cell in order:
                steps = ",".join(str(s) for s in order[cell])
                text = f"[bold yellow]{text}[/bold yellow] [dim]({steps})[/dim]"
            return text

        pockets = state.pockets_per_side
        table = Table(show_header=False, box=None, padding=(0, 2))
        for _ in range(pockets + 2):
            table.add_column(justify="center")

        p1, p2 = Player.PLAYER_1, Player.PLAYER_2
        p2_row = state.get_player_pits(p2)
        p1_row = state.get_player_pits(p1)

        # Player 2 sows right-to-left as drawn, so its row is reversed
        table.add_row(
            "",
            *[f"[dim]{pos + 1}[/dim]" for pos in reversed(range(pockets))],
            "",
        )
        table.add_row(
            "",
            *[
                cell_text(p2_row[pos], TouchedCell.pit(p2, pos))
                for pos in reversed(range(pockets))
            ],
            "",
            style=PLAYER_STYLES[p2],
        )
        table.add_row(
            f"[{PLAYER_STYLES[p2]}]{cell_text(state.get_player_store(p2), TouchedCell.store(p2))}[/{PLAYER_STYLES[p2]}]",
            *[""] * pockets,
            f"[{PLAYER_STYLES[p1]}]{cell_text(state.get_player_store(p1), TouchedCell.store(p1))}[/{PLAYER_STYLES[p1]}]",
        )
        table.add_row(
            "",
            *[cell_text(p1_row[pos], TouchedCell.pit(p1, pos)) for pos in range(pockets)],
            "",
            style=PLAYER_STYLES[p1],
        )
        table.add_row("", *[f"[dim]{pos + 1}[/dim]" for pos in range(pockets)], "")
        return table

    def show_board(self, state: GameState, highlight: Sequence[TouchedCell] = ()):
        """Print the board with whose turn it is."""
        style = PLAYER_STYLES[state.player]
        self.console.print(
            Panel(
                self.board_table(state, highlight),
                title=f"[{style}]{state.player}'s turn[/{style}]",
                expand=False,
            )
        )

    def show_preview(self, state: GameState, position: int, cells: Sequence[TouchedCell]):
        """Print the cells a move would touch, in order."""
        if not cells:
            self.log_warning(f"Pit {position + 1} is not a valid move")
            return

        self.log_info(
            f"Preview pit {position + 1}: " + " -> ".join(describe_cell(cell) for cell in cells)
        )
        self.show_board(state, highlight=cells)

    def show_outcome(self, outcome: MoveOutcome):
        """Print what a performed move did."""
        if not outcome.performed:
            self.log_error("Invalid move, nothing changed")
            return

        if outcome.capture:
            self.log_success(
                f"{outcome.mover} captured {outcome.capture.stones} stones "
                f"(pit {outcome.capture.landing_position + 1})"
            )
        if outcome.keeps_turn:
            self.log_success(f"{outcome.mover} landed in their store and moves again")

    def show_result(self, scores: dict, result: str):
        """Show final scores of a finished game."""
        table = Table(title="Final scores")
        table.add_column("Player", style="cyan")
        table.add_column("Score", justify="right")
        for player, score in scores.items():
            table.add_row(str(player), str(score))
        self.console.print(table)
        self.console.rule(f"[bold]{result}[/bold]")


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
