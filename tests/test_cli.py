"""Tests for the command line front end."""

import sys

import pytest
from mancala_engine.cli import main as cli_main
from mancala_engine.cli.main import main, parse_moves, parse_pit


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["mancala-engine", *argv])
    main()


def test_parse_pit():
    """Pit numbers are 1-based for users."""
    assert parse_pit("1", 6) == 0
    assert parse_pit("6", 6) == 5

    with pytest.raises(ValueError):
        parse_pit("0", 6)
    with pytest.raises(ValueError):
        parse_pit("7", 6)
    with pytest.raises(ValueError):
        parse_pit("x", 6)


def test_parse_moves():
    assert parse_moves("3, 1,6", 6) == [2, 0, 5]
    assert parse_moves("", 6) == []

    with pytest.raises(ValueError):
        parse_moves("3,9", 6)


def test_replay(monkeypatch, capsys):
    """Pit 3 ends in the store, so player 1 sows pit 1 next."""
    run_cli(monkeypatch, "replay", "--moves", "3,1")

    out = capsys.readouterr().out
    assert "Move 2: Player 1 sowed pit 1" in out


def test_replay_invalid_move_exits(monkeypatch, capsys):
    # Pit 3 is empty after the first move and it is still player 1's turn
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "replay", "--moves", "3,3")

    assert exc.value.code == 1
    assert "cannot sow pit 3" in capsys.readouterr().out


def test_replay_bad_pit_number(monkeypatch):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "replay", "--pockets", "4", "--moves", "5")

    assert exc.value.code == 1


def test_preview(monkeypatch, capsys):
    run_cli(monkeypatch, "preview", "3")

    out = capsys.readouterr().out
    assert "P1 pit 4" in out
    assert "P1 store" in out


def test_bad_board_configuration(monkeypatch):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "preview", "--pockets", "0", "1")

    assert exc.value.code == 2


def test_no_command(monkeypatch):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch)

    assert exc.value.code == 1


def play(monkeypatch, answers, *argv):
    """Run the play command, answering prompts from a list."""
    replies = iter(answers)
    monkeypatch.setattr(cli_main.Prompt, "ask", lambda *args, **kwargs: next(replies))
    run_cli(monkeypatch, "play", *argv)


def test_play_session(monkeypatch, capsys):
    """Preview, extra turn, empty pit, bad input, restart, then quit."""
    play(monkeypatch, ["p3", "3", "3", "x", "p9", "r", "1", "q"])

    out = capsys.readouterr().out
    assert "Preview pit 3" in out
    assert "moves again" in out
    assert "Pit 3 is empty" in out
    assert "'x' is not a pit number" in out
    assert "Pit must be between 1 and 6" in out
    assert "Board reset" in out
    # Pit 1 after the restart passes the turn
    assert "Player 2's turn" in out


def test_play_finished_game_shows_scores(monkeypatch, capsys):
    """One pit, one stone: the first move ends in the store and empties the row."""
    play(monkeypatch, ["1", "n"], "--pockets", "1", "--stones", "1")

    out = capsys.readouterr().out
    assert "Final scores" in out
    assert "Tie game" in out


def test_play_again_restarts(monkeypatch, capsys):
    play(monkeypatch, ["1", "y", "1", "n"], "--pockets", "1", "--stones", "1")

    assert capsys.readouterr().out.count("Final scores") == 2


def test_bad_stone_count(monkeypatch):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "play", "--stones", "-1")

    assert exc.value.code == 2


def test_errors_inside_a_command_are_not_usage_errors(monkeypatch):
    """Only the board configuration is reported through argparse."""

    def broken_command(args):
        raise ValueError("boom")

    monkeypatch.setattr(cli_main, "replay_command", broken_command)

    with pytest.raises(ValueError, match="boom"):
        run_cli(monkeypatch, "replay", "--moves", "1")
