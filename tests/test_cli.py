import pytest

from connect4_arcade.debug import debug, DebugLevel
from connect4_arcade.interfaces.cli import SimpleCLI, main
from tests.positions import NO_WIN_FULL_GRID


def position_arg(grid):
    return ",".join(str(int(v)) for v in grid.flatten())


def feed(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_no_command_prints_help_hint(capsys):
    assert main([]) == 1
    assert "Please specify a command" in capsys.readouterr().out


def test_play_until_win_and_restart(monkeypatch, capsys):
    feed(monkeypatch, ["3", "0", "3", "0", "3", "0", "3", "5", "r", "q"])
    cli = SimpleCLI()
    assert cli.run(["--debug_level", "none", "play"]) == 0

    out = capsys.readouterr().out
    assert "Player 1 (Red) WINS!" in out
    assert "GAME OVER" in out
    assert "The game is over" in out
    assert "Game restarted." in out
    assert not cli.controller.board.grid.any()


def test_play_reports_bad_input(monkeypatch, capsys):
    feed(monkeypatch, ["x", "9", "0", "0", "0", "0", "0", "0", "0"])
    SimpleCLI().run(["--debug_level", "none", "play"])

    out = capsys.readouterr().out
    assert "Invalid input" in out
    assert "Column must be between 0 and 6." in out
    assert "Column 0 is full!" in out


def test_position_with_win(capsys):
    grid = NO_WIN_FULL_GRID.copy()
    grid[:2] = 0
    grid[2, 0:4] = 1
    SimpleCLI().run(["--debug_level", "none", "test", "--position", position_arg(grid)])

    out = capsys.readouterr().out
    assert "Win for Player 1 (Red)" in out
    assert "Valid moves: [0, 1, 2, 3, 4, 5, 6]" in out


def test_position_draw(capsys):
    SimpleCLI().run(["--debug_level", "none", "test", "--position", position_arg(NO_WIN_FULL_GRID)])

    out = capsys.readouterr().out
    assert "No win detected for any player" in out
    assert "Board is full - it's a draw" in out


def test_bad_position(capsys):
    assert SimpleCLI().run(["--debug_level", "none", "test", "--position", "1,2,3"]) == 1
    assert "Error parsing position" in capsys.readouterr().out


def test_benchmark(capsys):
    SimpleCLI().run(["--debug_level", "none", "benchmark", "--iterations", "5"])
    out = capsys.readouterr().out
    assert "Played 5 games" in out


def test_debug_flag_sets_level():
    SimpleCLI().parse_args(["--debug", "benchmark"])
    assert debug.level == DebugLevel.DEBUG
