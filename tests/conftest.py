import pytest

from connect4_arcade.debug import debug, DebugLevel
from connect4_arcade.game.board import Board
from tests.positions import NO_WIN_FULL_GRID


@pytest.fixture(autouse=True)
def _quiet_debug():
    """Keep engine log output out of test runs."""
    debug.configure(level=DebugLevel.NONE, components=[])
    yield
    debug.configure(level=DebugLevel.NONE, components=[])


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def no_win_full_board():
    return Board.from_position(NO_WIN_FULL_GRID)
