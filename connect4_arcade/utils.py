"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

Board geometry, player and result enumerations, the win-scan direction
vectors, popup timing and the text/palette shown by the presentation layer.
"""

from enum import Enum, auto
from typing import Optional, Tuple

import numpy as np

# Board geometry
ROWS = 6
COLS = 7
CONNECT_N = 4  # pieces in a row needed to win

# Offsets scanned on each side of the last move, inclusive
WIN_SCAN_OFFSETS = range(-(CONNECT_N - 1), CONNECT_N)

# Popup fade-in, in alpha units per second
FADE_RATE = 600.0
FADE_MAX = 255.0

RGB = Tuple[int, int, int]


class Player(Enum):
    """Players, also used as cell values on the grid."""
    EMPTY = 0
    ONE = 1    # moves first, red pieces
    TWO = 2    # yellow pieces

    def other(self) -> 'Player':
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def label(self) -> str:
        if self == Player.ONE:
            return "Player 1 (Red)"
        elif self == Player.TWO:
            return "Player 2 (Yellow)"
        return "Nobody"

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Outcome of the current round."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameResult.IN_PROGRESS

    def winner(self) -> Optional[Player]:
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        elif self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @staticmethod
    def win_for(player: Player) -> 'GameResult':
        if player == Player.ONE:
            return GameResult.PLAYER_ONE_WIN
        elif player == Player.TWO:
            return GameResult.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class Direction(Enum):
    """Axes checked for four in a row, in scan order."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()  # top-left to bottom-right
    DIAGONAL_DOWN_LEFT = auto()   # top-right to bottom-left


# (row, col) step for each axis; rows grow downward
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}

# Status bar and popup text
TURN_TEXT = "{label}'s Turn"
WIN_TEXT = "{label} WINS!"
DRAW_STATUS_TEXT = "Game Over - It's a DRAW!"
DRAW_POPUP_TEXT = "It's a DRAW!"
RESTART_PROMPT = ">> PRESS R TO RESTART <<"

# Popup accent colors
ACCENT_COLORS = {
    Player.ONE: (255, 0, 100),
    Player.TWO: (255, 220, 0),
    None: (100, 200, 255),
}


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        rows: Number of rows on the board
        cols: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < rows and 0 <= col < cols


def win_text(player: Player) -> str:
    return WIN_TEXT.format(label=player.label)


def turn_text(player: Player) -> str:
    return TURN_TEXT.format(label=player.label)


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art, top row first, with column numbers below.

    Args:
        grid: 2D array of cell values

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    lines = [border]
    for row in range(rows):
        cells = [str(Player(int(grid[row, col]))) for col in range(cols)]
        lines.append("|" + " ".join(cells) + "|")
    lines.append(border)
    lines.append("|" + " ".join(str(col) for col in range(cols)) + "|")

    return "\n".join(lines)
