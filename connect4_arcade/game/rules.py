"""
rules.py - Win and draw detection for the Connect Four engine

Both checks are pure functions over a Board. The win check only looks at
lines passing through the last placed piece, so it must be called once per
committed move.
"""

from typing import List, Optional, Tuple

from connect4_arcade.debug import debug
from connect4_arcade.game.board import Board
from connect4_arcade.utils import (CONNECT_N, DIRECTION_VECTORS, WIN_SCAN_OFFSETS,
                                   Direction, Player, is_valid_position)


def _scan_direction(board: Board, last_row: int, last_col: int,
                    dr: int, dc: int, player_value: int) -> Optional[List[Tuple[int, int]]]:
    """
    Slide a run counter along one axis through the last move.

    Cells are visited at offsets -3..3 from (last_row, last_col). Each
    matching cell extends the run, anything else (including positions off
    the board) resets it.

    Returns:
        The CONNECT_N cells of the first complete run, or None
    """
    run: List[Tuple[int, int]] = []
    for i in WIN_SCAN_OFFSETS:
        r = last_row + i * dr
        c = last_col + i * dc
        if is_valid_position(r, c, board.rows, board.cols) and board.grid[r, c] == player_value:
            run.append((r, c))
            if len(run) >= CONNECT_N:
                return run
        else:
            run = []
    return None


def _first_winning_run(board: Board, last_row: Optional[int],
                       last_col: Optional[int]) -> Optional[Tuple[Direction, List[Tuple[int, int]]]]:
    # No move yet (None or the -1 sentinel)
    if last_row is None or last_col is None:
        return None
    if not is_valid_position(last_row, last_col, board.rows, board.cols):
        return None

    player_value = board.grid[last_row, last_col]
    if player_value == Player.EMPTY.value:
        return None

    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        run = _scan_direction(board, last_row, last_col, dr, dc, player_value)
        if run is not None:
            return direction, run
    return None


def check_win(board: Board, last_row: Optional[int], last_col: Optional[int]) -> bool:
    """
    Check whether the piece at (last_row, last_col) completes four in a row.

    Args:
        board: The board after the piece was placed
        last_row: Row of the last piece, or None / -1 if no move was made
        last_col: Column of the last piece

    Returns:
        True if the last move wins, False otherwise
    """
    found = _first_winning_run(board, last_row, last_col)
    if found is None:
        return False

    direction, _ = found
    debug.debug(f"Win through ({last_row}, {last_col}) along {direction.name}", "rules")
    return True


def winning_line(board: Board, last_row: Optional[int],
                 last_col: Optional[int]) -> List[Tuple[int, int]]:
    """Cells of the run found by ``check_win``, or an empty list."""
    found = _first_winning_run(board, last_row, last_col)
    return found[1] if found else []


def check_draw(board: Board) -> bool:
    """
    Check whether the board is full.

    Only meaningful after ``check_win`` returned False for the same move:
    a move that wins and fills the board at once is a win.
    """
    full = board.is_full()
    if full:
        debug.debug("Board is full", "rules")
    return full
