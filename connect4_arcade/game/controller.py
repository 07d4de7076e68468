"""
controller.py - Turn sequencing and result state for the Connect Four engine

The GameController is the single state machine tying the board, the win and
draw checks, the piece-fall animation and the end-of-game popup together.
All game state lives in a GameSession owned by the controller; the
rendering layer only ever sees SessionSnapshot copies.

One driver tick is processed in a fixed order:
    1. input (click_column / request_reset)
    2. animation advance, committing the move when the fall ends
    3. win check, then draw check, for that move
    4. popup fade
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

import numpy as np

from connect4_arcade.debug import debug
from connect4_arcade.game.animation import AnimationController, InstantAnimation
from connect4_arcade.game.board import Board
from connect4_arcade.game.popup import PopupController, PopupState
from connect4_arcade.game.rules import check_draw, check_win
from connect4_arcade.utils import (DRAW_STATUS_TEXT, GameResult, Player, turn_text,
                                   win_text)


class ControllerState(Enum):
    AWAITING_INPUT = auto()
    COMMITTING_MOVE = auto()
    TERMINAL_WIN = auto()
    TERMINAL_DRAW = auto()


class ClickOutcome(Enum):
    """What happened to a column click."""
    ACCEPTED = auto()
    COLUMN_FULL = auto()
    INVALID_COLUMN = auto()
    IGNORED = auto()  # a move is pending or the round is over


@dataclass(frozen=True)
class PendingMove:
    column: int
    target_row: int
    player: Player


@dataclass
class GameSession:
    """Everything that is reset when a new round starts."""
    board: Board = field(default_factory=Board)
    popup: PopupController = field(default_factory=PopupController)
    current_player: Player = Player.ONE
    result: GameResult = GameResult.IN_PROGRESS


@dataclass(frozen=True)
class SessionSnapshot:
    grid: np.ndarray
    current_player: Player
    result: GameResult
    state: ControllerState
    pending_move: Optional[PendingMove]
    status_text: str
    popup: PopupState


class GameController:
    """
    Drives a round of Connect Four from discrete input and tick events.

    At most one move is in flight at a time: a click is accepted only in
    AWAITING_INPUT, and the piece is committed to the board only when the
    animation reports it has finished falling.
    """

    def __init__(self, session: Optional[GameSession] = None,
                 animation: Optional[AnimationController] = None):
        self.session = session if session is not None else GameSession()
        self.animation = animation if animation is not None else InstantAnimation()
        self._pending: Optional[PendingMove] = None
        self._state = self._state_for_result(self.session.result)
        debug.debug(f"Controller ready in {self._state.name}", "controller")

    @staticmethod
    def _state_for_result(result: GameResult) -> ControllerState:
        if result == GameResult.DRAW:
            return ControllerState.TERMINAL_DRAW
        if result.is_game_over():
            return ControllerState.TERMINAL_WIN
        return ControllerState.AWAITING_INPUT

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def board(self) -> Board:
        return self.session.board

    @property
    def popup(self) -> PopupController:
        return self.session.popup

    @property
    def current_player(self) -> Player:
        return self.session.current_player

    @property
    def result(self) -> GameResult:
        return self.session.result

    @property
    def pending_move(self) -> Optional[PendingMove]:
        return self._pending

    @property
    def status_text(self) -> str:
        if self.session.result == GameResult.DRAW:
            return DRAW_STATUS_TEXT
        winner = self.session.result.winner()
        if winner is not None:
            return win_text(winner)
        return turn_text(self.session.current_player)

    def click_column(self, column: int) -> ClickOutcome:
        """
        Handle a click on ``column``.

        Returns:
            ACCEPTED if a fall was started, otherwise why the click was
            rejected. Rejections never change any state.
        """
        if self._state != ControllerState.AWAITING_INPUT:
            debug.trace(f"Click on column {column} ignored in {self._state.name}", "controller")
            return ClickOutcome.IGNORED

        if not 0 <= column < self.board.cols:
            debug.debug(f"Click outside the board (column {column})", "controller")
            return ClickOutcome.INVALID_COLUMN

        row = self.board.find_landing_row(column)
        if row is None:
            debug.info(f"Column {column + 1} is full!", "controller")
            return ClickOutcome.COLUMN_FULL

        self._pending = PendingMove(column, row, self.session.current_player)
        self.animation.begin(column, row, self.session.current_player)
        self._state = ControllerState.COMMITTING_MOVE
        debug.debug(f"{self.session.current_player.name} drops into column {column}, "
                    f"landing on row {row}", "controller")
        return ClickOutcome.ACCEPTED

    def tick(self, delta_time: float) -> None:
        """Advance the animation, commit a finished move, then fade the popup."""
        if self.animation.is_active():
            self.animation.on_tick(delta_time)
            if not self.animation.is_active():
                self.animation_finished()

        self.session.popup.advance(delta_time)

    def animation_finished(self) -> ControllerState:
        """
        Commit the pending move and evaluate it.

        A win is checked before a draw, so a move that completes four in a
        row on the last empty cell is a win.
        """
        if self._state != ControllerState.COMMITTING_MOVE or self._pending is None:
            return self._state

        move = self._pending
        self._pending = None
        self.board.place(move.target_row, move.column, move.player)

        if check_win(self.board, move.target_row, move.column):
            self.session.result = GameResult.win_for(move.player)
            self._state = ControllerState.TERMINAL_WIN
            self.session.popup.activate(move.player)
            debug.info(f"{move.player.label} wins after move at "
                       f"({move.target_row}, {move.column})", "controller")
        elif check_draw(self.board):
            self.session.result = GameResult.DRAW
            self._state = ControllerState.TERMINAL_DRAW
            self.session.popup.activate(None)
            debug.info("Game ends in a draw", "controller")
        else:
            self.session.current_player = move.player.other()
            self._state = ControllerState.AWAITING_INPUT
            debug.debug(f"Switching to player {self.session.current_player.name}", "controller")

        return self._state

    def request_reset(self) -> None:
        """Start a new round from any state, discarding a pending move."""
        if self._pending is not None:
            debug.debug(f"Discarding pending move {self._pending}", "controller")
        self._pending = None
        self.animation.reset()
        self.session.board.reset()
        self.session.current_player = Player.ONE
        self.session.result = GameResult.IN_PROGRESS
        self.session.popup.deactivate()
        self._state = ControllerState.AWAITING_INPUT
        debug.info("New round started", "controller")

    def snapshot(self) -> SessionSnapshot:
        grid = self.board.get_state()
        grid.flags.writeable = False
        return SessionSnapshot(
            grid=grid,
            current_player=self.session.current_player,
            result=self.session.result,
            state=self._state,
            pending_move=self._pending,
            status_text=self.status_text,
            popup=self.session.popup.state,
        )
