"""
connect4_arcade.game - Core game mechanics for Connect Four

This package contains the board, the win and draw rules, the game
controller state machine and the end-of-game popup.
"""

from connect4_arcade.game.board import Board
from connect4_arcade.game.rules import check_win, check_draw, winning_line
from connect4_arcade.game.popup import PopupController, PopupState
from connect4_arcade.game.animation import AnimationController, InstantAnimation
from connect4_arcade.game.controller import (ClickOutcome, ControllerState, GameController,
                                             GameSession, PendingMove, SessionSnapshot)

__all__ = ['Board', 'check_win', 'check_draw', 'winning_line',
           'PopupController', 'PopupState', 'AnimationController', 'InstantAnimation',
           'ClickOutcome', 'ControllerState', 'GameController', 'GameSession',
           'PendingMove', 'SessionSnapshot']
