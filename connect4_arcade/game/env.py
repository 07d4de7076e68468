"""
env.py - Gymnasium environment over the Connect Four engine

ConnectFourEnv plays the engine headlessly: each step clicks a column and
runs one driver tick with an instant animation, so the move is committed
and evaluated within the step. Both seats are played by the caller.
"""

from typing import Any, Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4_arcade.debug import debug
from connect4_arcade.game.animation import InstantAnimation
from connect4_arcade.game.controller import ClickOutcome, ControllerState, GameController
from connect4_arcade.game.rules import winning_line
from connect4_arcade.utils import COLS, ROWS, GameResult


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Rewards are given to the player who made the move.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None, tick_seconds: float = 1.0 / 60.0):
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.controller = GameController(animation=InstantAnimation())
        self.render_mode = render_mode
        self.tick_seconds = tick_seconds

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        super().reset(seed=seed)
        self.controller.request_reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the player whose turn it is.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        outcome = self.controller.click_column(int(action))

        if outcome != ClickOutcome.ACCEPTED:
            debug.warning(f"Invalid action {action}: {outcome.name}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            info['outcome'] = outcome.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.controller.tick(self.tick_seconds)

        state = self.controller.state
        if state == ControllerState.TERMINAL_WIN:
            reward, terminated = self.reward_win, True
        elif state == ControllerState.TERMINAL_DRAW:
            reward, terminated = self.reward_draw, True
        else:
            reward, terminated = self.reward_step, False

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode is None:
            return None

        text = f"{self.controller.board.render()}\n{self.controller.status_text}"
        if self.render_mode == "ascii":
            return text

        print(text)
        return None

    def _get_observation(self) -> np.ndarray:
        return self.controller.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        board = self.controller.board
        last_move = board.last_move
        line = []
        if self.controller.result.winner() is not None and last_move is not None:
            line = winning_line(board, *last_move)

        return {
            'valid_moves': board.get_valid_moves() if self.controller.result == GameResult.IN_PROGRESS else [],
            'current_player': self.controller.current_player.value,
            'game_result': self.controller.result.name,
            'moves_made': board.move_count,
            'winning_line': line,
            'last_move': last_move,
        }
