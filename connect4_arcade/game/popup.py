"""
popup.py - End-of-game overlay state for the Connect Four engine

The PopupController fades an overlay in once a round ends. It is driven by
wall-clock delta time, one ``advance`` call per driver tick, and knows
nothing about the board.
"""

import math
from dataclasses import dataclass
from typing import Optional

from connect4_arcade.debug import debug
from connect4_arcade.utils import (ACCENT_COLORS, DRAW_POPUP_TEXT, FADE_MAX, FADE_RATE,
                                   RGB, Player, win_text)


@dataclass(frozen=True)
class PopupState:
    """Read-only view of the overlay handed to the rendering layer."""
    active: bool = False
    winner: Optional[Player] = None  # None means a draw
    fade: float = 0.0
    message: str = ""

    @property
    def overlay_alpha(self) -> int:
        """Alpha of the darkening layer drawn over the whole window."""
        return int(self.fade * 0.85)

    @property
    def restart_prompt_alpha(self) -> int:
        """Pulsing alpha of the restart prompt."""
        return int(self.fade * (0.7 + 0.3 * math.sin(self.fade / 40.0)))

    @property
    def accent_color(self) -> RGB:
        return ACCENT_COLORS[self.winner]


class PopupController:
    """Monotone fade-in timer for the end-of-game overlay."""

    def __init__(self, fade_rate: float = FADE_RATE):
        self.fade_rate = fade_rate
        self.deactivate()

    def activate(self, winner: Optional[Player]) -> None:
        """
        Show the overlay for a finished round, starting fully transparent.

        Args:
            winner: The winning player, or None for a draw
        """
        if winner == Player.EMPTY:
            raise ValueError("Winner must be a player or None")

        self._active = True
        self._winner = winner
        self._fade = 0.0
        self._message = win_text(winner) if winner is not None else DRAW_POPUP_TEXT
        debug.info(f"Popup activated: {self._message}", "popup")

    def advance(self, delta_time: float) -> None:
        """Raise the fade by FADE_RATE per second, saturating at 255."""
        if not self._active or delta_time <= 0:
            return
        self._fade = min(FADE_MAX, self._fade + self.fade_rate * delta_time)

    def deactivate(self) -> None:
        self._active = False
        self._winner: Optional[Player] = None
        self._fade = 0.0
        self._message = ""

    @property
    def active(self) -> bool:
        return self._active

    @property
    def fade(self) -> float:
        return self._fade

    @property
    def is_saturated(self) -> bool:
        return self._fade >= FADE_MAX

    @property
    def state(self) -> PopupState:
        return PopupState(active=self._active, winner=self._winner,
                          fade=self._fade, message=self._message)
