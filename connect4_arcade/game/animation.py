"""
animation.py - Piece-fall animation contract

The engine never animates pieces itself. It hands a pending move to an
AnimationController and commits the piece once the controller reports the
fall is over. InstantAnimation is a zero-duration implementation for
headless drivers such as the CLI and the gymnasium environment.
"""

from typing import Optional, Protocol, Tuple

from connect4_arcade.debug import debug
from connect4_arcade.utils import Player


class AnimationController(Protocol):
    """Calls the GameController makes on the piece-fall animation."""

    def begin(self, column: int, target_row: int, player: Player) -> None:
        ...

    def is_active(self) -> bool:
        ...

    def on_tick(self, delta_time: float) -> None:
        ...

    def reset(self) -> None:
        ...


class InstantAnimation:
    """A fall that finishes on the first tick after it begins."""

    def __init__(self):
        self.in_flight: Optional[Tuple[int, int, Player]] = None
        self.started = 0

    def begin(self, column: int, target_row: int, player: Player) -> None:
        debug.trace(f"Fall of {player.name} into ({target_row}, {column})", "animation")
        self.in_flight = (column, target_row, player)
        self.started += 1

    def is_active(self) -> bool:
        return self.in_flight is not None

    def on_tick(self, delta_time: float) -> None:
        self.in_flight = None

    def reset(self) -> None:
        self.in_flight = None
