"""
Paddle controller protocol - defines interface for human and rule-driven paddles
"""

from typing import Protocol

from beat_pong.core.entities import GameState
from beat_pong.core.entities import Paddle


class PaddleController(Protocol):
    """
    Protocol that every paddle driver (keyboard, reactive rule, ...) implements.

    The game engine calls ``move`` once per frame for each paddle without
    knowing which kind of controller it is dealing with.
    """

    name: str

    def move(self, paddle: Paddle, state: GameState, step: float = 1.0) -> None:
        """
        Move ``paddle`` for the current frame.

        Args:
            paddle: Paddle driven by this controller
            state: Current game state (read only, apart from ``paddle``)
            step: Frame step multiplier, 1.0 for one nominal frame
        """
        ...
