"""
Paddle controllers: keyboard intents and the reactive opponent rule
"""

from beat_pong.core.entities import GameState
from beat_pong.core.entities import Paddle
from beat_pong.core.entities import PaddleIntent
from beat_pong.utils.config import game_config


class KeyboardController:
    """Moves a paddle from held-key intents"""

    def __init__(self, name: str = "Player", paddle_step: float | None = None):
        self.name = name
        self.paddle_step = (
            paddle_step if paddle_step is not None else game_config.PLAYER_PADDLE_STEP
        )

    def move(self, paddle: Paddle, state: GameState, step: float = 1.0) -> None:
        """Applies both intents independently; up and down together cancel out"""
        self.apply_intent(paddle, state.intent, step)

    def apply_intent(self, paddle: Paddle, intent: PaddleIntent, step: float = 1.0) -> None:
        distance = self.paddle_step * step
        if intent.moving_up and not paddle.at_top():
            paddle.move(-distance)
        if intent.moving_down and not paddle.at_bottom():
            paddle.move(distance)


class ReactiveController:
    """
    Follows the ball vertically with a dead zone.

    The paddle only moves when its center is more than ``dead_zone`` pixels
    away from the ball, so tracking stays imperfect.
    """

    def __init__(
        self,
        name: str = "Computer",
        paddle_step: float | None = None,
        dead_zone: float | None = None,
    ):
        self.name = name
        self.paddle_step = (
            paddle_step if paddle_step is not None else game_config.OPPONENT_PADDLE_STEP
        )
        self.dead_zone = dead_zone if dead_zone is not None else game_config.OPPONENT_DEAD_ZONE

    def direction(self, paddle: Paddle, ball_y: float) -> int:
        """1 to move down, -1 to move up, 0 to hold"""
        center = paddle.center_y
        if center < ball_y - self.dead_zone:
            return 1
        if center > ball_y + self.dead_zone:
            return -1
        return 0

    def move(self, paddle: Paddle, state: GameState, step: float = 1.0) -> None:
        direction = self.direction(paddle, state.ball.y)
        if direction:
            paddle.move(direction * self.paddle_step * step)
