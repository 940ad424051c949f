"""
Physics system for Beat Pong
"""

import logging
import random

from beat_pong.core.collision import CollisionDetector
from beat_pong.core.entities import GameState

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """Advances the ball and resolves walls, paddles and goals once per frame"""

    def __init__(self, rng: random.Random | None = None):
        self.collision_detector = CollisionDetector()
        self.rng = rng or random.Random()

    def advance(self, state: GameState, step: float = 1.0) -> dict[str, list]:
        """
        Updates the ball for one frame and returns the events that occurred.

        The direction changes made this frame only affect the next frame's
        displacement; the position has already moved by the pre-bounce
        velocity.

        Returns:
            {"wall_bounces": [...], "paddle_hits": [...], "goals": [...]}
        """
        events: dict[str, list] = {"wall_bounces": [], "paddle_hits": [], "goals": []}
        ball = state.ball
        court = state.court

        ball.update(step)

        wall = self.collision_detector.check_ball_walls(ball, court)
        if wall != "none":
            events["wall_bounces"].append(wall)

        hit = self.collision_detector.check_ball_paddles(ball, state.player, state.opponent, court)
        if hit is not None:
            events["paddle_hits"].append({"player": hit})

        scorer = self.collision_detector.check_goal(ball, court)
        if scorer is not None:
            state.paddle(scorer).score += 1
            events["goals"].append({"player": scorer, "score": list(state.score)})
            logger.info("Player %d scores (%d - %d)", scorer, *state.score)
            self.reset_ball(state)

        return events

    def reset_ball(self, state: GameState) -> None:
        """Serves from the center in a random direction at the current speed"""
        direction = self.rng.choice([-1, 1])
        vertical = self.rng.uniform(-1.0, 1.0)
        state.ball.reset_to_center(state.court, direction, vertical)
