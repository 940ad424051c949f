"""
Collision detection system for Beat Pong
"""

from beat_pong.core.entities import OPPONENT_ID
from beat_pong.core.entities import PLAYER_ID
from beat_pong.core.entities import Ball
from beat_pong.core.entities import Court
from beat_pong.core.entities import Paddle


def hits_horizontal_wall(ball: Ball, court: Court) -> str:
    """Returns "top", "bottom" or "none" depending on which wall the ball overlaps"""
    if ball.y - ball.radius < 0:
        return "top"
    if ball.y + ball.radius > court.height:
        return "bottom"
    return "none"


def reaches_left_paddle(ball: Ball, paddle: Paddle) -> bool:
    """Ball edge inside the left paddle column and center strictly inside its band"""
    return ball.x - ball.radius < paddle.width and paddle.spans(ball.y)


def reaches_right_paddle(ball: Ball, paddle: Paddle, court: Court) -> bool:
    """Ball edge inside the right paddle column and center strictly inside its band"""
    return ball.x + ball.radius > court.width - paddle.width and paddle.spans(ball.y)


class CollisionDetector:
    """Main collision manager"""

    def check_ball_walls(self, ball: Ball, court: Court) -> str:
        """
        Reflects the ball off the top and bottom walls.

        The ball is not pushed back inside the court; an overshoot resolves
        itself on the next frame. Returns the wall hit, or "none".
        """
        wall = hits_horizontal_wall(ball, court)
        if wall != "none":
            ball.bounce_vertical()
        return wall

    def check_ball_paddles(
        self, ball: Ball, player: Paddle, opponent: Paddle, court: Court
    ) -> int | None:
        """
        Reflects the ball off the paddle it is travelling towards.

        Only that paddle is tested. Returns the id of the paddle hit, if any.
        """
        if ball.dx < 0:
            if reaches_left_paddle(ball, player):
                ball.bounce_horizontal()
                return PLAYER_ID
        elif reaches_right_paddle(ball, opponent, court):
            ball.bounce_horizontal()
            return OPPONENT_ID
        return None

    def check_goal(self, ball: Ball, court: Court) -> int | None:
        """Returns the id of the player who scored, if the ball left the court"""
        if ball.x + ball.radius > court.width:
            return PLAYER_ID
        if ball.x - ball.radius < 0:
            return OPPONENT_ID
        return None
