"""
Tests for Beat Pong game entities
"""

import pytest

from beat_pong.core.entities import OPPONENT_ID
from beat_pong.core.entities import PLAYER_ID
from beat_pong.core.entities import Ball
from beat_pong.core.entities import Court
from beat_pong.core.entities import GameState
from beat_pong.core.entities import Paddle
from beat_pong.core.entities import sign

COURT = Court(800.0, 600.0)


class TestBall:
    """Tests for Ball class"""

    def test_default_creation(self) -> None:
        """A new ball moves down-right at the base speed on both axes"""
        ball = Ball(400.0, 300.0)
        assert ball.speed == 5.0
        assert ball.dx == 5.0
        assert ball.dy == 5.0
        assert ball.radius == 10.0

    def test_update_position(self) -> None:
        """Test position update for one frame"""
        ball = Ball(400.0, 300.0, 5.0, 5.0, -3.0)
        ball.update()
        assert ball.x == 405.0
        assert ball.y == 297.0

    def test_update_with_step(self) -> None:
        """A step of 2 covers two nominal frames"""
        ball = Ball(0.0, 0.0, 5.0, 5.0, 5.0)
        ball.update(2.0)
        assert ball.x == 10.0
        assert ball.y == 10.0

    def test_bounce_vertical(self) -> None:
        """Test vertical bounce"""
        ball = Ball(0.0, 0.0, 5.0, 5.0, 3.0)
        ball.bounce_vertical()
        assert ball.dx == 5.0
        assert ball.dy == -3.0

    def test_bounce_horizontal(self) -> None:
        """Test horizontal bounce keeps magnitude"""
        ball = Ball(0.0, 0.0, 5.0, 5.0, 3.0)
        ball.bounce_horizontal()
        assert ball.dx == -5.0
        assert ball.dy == 3.0

    @pytest.mark.parametrize("dx,dy", [(5.0, 5.0), (-5.0, 2.5), (3.0, -0.5), (-1.0, -4.0)])
    def test_set_speed_keeps_direction(self, dx: float, dy: float) -> None:
        """Speed changes never flip a direction sign"""
        ball = Ball(0.0, 0.0, 5.0, dx, dy)
        ball.set_speed(8.0)
        assert ball.speed == 8.0
        assert ball.dx == 8.0 * sign(dx)
        assert ball.dy == 8.0 * sign(dy)

    def test_set_speed_zero_component_stays_zero(self) -> None:
        """A ball with no vertical motion keeps none"""
        ball = Ball(0.0, 0.0, 5.0, 5.0, 0.0)
        ball.set_speed(7.0)
        assert ball.dy == 0.0

    def test_reset_to_center(self) -> None:
        """Reset puts the ball at court center with the current speed"""
        ball = Ball(12.0, 34.0, 4.0, 4.0, 4.0)
        ball.reset_to_center(COURT, -1, 0.5)
        assert (ball.x, ball.y) == (400.0, 300.0)
        assert ball.dx == -4.0
        assert ball.dy == 2.0


class TestPaddle:
    """Tests for Paddle class"""

    def test_creation_left_player(self) -> None:
        """The human paddle is flush with the left edge and vertically centred"""
        paddle = Paddle(COURT, PLAYER_ID)
        assert paddle.x == 0.0
        assert paddle.y == 250.0
        assert paddle.width == 10.0
        assert paddle.height == 100.0
        assert paddle.score == 0

    def test_creation_right_player(self) -> None:
        """The opponent paddle is flush with the right edge"""
        paddle = Paddle(COURT, OPPONENT_ID)
        assert paddle.x == 790.0
        assert paddle.max_y == 500.0

    def test_get_rect(self) -> None:
        """Test getting the paddle rectangle"""
        paddle = Paddle(COURT, PLAYER_ID, y=120.0)
        assert paddle.get_rect() == (0.0, 120.0, 10.0, 100.0)

    def test_move_is_constrained(self) -> None:
        """Moving past an edge stops at the edge"""
        paddle = Paddle(COURT, PLAYER_ID, y=3.0)
        paddle.move(-7.0)
        assert paddle.y == 0.0
        paddle = Paddle(COURT, PLAYER_ID, y=497.0)
        paddle.move(7.0)
        assert paddle.y == 500.0

    @pytest.mark.parametrize(
        "ball_y,expected",
        [(100.0, False), (100.1, True), (150.0, True), (199.9, True), (200.0, False)],
    )
    def test_spans_is_strict(self, ball_y: float, expected: bool) -> None:
        """The band excludes both paddle edges"""
        paddle = Paddle(COURT, PLAYER_ID, y=100.0)
        assert paddle.spans(ball_y) is expected


class TestGameState:
    """Tests for the game-state record"""

    def test_new_state(self) -> None:
        """A new game starts centred and scoreless"""
        state = GameState.new(COURT)
        assert (state.ball.x, state.ball.y) == (400.0, 300.0)
        assert state.score == (0, 0)
        assert state.bpm is None
        assert state.frame == 0

    def test_paddle_lookup(self) -> None:
        state = GameState.new(COURT)
        assert state.paddle(PLAYER_ID) is state.player
        assert state.paddle(OPPONENT_ID) is state.opponent

    def test_snapshot_is_a_copy(self) -> None:
        """Snapshots do not follow later changes to the state"""
        state = GameState.new(COURT)
        snapshot = state.snapshot()
        state.ball.update()
        state.player.score = 3

        assert snapshot.ball_position == (400.0, 300.0)
        assert snapshot.score == (0, 0)
        assert snapshot.court_size == (800.0, 600.0)

    def test_snapshot_is_frozen(self) -> None:
        state = GameState.new(COURT)
        snapshot = state.snapshot()
        with pytest.raises(AttributeError):
            snapshot.frame = 10  # type: ignore[misc]
