"""
Unit tests for physics engine

Tests physics engine functionality including:
- Ball integration and frame ordering of bounces
- Scoring and serve after a goal
- At most one goal per frame
"""

import random

import pytest

from beat_pong.core.entities import OPPONENT_ID
from beat_pong.core.entities import PLAYER_ID
from beat_pong.core.entities import Court
from beat_pong.core.entities import GameState
from beat_pong.core.physics import PhysicsEngine


@pytest.fixture
def state() -> GameState:
    return GameState.new(Court(800.0, 600.0))


@pytest.fixture
def engine() -> PhysicsEngine:
    return PhysicsEngine(random.Random(1234))


class TestPhysicsEngine:
    """Test the per-frame ball update"""

    def test_free_flight(self, engine: PhysicsEngine, state: GameState) -> None:
        """One frame with nothing in the way moves the ball by its velocity"""
        events = engine.advance(state)

        assert (state.ball.x, state.ball.y) == (405.0, 305.0)
        assert events == {"wall_bounces": [], "paddle_hits": [], "goals": []}

    def test_bottom_wall_flip_happens_after_the_move(
        self, engine: PhysicsEngine, state: GameState
    ) -> None:
        """The flip only affects the next frame's displacement"""
        state.ball.x, state.ball.y = 400.0, 586.0

        events = engine.advance(state)
        assert state.ball.y == 591.0
        assert state.ball.dy == -5.0
        assert events["wall_bounces"] == ["bottom"]

        engine.advance(state)
        assert state.ball.y == 586.0

    def test_no_flip_before_the_wall(self, engine: PhysicsEngine, state: GameState) -> None:
        state.ball.x, state.ball.y = 400.0, 585.0
        engine.advance(state)
        assert state.ball.y == 590.0
        assert state.ball.dy == 5.0

    def test_player_paddle_hit(self, engine: PhysicsEngine, state: GameState) -> None:
        state.ball.x, state.ball.y = 24.0, 300.0
        state.ball.dx, state.ball.dy = -5.0, 0.0

        events = engine.advance(state)

        assert state.ball.x == 19.0
        assert state.ball.dx == 5.0
        assert events["paddle_hits"] == [{"player": PLAYER_ID}]
        assert events["goals"] == []

    def test_player_scores(self, engine: PhysicsEngine, state: GameState) -> None:
        """Passing the right edge scores for the player and serves from center"""
        state.ball.x, state.ball.y = 795.0, 100.0
        state.ball.dx, state.ball.dy = 5.0, 5.0

        events = engine.advance(state)

        assert state.player.score == 1
        assert state.opponent.score == 0
        assert events["goals"] == [{"player": PLAYER_ID, "score": [1, 0]}]
        assert (state.ball.x, state.ball.y) == (400.0, 300.0)
        assert abs(state.ball.dx) == 5.0
        assert -5.0 <= state.ball.dy <= 5.0

    def test_opponent_scores(self, engine: PhysicsEngine, state: GameState) -> None:
        state.ball.x, state.ball.y = 12.0, 500.0
        state.ball.dx, state.ball.dy = -5.0, 0.0

        events = engine.advance(state)

        assert state.score == (0, 1)
        assert events["goals"] == [{"player": OPPONENT_ID, "score": [0, 1]}]
        assert (state.ball.x, state.ball.y) == (400.0, 300.0)

    def test_goal_after_paddle_hit_still_counts(
        self, engine: PhysicsEngine, state: GameState
    ) -> None:
        """A ball already past the edge scores even if the paddle reflected it"""
        state.ball.x, state.ball.y = 795.0, 300.0
        state.ball.dx, state.ball.dy = 5.0, 0.0

        events = engine.advance(state)

        assert events["paddle_hits"] == [{"player": OPPONENT_ID}]
        assert len(events["goals"]) == 1
        assert state.player.score == 1

    def test_serve_keeps_current_speed(self, engine: PhysicsEngine, state: GameState) -> None:
        """The serve uses whatever speed the tempo last set"""
        state.ball.set_speed(3.0)
        state.ball.x, state.ball.y = 797.0, 100.0

        engine.advance(state)

        assert state.ball.speed == 3.0
        assert abs(state.ball.dx) == 3.0
        assert abs(state.ball.dy) <= 3.0

    def test_serve_direction_is_random(self, state: GameState) -> None:
        """Both serve directions occur"""
        engine = PhysicsEngine(random.Random(7))
        directions = set()
        for _ in range(50):
            engine.reset_ball(state)
            directions.add(state.ball.dx > 0)
        assert directions == {True, False}

    def test_at_most_one_goal_per_frame(self, engine: PhysicsEngine, state: GameState) -> None:
        """Random play never produces two goals in a single frame"""
        rng = random.Random(99)
        for _ in range(2000):
            events = engine.advance(state)
            assert len(events["goals"]) <= 1
            state.player.y = rng.uniform(0, 500)
            state.opponent.y = rng.uniform(0, 500)

    def test_step_scales_displacement(self, engine: PhysicsEngine, state: GameState) -> None:
        engine.advance(state, step=0.5)
        assert (state.ball.x, state.ball.y) == (402.5, 302.5)
