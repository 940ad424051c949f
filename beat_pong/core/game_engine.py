"""
Beat Pong main game engine
"""

import logging
import random
from typing import Any

from beat_pong.core.controllers import KeyboardController
from beat_pong.core.controllers import ReactiveController
from beat_pong.core.entities import GameSnapshot
from beat_pong.core.entities import GameState
from beat_pong.core.entities import PaddleIntent
from beat_pong.core.interfaces.controller import PaddleController
from beat_pong.core.physics import PhysicsEngine
from beat_pong.tempo.monitor import TempoMonitor
from beat_pong.tempo.speed_mapper import TempoSpeedMapper
from beat_pong.utils.config import game_config

logger = logging.getLogger(__name__)


class GameEngine:
    """Main engine that owns the game state and runs one frame at a time"""

    def __init__(
        self,
        state: GameState | None = None,
        player_controller: PaddleController | None = None,
        opponent_controller: PaddleController | None = None,
        tempo_monitor: TempoMonitor | None = None,
        speed_mapper: TempoSpeedMapper | None = None,
        rng: random.Random | None = None,
    ):
        self.state = state or GameState.new()
        self.physics_engine = PhysicsEngine(rng)
        self.player_controller: PaddleController = player_controller or KeyboardController()
        self.opponent_controller: PaddleController = opponent_controller or ReactiveController()
        self.tempo_monitor = tempo_monitor
        self.speed_mapper = speed_mapper or TempoSpeedMapper(game_config.BASE_BALL_SPEED)

        self.running = True
        self.paused = False

    def set_intent(self, moving_up: bool, moving_down: bool) -> None:
        """Records the held-key state of the keyboard paddle"""
        self.state.intent = PaddleIntent(moving_up, moving_down)

    def update(self, dt: float | None = None) -> dict[str, Any]:
        """
        Updates the game by one frame

        Args:
            dt: Frame duration in seconds, only used when the game runs
                frame-rate independent

        Returns:
            Dict containing the frame events and a snapshot of the game
        """
        if not self.running or self.paused:
            return {"events": {}, "game_state": self.get_game_state()}

        state = self.state
        step = game_config.frame_step(dt)

        self.player_controller.move(state.player, state, step)
        self.opponent_controller.move(state.opponent, state, step)

        events = self.physics_engine.advance(state, step)

        bpm_update = self.tempo_monitor.take_update() if self.tempo_monitor else None
        if bpm_update is not None:
            self.apply_tempo(bpm_update)
            events["tempo_changes"] = [{"bpm": state.bpm, "speed": state.ball.speed}]

        state.frame += 1
        return {"events": events, "game_state": self.get_game_state()}

    def apply_tempo(self, bpm: float | None) -> float:
        """Rescales the ball speed for ``bpm``; returns the new speed"""
        self.state.bpm = bpm
        return self.speed_mapper.apply(self.state.ball, bpm)

    def get_game_state(self) -> GameSnapshot:
        """Returns a read-only snapshot of the game"""
        return self.state.snapshot()

    def pause_game(self) -> None:
        """Pauses / resumes the game"""
        self.paused = not self.paused

    def stop_game(self) -> None:
        self.running = False

    def reset_game(self) -> None:
        """Starts a new session: scores to zero, ball and paddles centred"""
        self.state = GameState.new(self.state.court)
        self.running = True
        self.paused = False
        if self.tempo_monitor and self.tempo_monitor.bpm is not None:
            self.apply_tempo(self.tempo_monitor.bpm)
        logger.info("Game reset")
