"""
Keyboard input handling for Beat Pong
"""

import pygame

from beat_pong.core.entities import PaddleIntent
from beat_pong.utils.config import game_config


class InputManager:
    """Tracks held movement keys and turns other key presses into commands"""

    COMMAND_KEYS = {
        pygame.K_ESCAPE: "quit",
        pygame.K_p: "pause",
        pygame.K_SPACE: "pause",
        pygame.K_m: "toggle_music",
        pygame.K_PLUS: "volume_up",
        pygame.K_EQUALS: "volume_up",
        pygame.K_KP_PLUS: "volume_up",
        pygame.K_MINUS: "volume_down",
        pygame.K_KP_MINUS: "volume_down",
        pygame.K_F2: "toggle_fps",
        pygame.K_r: "restart",
    }

    def __init__(self) -> None:
        layout = game_config.get_keyboard_layout()
        self.up_keys = {layout.arrow_keys["up"], layout.letter_keys["up"]}
        self.down_keys = {layout.arrow_keys["down"], layout.letter_keys["down"]}
        self.held_keys: set[int] = set()

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating special actions (pause, quit, music...) or None
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type == pygame.KEYDOWN:
            if event.key in self.up_keys or event.key in self.down_keys:
                self.held_keys.add(event.key)
                return None
            return self.COMMAND_KEYS.get(event.key)

        if event.type == pygame.KEYUP:
            self.held_keys.discard(event.key)

        return None

    def intent(self) -> PaddleIntent:
        """Current held-key state; up and down may both be held"""
        return PaddleIntent(
            moving_up=bool(self.held_keys & self.up_keys),
            moving_down=bool(self.held_keys & self.down_keys),
        )
