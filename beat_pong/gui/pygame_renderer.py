"""
PyGame renderer for Beat Pong game
"""

from typing import Any

import pygame

from beat_pong.core.entities import GameSnapshot
from beat_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer for Beat Pong"""

    def __init__(self, width: int | None = None, height: int | None = None):
        """Initialize the PyGame renderer"""
        self.width = width or game_config.COURT_WIDTH
        self.height = height or game_config.COURT_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Beat Pong")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.ball_color: tuple[int, int, int] = game_config.BALL_COLOR
        self.paddle_color: tuple[int, int, int] = game_config.PADDLE_COLOR
        self.text_color: tuple[int, int, int] = game_config.TEXT_COLOR
        self.dim_text_color: tuple[int, int, int] = (170, 170, 170)

        self.font_score = pygame.font.Font(None, 44)
        self.font_small = pygame.font.Font(None, 28)

        self.show_fps = False

    def clear_screen(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_ball(self, snapshot: GameSnapshot) -> None:
        x, y = snapshot.ball_position
        radius = int(snapshot.ball_radius)
        pygame.draw.circle(self.screen, self.ball_color, (int(x), int(y)), radius)

    def draw_paddle(self, rect: tuple[float, float, float, float]) -> None:
        x, y, width, height = rect
        paddle_rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(self.screen, self.paddle_color, paddle_rect)

    def draw_score(self, score: tuple[int, int]) -> None:
        """Draw each score above its own half of the court"""
        for value, x in ((score[0], self.width // 4), (score[1], 3 * self.width // 4)):
            surface = self.font_score.render(str(value), True, self.text_color)
            self.screen.blit(surface, (x, 30))

    def draw_status(self, status: dict[str, Any]) -> None:
        """Draw the music status line at the bottom of the screen"""
        music = "Music On" if status.get("music_on") else "Music Off"
        bpm = status.get("bpm")
        bpm_text = f"BPM: {bpm:.0f}" if bpm is not None else "BPM: --"
        parts = [music, bpm_text]
        if "volume" in status:
            parts.append(f"Volume: {status['volume'] * 100:.0f}%")
        if self.show_fps:
            parts.append(f"FPS: {self.clock.get_fps():.0f}")

        surface = self.font_small.render("   ".join(parts), True, self.dim_text_color)
        rect = surface.get_rect()
        rect.centerx = self.width // 2
        rect.bottom = self.height - 10
        self.screen.blit(surface, rect)

    def draw_pause_screen(self) -> None:
        overlay = pygame.Surface((self.width, self.height))
        overlay.set_alpha(150)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        surface = self.font_score.render("PAUSED", True, self.text_color)
        rect = surface.get_rect()
        rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(surface, rect)

    def render_frame(self, snapshot: GameSnapshot, status: dict[str, Any] | None = None) -> None:
        """Render the complete game state"""
        self.clear_screen()
        self.draw_ball(snapshot)
        self.draw_paddle(snapshot.player_rect)
        self.draw_paddle(snapshot.opponent_rect)
        self.draw_score(snapshot.score)
        if status is not None:
            self.draw_status(status)

    def present(self) -> None:
        """Present the rendered frame"""
        pygame.display.flip()

    def update(self, fps: int | None = None) -> float:
        """Maintain frame rate; returns the elapsed frame time in seconds"""
        fps = fps or game_config.FPS
        return self.clock.tick(fps) / 1000.0

    def toggle_fps_display(self) -> None:
        self.show_fps = not self.show_fps

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        pygame.quit()
