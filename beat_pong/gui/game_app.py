"""
Main game application with PyGame GUI
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import pygame

from beat_pong.audio.track import MusicTrack
from beat_pong.core.game_engine import GameEngine
from beat_pong.gui.input_manager import InputManager
from beat_pong.gui.pygame_renderer import PygameRenderer
from beat_pong.tempo.estimators import create_estimator
from beat_pong.tempo.monitor import TempoMonitor
from beat_pong.utils.config import game_config
from beat_pong.utils.config import load_config_from_file
from beat_pong.utils.config import tempo_config

logger = logging.getLogger(__name__)

VOLUME_STEP = 0.1


class BeatPongApp:
    """Main application class for Beat Pong with PyGame GUI"""

    def __init__(
        self,
        music_path: str | Path | None = None,
        estimator: str | None = None,
        renderer: PygameRenderer | None = None,
    ):
        self.renderer = renderer or PygameRenderer()
        self.input_manager = InputManager()
        self.tempo_monitor = TempoMonitor(create_estimator(estimator))
        self.game_engine = GameEngine(tempo_monitor=self.tempo_monitor)
        self.track = MusicTrack(music_path) if music_path else None
        self.running = True

    def toggle_music(self) -> None:
        """Starts or pauses the background track and the tempo monitor with it"""
        if self.track is None:
            logger.warning("No music track configured")
            return

        if self.track.toggle():
            self.tempo_monitor.start(self.track.position())
        else:
            self.tempo_monitor.stop()

    def change_volume(self, delta: float) -> None:
        if self.track is not None:
            self.track.set_volume(self.track.volume + delta)

    def handle_command(self, command: str) -> None:
        if command == "quit":
            self.running = False
        elif command == "pause":
            self.game_engine.pause_game()
        elif command == "toggle_music":
            self.toggle_music()
        elif command == "volume_up":
            self.change_volume(VOLUME_STEP)
        elif command == "volume_down":
            self.change_volume(-VOLUME_STEP)
        elif command == "toggle_fps":
            self.renderer.toggle_fps_display()
        elif command == "restart":
            self.game_engine.reset_game()

    def poll_tempo(self) -> None:
        """Tempo polling cycle, scheduled independently of the physics update"""
        if self.track is None or not self.track.playing:
            return
        self.tempo_monitor.poll(self.track.energy(), self.track.position())

    def status(self) -> dict[str, Any]:
        status: dict[str, Any] = {
            "music_on": bool(self.track and self.track.playing),
            "bpm": self.tempo_monitor.bpm,
        }
        if self.track is not None:
            status["volume"] = self.track.volume
        return status

    def render(self) -> None:
        self.renderer.render_frame(self.game_engine.get_game_state(), self.status())
        if self.game_engine.paused:
            self.renderer.draw_pause_screen()
        self.renderer.present()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Beat Pong")
        dt: float | None = None

        try:
            while self.running:
                for event in pygame.event.get():
                    command = self.input_manager.handle_event(event)
                    if command:
                        self.handle_command(command)

                intent = self.input_manager.intent()
                self.game_engine.set_intent(intent.moving_up, intent.moving_down)

                self.poll_tempo()
                self.game_engine.update(dt)
                self.render()

                dt = self.renderer.update()
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        if self.track is not None:
            self.track.stop()
        self.renderer.cleanup()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Beat Pong - Pong whose ball follows the beat")
    parser.add_argument("--music", type=Path, help="Background track (ogg or wav)")
    parser.add_argument(
        "--estimator",
        choices=["energy", "fixed"],
        default=None,
        help="Tempo estimation strategy",
    )
    parser.add_argument("--config", type=str, help="JSON game configuration file")
    parser.add_argument("--fps", type=int, help="Target frames per second")
    parser.add_argument(
        "--frame-rate-independent",
        action="store_true",
        help="Scale movement by elapsed time instead of per frame",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.config and not load_config_from_file(args.config):
        logger.warning("Configuration file not found: %s", args.config)
    if args.fps:
        game_config.FPS = args.fps
    if args.frame_rate_independent:
        game_config.FRAME_RATE_INDEPENDENT = True
    if args.estimator:
        tempo_config.ESTIMATOR = args.estimator

    layout = game_config.get_keyboard_layout()
    print("=== BEAT PONG ===")
    print()
    print("CONTROLS:")
    print(f"  Up / Down: arrow keys or {layout.display_names['up']}/{layout.display_names['down']}")
    print("  M: Music on/off    +/-: Volume")
    print("  P or SPACE: Pause  R: Restart  F2: Show FPS")
    print("  ESC: Quit")
    print()

    app = BeatPongApp(music_path=args.music, estimator=args.estimator)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
