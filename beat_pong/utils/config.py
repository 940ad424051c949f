"""
Beat Pong game configuration with Pydantic validation
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from typing import Literal

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    letter_keys: dict[str, int]
    arrow_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        letter_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        letter_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        letter_keys={"up": pygame.K_w, "down": pygame.K_s},
        arrow_keys=_ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Court dimensions
    COURT_WIDTH: int = Field(default=800, gt=0, description="Court width in pixels")
    COURT_HEIGHT: int = Field(default=600, gt=0, description="Court height in pixels")

    # Ball
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius in pixels")
    BASE_BALL_SPEED: float = Field(default=5.0, gt=0, description="Ball speed in pixels/frame")

    # Paddles
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PLAYER_PADDLE_STEP: float = Field(default=7.0, gt=0, description="Human paddle pixels/frame")
    OPPONENT_PADDLE_STEP: float = Field(default=5.0, gt=0, description="Opponent pixels/frame")
    OPPONENT_DEAD_ZONE: float = Field(default=35.0, ge=0, description="Opponent tracking band")

    # Timing
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    FRAME_RATE_INDEPENDENT: bool = Field(
        default=False, description="Scale per-frame speeds by elapsed time"
    )
    REFERENCE_FPS: float = Field(default=60.0, gt=0, description="Frame rate speeds refer to")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Audio
    MUSIC_VOLUME: float = Field(default=0.5, ge=0, le=1.0, description="Music volume")

    # Display
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(26, 26, 26), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_court_dimensions(self) -> "GameConfig":
        """Validate court is large enough for game elements"""
        min_width = 2 * (self.PADDLE_WIDTH + self.BALL_RADIUS) + 100
        if self.COURT_WIDTH < min_width:
            raise ValueError(f"COURT_WIDTH must be at least {min_width} pixels")

        min_height = self.PADDLE_HEIGHT + 2 * self.BALL_RADIUS
        if self.COURT_HEIGHT < min_height:
            raise ValueError(f"COURT_HEIGHT must be at least {min_height} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def frame_step(self, dt: float | None) -> float:
        """Multiplier applied to every per-frame speed for a frame lasting ``dt`` seconds"""
        if not self.FRAME_RATE_INDEPENDENT or dt is None:
            return 1.0
        return dt * self.REFERENCE_FPS

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "beat_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "beat_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


class TempoConfig(BaseModel):
    """Configuration of tempo estimation and of the tempo-to-speed mapping"""

    model_config = {"validate_assignment": True}

    # Speed mapping
    DEFAULT_BPM: float = Field(default=120.0, gt=0, description="BPM used without estimate")
    MIN_BPM: float = Field(default=40.0, gt=0, description="Lowest accepted tempo")
    MAX_BPM: float = Field(default=200.0, gt=0, description="Highest accepted tempo")
    REFERENCE_BPM: float = Field(default=120.0, gt=0, description="Tempo of base speed")
    SPEED_EXPONENT: float = Field(default=0.7, gt=0, description="Tempo sensitivity")
    MIN_SPEED_MULTIPLIER: float = Field(default=0.5, gt=0, description="Lower speed clamp")
    MAX_SPEED_MULTIPLIER: float = Field(default=2.0, gt=0, description="Upper speed clamp")

    # Estimation
    ESTIMATOR: Literal["energy", "fixed"] = Field(default="energy", description="Strategy")
    FIXED_BPM: float = Field(default=69.0, gt=0, description="Known tempo of the track")
    ENERGY_HISTORY_SIZE: int = Field(default=60, gt=1, description="Samples in energy window")
    PEAK_THRESHOLD_RATIO: float = Field(default=1.3, gt=0, description="Beat threshold/median")
    MIN_BEAT_INTERVAL: float = Field(default=0.2, ge=0, description="Seconds between beats")
    SAMPLE_INTERVAL: float = Field(default=1 / 60, gt=0, description="Seconds per sample")
    BEAT_MIN_BPM: float = Field(default=60.0, gt=0, description="Lowest instantaneous tempo")
    BEAT_MAX_BPM: float = Field(default=200.0, gt=0, description="Highest instantaneous tempo")
    BPM_SMOOTHING: float = Field(default=0.2, gt=0, le=1.0, description="Weight of new beats")

    # Spectrum analysis
    FFT_SIZE: int = Field(default=2048, gt=0, description="Samples per analysis window")
    ANALYSER_SMOOTHING: float = Field(default=0.9, ge=0, lt=1.0, description="Time smoothing")
    BASS_BINS: tuple[int, int] = Field(default=(1, 6), description="Bass bins [start, stop)")
    MIN_DECIBELS: float = Field(default=-100.0, description="Floor of byte spectrum")
    MAX_DECIBELS: float = Field(default=-30.0, description="Ceiling of byte spectrum")

    @field_validator("FFT_SIZE")
    @classmethod
    def validate_fft_size(cls, v: int) -> int:
        """FFT windows must be powers of two"""
        if v & (v - 1):
            raise ValueError(f"FFT_SIZE ({v}) must be a power of two")
        return v

    @field_validator("BASS_BINS")
    @classmethod
    def validate_bass_bins(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Validate that the bass band is a non-empty bin range"""
        start, stop = v
        if start < 0 or stop <= start:
            raise ValueError(f"BASS_BINS {v} must be a non-empty range of bins")
        return v

    @model_validator(mode="after")
    def validate_ranges(self) -> "TempoConfig":
        """Validate that every lower bound is below its upper bound"""
        if self.MIN_SPEED_MULTIPLIER > self.MAX_SPEED_MULTIPLIER:
            raise ValueError(
                f"MIN_SPEED_MULTIPLIER ({self.MIN_SPEED_MULTIPLIER}) must not exceed "
                f"MAX_SPEED_MULTIPLIER ({self.MAX_SPEED_MULTIPLIER})"
            )
        if self.MIN_BPM > self.MAX_BPM:
            raise ValueError(f"MIN_BPM ({self.MIN_BPM}) must not exceed MAX_BPM ({self.MAX_BPM})")
        if not self.MIN_BPM <= self.DEFAULT_BPM <= self.MAX_BPM:
            raise ValueError(f"DEFAULT_BPM ({self.DEFAULT_BPM}) must lie in [MIN_BPM, MAX_BPM]")
        if self.BEAT_MIN_BPM > self.BEAT_MAX_BPM:
            raise ValueError("BEAT_MIN_BPM must not exceed BEAT_MAX_BPM")
        if self.BASS_BINS[1] > self.FFT_SIZE // 2 + 1:
            raise ValueError(f"BASS_BINS {self.BASS_BINS} exceed the spectrum of FFT_SIZE")
        return self


# Global configuration instances with validation
game_config = GameConfig()
tempo_config = TempoConfig()


def load_config_from_file(filepath: str = "beat_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False

    for field_name in GameConfig.model_fields.keys():
        setattr(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = _change_values(game_config, **kwargs)
    try:
        yield
    finally:
        _change_values(game_config, **old_values)


@contextmanager
def tempo_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify tempo config (with validation)"""
    old_values = _change_values(tempo_config, **kwargs)
    try:
        yield
    finally:
        _change_values(tempo_config, **old_values)
