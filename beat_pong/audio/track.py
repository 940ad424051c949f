"""
Background music track played through the pygame mixer
"""

import logging
import time
from pathlib import Path

import numpy as np
import pygame

from beat_pong.tempo.spectrum import SpectrumAnalyzer
from beat_pong.utils.config import game_config

logger = logging.getLogger(__name__)


def to_unit_range(raw: np.ndarray, sample_format: int) -> np.ndarray:
    """
    Scales mixer samples to [-1, 1].

    ``sample_format`` is the size reported by ``pygame.mixer.get_init()``: the
    bit depth, negative for signed integers, 32 for floating point.
    """
    bits = abs(sample_format)
    if bits == 32:
        return raw.astype(np.float32)
    half_range = float(2 ** (bits - 1))
    if sample_format > 0:
        return (raw.astype(np.float32) - half_range) / half_range
    return raw.astype(np.float32) / half_range


class MusicTrack:
    """
    Looping background track with play/pause and a live spectrum.

    Any failure to load or play leaves the track stopped; the game keeps
    running without music.
    """

    def __init__(self, path: str | Path, analyzer: SpectrumAnalyzer | None = None):
        self.path = Path(path)
        self.analyzer = analyzer or SpectrumAnalyzer()
        self.volume = game_config.MUSIC_VOLUME
        self.playing = False

        self.sound: pygame.mixer.Sound | None = None
        self.channel: pygame.mixer.Channel | None = None
        self.samples = np.zeros(0)
        self.sample_rate = 44100

        self._started_at = 0.0
        self._paused_at: float | None = None

    @property
    def loaded(self) -> bool:
        return self.sound is not None

    def load(self) -> bool:
        """Decodes the track; returns False when it cannot be used"""
        if self.loaded:
            return True
        if not self.path.exists():
            logger.warning("Missing music file: %s", self.path)
            return False

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self.sound = pygame.mixer.Sound(str(self.path))
            raw = pygame.sndarray.array(self.sound)
        except pygame.error as e:
            logger.error("Error loading music %s: %s", self.path, e)
            self.sound = None
            return False

        self.sample_rate, sample_format, _ = pygame.mixer.get_init()
        samples = to_unit_range(raw, sample_format)
        # Mix down to mono
        self.samples = samples.mean(axis=1) if samples.ndim > 1 else samples
        logger.info(
            "Loaded %s (%.1f s at %d Hz)",
            self.path.name,
            len(self.samples) / self.sample_rate,
            self.sample_rate,
        )
        return True

    def play(self) -> bool:
        """Starts or resumes playback; returns the resulting playing state"""
        if self.playing:
            return True
        if not self.load():
            return False

        try:
            if self.channel is not None and self._paused_at is not None:
                self.channel.unpause()
                self._started_at += time.monotonic() - self._paused_at
            else:
                self.channel = self.sound.play(loops=-1)  # type: ignore[union-attr]
                if self.channel is None:
                    raise pygame.error("no free mixer channel")
                self._started_at = time.monotonic()
            self.channel.set_volume(self.volume)
        except pygame.error as e:
            logger.error("Error playing music: %s", e)
            self.playing = False
            return False

        self._paused_at = None
        self.playing = True
        logger.info("Music started")
        return True

    def pause(self) -> None:
        if not self.playing or self.channel is None:
            return
        self.channel.pause()
        self._paused_at = time.monotonic()
        self.playing = False
        self.analyzer.reset()
        logger.info("Music paused")

    def toggle(self) -> bool:
        """Flips between playing and paused; returns the new playing state"""
        if self.playing:
            self.pause()
            return False
        return self.play()

    def set_volume(self, volume: float) -> None:
        self.volume = max(0.0, min(1.0, volume))
        if self.channel is not None:
            self.channel.set_volume(self.volume)

    def position(self) -> float:
        """Playback position in seconds, wrapped to the track length"""
        if not self.loaded or not len(self.samples):
            return 0.0
        reference = self._paused_at if self._paused_at is not None else time.monotonic()
        elapsed = reference - self._started_at
        return elapsed % (len(self.samples) / self.sample_rate)

    def current_window(self) -> np.ndarray:
        """Mono samples of the analysis window ending at the playback position"""
        size = self.analyzer.fft_size
        end = int(self.position() * self.sample_rate)
        start = max(0, end - size)
        return self.samples[start:end]

    def energy(self) -> float:
        """Bass energy of what is currently playing"""
        return self.analyzer.energy(self.current_window())

    def stop(self) -> None:
        if self.channel is not None:
            self.channel.stop()
        self.channel = None
        self._paused_at = None
        self.playing = False
