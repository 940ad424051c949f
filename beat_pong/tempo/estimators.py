"""
Tempo estimators: turn a stream of bass-energy samples into BPM estimates
"""

import logging
import math
from abc import ABC
from abc import abstractmethod
from collections import deque

import numpy as np

from beat_pong.utils.config import tempo_config

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class TempoEstimator(ABC):
    """Base interface for all tempo estimators"""

    name = "estimator"

    @abstractmethod
    def consume(self, energy: float, now: float) -> float | None:
        """
        Feeds one energy sample taken at time ``now`` (seconds).

        Returns:
            The updated BPM estimate, or None when the estimate did not change
        """

    def reset(self, now: float = 0.0) -> None:
        """Called when playback (re)starts at time ``now``"""


class FixedTempoEstimator(TempoEstimator):
    """Reports a known tempo once after each reset"""

    name = "fixed"

    def __init__(self, bpm: float | None = None):
        self.bpm = bpm if bpm is not None else tempo_config.FIXED_BPM
        self._reported = False

    def consume(self, energy: float, now: float) -> float | None:
        if self._reported:
            return None
        self._reported = True
        return self.bpm

    def reset(self, now: float = 0.0) -> None:
        self._reported = False


class EnergyThresholdEstimator(TempoEstimator):
    """
    Counts beats as bass-energy peaks over a sliding window.

    A beat is a sample louder than ``PEAK_THRESHOLD_RATIO`` times the window
    median, louder than the previous sample, and more than
    ``MIN_BEAT_INTERVAL`` seconds of samples after the previous beat. The
    interval between beats gives an instantaneous tempo which, when within
    the accepted range, is blended into the running estimate.
    """

    name = "energy"

    def __init__(self, initial_bpm: float | None = None):
        self.initial_bpm = initial_bpm if initial_bpm is not None else tempo_config.DEFAULT_BPM
        self.history: deque[float] = deque(maxlen=tempo_config.ENERGY_HISTORY_SIZE)
        self.bpm = float(self.initial_bpm)
        self.threshold: float | None = None
        self.last_energy = 0.0
        self.last_beat_time = 0.0
        self.time_since_beat = 0.0
        self.beat_count = 0

    def reset(self, now: float = 0.0) -> None:
        # The energy window and the running estimate carry over between plays
        self.beat_count = 0
        self.last_beat_time = now

    def _update_threshold(self) -> None:
        # The threshold only exists once the window has been filled
        if len(self.history) < self.history.maxlen:  # type: ignore[operator]
            return
        ordered = np.sort(np.fromiter(self.history, dtype=float))
        median = float(ordered[len(ordered) // 2])
        self.threshold = median * tempo_config.PEAK_THRESHOLD_RATIO

    def consume(self, energy: float, now: float) -> float | None:
        self.history.append(energy)
        self._update_threshold()

        updated = None
        if (
            self.threshold is not None
            and energy > self.threshold
            and energy > self.last_energy
            and self.time_since_beat > tempo_config.MIN_BEAT_INTERVAL
        ):
            updated = self._register_beat(energy, now)

        self.last_energy = energy
        self.time_since_beat += tempo_config.SAMPLE_INTERVAL
        return updated

    def _register_beat(self, energy: float, now: float) -> float | None:
        self.beat_count += 1
        self.time_since_beat = 0.0

        updated = None
        interval = now - self.last_beat_time
        if interval > 0:
            instant_bpm = round_half_up(60 / interval)
            if tempo_config.BEAT_MIN_BPM <= instant_bpm <= tempo_config.BEAT_MAX_BPM:
                weight = tempo_config.BPM_SMOOTHING
                self.bpm = float(round_half_up(self.bpm * (1 - weight) + instant_bpm * weight))
                updated = self.bpm
                logger.debug(
                    "Beat detected: instant %d BPM, estimate %d BPM, energy %.0f, threshold %.0f",
                    instant_bpm,
                    self.bpm,
                    energy,
                    self.threshold,
                )
        self.last_beat_time = now
        return updated


def create_estimator(kind: str | None = None) -> TempoEstimator:
    """Factory function to create a tempo estimator"""
    kind = kind or tempo_config.ESTIMATOR
    estimators: dict[str, type[TempoEstimator]] = {
        FixedTempoEstimator.name: FixedTempoEstimator,
        EnergyThresholdEstimator.name: EnergyThresholdEstimator,
    }
    if kind not in estimators:
        raise ValueError(f"Unknown tempo estimator: {kind}. Available: {list(estimators.keys())}")
    return estimators[kind]()
