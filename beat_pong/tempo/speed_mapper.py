"""
Tempo-to-speed mapping: rescales ball speed from a beats-per-minute estimate
"""

import logging
import math

from beat_pong.core.entities import Ball
from beat_pong.utils.config import tempo_config

logger = logging.getLogger(__name__)


class TempoSpeedMapper:
    """
    Converts a BPM estimate into a ball speed.

    ``multiplier = clamp((bpm / reference_bpm) ** exponent, lower, upper)``;
    with the default exponent of 0.7 doubling the tempo does not double the
    speed. Invalid tempos are replaced by the default BPM without error.
    """

    def __init__(
        self,
        base_speed: float,
        lower: float | None = None,
        upper: float | None = None,
        exponent: float | None = None,
    ):
        self.base_speed = base_speed
        self.lower = lower if lower is not None else tempo_config.MIN_SPEED_MULTIPLIER
        self.upper = upper if upper is not None else tempo_config.MAX_SPEED_MULTIPLIER
        self.exponent = exponent if exponent is not None else tempo_config.SPEED_EXPONENT
        if self.lower > self.upper:
            raise ValueError(f"Lower bound ({self.lower}) must not exceed upper ({self.upper})")

    @staticmethod
    def sanitize_bpm(bpm: float | None) -> float:
        """Returns ``bpm`` if usable, otherwise the default tempo"""
        if bpm is None or not math.isfinite(bpm):
            return tempo_config.DEFAULT_BPM
        if not tempo_config.MIN_BPM <= bpm <= tempo_config.MAX_BPM:
            return tempo_config.DEFAULT_BPM
        return float(bpm)

    def multiplier(self, bpm: float | None) -> float:
        normalized = self.sanitize_bpm(bpm) / tempo_config.REFERENCE_BPM
        return max(self.lower, min(self.upper, normalized**self.exponent))

    def speed_for(self, bpm: float | None) -> float:
        return self.base_speed * self.multiplier(bpm)

    def apply(self, ball: Ball, bpm: float | None) -> float:
        """Sets the ball speed for ``bpm`` without touching its direction"""
        speed = self.speed_for(bpm)
        ball.set_speed(speed)
        logger.debug(
            "BPM %s -> ball speed %.2f (%.1f%% of base)",
            bpm,
            speed,
            speed / self.base_speed * 100,
        )
        return speed
