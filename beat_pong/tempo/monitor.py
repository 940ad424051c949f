"""
Tempo monitor: the polling task that publishes BPM estimates to the game loop
"""

import logging

from beat_pong.tempo.estimators import TempoEstimator
from beat_pong.tempo.estimators import create_estimator

logger = logging.getLogger(__name__)


class TempoMonitor:
    """
    Holds the latest BPM estimate, written by ``poll`` and read by the game.

    ``poll`` and the game frame run on the same single-threaded loop and never
    interleave, so the estimate is a plain last-write-wins attribute. Driving
    them from separate threads would require guarding ``bpm`` with a lock.
    """

    def __init__(self, estimator: TempoEstimator | None = None):
        self.estimator = estimator or create_estimator()
        self.playing = False
        self.bpm: float | None = None
        self._pending = False

    def start(self, now: float) -> None:
        """Playback started: estimation resumes from ``now``"""
        self.playing = True
        self.estimator.reset(now)
        logger.info("Tempo monitor started (%s estimator)", self.estimator.name)

    def stop(self) -> None:
        """Playback stopped: no estimate is displayed until the next start"""
        self.playing = False
        self.bpm = None
        logger.info("Tempo monitor stopped")

    def poll(self, energy: float, now: float) -> float | None:
        """One polling cycle; returns the new BPM when the estimate changed"""
        if not self.playing:
            return None

        bpm = self.estimator.consume(energy, now)
        if bpm is not None:
            self.bpm = bpm
            self._pending = True
            logger.debug("Tempo estimate updated: %.0f BPM", bpm)
        return bpm

    def take_update(self) -> float | None:
        """Returns the estimate published since the last call, if any"""
        if not self._pending:
            return None
        self._pending = False
        return self.bpm
