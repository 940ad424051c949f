"""
Tempo estimation and tempo-driven ball speed
"""

from beat_pong.tempo.estimators import EnergyThresholdEstimator
from beat_pong.tempo.estimators import FixedTempoEstimator
from beat_pong.tempo.estimators import TempoEstimator
from beat_pong.tempo.estimators import create_estimator
from beat_pong.tempo.monitor import TempoMonitor
from beat_pong.tempo.speed_mapper import TempoSpeedMapper

__all__ = [
    "TempoEstimator",
    "FixedTempoEstimator",
    "EnergyThresholdEstimator",
    "create_estimator",
    "TempoMonitor",
    "TempoSpeedMapper",
]
