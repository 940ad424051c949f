"""
Core module of Beat Pong game
"""

from beat_pong.core.entities import Ball
from beat_pong.core.entities import Court
from beat_pong.core.entities import GameSnapshot
from beat_pong.core.entities import GameState
from beat_pong.core.entities import Paddle
from beat_pong.core.entities import PaddleIntent

__all__ = [
    "Ball",
    "Court",
    "Paddle",
    "PaddleIntent",
    "GameState",
    "GameSnapshot",
]
