"""
Utility module of Beat Pong game
"""

from beat_pong.utils.config import GameConfig
from beat_pong.utils.config import TempoConfig
from beat_pong.utils.config import game_config
from beat_pong.utils.config import tempo_config

__all__ = ["game_config", "tempo_config", "GameConfig", "TempoConfig"]
