"""
Background music playback
"""

from beat_pong.audio.track import MusicTrack

__all__ = ["MusicTrack"]
