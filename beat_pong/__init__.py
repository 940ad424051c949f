"""
Beat Pong: two-paddle ball game whose ball speed follows the music tempo
"""

__version__ = "0.1.0"
