"""
Interfaces between the core and its collaborators
"""

from beat_pong.core.interfaces.controller import PaddleController
from beat_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["PaddleController", "RendererProtocol"]
