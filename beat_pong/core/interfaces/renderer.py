"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Any
from typing import Protocol

from beat_pong.core.entities import GameSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    Renderers only ever receive snapshots and never write back into the game.
    """

    def render_frame(self, snapshot: GameSnapshot, status: dict[str, Any] | None = None) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: Read-only game state
            status: Optional extra data to display (music state, BPM, volume)
        """
        ...

    def present(self) -> None:
        """Show the rendered frame"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
