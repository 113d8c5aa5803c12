"""Sprite-sheet animation state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from ecsgame.vec2 import Vec2


@dataclass
class Animation:
    """A named animation over a horizontal strip of equally sized frames.

    ``texture`` is any object with a ``get_size()`` method returning
    ``(width, height)``, such as a pygame surface.
    """

    name: str = "none"
    texture: Optional[Any] = None
    frame_count: int = 1
    speed: int = 0
    current_frame: int = field(default=0, init=False)
    size: Vec2 = field(default_factory=lambda: Vec2(128, 128), init=False)

    def __post_init__(self) -> None:
        if self.frame_count <= 0:
            raise ValueError("frame_count must be positive")
        if self.texture is not None:
            width, height = self.texture.get_size()
            self.size = Vec2(width / self.frame_count, height)

    @property
    def origin(self) -> Vec2:
        """Centre of a single frame, used as the sprite origin."""
        return Vec2(self.size.x / 2.0, self.size.y / 2.0)

    @property
    def frame_rect(self) -> Tuple[int, int, int, int]:
        """Rectangle ``(left, top, width, height)`` of the current frame."""
        frame = self.current_frame % self.frame_count
        return (
            int(frame * self.size.x),
            0,
            int(self.size.x),
            int(self.size.y),
        )

    def update(self) -> None:
        """Advance to the next frame."""
        self.current_frame += 1

    def has_ended(self) -> bool:
        """Animations loop and never end."""
        return False