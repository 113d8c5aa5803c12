"""Components that can be attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ecsgame.animation import Animation
from ecsgame.vec2 import Vec2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def with_alpha(self, alpha: int) -> Color:
        """Return this colour with a different alpha channel."""
        return replace(self, a=alpha)

    def as_tuple(self) -> tuple:
        return (self.r, self.g, self.b, self.a)


@dataclass
class CTransform:
    """Position, motion and orientation of an entity."""

    pos: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    angle: float = 0.0
    prev_pos: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))


@dataclass
class CShape:
    """A regular polygon approximating a circle, centred on its position."""

    radius: float = 0.0
    point_count: int = 30
    fill_color: Color = field(default_factory=Color)
    outline_color: Color = field(default_factory=Color)
    outline_thickness: float = 0.0
    position: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0

    def __post_init__(self) -> None:
        if self.point_count < 3:
            raise ValueError("a shape needs at least three points")

    @property
    def origin(self) -> Vec2:
        """Local origin: the centre of the circle's bounding square."""
        return Vec2(self.radius, self.radius)


@dataclass
class CBBox:
    """Axis-aligned bounding box with its precomputed half size."""

    size: Vec2 = field(default_factory=Vec2)
    half_size: Vec2 = field(init=False)

    def __post_init__(self) -> None:
        self.half_size = Vec2(self.size.x / 2, self.size.y / 2)


@dataclass
class CCollision:
    radius: float = 0.0


@dataclass
class CGravity:
    gravity: float = 0.0


@dataclass
class CInput:
    """Current directional and action input state."""

    up: bool = False
    left: bool = False
    right: bool = False
    down: bool = False
    shoot: bool = False
    can_shoot: bool = True
    can_jump: bool = True


@dataclass
class CLifespan:
    """Number of frames an entity lives and the frame it was created on."""

    lifespan: int = 0
    frame_created: int = 0


@dataclass
class CState:
    state: str = "jumping"


@dataclass
class CAnimation:
    animation: Animation = field(default_factory=Animation)
    repeat: bool = False