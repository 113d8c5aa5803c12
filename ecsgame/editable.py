"""Bouncing shapes with a centred caption whose properties can be edited live."""

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence, Tuple

import pygame

from ecsgame.components import Color
from ecsgame.vec2 import Vec2


def _rgb_color(rgb: Sequence[float]) -> Color:
    """Colour from three channels in the range 0 to 1."""
    r, g, b = rgb
    return Color(int(r * 255), int(g * 255), int(b * 255))


def _bounce_step(pos: Vec2, velocity: Vec2, extent: Vec2, screen: Vec2) -> None:
    """Move ``pos`` by ``velocity``, reversing a direction at the screen edges.

    Each axis and direction is checked in turn and every check that applies
    moves the shape once more, so diagonal motion covers two steps per call.
    """
    if velocity.x > 0:
        if pos.x + extent.x > screen.x:
            velocity.x *= -1
        pos += velocity
    if velocity.x < 0:
        if pos.x < 0:
            velocity.x *= -1
        pos += velocity
    if velocity.y > 0:
        if pos.y + extent.y > screen.y:
            velocity.y *= -1
        pos += velocity
    if velocity.y < 0:
        if pos.y < 0:
            velocity.y *= -1
        pos += velocity


class _Editable:
    """State shared by the editable shapes: motion, colour and caption."""

    def __init__(
        self,
        speed_x: float,
        speed_y: float,
        x: float,
        y: float,
        color: Sequence[float],
        text: str,
        font: Optional[Any],
        text_size: int,
    ) -> None:
        self.velocity = Vec2(speed_x, speed_y)
        self.position = Vec2(x, y)
        self.color_rgb: List[float] = [float(c) for c in color]
        if len(self.color_rgb) != 3:
            raise ValueError("color needs exactly three channels")
        self.fill_color = _rgb_color(self.color_rgb)
        self.text = text
        self.font = font
        self.text_size = int(text_size)
        self.draw_text = True
        self.text_position = Vec2(x, y)

    @property
    def speed_x(self) -> float:
        return self.velocity.x

    @speed_x.setter
    def speed_x(self, value: float) -> None:
        self.velocity.x = float(value)

    @property
    def speed_y(self) -> float:
        return self.velocity.y

    @speed_y.setter
    def speed_y(self, value: float) -> None:
        self.velocity.y = float(value)

    @property
    def text_width(self) -> float:
        """Rendered width of the caption; zero without a font."""
        if self.font is None or not self.text:
            return 0.0
        return float(self.font.size(self.text)[0])

    def _place_text(self, extent: Vec2) -> None:
        self.text_position = Vec2(
            self.position.x + extent.x / 2.0 - self.text_width / 2.0,
            self.position.y + extent.y / 2.0 - self.text_size / 2.0,
        )

    def _draw_text(self, surface: Any) -> None:
        if self.draw_text and self.font is not None and self.text:
            label = self.font.render(self.text, True, (255, 255, 255))
            surface.blit(label, (self.text_position.x, self.text_position.y))


class EditableCircle(_Editable):
    """A circle bouncing around the screen with a caption at its centre."""

    def __init__(
        self,
        radius: float = 50.0,
        segments: int = 32,
        speed_x: float = 3.0,
        speed_y: float = 0.5,
        x: float = 0.0,
        y: float = 0.0,
        color: Sequence[float] = (0.0, 0.0, 0.0),
        text: str = "",
        font: Optional[Any] = None,
        text_size: int = 0,
    ) -> None:
        super().__init__(speed_x, speed_y, x, y, color, text, font, text_size)
        self.radius = float(radius)
        self.segments = int(segments)
        self.draw_circle = True
        self.point_count = self.segments
        self.shape_radius = self.radius

    def move(self, screen_width: int, screen_height: int) -> None:
        """Apply edited properties and advance one step, bouncing at the edges."""
        self.fill_color = _rgb_color(self.color_rgb)
        self.point_count = int(self.segments)
        self.shape_radius = self.radius
        diameter = Vec2(self.radius * 2, self.radius * 2)
        _bounce_step(self.position, self.velocity, diameter, Vec2(screen_width, screen_height))
        self._place_text(diameter)

    def points(self) -> List[Tuple[float, float]]:
        """Polygon vertices, starting at the top of the circle."""
        count = max(3, self.point_count)
        r = self.shape_radius
        cx, cy = self.position.x + r, self.position.y + r
        return [
            (
                cx + r * math.cos(2 * math.pi * i / count - math.pi / 2),
                cy + r * math.sin(2 * math.pi * i / count - math.pi / 2),
            )
            for i in range(count)
        ]

    def draw(self, surface: Any) -> None:
        """Draw the circle and its caption, each only when enabled."""
        if self.draw_circle:
            pygame.draw.polygon(surface, self.fill_color.as_tuple(), self.points())
        self._draw_text(surface)


class EditableRect(_Editable):
    """A rectangle bouncing around the screen with a caption at its centre."""

    def __init__(
        self,
        width: float = 0.0,
        height: float = 0.0,
        speed_x: float = 0.0,
        speed_y: float = 0.0,
        x: float = 0.0,
        y: float = 0.0,
        color: Sequence[float] = (0.0, 0.0, 0.0),
        text: str = "",
        font: Optional[Any] = None,
        text_size: int = 0,
    ) -> None:
        super().__init__(speed_x, speed_y, x, y, color, text, font, text_size)
        self.width = float(width)
        self.height = float(height)
        self.draw_rect = True
        self.size = Vec2(self.width, self.height)

    def move(self, screen_width: int, screen_height: int) -> None:
        """Apply edited properties and advance one step, bouncing at the edges."""
        self.fill_color = _rgb_color(self.color_rgb)
        self.size = Vec2(self.width, self.height)
        _bounce_step(self.position, self.velocity, self.size, Vec2(screen_width, screen_height))
        self._place_text(self.size)

    def draw(self, surface: Any) -> None:
        """Draw the rectangle and its caption, each only when enabled."""
        if self.draw_rect:
            rect = pygame.Rect(
                round(self.position.x),
                round(self.position.y),
                round(self.size.x),
                round(self.size.y),
            )
            pygame.draw.rect(surface, self.fill_color.as_tuple(), rect)
        self._draw_text(surface)