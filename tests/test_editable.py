import pygame
import pytest

from ecsgame.components import Color
from ecsgame.editable import EditableCircle, EditableRect
from ecsgame.vec2 import Vec2


class FakeFont:
    def __init__(self, char_width=10):
        self.char_width = char_width

    def size(self, text):
        return (self.char_width * len(text), 12)

    def render(self, text, antialias, color):
        surface = pygame.Surface(self.size(text))
        surface.fill(color)
        return surface


def test_circle_defaults():
    circle = EditableCircle()
    assert circle.radius == 50.0
    assert circle.segments == 32
    assert circle.speed_x == 3.0
    assert circle.speed_y == 0.5
    assert circle.draw_circle and circle.draw_text


def test_circle_moves_once_along_x_only():
    circle = EditableCircle(radius=10, speed_x=3, speed_y=0, x=0, y=0)
    circle.move(800, 600)
    assert circle.position == Vec2(3, 0)
    assert circle.speed_x == 3


def test_circle_diagonal_motion_takes_two_steps():
    circle = EditableCircle(radius=5, speed_x=2, speed_y=1, x=10, y=10)
    circle.move(800, 600)
    assert circle.position == Vec2(10 + 2 * 2, 10 + 2 * 1)


def test_circle_bounces_off_right_edge():
    circle = EditableCircle(radius=5, speed_x=3, speed_y=0, x=95, y=10)
    circle.move(100, 100)
    assert circle.speed_x == -3
    assert circle.position.x < 95


def test_circle_bounces_off_left_edge():
    circle = EditableCircle(radius=5, speed_x=-3, speed_y=0, x=-1, y=10)
    circle.move(100, 100)
    assert circle.speed_x == 3
    assert circle.position.x > -1


def test_circle_bounces_off_bottom_edge():
    circle = EditableCircle(radius=5, speed_x=0, speed_y=2, x=10, y=95)
    circle.move(100, 100)
    assert circle.speed_y == -2
    assert circle.position.y < 95


def test_circle_move_applies_colour_and_shape_edits():
    circle = EditableCircle(radius=10, speed_x=0, speed_y=0)
    circle.color_rgb = [1.0, 0.0, 1.0]
    circle.segments = 6
    circle.radius = 20
    circle.move(800, 600)
    assert circle.fill_color == Color(255, 0, 255)
    assert circle.point_count == 6
    assert circle.shape_radius == 20
    assert len(circle.points()) == 6


def test_circle_text_is_centred():
    font = FakeFont(char_width=10)
    circle = EditableCircle(
        radius=20, speed_x=0, speed_y=0, x=100, y=100, text="ab", font=font, text_size=10
    )
    circle.move(800, 600)
    width = font.size("ab")[0]
    assert circle.text_position == Vec2(100 + 20 - width / 2, 100 + 20 - 10 / 2)


def test_circle_color_needs_three_channels():
    with pytest.raises(ValueError):
        EditableCircle(color=(0.1, 0.2))


def test_circle_draw_fills_centre():
    surface = pygame.Surface((100, 100))
    circle = EditableCircle(radius=20, speed_x=0, speed_y=0, x=30, y=30, color=(1.0, 0.0, 0.0))
    circle.move(100, 100)
    circle.draw(surface)
    assert surface.get_at((50, 50))[:3] == (255, 0, 0)


def test_circle_draw_disabled_leaves_surface():
    surface = pygame.Surface((100, 100))
    circle = EditableCircle(radius=20, speed_x=0, speed_y=0, x=30, y=30, color=(1.0, 0.0, 0.0))
    circle.draw_circle = False
    circle.move(100, 100)
    circle.draw(surface)
    assert surface.get_at((50, 50))[:3] == (0, 0, 0)


def test_rect_moves_and_bounces():
    rect = EditableRect(width=20, height=10, speed_x=4, speed_y=0, x=85, y=0)
    rect.move(100, 100)
    assert rect.speed_x == -4
    assert rect.position.x < 85


def test_rect_size_follows_edits():
    rect = EditableRect(width=20, height=10)
    rect.width = 30
    rect.height = 40
    rect.move(100, 100)
    assert rect.size == Vec2(30, 40)


def test_rect_text_is_centred():
    font = FakeFont(char_width=4)
    rect = EditableRect(width=40, height=20, x=10, y=10, text="abc", font=font, text_size=8)
    rect.move(200, 200)
    width = font.size("abc")[0]
    assert rect.text_position == Vec2(10 + 40 / 2 - width / 2, 10 + 20 / 2 - 8 / 2)


def test_rect_draw_fills_area():
    surface = pygame.Surface((100, 100))
    rect = EditableRect(width=20, height=20, x=10, y=10, color=(0.0, 1.0, 0.0))
    rect.move(100, 100)
    rect.draw(surface)
    assert surface.get_at((20, 20))[:3] == (0, 255, 0)
    assert surface.get_at((50, 50))[:3] == (0, 0, 0)


def test_rect_draw_text_with_font():
    surface = pygame.Surface((200, 200))
    rect = EditableRect(width=100, height=100, x=0, y=0, text="hi", font=FakeFont(), text_size=12)
    rect.draw_rect = False
    rect.move(200, 200)
    rect.draw(surface)
    pos = rect.text_position
    assert surface.get_at((int(pos.x) + 1, int(pos.y) + 1))[:3] == (255, 255, 255)