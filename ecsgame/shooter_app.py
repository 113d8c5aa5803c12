"""Window, input and drawing for the shooter, built on pygame."""

from __future__ import annotations

import argparse
import math
from typing import List, Optional, Sequence, Tuple

import pygame

from ecsgame.components import Color, CShape
from ecsgame.shooter import MAX_SPAWN_NUMBER, MIN_SPAWN_NUMBER, ShooterGame
from ecsgame.vec2 import Vec2

FRAME_RATE = 60
FONT_SIZE = 24
WINDOW_TITLE = "Shooter"


def _polygon(centre: Vec2, radius: float, count: int, rotation: float) -> List[Tuple[float, float]]:
    base = math.radians(rotation) - math.pi / 2
    return [
        (
            centre.x + radius * math.cos(base + 2 * math.pi * i / count),
            centre.y + radius * math.sin(base + 2 * math.pi * i / count),
        )
        for i in range(count)
    ]


def _faded(color: Color, elapsed: float, start: float, duration: float, span: float) -> Color:
    alpha = 256 - span * (elapsed - start) / duration
    return color.with_alpha(int(min(255.0, max(0.0, alpha))))


class ShooterApp:
    """Runs a :class:`ShooterGame` in a pygame window.

    Keys F1 to F4 toggle rendering, user input, enemy spawning and collision;
    ``+`` and ``-`` change how many enemies each wave brings.
    """

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        font_path: Optional[str] = None,
        game: Optional[ShooterGame] = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)
        self.font = pygame.font.Font(font_path, FONT_SIZE)
        self.game = game if game is not None else ShooterGame(width, height)
        self.running = True
        self._overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        self._clock = pygame.time.Clock()

    def _toggle(self, key: int) -> None:
        game = self.game
        if key == pygame.K_F1:
            game.enable_render = not game.enable_render
        elif key == pygame.K_F2:
            game.enable_user_input = not game.enable_user_input
        elif key == pygame.K_F3:
            game.enable_spawn_enemy = not game.enable_spawn_enemy
        elif key == pygame.K_F4:
            game.enable_collision = not game.enable_collision
        elif key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
            game.spawn_enemy_number = min(MAX_SPAWN_NUMBER, game.spawn_enemy_number + 1)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            game.spawn_enemy_number = max(MIN_SPAWN_NUMBER, game.spawn_enemy_number - 1)

    def handle_events(self) -> None:
        """Process window events, panel keys, movement keys and mouse clicks."""
        game = self.game
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._toggle(event.key)
            elif (
                event.type == pygame.MOUSEBUTTONDOWN
                and event.button == 1
                and game.enable_user_input
            ):
                game.spawn_bullet(*event.pos)

        if game.enable_user_input:
            keys = pygame.key.get_pressed()
            game.set_input(
                up=bool(keys[pygame.K_w]),
                down=bool(keys[pygame.K_s]),
                left=bool(keys[pygame.K_a]),
                right=bool(keys[pygame.K_d]),
            )

    def _draw_shape(self, shape: CShape) -> None:
        points = _polygon(shape.position, shape.radius, shape.point_count, shape.rotation)
        pygame.draw.polygon(self._overlay, shape.fill_color.as_tuple(), points)
        if shape.outline_thickness > 0:
            outline = _polygon(
                shape.position,
                shape.radius + shape.outline_thickness / 2,
                shape.point_count,
                shape.rotation,
            )
            width = max(1, round(shape.outline_thickness))
            pygame.draw.polygon(self._overlay, shape.outline_color.as_tuple(), outline, width)

    def _draw_panel(self) -> None:
        game = self.game
        lines = [
            f"F1 render: {'on' if game.enable_render else 'off'}",
            f"F2 user input: {'on' if game.enable_user_input else 'off'}",
            f"F3 spawn enemy: {'on' if game.enable_spawn_enemy else 'off'}",
            f"F4 collision: {'on' if game.enable_collision else 'off'}",
            f"+/- enemies per wave: {game.spawn_enemy_number}",
        ]
        y = self.screen.get_height() - FONT_SIZE * len(lines) - 10
        for line in lines:
            self.screen.blit(self.font.render(line, True, (200, 200, 200)), (20, y))
            y += FONT_SIZE

    def render(self) -> None:
        """Draw the current frame onto the window surface."""
        game = self.game
        self.screen.fill((0, 0, 0))
        if not game.enable_render:
            self._draw_panel()
            return

        elapsed = game.elapsed
        bullets = game.entities.entities("bullet")
        enemies = game.entities.entities("enemy")

        for bullet in bullets:
            bullet.shape.position = bullet.transform.pos.copy()
            bullet.transform.angle += 1.0
            bullet.shape.rotation = bullet.transform.angle
            bullet.shape.fill_color = _faded(
                Color(255, 255, 255), elapsed, bullet.start_time, bullet.target_time, 255
            )

        for enemy in enemies:
            enemy.shape.position = enemy.transform.pos.copy()
            enemy.transform.angle += 1.0
            enemy.shape.rotation = enemy.transform.angle
            if enemy.shape.radius < 30:
                enemy.shape.fill_color = _faded(
                    enemy.shape.fill_color, elapsed, enemy.start_time, enemy.target_time, 200
                )
                enemy.shape.outline_color = _faded(
                    enemy.shape.outline_color, elapsed, enemy.start_time, enemy.target_time, 200
                )

        player = game.player
        player.shape.position = player.transform.pos.copy()
        player.transform.angle += 1.0
        player.shape.rotation = player.transform.angle

        self._overlay.fill((0, 0, 0, 0))
        for bullet in bullets:
            self._draw_shape(bullet.shape)
        for enemy in enemies:
            self._draw_shape(enemy.shape)
        self._draw_shape(player.shape)
        self.screen.blit(self._overlay, (0, 0))

        score = self.font.render(f"score: {game.score}", True, (255, 255, 255))
        self.screen.blit(score, (20, FONT_SIZE))
        self._draw_panel()

    def run(self) -> None:
        """Run frames until the window is closed."""
        while self.running:
            self.handle_events()
            if not self.running:
                break
            self.game.step()
            self.render()
            pygame.display.flip()
            self._clock.tick(FRAME_RATE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Arena shooter.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--font", default=None, help="path of a TrueType font for the score")
    args = parser.parse_args(argv)

    app = ShooterApp(args.width, args.height, args.font)
    try:
        app.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())