"""Game rules for the arena shooter: spawning, movement and collisions.

The simulation is independent of any window or input library. Time is read
from a clock callable that returns seconds since the game started, and
randomness comes from a ``random.Random`` instance. Both can be injected.
"""

from __future__ import annotations

import math
import random
import time
from typing import Callable, Optional

from ecsgame.components import CInput, Color, CShape, CTransform
from ecsgame.entity import Entity
from ecsgame.entity_manager import EntityManager
from ecsgame.vec2 import Vec2

PLAYER_RADIUS = 32.0
PLAYER_POINTS = 8
PLAYER_FILL = Color(10, 10, 10)
PLAYER_OUTLINE = Color(255, 0, 0)
PLAYER_THICKNESS = 4.0
PLAYER_SPEED = 2.0

ENEMY_RADIUS = 32.0
ENEMY_OUTLINE = Color(255, 255, 255)
ENEMY_THICKNESS = 4.0
ENEMY_MIN_POINTS = 3
ENEMY_MAX_POINTS = 6
ENEMY_EDGE_MARGIN = 45
ENEMY_CENTRE_GAP = 60
SPAWN_INTERVAL = 5

SMALL_ENEMY_RADIUS = 8.0
SMALL_ENEMY_THICKNESS = 1.0

BULLET_RADIUS = 16.0
BULLET_POINTS = 8
BULLET_FILL = Color(255, 255, 255, 255)
BULLET_OUTLINE = Color(0, 0, 0)
BULLET_THICKNESS = 1.0
BULLET_SPEED = 4.0

MIN_SPAWN_NUMBER = 1
MAX_SPAWN_NUMBER = 20


def _stopwatch() -> Callable[[], float]:
    start = time.monotonic()
    return lambda: time.monotonic() - start


class ShooterGame:
    """State and systems of one shooter session."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else _stopwatch()

        self.entities = EntityManager()
        self.enable_render = True
        self.enable_user_input = True
        self.enable_spawn_enemy = True
        self.enable_collision = True
        self.spawn_enemy_number = MIN_SPAWN_NUMBER

        self.target_time = SPAWN_INTERVAL
        self.score = 0
        self.current_frame = 0
        self.player: Entity = self.spawn_player()

    @property
    def elapsed(self) -> float:
        """Seconds since the game started."""
        return self._clock()

    def spawn_player(self) -> Entity:
        """Create the player in the centre of the arena."""
        player = self.entities.add_entity("player")
        player.transform = CTransform(Vec2(self.width / 2.0, self.height / 2.0), Vec2(0.0, 0.0), 0.0)
        player.shape = CShape(PLAYER_RADIUS, PLAYER_POINTS, PLAYER_FILL, PLAYER_OUTLINE, PLAYER_THICKNESS)
        player.input = CInput()
        self.player = player
        return player

    def _spawn_enemy(self) -> Entity:
        rng = self.rng
        left = rng.randint(0, 1) == 0
        top = rng.randint(0, 1) == 0
        half_w, half_h = self.width // 2, self.height // 2

        if left:
            min_x, max_x = ENEMY_EDGE_MARGIN, half_w - ENEMY_CENTRE_GAP
        else:
            min_x, max_x = half_w + ENEMY_CENTRE_GAP, self.width - ENEMY_EDGE_MARGIN
        if top:
            min_y, max_y = ENEMY_EDGE_MARGIN, half_h - ENEMY_CENTRE_GAP
        else:
            min_y, max_y = half_h + ENEMY_CENTRE_GAP, self.height - ENEMY_EDGE_MARGIN

        enemy = self.entities.add_entity("enemy")
        enemy.transform = CTransform(
            Vec2(rng.randint(min_x, max_x), rng.randint(min_y, max_y)), Vec2(1, 1), 0.0
        )
        points = rng.randint(ENEMY_MIN_POINTS, ENEMY_MAX_POINTS)
        fill = Color(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))
        enemy.shape = CShape(ENEMY_RADIUS, points, fill, ENEMY_OUTLINE, ENEMY_THICKNESS)
        return enemy

    def spawn_enemies(self) -> None:
        """Spawn a wave of enemies every few seconds while spawning is enabled."""
        current_time = int(self.elapsed)
        if not self.enable_spawn_enemy:
            self.target_time = current_time
            return
        if current_time >= self.target_time:
            for _ in range(self.spawn_enemy_number):
                self._spawn_enemy()
            self.target_time += SPAWN_INTERVAL

    def spawn_bullet(self, target_x: float, target_y: float) -> Entity:
        """Fire a bullet from the player towards the given point."""
        origin = self.player.transform.pos
        direction = Vec2(target_x - origin.x, target_y - origin.y).normalize()
        bullet = self.entities.add_entity("bullet")
        bullet.transform = CTransform(origin.copy(), direction * BULLET_SPEED, 0.0)
        bullet.shape = CShape(BULLET_RADIUS, BULLET_POINTS, BULLET_FILL, BULLET_OUTLINE, BULLET_THICKNESS)
        bullet.start_time = self.elapsed
        return bullet

    def set_input(self, up: bool, down: bool, left: bool, right: bool) -> None:
        """Set the player's velocity from the pressed directions."""
        if not self.enable_user_input:
            return
        velocity = self.player.transform.velocity
        if up:
            velocity.y = -PLAYER_SPEED
        elif down:
            velocity.y = PLAYER_SPEED
        else:
            velocity.y = 0.0
        if right:
            velocity.x = PLAYER_SPEED
        elif left:
            velocity.x = -PLAYER_SPEED
        else:
            velocity.x = 0.0

    def move(self) -> None:
        """Advance enemies, bullets and the player by their velocities."""
        for enemy in self.entities.entities("enemy"):
            if enemy.transform.pos.x + enemy.shape.radius > self.width:
                enemy.transform.velocity.x = -1.0
            enemy.transform.pos += enemy.transform.velocity

        for bullet in self.entities.entities("bullet"):
            bullet.transform.pos += bullet.transform.velocity

        pos = self.player.transform.pos
        velocity = self.player.transform.velocity
        radius = self.player.shape.radius

        if pos.x + radius > self.width:
            pos.x = self.width - radius
            return
        if pos.x - radius < 0:
            pos.x = radius + 1
            return
        if pos.y + radius > self.height:
            pos.y = self.height - radius
            return
        if pos.y - radius < 0:
            pos.y = radius + 1
            return

        if velocity.x != 0 and velocity.y != 0:
            diagonal = math.radians(45.0)
            pos.x += velocity.x * math.cos(diagonal)
            pos.y += velocity.y * math.sin(diagonal)
        else:
            pos += velocity

    def _off_screen(self, entity: Entity) -> bool:
        pos, radius = entity.transform.pos, entity.shape.radius
        return (
            pos.x - radius > self.width
            or pos.x + radius < 0
            or pos.y - radius > self.height
            or pos.y + radius < 0
        )

    def _burst(self, enemy: Entity) -> None:
        """Split ``enemy`` into small enemies flying out in every direction."""
        count = enemy.shape.point_count
        step = 360.0 / count
        direction = 0.0
        for _ in range(count):
            direction += step
            angle = math.radians(direction)
            small = self.entities.add_entity("enemy")
            small.transform = CTransform(
                enemy.transform.pos.copy(), Vec2(math.cos(angle), math.sin(angle)), 0.0
            )
            small.shape = CShape(
                SMALL_ENEMY_RADIUS,
                count,
                enemy.shape.fill_color,
                enemy.shape.outline_color,
                SMALL_ENEMY_THICKNESS,
            )
            small.start_time = self.elapsed

    def collide(self) -> None:
        """Resolve walls, lifetimes and hits between player, enemies and bullets."""
        enemies = self.entities.entities("enemy")
        bullets = self.entities.entities("bullet")

        if not self.enable_collision:
            for enemy in enemies:
                if self._off_screen(enemy):
                    enemy.destroy()
            return

        for enemy in enemies:
            pos, radius, velocity = enemy.transform.pos, enemy.shape.radius, enemy.transform.velocity
            if pos.x + radius >= self.width:
                velocity.x = -1.0
            if pos.x - radius <= 0:
                velocity.x = 1.0
            if pos.y + radius >= self.height:
                velocity.y = -1.0
            if pos.y - radius <= 0:
                velocity.y = 1.0
            if radius < 10 and enemy.start_time + enemy.target_time <= self.elapsed:
                enemy.destroy()

        for bullet in bullets:
            if self._off_screen(bullet):
                bullet.destroy()
            if bullet.start_time + bullet.target_time <= self.elapsed:
                bullet.destroy()

        for enemy in enemies:
            player = self.player
            distance = player.transform.pos.dist(enemy.transform.pos)
            if player.is_active and distance <= player.shape.radius + enemy.shape.radius:
                self.score = 0
                player.destroy()
                self.spawn_player()
                if enemy.shape.radius > SMALL_ENEMY_RADIUS:
                    self._burst(enemy)
                enemy.destroy()

        for bullet in bullets:
            for enemy in enemies:
                distance = bullet.transform.pos.dist(enemy.transform.pos)
                if enemy.is_active and distance <= enemy.shape.radius + bullet.shape.radius:
                    bullet.destroy()
                    enemy.destroy()
                    if enemy.shape.radius > 10:
                        self.score += enemy.shape.point_count * 100
                        self._burst(enemy)

    def step(self) -> None:
        """Run one frame of the simulation."""
        self.entities.update()
        self.collide()
        self.spawn_enemies()
        self.move()
        self.current_frame += 1