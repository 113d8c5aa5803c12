"""Platformer level scene."""

from __future__ import annotations

import copy
import math
from typing import Any, Optional

import pygame

from ecsgame.action import Action
from ecsgame.components import CAnimation, CBBox, CGravity, CInput, CTransform
from ecsgame.entity import Entity
from ecsgame.entity_manager import EntityManager
from ecsgame.scene import Scene
from ecsgame.vec2 import Vec2

GRID_SIZE = Vec2(64, 64)
PLAYER_START = Vec2(224, 352)
PLAYER_BBOX = Vec2(48, 48)
PLAYER_GRAVITY = 0.1
JUMP_SPEED = 3.0

BACKGROUND_COLOR = (0, 0, 0)
GRID_COLOR = (255, 255, 255)
BBOX_COLOR = (0, 255, 0)
GRID_TEXT_COLOR = (255, 255, 255)


class ScenePlay(Scene):
    """A level with a player, tiles, gravity and debug overlays."""

    def __init__(self, game: Any, level_path: str) -> None:
        super().__init__(game)
        self.level_path = level_path
        self.player: Optional[Entity] = None
        self.draw_textures = True
        self.draw_collision = False
        self.draw_grid = False

        for key, name in (
            (pygame.K_p, "PAUSE"),
            (pygame.K_ESCAPE, "QUIT"),
            (pygame.K_t, "TOGGLE_TEXTURE"),
            (pygame.K_c, "TOGGLE_COLLISION"),
            (pygame.K_g, "TOGGLE_GRID"),
            (pygame.K_w, "UP"),
        ):
            self.register_action(key, name)

        self.grid_font = game.assets.font("Tech")
        self.load_level(level_path)

    def _animation(self, name: str) -> CAnimation:
        return CAnimation(copy.copy(self.game.assets.animation(name)), True)

    def load_level(self, filename: str) -> None:
        """Reset the level: a fresh player and the starting tiles."""
        self.entity_manager = EntityManager()
        self.spawn_player()

        brick = self.entity_manager.add_entity("tile")
        brick.animation = self._animation("Brick")
        brick.transform = CTransform(Vec2(96, 480))

        block = self.entity_manager.add_entity("tile")
        block.animation = self._animation("Block")
        block.transform = CTransform(Vec2(224, 480))
        block.bbox = CBBox(self.game.assets.animation("Block").size.copy())

        question = self.entity_manager.add_entity("tile")
        question.animation = self._animation("Question")
        question.transform = CTransform(Vec2(352, 480))

    def spawn_player(self) -> Entity:
        player = self.entity_manager.add_entity("player")
        player.animation = self._animation("WizardStand")
        player.transform = CTransform(PLAYER_START.copy())
        player.bbox = CBBox(PLAYER_BBOX.copy())
        player.gravity = CGravity(PLAYER_GRAVITY)
        player.input = CInput()
        self.player = player
        return player

    def grid_to_mid_pixel(self, grid_x: float, grid_y: float, entity: Entity) -> Vec2:
        """Centre pixel of an entity whose bottom-left corner sits on a grid cell.

        Grid rows count upwards from the bottom of the window.
        """
        size = entity.animation.animation.size
        height = self.game.window.get_height()
        return Vec2(
            grid_x * GRID_SIZE.x + size.x / 2.0,
            height - grid_y * GRID_SIZE.y - size.y / 2.0,
        )

    def update(self) -> None:
        self.entity_manager.update()
        if not self.paused:
            self._movement()
            self._animate()
            self.current_frame += 1
        self.render()

    def _movement(self) -> None:
        player = self.player
        velocity = Vec2(0.0, player.transform.velocity.y)
        if player.input.up:
            velocity.y = -JUMP_SPEED
        player.transform.velocity = velocity

        for entity in self.entity_manager.entities():
            transform = entity.transform
            if transform is None:
                continue
            if entity.gravity is not None:
                transform.velocity.y += entity.gravity.gravity
            transform.prev_pos = transform.pos.copy()
            transform.pos += transform.velocity

    def _animate(self) -> None:
        for entity in self.entity_manager.entities():
            if entity.animation is not None:
                entity.animation.animation.update()

    def s_do_action(self, action: Action) -> None:
        name = action.name
        if action.type == "START":
            if name == "TOGGLE_TEXTURE":
                self.draw_textures = not self.draw_textures
            elif name == "TOGGLE_COLLISION":
                self.draw_collision = not self.draw_collision
            elif name == "TOGGLE_GRID":
                self.draw_grid = not self.draw_grid
            elif name == "PAUSE":
                self.set_paused(not self.paused)
            elif name == "QUIT":
                self.on_end()
            elif name == "RIGHT":
                self.player.input.right = True
            elif name == "UP":
                self.player.input.up = True
        elif action.type == "END":
            if name == "RIGHT":
                self.player.input.right = False
            elif name == "UP":
                self.player.input.up = False

    def on_end(self) -> None:
        self.has_ended = True

    def render(self) -> None:
        window = self.game.window
        window.fill(BACKGROUND_COLOR)
        entities = self.entity_manager.entities()

        if self.draw_textures:
            for entity in entities:
                if entity.animation is None or entity.transform is None:
                    continue
                animation = entity.animation.animation
                if animation.texture is None:
                    continue
                frame = animation.texture.subsurface(pygame.Rect(animation.frame_rect))
                corner = entity.transform.pos - animation.origin
                window.blit(frame, (corner.x, corner.y))

        if self.draw_collision:
            for entity in entities:
                if entity.bbox is None or entity.transform is None:
                    continue
                pos, box = entity.transform.pos, entity.bbox
                rect = pygame.Rect(
                    round(pos.x - box.half_size.x),
                    round(pos.y - box.half_size.y),
                    round(box.size.x),
                    round(box.size.y),
                )
                pygame.draw.rect(window, BBOX_COLOR, rect, 1)

        if self.draw_grid:
            self._render_grid(window)

    def _render_grid(self, window: Any) -> None:
        width, height = window.get_size()
        step_x, step_y = int(GRID_SIZE.x), int(GRID_SIZE.y)
        for x in range(0, width, step_x):
            pygame.draw.line(window, GRID_COLOR, (x, 0), (x, height))
        for y in range(height, -1, -step_y):
            pygame.draw.line(window, GRID_COLOR, (0, y), (width, y))

        for col in range(math.ceil(width / step_x)):
            for row in range(math.ceil(height / step_y)):
                label = self.grid_font.render(f"{col},{row}", True, GRID_TEXT_COLOR)
                window.blit(label, (col * step_x + 3, height - (row + 1) * step_y + 2))