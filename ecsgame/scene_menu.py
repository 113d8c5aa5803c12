"""Level selection menu."""

from __future__ import annotations

from typing import Any, List

import pygame

from ecsgame.action import Action
from ecsgame.scene import Scene

MENU_FONT_SIZE = 36
MENU_TOP = 20
MENU_TEXT_COLOR = (255, 255, 255)
LEVEL_COUNT = 3


class SceneMenu(Scene):
    """Lists the levels and lets the player move a selection through them."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.title = ""
        self.level_paths: List[str] = []
        self.selected_index = 0

        self.register_action(pygame.K_UP, "UP")
        self.register_action(pygame.K_DOWN, "DOWN")
        self.register_action(pygame.K_RETURN, "ChangeScene")

        self.menu_font = game.assets.font("roboto")
        self.menu_strings: List[str] = [f"Level {i + 1}" for i in range(LEVEL_COUNT)]

    def update(self) -> None:
        self.render()

    def on_end(self) -> None:
        self.has_ended = True

    def s_do_action(self, action: Action) -> None:
        if action.type != "START":
            return
        if action.name == "UP":
            self.selected_index = (self.selected_index + 1) % len(self.menu_strings)
        elif action.name == "DOWN":
            self.selected_index = (self.selected_index - 1) % len(self.menu_strings)

    def render(self) -> None:
        window = self.game.window
        x = window.get_width() / 2.0
        for row, text in enumerate(self.menu_strings):
            surface = self.menu_font.render(text, True, MENU_TEXT_COLOR)
            window.blit(surface, (x, MENU_FONT_SIZE * row + MENU_TOP))