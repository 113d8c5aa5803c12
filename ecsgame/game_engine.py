"""The engine that owns the window, the assets and the scenes."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import pygame

from ecsgame.action import Action
from ecsgame.assets import Assets
from ecsgame.scene import Scene
from ecsgame.scene_menu import SceneMenu

logger = logging.getLogger(__name__)

WINDOW_SIZE = (1280, 768)
WINDOW_TITLE = "Definitely Not Mario"
FRAME_RATE = 60
SCREENSHOT_PATH = "test.png"


class GameEngine:
    """Loads assets, runs the current scene and routes key events to it."""

    def __init__(
        self,
        path: str,
        *,
        assets: Optional[Assets] = None,
        window: Optional[Any] = None,
    ) -> None:
        self.assets = assets if assets is not None else Assets()
        self.simulation_speed = 1
        self.running = True
        self.screenshot_path = SCREENSHOT_PATH
        self._scenes: Dict[str, Scene] = {}
        self._current = ""

        self.assets.load_from_file(path)
        if window is None:
            pygame.init()
            window = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
        self.window = window
        self.change_scene("MENU", SceneMenu(self))

    @property
    def scenes(self) -> Mapping[str, Scene]:
        return MappingProxyType(self._scenes)

    def change_scene(self, name: str, scene: Scene, end_current_scene: bool = False) -> None:
        """Make ``scene`` current under ``name``, optionally dropping the old one."""
        if end_current_scene and self._current in self._scenes and self._current != name:
            del self._scenes[self._current]
        self._scenes[name] = scene
        self._current = name

    def current_scene(self) -> Scene:
        return self._scenes[self._current]

    def save_screenshot(self) -> None:
        pygame.image.save(self.window, self.screenshot_path)
        logger.info("screenshot saved to %s", self.screenshot_path)

    def handle_event(self, event: Any) -> None:
        """Handle a window event: quitting, screenshots and bound keys."""
        if event.type == pygame.QUIT:
            self.quit()
            return
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_x:
            self.save_screenshot()

        scene = self.current_scene()
        name = scene.action_map.get(event.key)
        if name is None:
            return
        phase = "START" if event.type == pygame.KEYDOWN else "END"
        scene.do_action(Action(name, phase))

    def is_running(self) -> bool:
        return self.running

    def quit(self) -> None:
        self.running = False

    def update(self) -> None:
        self.current_scene().update()

    def run(self) -> None:
        """Process events and update the current scene until quit."""
        clock = pygame.time.Clock()
        while self.is_running():
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.is_running():
                break
            self.update()
            pygame.display.flip()
            clock.tick(FRAME_RATE)