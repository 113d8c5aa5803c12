"""Base class for game scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ecsgame.action import Action
from ecsgame.entity_manager import EntityManager


class Scene(ABC):
    """A scene owns its entities and maps input keys to named actions."""

    def __init__(self, game: Optional[Any] = None) -> None:
        self.game = game
        self.entity_manager = EntityManager()
        self.action_map: Dict[int, str] = {}
        self.paused = False
        self.has_ended = False
        self.current_frame = 0

    def set_paused(self, paused: bool) -> None:
        self.paused = paused

    def register_action(self, key: int, name: str) -> None:
        """Bind an input key to an action name."""
        self.action_map[key] = name

    def do_action(self, action: Action) -> None:
        """Deliver an action to the scene's action system."""
        self.s_do_action(action)

    def simulate(self, frames: int) -> None:
        """Run ``frames`` updates in a row."""
        for _ in range(frames):
            self.update()

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def s_do_action(self, action: Action) -> None:
        """React to an action."""

    @abstractmethod
    def render(self) -> None:
        """Draw the scene onto the game window."""

    @abstractmethod
    def on_end(self) -> None:
        """Called when the scene finishes."""