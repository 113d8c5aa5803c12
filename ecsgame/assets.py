"""Loading and lookup of textures, animations and fonts by name."""

from __future__ import annotations

import logging
from itertools import islice
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

import pygame

from ecsgame.animation import Animation

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 24

Loader = Callable[[str], Any]


def load_texture(path: str) -> Any:
    """Load an image file as a pygame surface."""
    return pygame.image.load(path)


def load_font(path: str) -> Any:
    """Load a TrueType font at the default size."""
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, DEFAULT_FONT_SIZE)


def _take(tokens: Iterator[str], count: int, kind: str) -> List[str]:
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError(f"incomplete {kind} entry in asset file")
    return values


class Assets:
    """Named game assets.

    Textures and fonts are read through loader callables, which default to
    pygame's image and font loaders.
    """

    def __init__(
        self,
        texture_loader: Optional[Loader] = None,
        font_loader: Optional[Loader] = None,
    ) -> None:
        self._texture_loader = texture_loader if texture_loader is not None else load_texture
        self._font_loader = font_loader if font_loader is not None else load_font
        self._textures: Dict[str, Any] = {}
        self._animations: Dict[str, Animation] = {}
        self._fonts: Dict[str, Any] = {}

    @property
    def textures(self) -> Mapping[str, Any]:
        return MappingProxyType(self._textures)

    @property
    def animations(self) -> Mapping[str, Animation]:
        return MappingProxyType(self._animations)

    def load_from_file(self, path: str) -> None:
        """Read an asset list of ``Texture``, ``Animation`` and ``Font`` entries."""
        with open(path, encoding="utf-8") as handle:
            tokens = iter(handle.read().split())

        for kind in tokens:
            if kind == "Texture":
                name, texture_path = _take(tokens, 2, kind)
                self.add_texture(name, texture_path)
            elif kind == "Animation":
                name, texture, frames, speed = _take(tokens, 4, kind)
                self.add_animation(name, texture, int(frames), int(speed))
            elif kind == "Font":
                name, font_path = _take(tokens, 2, kind)
                self.add_font(name, font_path)
            else:
                logger.warning("Unknown Asset Type: %s", kind)

    def add_texture(self, name: str, path: str) -> None:
        """Load a texture; a file that cannot be read is logged and skipped."""
        try:
            texture = self._texture_loader(path)
        except (pygame.error, OSError) as exc:
            logger.error("Could not load texture file: %s (%s)", path, exc)
            return
        self._textures[name] = texture
        logger.info("Loaded texture: %s", path)

    def add_animation(self, name: str, texture: str, frames: int, speed: int) -> None:
        """Define an animation over the frames of an already loaded texture."""
        self._animations[name] = Animation(name, self.texture(texture), frames, speed)

    def add_font(self, name: str, path: str) -> None:
        """Load a font; a file that cannot be read is logged and skipped."""
        try:
            font = self._font_loader(path)
        except (pygame.error, OSError) as exc:
            logger.error("Could not load font file: %s (%s)", path, exc)
            return
        self._fonts[name] = font
        logger.info("Loaded Font: %s", path)

    def texture(self, name: str) -> Any:
        try:
            return self._textures[name]
        except KeyError:
            raise KeyError(f"unknown texture: {name!r}") from None

    def animation(self, name: str) -> Animation:
        try:
            return self._animations[name]
        except KeyError:
            raise KeyError(f"unknown animation: {name!r}") from None

    def font(self, name: str) -> Any:
        try:
            return self._fonts[name]
        except KeyError:
            raise KeyError(f"unknown font: {name!r}") from None