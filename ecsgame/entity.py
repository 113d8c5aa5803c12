"""Game entities: a tag, an id and a set of optional components."""

from __future__ import annotations

from typing import Optional

from ecsgame.components import (
    CAnimation,
    CBBox,
    CCollision,
    CGravity,
    CInput,
    CLifespan,
    CShape,
    CTransform,
)


class Entity:
    """An object in the game world; components are ``None`` until attached."""

    def __init__(self, tag: str = "Default", entity_id: int = 0) -> None:
        self._tag = tag
        self._id = entity_id
        self._active = True

        self.transform: Optional[CTransform] = None
        self.animation: Optional[CAnimation] = None
        self.bbox: Optional[CBBox] = None
        self.gravity: Optional[CGravity] = None
        self.shape: Optional[CShape] = None
        self.collision: Optional[CCollision] = None
        self.input: Optional[CInput] = None
        self.lifespan: Optional[CLifespan] = None

        self.target_time: float = 5.0
        self.start_time: float = 0.0

    def __repr__(self) -> str:
        return f"Entity(tag={self._tag!r}, id={self._id}, active={self._active})"

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def id(self) -> int:
        return self._id

    @property
    def is_active(self) -> bool:
        return self._active

    def destroy(self) -> None:
        """Mark the entity for removal on the next manager update."""
        self._active = False