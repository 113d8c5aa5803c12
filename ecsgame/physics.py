"""Overlap of entity bounding boxes."""

from __future__ import annotations

from ecsgame.entity import Entity
from ecsgame.vec2 import Vec2


def _overlap(a_pos: Vec2, a: Entity, b_pos: Vec2, b: Entity) -> Vec2:
    if a.bbox is None or b.bbox is None:
        raise ValueError("both entities need a bounding box")
    return Vec2(
        a.bbox.half_size.x + b.bbox.half_size.x - abs(a_pos.x - b_pos.x),
        a.bbox.half_size.y + b.bbox.half_size.y - abs(a_pos.y - b_pos.y),
    )


def _require_transform(entity: Entity) -> None:
    if entity.transform is None:
        raise ValueError("both entities need a transform")


def get_overlap(a: Entity, b: Entity) -> Vec2:
    """Overlap of the boxes on each axis; both positive means they intersect."""
    _require_transform(a)
    _require_transform(b)
    return _overlap(a.transform.pos, a, b.transform.pos, b)


def get_previous_overlap(a: Entity, b: Entity) -> Vec2:
    """Overlap the boxes had at their previous positions."""
    _require_transform(a)
    _require_transform(b)
    return _overlap(a.transform.prev_pos, a, b.transform.prev_pos, b)