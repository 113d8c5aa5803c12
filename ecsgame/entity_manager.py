"""Creation, lookup and cleanup of entities."""

from __future__ import annotations

from typing import Dict, List, Optional

from ecsgame.entity import Entity


class EntityManager:
    """Owns entities; additions and removals take effect on ``update``."""

    def __init__(self) -> None:
        self._entities: List[Entity] = []
        self._to_add: List[Entity] = []
        self._entity_map: Dict[str, List[Entity]] = {}
        self._total_entities = 0

    @property
    def entity_map(self) -> Dict[str, List[Entity]]:
        """Live entities grouped by tag."""
        return self._entity_map

    def update(self) -> None:
        """Add queued entities, then drop those that have been destroyed."""
        for entity in self._to_add:
            self._entities.append(entity)
            self._entity_map.setdefault(entity.tag, []).append(entity)
        self._to_add.clear()

        self._entities[:] = [e for e in self._entities if e.is_active]
        for group in self._entity_map.values():
            group[:] = [e for e in group if e.is_active]

    def add_entity(self, tag: str) -> Entity:
        """Create an entity with the next id; it becomes visible after ``update``."""
        entity = Entity(tag, self._total_entities)
        self._total_entities += 1
        self._to_add.append(entity)
        return entity

    def entities(self, tag: Optional[str] = None) -> List[Entity]:
        """All live entities, or those with ``tag`` when one is given."""
        if tag is None:
            return self._entities
        return self._entity_map.setdefault(tag, [])