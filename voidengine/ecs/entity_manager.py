"""Allocation and recycling of entity handles."""

from __future__ import annotations

from collections import deque

from voidengine.ecs.entity import create_entity, entity_index, entity_version

_MAX_VERSION = 0xFFFF_FFFF


class EntityManager:
    """Hands out entity handles, reusing freed indices with a bumped version."""

    def __init__(self) -> None:
        self._versions: list[int] = []
        self._alive: list[bool] = []
        self._free: deque[int] = deque()

    def create(self) -> int:
        """Create a new live entity."""
        if self._free:
            index = self._free.popleft()
            self._alive[index] = True
        else:
            index = len(self._versions)
            self._versions.append(0)
            self._alive.append(True)
        return create_entity(index, self._versions[index])

    def destroy(self, entity: int) -> None:
        """Destroy a live entity; its index is recycled with a new version."""
        if not self.contains(entity):
            raise KeyError(f"entity {entity} does not exist")
        index = entity_index(entity)
        self._versions[index] = (self._versions[index] + 1) & _MAX_VERSION
        self._alive[index] = False
        self._free.append(index)

    def contains(self, entity: int) -> bool:
        """Whether the entity is currently alive."""
        index = entity_index(entity)
        if index >= len(self._versions):
            return False
        return self._alive[index] and self._versions[index] == entity_version(entity)

    def __contains__(self, entity: int) -> bool:
        return self.contains(entity)