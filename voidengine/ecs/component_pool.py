"""Sparse-set storage of one component type, keyed by entity."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from voidengine.ecs.entity import entity_index

C = TypeVar("C")


class ComponentPool(Generic[C]):
    """Densely packed components of one type with constant-time lookup."""

    def __init__(self, factory: Callable[[], C]) -> None:
        self._factory = factory
        self._sparse: dict[int, int] = {}
        self._packed: list[int] = []
        self._data: list[C] = []

    def create(self, entity: int, component: C | None = None) -> C:
        """Attach a component to an entity and return it.

        Without a component, an existing one is returned as is, or a new one
        is made by the pool's factory. A given component replaces any existing one.
        """
        index = entity_index(entity)
        position = self._sparse.get(index)
        if position is None:
            self._sparse[index] = len(self._packed)
            self._packed.append(entity)
            self._data.append(self._factory() if component is None else component)
            return self._data[-1]
        if component is not None:
            self._data[position] = component
        return self._data[position]

    def destroy(self, entity: int) -> None:
        """Remove the entity's component, moving the last one into its place."""
        if not self.contains(entity):
            raise KeyError(f"entity {entity} has no component in this pool")
        index = entity_index(entity)
        position = self._sparse.pop(index)
        last_entity = self._packed.pop()
        last_data = self._data.pop()
        if position < len(self._packed):
            self._packed[position] = last_entity
            self._data[position] = last_data
            self._sparse[entity_index(last_entity)] = position

    def clear(self) -> None:
        """Remove every component."""
        self._sparse.clear()
        self._packed.clear()
        self._data.clear()

    def get(self, entity: int) -> C:
        """Return the entity's component."""
        if not self.contains(entity):
            raise KeyError(f"entity {entity} has no component in this pool")
        return self._data[self._sparse[entity_index(entity)]]

    def contains(self, entity: int) -> bool:
        """Whether the entity has a component in this pool."""
        return entity_index(entity) in self._sparse

    def entities(self) -> tuple[int, ...]:
        """The entities holding a component, in packed order."""
        return tuple(self._packed)

    def __contains__(self, entity: int) -> bool:
        return self.contains(entity)

    def __len__(self) -> int:
        return len(self._packed)