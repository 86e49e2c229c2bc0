"""The entity-component world: entities plus their components."""

from __future__ import annotations

from typing import Any

from voidengine.ecs.component_pool_manager import ComponentPoolManager
from voidengine.ecs.entity_manager import EntityManager


class World:
    """Creates entities and attaches, detaches, fetches and queries components."""

    def __init__(self) -> None:
        self._entities = EntityManager()
        self._pools = ComponentPoolManager()

    def _require(self, entity: int) -> None:
        if not self._entities.contains(entity):
            raise KeyError(f"entity {entity} does not exist")

    @staticmethod
    def _require_components(args: tuple[Any, ...], operation: str) -> None:
        if not args:
            raise TypeError(f"{operation}() needs at least one component")

    def create(self, *args: Any) -> int:
        """Create an entity with the given components (types or instances)."""
        entity = self._entities.create()
        for component in args:
            self._pools.create(entity, component)
        return entity

    def destroy(self, entity: int) -> None:
        """Destroy an entity and all its components."""
        self._require(entity)
        self._pools.destroy(entity)
        self._entities.destroy(entity)

    def contains(self, entity: int) -> bool:
        """Whether the entity is alive."""
        return self._entities.contains(entity)

    def __contains__(self, entity: int) -> bool:
        return self.contains(entity)

    def attach(self, entity: int, *args: Any) -> Any:
        """Attach components (types or instances); return one, or a tuple for several."""
        self._require(entity)
        self._require_components(args, "attach")
        attached = tuple(self._pools.create(entity, component) for component in args)
        return attached[0] if len(attached) == 1 else attached

    def detach(self, entity: int, *args: type) -> None:
        """Remove components of the given types from an entity."""
        self._require(entity)
        self._require_components(args, "detach")
        self._pools.destroy(entity, *args)

    def fetch(self, entity: int, *args: type) -> Any:
        """Return the entity's component of a type, or a tuple for several types."""
        self._require(entity)
        self._require_components(args, "fetch")
        fetched = tuple(self._pools.get(entity, t) for t in args)
        return fetched[0] if len(fetched) == 1 else fetched

    def has(self, entity: int, *args: type) -> bool:
        """Whether the entity has a component of every given type."""
        self._require(entity)
        self._require_components(args, "has")
        return self._pools.contains(entity, *args)

    def query(self, *args: type) -> list[int]:
        """Entities with all given component types, or with any component if none given."""
        return self._pools.query(*args)