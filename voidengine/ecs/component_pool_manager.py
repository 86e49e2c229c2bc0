"""One component pool per component type."""

from __future__ import annotations

from typing import Any

from voidengine.ecs.component_pool import ComponentPool


class ComponentPoolManager:
    """Routes component operations to the pool of each component's type."""

    def __init__(self) -> None:
        self._pools: dict[type, ComponentPool[Any]] = {}

    def _pool_for(self, component_type: type) -> ComponentPool[Any]:
        pool = self._pools.get(component_type)
        if pool is None:
            pool = self._pools[component_type] = ComponentPool(component_type)
        return pool

    def _existing_pool(self, component_type: type) -> ComponentPool[Any]:
        try:
            return self._pools[component_type]
        except KeyError:
            raise KeyError(f"no component pool for {component_type.__name__}") from None

    def create(self, entity: int, component: Any) -> Any:
        """Attach a component to an entity.

        A type attaches a default-constructed component of that type (or
        returns the existing one); an instance is stored as the component.
        """
        if isinstance(component, type):
            return self._pool_for(component).create(entity)
        return self._pool_for(type(component)).create(entity, component)

    def destroy(self, entity: int, *args: type) -> None:
        """Remove the given component types from an entity, or all if none are given."""
        if not args:
            for pool in self._pools.values():
                if pool.contains(entity):
                    pool.destroy(entity)
            return
        for component_type in args:
            self._existing_pool(component_type).destroy(entity)

    def clear(self, component_type: type) -> None:
        """Remove every component of a type."""
        self._existing_pool(component_type).clear()

    def get(self, entity: int, component_type: type) -> Any:
        """Return the entity's component of a type."""
        return self._existing_pool(component_type).get(entity)

    def contains(self, entity: int, *args: type) -> bool:
        """Whether the entity has a component of every given type."""
        if not args:
            raise TypeError("contains() needs at least one component type")
        return all(
            (pool := self._pools.get(component_type)) is not None and pool.contains(entity)
            for component_type in args
        )

    def query(self, *args: type) -> list[int]:
        """Entities holding all the given component types, or any component if none are given."""
        if not args:
            unique: dict[int, None] = {}
            for pool in self._pools.values():
                unique.update(dict.fromkeys(pool.entities()))
            return list(unique)
        candidates = [
            pool.entities() if (pool := self._pools.get(t)) is not None else ()
            for t in args
        ]
        smallest = min(candidates, key=len)
        if len(args) == 1:
            return list(smallest)
        return [entity for entity in smallest if self.contains(entity, *args)]