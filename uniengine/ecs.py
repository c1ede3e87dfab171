"""Two entity-component-system registries.

:class:`AnyECS` stores components by value; reading returns a copy that has
to be written back. :class:`MemoryECS` keeps each component type in a fixed
size :class:`~uniengine.memory_pool.MemoryPool` and hands out the stored
object itself for in-place changes.
"""

from __future__ import annotations

import copy
import sys
from typing import Any, Callable, TypeVar

from .memory_pool import MemoryPool, PoolExhaustedError
from .sparse_set import SparseSet

C = TypeVar("C")

DEFAULT_POOL_CAPACITY = 10000


class ComponentPoolFullError(RuntimeError):
    """Raised when a component type's pool has no room for another component."""


class AnyECS:
    """Entities with components of any type, stored by value."""

    def __init__(self) -> None:
        self._entities: list[int] = []
        self._next_entity = 0
        self._registered: dict[type, int] = {}
        self._components: SparseSet[SparseSet[Any]] = SparseSet()
        self._systems: list[Callable[[AnyECS, float], None]] = []

    # Entities

    def all_entities(self) -> list[int]:
        """Return a copy of the live entity list."""
        return list(self._entities)

    def create_entity(self) -> int:
        """Create an entity with the next unused id."""
        entity = self._next_entity
        self._entities.append(entity)
        self._next_entity += 1
        return entity

    def remove_entity(self, entity: int) -> None:
        """Drop ``entity`` from the entity list; its components are kept."""
        self._entities = [e for e in self._entities if e != entity]

    # Components

    def entity_components(self) -> SparseSet[SparseSet[Any]]:
        """Return a deep copy of the component store, keyed by component id."""
        return copy.deepcopy(self._components)

    def _store_for(self, component_type: type) -> SparseSet[Any] | None:
        comp_id = self._registered.get(component_type)
        if comp_id is None:
            return None
        return self._components.get(comp_id)

    def attach_components(self, entity: int, *args: Any) -> None:
        """Attach each given component to ``entity``, replacing one of the same type."""
        for component in args:
            component_type = type(component)
            comp_id = self._registered.get(component_type)
            if comp_id is None:
                comp_id = len(self._registered)
                self._registered[component_type] = comp_id
                self._components.insert(comp_id, SparseSet())
            self._components.get(comp_id).insert(entity, copy.copy(component))

    def has_components(self, entity: int, *args: type) -> bool:
        """Return whether ``entity`` has a component of every given type."""
        for component_type in args:
            store = self._store_for(component_type)
            if store is None or not store.has_index(entity):
                return False
        return True

    def get_component(self, entity: int, component_type: type[C]) -> C:
        """Return a copy of the entity's component of ``component_type``."""
        store = self._store_for(component_type)
        if store is None:
            raise KeyError(f"component type {component_type.__name__} is not registered")
        if not store.has_index(entity):
            raise KeyError(f"entity {entity} has no {component_type.__name__}")
        return copy.copy(store.get(entity))

    def set_component(self, entity: int, component: Any) -> None:
        """Overwrite the entity's existing component of the same type."""
        component_type = type(component)
        store = self._store_for(component_type)
        if store is None:
            raise KeyError(f"component type {component_type.__name__} is not registered")
        store.set(entity, copy.copy(component))

    # Systems

    def update_systems(self, delta_time: float) -> None:
        """Run every system, in the order added."""
        for system in self._systems:
            system(self, delta_time)

    def add_system(self, system: Callable[[AnyECS, float], None]) -> None:
        """Register a system called as ``system(ecs, delta_time)``."""
        self._systems.append(system)


class MemoryECS:
    """Entities whose components live in per-type fixed-size pools."""

    def __init__(self, pool_capacity: int = DEFAULT_POOL_CAPACITY) -> None:
        if pool_capacity < 1:
            raise ValueError(f"pool_capacity must be positive, got {pool_capacity}")
        self._pool_capacity = pool_capacity
        self._entities: list[int] = []
        self._removed: list[int] = []
        self._next_entity = 0
        self._registered: dict[type, int] = {}
        self._pools: list[MemoryPool] = []
        self._components: list[SparseSet[tuple[int, Any]]] = []
        self._systems: list[Callable[[MemoryECS, float], None]] = []

    # Entities

    def all_entities(self) -> list[int]:
        """Return a copy of the live entity list."""
        return list(self._entities)

    def create_entity(self) -> int:
        """Create an entity, reusing the most recently removed id first."""
        if self._removed:
            entity = self._removed.pop()
        else:
            entity = self._next_entity
            self._next_entity += 1
        self._entities.append(entity)
        return entity

    def remove_entity(self, entity: int) -> bool:
        """Remove ``entity`` and keep its id for reuse; return whether it existed."""
        try:
            self._entities.remove(entity)
        except ValueError:
            return False
        self._removed.append(entity)
        return True

    # Components

    def _comp_id(self, component_type: type) -> int | None:
        return self._registered.get(component_type)

    def attach_component(self, entity: int, component: Any) -> None:
        """Store a copy of ``component`` for ``entity`` in its type's pool."""
        component_type = type(component)
        comp_id = self._comp_id(component_type)
        if comp_id is None:
            comp_id = len(self._pools)
            self._registered[component_type] = comp_id
            self._pools.append(MemoryPool(sys.getsizeof(component), self._pool_capacity))
            self._components.append(SparseSet())

        pool = self._pools[comp_id]
        store = self._components[comp_id]
        if store.has_index(entity):
            old_chunk, _ = store.get(entity)
            pool.deallocate(old_chunk)
        try:
            chunk = pool.allocate()
        except PoolExhaustedError as exc:
            raise ComponentPoolFullError("Component Pool is full!") from exc
        store.insert(entity, (chunk, copy.copy(component)))

    def remove_components(self, entity: int, *args: type) -> None:
        """Detach the entity's components of the given types; others are ignored."""
        for component_type in args:
            comp_id = self._comp_id(component_type)
            if comp_id is None:
                continue
            store = self._components[comp_id]
            if not store.has_index(entity):
                continue
            chunk, _ = store.get(entity)
            self._pools[comp_id].deallocate(chunk)
            store.remove(entity)

    def has_components(self, entity: int, component_type: type) -> bool:
        """Return whether ``entity`` has a component of ``component_type``."""
        comp_id = self._comp_id(component_type)
        return comp_id is not None and self._components[comp_id].has_index(entity)

    def get_component(self, entity: int, component_type: type[C]) -> C | None:
        """Return the stored component itself, or None if the entity has none."""
        comp_id = self._comp_id(component_type)
        if comp_id is None:
            return None
        store = self._components[comp_id]
        if not store.has_index(entity):
            return None
        return store.get(entity)[1]

    # Systems

    def update_systems(self, delta_time: float) -> None:
        """Run every system, in the order added."""
        for system in self._systems:
            system(self, delta_time)

    def add_system(self, system: Callable[[MemoryECS, float], None]) -> None:
        """Register a system called as ``system(ecs, delta_time)``."""
        self._systems.append(system)