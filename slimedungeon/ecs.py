"""A small entity-component-system: entities, component storage and systems."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, Optional, TypeVar

from slimedungeon.gametypes import MAX_COMPONENTS, MAX_ENTITIES, Entity

T = TypeVar("T")
S = TypeVar("S", bound="System")


class EcsError(Exception):
    """Raised when the entity-component-system is misused."""


class ComponentArray(Generic[T]):
    """Densely packed components of one type, keyed by entity."""

    def __init__(self, capacity: int = MAX_ENTITIES) -> None:
        self._capacity = capacity
        self._components: list[T] = []
        self._entities: list[Entity] = []
        self._index: dict[Entity, int] = {}

    def insert(self, entity: Entity, component: T) -> None:
        if entity in self._index:
            raise EcsError("Component added to same entity more than once.")
        if len(self._components) >= self._capacity:
            raise EcsError("Component array is full.")
        self._index[entity] = len(self._components)
        self._components.append(component)
        self._entities.append(entity)

    def remove(self, entity: Entity) -> None:
        if entity not in self._index:
            raise EcsError("Removing non-existent component.")
        removed = self._index.pop(entity)
        last_component = self._components.pop()
        last_entity = self._entities.pop()
        if last_entity != entity:
            self._components[removed] = last_component
            self._entities[removed] = last_entity
            self._index[last_entity] = removed

    def get(self, entity: Entity) -> T:
        try:
            return self._components[self._index[entity]]
        except KeyError:
            raise EcsError("Retrieving non-existent component.") from None

    def try_get(self, entity: Entity) -> Optional[T]:
        index = self._index.get(entity)
        return None if index is None else self._components[index]

    def entity_destroyed(self, entity: Entity) -> None:
        if entity in self._index:
            self.remove(entity)

    def __contains__(self, entity: object) -> bool:
        return entity in self._index

    def __len__(self) -> int:
        return len(self._components)


class ComponentManager:
    """Registers component types and stores one array per type."""

    def __init__(self) -> None:
        self._type_ids: dict[type, int] = {}
        self._arrays: dict[type, ComponentArray[Any]] = {}

    def register_component(self, component_type: type) -> None:
        if component_type in self._type_ids:
            raise EcsError("Registering component type more than once.")
        if len(self._type_ids) >= MAX_COMPONENTS:
            raise EcsError("Too many component types.")
        self._type_ids[component_type] = len(self._type_ids)
        self._arrays[component_type] = ComponentArray()

    def component_type_id(self, component_type: type) -> int:
        try:
            return self._type_ids[component_type]
        except KeyError:
            raise EcsError("Component not registered before use.") from None

    def _array(self, component_type: type) -> ComponentArray[Any]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise EcsError("Component not registered before use.") from None

    def add_component(self, entity: Entity, component: Any) -> None:
        self._array(type(component)).insert(entity, component)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self._array(component_type).remove(entity)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        return self._array(component_type).get(entity)

    def try_get_component(self, entity: Entity, component_type: type[T]) -> Optional[T]:
        return self._array(component_type).try_get(entity)

    def has_component(self, entity: Entity, component_type: type) -> bool:
        return entity in self._array(component_type)

    def entity_destroyed(self, entity: Entity) -> None:
        for array in self._arrays.values():
            array.entity_destroyed(entity)


class EntityManager:
    """Hands out entity ids in FIFO order and keeps their signatures."""

    def __init__(self, max_entities: int = MAX_ENTITIES) -> None:
        self._max = max_entities
        self._available: deque[Entity] = deque(range(max_entities))
        self._signatures = [0] * max_entities
        self._living = 0

    def _check(self, entity: Entity) -> None:
        if not 0 <= entity < self._max:
            raise EcsError("Entity out of range.")

    def create_entity(self) -> Entity:
        if self._living >= self._max:
            raise EcsError("Too many entities in existence.")
        self._living += 1
        return self._available.popleft()

    def destroy_entity(self, entity: Entity) -> None:
        self._check(entity)
        self._signatures[entity] = 0
        self._available.append(entity)
        self._living -= 1

    def set_signature(self, entity: Entity, signature: int) -> None:
        self._check(entity)
        self._signatures[entity] = signature

    def get_signature(self, entity: Entity) -> int:
        self._check(entity)
        return self._signatures[entity]


class System:
    """Base for systems; holds the entities whose signature matches."""

    def __init__(self) -> None:
        self.entities: set[Entity] = set()


class SystemManager:
    """Keeps one instance per system type and its required signature."""

    def __init__(self) -> None:
        self._systems: dict[type, System] = {}
        self._signatures: dict[type, int] = {}

    def register_system(self, system_type: type[S]) -> S:
        system = self._systems.get(system_type)
        if system is None:
            system = system_type()
            self._systems[system_type] = system
        return system  # type: ignore[return-value]

    def set_signature(self, system_type: type, signature: int) -> None:
        if system_type not in self._systems:
            raise EcsError("System used before registered.")
        self._signatures[system_type] = signature

    def entity_destroyed(self, entity: Entity) -> None:
        for system in self._systems.values():
            system.entities.discard(entity)

    def entity_signature_changed(self, entity: Entity, signature: int) -> None:
        for system_type, system in self._systems.items():
            required = self._signatures.get(system_type, 0)
            if signature & required == required:
                system.entities.add(entity)
            else:
                system.entities.discard(entity)


class Coordinator:
    """Front door to entities, components and systems."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Drop every entity, component type and system."""
        self._components = ComponentManager()
        self._entities = EntityManager()
        self._systems = SystemManager()

    def create_entity(self) -> Entity:
        return self._entities.create_entity()

    def destroy_entity(self, entity: Entity) -> None:
        self._entities.destroy_entity(entity)
        self._components.entity_destroyed(entity)
        self._systems.entity_destroyed(entity)

    def register_component(self, component_type: type) -> None:
        self._components.register_component(component_type)

    def _set_bit(self, entity: Entity, component_type: type, present: bool) -> None:
        bit = 1 << self._components.component_type_id(component_type)
        signature = self._entities.get_signature(entity)
        signature = signature | bit if present else signature & ~bit
        self._entities.set_signature(entity, signature)
        self._systems.entity_signature_changed(entity, signature)

    def add_component(self, entity: Entity, component: Any) -> None:
        self._components.add_component(entity, component)
        self._set_bit(entity, type(component), True)

    def add_components(self, entity: Entity, *args: Any) -> None:
        for component in args:
            self.add_component(entity, component)

    def add_component_if_missing(self, entity: Entity, component: Any) -> None:
        if not self.has_component(entity, type(component)):
            self.add_component(entity, component)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        self._components.remove_component(entity, component_type)
        self._set_bit(entity, component_type, False)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        return self._components.get_component(entity, component_type)

    def try_get_component(self, entity: Entity, component_type: type[T]) -> Optional[T]:
        return self._components.try_get_component(entity, component_type)

    def has_component(self, entity: Entity, component_type: type) -> bool:
        return self._components.has_component(entity, component_type)

    def component_type_id(self, component_type: type) -> int:
        return self._components.component_type_id(component_type)

    def signature_of(self, *args: type) -> int:
        """Return the signature with the bits of the given component types set."""
        signature = 0
        for component_type in args:
            signature |= 1 << self.component_type_id(component_type)
        return signature

    def register_system(self, system_type: type[S]) -> S:
        return self._systems.register_system(system_type)

    def set_system_signature(self, system_type: type, signature: int) -> None:
        self._systems.set_signature(system_type, signature)