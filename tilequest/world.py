"""Entity lifetime, naming, tagging and editor properties on top of a registry."""

import copy
from dataclasses import dataclass, field
from typing import Any, List, Optional, Set

from .registry import Registry
from .tiled_types import Property, PropertyType, find_property


@dataclass
class Lifetime:
    """Seconds left before the entity is destroyed."""

    time: float = 0.0


@dataclass
class _Name:
    value: str


@dataclass
class _Tag:
    value: Any


@dataclass
class _Properties:
    values: List[Property] = field(default_factory=list)


class World:
    """Owns the entity registry and the set of entities pending destruction."""

    def __init__(self, registry: Optional[Registry] = None) -> None:
        self.registry = registry if registry is not None else Registry()
        self._to_destroy: Set[int] = set()

    # Creation and destruction

    def create(self, hint: Optional[int] = None) -> int:
        return self.registry.create(hint)

    def clear(self) -> None:
        self.registry.clear()
        self._to_destroy.clear()

    def deep_copy(self, entity: int) -> int:
        copied = self.registry.create()
        if self.registry.valid(entity):
            for component in self.registry.components(entity).values():
                self.registry.emplace(copied, copy.deepcopy(component))
        return copied

    def set_lifetime(self, entity: int, time: float) -> None:
        self.registry.emplace(entity, Lifetime(time))

    def update_lifetimes(self, dt: float) -> None:
        for entity, lifetime in self.registry.view(Lifetime):
            lifetime.time -= dt
            if lifetime.time <= 0.0:
                self.destroy_at_end_of_frame(entity)

    def destroy_immediately(self, entity: Optional[int]) -> None:
        if self.registry.valid(entity):
            self.registry.destroy(entity)

    def destroy_at_end_of_frame(self, entity: Optional[int]) -> None:
        if self.registry.valid(entity):
            self._to_destroy.add(entity)

    def destroy_entities_to_be_destroyed_at_end_of_frame(self) -> None:
        for entity in self._to_destroy:
            if self.registry.valid(entity):
                self.registry.destroy(entity)
        self._to_destroy.clear()

    def valid(self, entity: Optional[int]) -> bool:
        return self.registry.valid(entity)

    # Name and tag

    def set_name(self, entity: int, name: str) -> None:
        self.registry.emplace(entity, _Name(name))

    def set_tag(self, entity: int, tag: Any) -> None:
        self.registry.emplace(entity, _Tag(tag))

    def get_name(self, entity: Optional[int]) -> str:
        name = self.registry.get(entity, _Name)
        return name.value if name else ""

    def get_tag(self, entity: Optional[int]) -> Any:
        """Return the entity's tag, or None when it has none."""
        tag = self.registry.get(entity, _Tag)
        return tag.value if tag else None

    def find_entity_by_name(self, name: str) -> Optional[int]:
        if not name:
            return None
        return next(
            (entity for entity, other in self.registry.view(_Name) if other.value == name),
            None,
        )

    def find_entity_by_tag(self, tag: Any) -> Optional[int]:
        return next(
            (entity for entity, other in self.registry.view(_Tag) if other.value == tag),
            None,
        )

    # Editor properties

    def set_properties(self, entity: int, properties: List[Property]) -> None:
        self.registry.emplace(entity, _Properties(copy.deepcopy(list(properties))))

    def get_properties(self, entity: Optional[int]) -> Optional[List[Property]]:
        props = self.registry.get(entity, _Properties)
        return copy.deepcopy(props.values) if props else None

    def _property(self, entity: Optional[int], name: str, type: PropertyType) -> Any:
        props = self.registry.get(entity, _Properties)
        if props is None:
            return None
        return find_property(props.values, name, type)

    def get_string_property(self, entity: Optional[int], name: str) -> Optional[str]:
        return self._property(entity, name, PropertyType.STRING)

    def get_bool_property(self, entity: Optional[int], name: str) -> Optional[bool]:
        return self._property(entity, name, PropertyType.BOOL)

    def get_int_property(self, entity: Optional[int], name: str) -> Optional[int]:
        return self._property(entity, name, PropertyType.INT)

    def get_float_property(self, entity: Optional[int], name: str) -> Optional[float]:
        return self._property(entity, name, PropertyType.FLOAT)

    def get_object_property(self, entity: Optional[int], name: str) -> Optional[int]:
        return self._property(entity, name, PropertyType.OBJECT)