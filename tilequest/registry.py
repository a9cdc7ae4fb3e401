"""An entity-component store keyed by component type."""

from typing import Any, Dict, Iterator, Optional, Tuple, Type


class Registry:
    """Entities are integers; each holds at most one component per type."""

    def __init__(self) -> None:
        self._alive: Dict[int, None] = {}
        self._next = 0
        self._storages: Dict[type, Dict[int, Any]] = {}

    def create(self, hint: Optional[int] = None) -> int:
        """Create an entity, using ``hint`` as its id when that id is free."""
        if hint is not None and hint >= 0 and hint not in self._alive:
            entity = hint
            self._next = max(self._next, hint + 1)
        else:
            while self._next in self._alive:
                self._next += 1
            entity = self._next
            self._next += 1
        self._alive[entity] = None
        return entity

    def valid(self, entity: Optional[int]) -> bool:
        return entity is not None and entity in self._alive

    def destroy(self, entity: int) -> None:
        if not self.valid(entity):
            raise ValueError(f"invalid entity: {entity!r}")
        for storage in self._storages.values():
            storage.pop(entity, None)
        del self._alive[entity]

    def clear(self) -> None:
        self._alive.clear()
        self._storages.clear()

    def emplace(self, entity: int, component: Any) -> Any:
        """Attach ``component``, replacing any component of the same type."""
        if not self.valid(entity):
            raise ValueError(f"invalid entity: {entity!r}")
        self._storages.setdefault(type(component), {})[entity] = component
        return component

    def get(self, entity: Optional[int], component_type: Type) -> Optional[Any]:
        storage = self._storages.get(component_type)
        if storage is None or entity is None:
            return None
        return storage.get(entity)

    def has(self, entity: Optional[int], component_type: Type) -> bool:
        storage = self._storages.get(component_type)
        return storage is not None and entity in storage

    def remove(self, entity: Optional[int], component_type: Type) -> bool:
        storage = self._storages.get(component_type)
        if storage is None or entity not in storage:
            return False
        del storage[entity]
        return True

    def components(self, entity: int) -> Dict[type, Any]:
        return {
            component_type: storage[entity]
            for component_type, storage in self._storages.items()
            if entity in storage
        }

    def view(self, *args: Type) -> Iterator[Tuple[Any, ...]]:
        """Yield ``(entity, *components)`` for entities holding all given types."""
        if not args:
            raise TypeError("view() needs at least one component type")
        storages = [self._storages.get(t, {}) for t in args]
        first, rest = storages[0], storages[1:]
        for entity in list(first):
            if entity not in first or not all(entity in s for s in rest):
                continue
            yield (entity, *(s[entity] for s in storages))