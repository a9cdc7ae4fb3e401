"""A slot pool addressed by generational handles."""

from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")

_GENERATION_MASK = 0xFFFF


@dataclass(frozen=True)
class Handle:
    """Index plus generation; generation 0 never refers to a live slot."""

    index: int = 0
    generation: int = 0


class Pool(Generic[T]):
    """Stores values in reusable slots; stale handles resolve to None."""

    def __init__(self) -> None:
        self._data: List[T] = []
        self._generations: List[int] = []
        self._freelist: List[int] = []

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()
        self._generations.clear()
        self._freelist.clear()

    def emplace(self, value: T) -> Handle:
        if not self._freelist:
            index = len(self._data)
            self._generations.append(1)  # valid generations start at 1
            self._data.append(value)
            return Handle(index, 1)
        index = self._freelist.pop()
        self._data[index] = value
        return Handle(index, self._generations[index])

    def get(self, handle: Handle) -> Optional[T]:
        if not self._is_current(handle):
            return None
        return self._data[handle.index]

    def free(self, handle: Handle) -> None:
        if not self._is_current(handle):
            return
        index = handle.index
        self._generations[index] = (self._generations[index] + 1) & _GENERATION_MASK
        self._freelist.append(index)

    def _is_current(self, handle: Handle) -> bool:
        return (
            0 <= handle.index < len(self._data)
            and handle.generation == self._generations[handle.index]
        )