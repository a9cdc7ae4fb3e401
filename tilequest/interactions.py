"""Per-entity interaction callbacks."""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .world import World

__all__ = [
    "InteractionCallback",
    "set_interaction_callback",
    "get_interaction_callback",
    "interact_with",
    "interact_with_all",
]

InteractionCallback = Callable[[int], None]


@dataclass
class _InteractionCallback:
    callback: InteractionCallback


def set_interaction_callback(
    world: World, entity: int, callback: Optional[InteractionCallback]
) -> None:
    """Install a callback for ``entity``; passing None removes it."""
    if callback is not None:
        world.registry.emplace(entity, _InteractionCallback(callback))
    else:
        world.registry.remove(entity, _InteractionCallback)


def get_interaction_callback(
    world: World, entity: Optional[int]
) -> Optional[InteractionCallback]:
    component = world.registry.get(entity, _InteractionCallback)
    return component.callback if component is not None else None


def interact_with(world: World, entity: Optional[int]) -> None:
    """Call the entity's interaction callback, if it has one."""
    callback = get_interaction_callback(world, entity)
    if callback is not None:
        callback(entity)


def interact_with_all(world: World, entities: Iterable[Optional[int]]) -> None:
    """Interact with each entity in turn, such as those overlapping a box."""
    for entity in entities:
        interact_with(world, entity)