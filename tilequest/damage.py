"""Damage dealt to entities through per-entity callbacks."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Set

from .world import World

__all__ = [
    "DamageType",
    "Damage",
    "ApplyDamageCallback",
    "set_apply_damage_callback",
    "get_apply_damage_callback",
    "apply_damage",
    "apply_damage_to_all",
]


class DamageType(Enum):
    DEFAULT = "default"
    MELEE = "melee"
    PROJECTILE = "projectile"
    EXPLOSION = "explosion"


@dataclass(frozen=True)
class Damage:
    """An amount of damage; the source entity is never damaged by it."""

    type: DamageType = DamageType.DEFAULT
    amount: int = 0
    source: Optional[int] = None


ApplyDamageCallback = Callable[[int, Damage], bool]


@dataclass
class _DamageCallback:
    callback: ApplyDamageCallback


def set_apply_damage_callback(
    world: World, entity: int, callback: ApplyDamageCallback
) -> None:
    """Install the function called when ``entity`` takes damage."""
    world.registry.emplace(entity, _DamageCallback(callback))


def get_apply_damage_callback(
    world: World, entity: Optional[int]
) -> Optional[ApplyDamageCallback]:
    component = world.registry.get(entity, _DamageCallback)
    return component.callback if component is not None else None


def apply_damage(world: World, entity: Optional[int], damage: Damage) -> bool:
    """Damage one entity; return True if its callback reports damage was applied."""
    if entity is None:
        return False
    if entity == damage.source:
        return False
    callback = get_apply_damage_callback(world, entity)
    if callback is None:
        return False
    return bool(callback(entity, damage))


def apply_damage_to_all(
    world: World, entities: Iterable[Optional[int]], damage: Damage
) -> bool:
    """Damage each listed entity at most once; return True if any took damage."""
    damaged: Set[int] = set()
    for entity in entities:
        if entity is None or entity == damage.source or entity in damaged:
            continue
        if apply_damage(world, entity, damage):
            damaged.add(entity)
    return bool(damaged)