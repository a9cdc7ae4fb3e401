"""AI actions: small tasks such as waiting, moving, pursuing, fleeing and wandering.

Actions are independent of the rest of the AI so other systems can start them.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .world import World

__all__ = [
    "AiActionType",
    "AiActionStatus",
    "AiAction",
    "magnetic_field_line_at",
    "advance_running_times",
    "ai_none",
    "ai_wait",
    "ai_move_to",
    "ai_pursue",
    "ai_flee",
    "ai_wander",
]

Vec2 = Tuple[float, float]


class AiActionType(Enum):
    NONE = "None"  # do nothing; runs forever
    WAIT = "Wait"  # succeeds after the duration has elapsed
    MOVE_TO = "MoveTo"  # succeeds when close enough to the position
    PURSUE = "Pursue"  # succeeds when close enough to the entity
    FLEE = "Flee"  # succeeds when far enough from the entity
    WANDER = "Wander"  # runs forever, or for the duration if it is positive

    def __str__(self) -> str:
        return self.value


class AiActionStatus(Enum):
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


@dataclass
class AiAction:
    type: AiActionType = AiActionType.NONE
    status: AiActionStatus = AiActionStatus.RUNNING
    running_time: float = 0.0
    path: List[Tuple[int, int]] = field(default_factory=list)  # tile positions
    entity: Optional[int] = None
    position: Vec2 = (0.0, 0.0)
    speed: float = 0.0
    radius: float = 0.0
    duration: float = 0.0
    pathfind: bool = False


def _field_line(x: float, y: float) -> Vec2:
    x2 = x * x
    y2 = y * y
    r2 = x2 + y2
    if r2 > 0.0001:
        return ((x2 - y2) / r2, 2.0 * x * y / r2)
    return (1.0, 0.0)


def magnetic_field_line_at(pos: Vec2, field_rotation: float = 0.0) -> Vec2:
    """Unit direction of an idealised dipole field line at ``pos``.

    The dipole sits at the origin with its north pole along +x, rotated by
    ``field_rotation`` radians; field lines are taken to be perfect circles.
    """
    c = math.cos(field_rotation)
    s = math.sin(field_rotation)
    x, y = pos
    fx, fy = _field_line(c * x + s * y, -s * x + c * y)
    return (c * fx - s * fy, s * fx + c * fy)


def advance_running_times(world: World, dt: float) -> None:
    """Add ``dt`` to the running time of every action still running."""
    for _entity, action in world.registry.view(AiAction):
        if action.status is AiActionStatus.RUNNING:
            action.running_time += dt


def _replace(world: World, entity: int, action: AiAction) -> AiAction:
    return world.registry.emplace(entity, action)


def ai_none(world: World, entity: int) -> AiAction:
    return _replace(world, entity, AiAction(type=AiActionType.NONE))


def ai_wait(world: World, entity: int, duration: float) -> AiAction:
    return _replace(world, entity, AiAction(type=AiActionType.WAIT, duration=duration))


def ai_move_to(
    world: World,
    entity: int,
    target_position: Vec2,
    speed: float,
    acceptance_radius: float,
    pathfind: bool = False,
) -> AiAction:
    return _replace(
        world,
        entity,
        AiAction(
            type=AiActionType.MOVE_TO,
            position=target_position,
            speed=speed,
            radius=acceptance_radius,
            pathfind=pathfind,
        ),
    )


def ai_pursue(
    world: World,
    entity: int,
    target_entity: Optional[int],
    speed: float,
    acceptance_radius: float,
    pathfind: bool = False,
) -> AiAction:
    return _replace(
        world,
        entity,
        AiAction(
            type=AiActionType.PURSUE,
            entity=target_entity,
            speed=speed,
            radius=acceptance_radius,
            pathfind=pathfind,
        ),
    )


def ai_flee(
    world: World,
    entity: int,
    target_entity: Optional[int],
    speed: float,
    acceptance_radius: float,
) -> AiAction:
    return _replace(
        world,
        entity,
        AiAction(
            type=AiActionType.FLEE,
            entity=target_entity,
            speed=speed,
            radius=acceptance_radius,
        ),
    )


def ai_wander(
    world: World,
    entity: int,
    wander_center: Vec2,
    speed: float,
    wander_radius: float,
    duration: float = 0.0,
) -> AiAction:
    return _replace(
        world,
        entity,
        AiAction(
            type=AiActionType.WANDER,
            position=wander_center,
            speed=speed,
            radius=wander_radius,
            duration=duration,
        ),
    )