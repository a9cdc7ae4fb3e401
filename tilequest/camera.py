"""Cameras that follow targets, stay inside confining boxes, shake and blend."""

from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .easings import ease_out_expo
from .world import World

__all__ = [
    "DEFAULT_CAMERA_SIZE",
    "CAMERA_BLEND_DURATION",
    "Vec2",
    "NoiseFunction",
    "FollowFunction",
    "Camera",
    "CameraSystem",
    "confine_camera_center",
]

Vec2 = Tuple[float, float]
NoiseFunction = Callable[[float, float], float]
FollowFunction = Callable[[int], Optional[Vec2]]

# The size of the game framebuffer in pixels.
DEFAULT_CAMERA_SIZE: Vec2 = (320.0, 180.0)
CAMERA_BLEND_DURATION = 1.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


@dataclass
class Camera:
    """A view onto the world.

    The view is kept inside ``confines_min``/``confines_max``; along an axis
    where the confines are smaller than the view, the view is centred on them.
    The shake amplitude is ``shake_amplitude * trauma ** 2``, and trauma decays
    linearly by ``trauma_decay`` per second.
    """

    center: Vec2 = (0.0, 0.0)
    size: Vec2 = DEFAULT_CAMERA_SIZE
    confines_min: Vec2 = (0.0, 0.0)
    confines_max: Vec2 = (0.0, 0.0)
    shake_offset: Vec2 = (0.0, 0.0)
    shake_amplitude: float = 6.0
    shake_frequency: float = 10.0
    trauma: float = 0.0
    trauma_decay: float = 1.5
    entity_to_follow: Optional[int] = None


def confine_camera_center(
    center: Vec2, size: Vec2, confines_min: Vec2, confines_max: Vec2
) -> Vec2:
    """Move a view centre so the view lies inside the confining box."""
    confined = []
    for axis in range(2):
        low = confines_min[axis] + size[axis] / 2.0
        high = confines_max[axis] - size[axis] / 2.0
        if low < high:
            confined.append(_clamp(center[axis], low, high))
        else:
            confined.append((confines_min[axis] + confines_max[axis]) / 2.0)
    return (confined[0], confined[1])


@dataclass
class CameraSystem:
    """Updates every camera in a world and tracks the active one."""

    world: World
    _active_entity: Optional[int] = field(default=None, init=False)
    _last_center: Vec2 = field(default=(0.0, 0.0), init=False)
    _last_size: Vec2 = field(default=DEFAULT_CAMERA_SIZE, init=False)
    _active_center: Vec2 = field(default=(0.0, 0.0), init=False)
    _active_size: Vec2 = field(default=DEFAULT_CAMERA_SIZE, init=False)
    _shake_time: float = field(default=0.0, init=False)
    _blend_time: float = field(default=CAMERA_BLEND_DURATION, init=False)

    @property
    def active_entity(self) -> Optional[int]:
        return self._active_entity

    def update(
        self,
        dt: float,
        noise: Optional[NoiseFunction] = None,
        follow_position: Optional[FollowFunction] = None,
    ) -> None:
        """Advance all cameras.

        ``noise(x, y)`` drives the shake; without it cameras do not shake.
        ``follow_position(entity)`` gives the position of a followed entity, or
        None when it has none.
        """
        self._shake_time += dt
        self._blend_time = _clamp(self._blend_time + dt, 0.0, CAMERA_BLEND_DURATION)

        for _entity, camera in self.world.registry.view(Camera):
            if follow_position is not None and camera.entity_to_follow is not None:
                target = follow_position(camera.entity_to_follow)
                if target is not None:
                    camera.center = (float(target[0]), float(target[1]))

            camera.center = confine_camera_center(
                camera.center, camera.size, camera.confines_min, camera.confines_max
            )
            camera.trauma = _clamp(camera.trauma - camera.trauma_decay * dt, 0.0, 1.0)

            offset = (0.0, 0.0)
            if (
                noise is not None
                and camera.shake_amplitude
                and camera.shake_frequency
                and camera.trauma
            ):
                amplitude = camera.shake_amplitude * camera.trauma * camera.trauma
                t = camera.shake_frequency * self._shake_time
                offset = (amplitude * noise(0.0, t), amplitude * noise(1.0, t))

            # Keep the shake from pushing the view outside its confines.
            shaky = confine_camera_center(
                (camera.center[0] + offset[0], camera.center[1] + offset[1]),
                camera.size,
                camera.confines_min,
                camera.confines_max,
            )
            camera.shake_offset = (
                shaky[0] - camera.center[0],
                shaky[1] - camera.center[1],
            )

        active = self.get(self._active_entity)
        if active is not None:
            self._active_center = (
                active.center[0] + active.shake_offset[0],
                active.center[1] + active.shake_offset[1],
            )
            self._active_size = active.size
        else:
            self._active_center = (0.0, 0.0)
            self._active_size = DEFAULT_CAMERA_SIZE

    def active_view(self) -> Tuple[Vec2, Vec2]:
        """The active camera's ``(center, size)``; cuts hard between cameras."""
        return self._active_center, self._active_size

    def blended_view(self) -> Tuple[Vec2, Vec2]:
        """``(center, size)`` moving smoothly from the previous camera to the active one."""
        factor = ease_out_expo(self._blend_time / CAMERA_BLEND_DURATION)
        return (
            _lerp(self._last_center, self._active_center, factor),
            _lerp(self._last_size, self._active_size, factor),
        )

    def activate(self, entity: Optional[int], hard_cut: bool = False) -> bool:
        if not self.world.registry.has(entity, Camera):
            return False
        self._last_center = self._active_center
        self._last_size = self._active_size
        self._active_entity = entity
        self._blend_time = CAMERA_BLEND_DURATION if hard_cut else 0.0
        return True

    def emplace(self, entity: int, camera: Optional[Camera] = None) -> Camera:
        return self.world.registry.emplace(entity, camera if camera is not None else Camera())

    def get(self, entity: Optional[int]) -> Optional[Camera]:
        return self.world.registry.get(entity, Camera)

    def detach(self, entity: Optional[int]) -> Optional[int]:
        """Move the entity's camera onto a new entity and return that entity."""
        camera = self.get(entity)
        if camera is None:
            return None
        camera.entity_to_follow = None
        new_entity = self.world.create()
        self.world.registry.emplace(new_entity, camera)
        self.world.registry.remove(entity, Camera)
        if self._active_entity == entity:
            self._active_entity = new_entity
        return new_entity

    def add_trauma(self, entity: Optional[int], trauma: float) -> bool:
        camera = self.get(entity)
        if camera is None:
            return False
        camera.trauma += trauma
        return True

    def add_trauma_to_active(self, trauma: float) -> bool:
        if self._active_entity is None:
            return False
        return self.add_trauma(self._active_entity, trauma)