"""Tile animations driven by tileset frame lists, and grid flipbook animations."""

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .tiled_types import Tileset
from .world import World

__all__ = [
    "TileAnimation",
    "FlipbookAnimation",
    "update_tile_animations",
    "update_flipbook_animations",
]


@dataclass
class TileAnimation:
    """Plays the frame list of one tile in a tileset.

    ``progress`` is normalised time in [0, 1]. After each update ``dirty`` says
    whether the displayed tile changed and ``looped`` whether playback wrapped.
    """

    tileset_id: Optional[int] = None
    tile_id: Optional[int] = None
    progress: float = 0.0
    speed: float = 1.0
    loop: bool = True
    previous_tile_id: Optional[int] = field(default=None, init=False)
    animated_tile_id: Optional[int] = field(default=None, init=False)
    frame_id: int = field(default=0, init=False)
    dirty: bool = field(default=False, init=False)
    looped: bool = field(default=False, init=False)

    def update(self, dt: float, tileset: Optional[Tileset]) -> None:
        self.dirty = False
        self.looped = False

        if self.tile_id != self.previous_tile_id:
            self.previous_tile_id = self.tile_id
            self.animated_tile_id = self.tile_id
            self.frame_id = 0
            # Progress is kept so that switching between walk cycles does not restart them.
            self.dirty = True

        if tileset is None or self.tile_id is None:
            return
        if not 0 <= self.tile_id < len(tileset.tiles):
            return
        frames = tileset.tiles[self.tile_id].animation
        if not frames:
            return

        duration_ms = sum(frame.duration_ms for frame in frames)
        if not duration_ms:
            return

        self.progress += self.speed * dt * 1000.0 / duration_ms
        if self.progress >= 1.0:
            if self.loop:
                self.looped = True
                self.progress = math.fmod(self.progress, 1.0)
            else:
                self.progress = 1.0

        time_ms = int(self.progress * duration_ms)
        for frame_id, frame in enumerate(frames):
            if time_ms >= frame.duration_ms:
                time_ms -= frame.duration_ms
                continue
            if frame_id != self.frame_id:
                self.animated_tile_id = frame.tile_id
                self.frame_id = frame_id
                self.dirty = True
            break


@dataclass
class FlipbookAnimation:
    """Plays a texture laid out as a grid of frames, row by row, in a loop."""

    rows: int = 0
    columns: int = 0
    fps: float = 0.0
    time: float = 0.0

    def update(self, dt: float) -> None:
        if self.rows <= 0 or self.columns <= 0 or self.fps <= 0.0:
            return
        duration = self.rows * self.columns / self.fps
        self.time += dt
        if self.time >= duration:
            self.time = math.fmod(self.time, duration)

    def texture_rect(self) -> Optional[Tuple[float, float, float, float]]:
        """Current frame as normalised ``(x, y, width, height)``, or None if the grid is empty."""
        if self.rows <= 0 or self.columns <= 0:
            return None
        frame = int(self.time * self.fps)
        row, col = divmod(frame, self.columns)
        frame_width = 1.0 / self.columns
        frame_height = 1.0 / self.rows
        return (col * frame_width, row * frame_height, frame_width, frame_height)


def update_tile_animations(world: World, tilesets: Sequence[Tileset], dt: float) -> None:
    """Advance every entity's tile animation against its tileset."""
    for _entity, animation in world.registry.view(TileAnimation):
        tileset_id = animation.tileset_id
        tileset = (
            tilesets[tileset_id]
            if tileset_id is not None and 0 <= tileset_id < len(tilesets)
            else None
        )
        animation.update(dt, tileset)


def update_flipbook_animations(world: World, dt: float) -> None:
    for _entity, animation in world.registry.view(FlipbookAnimation):
        animation.update(dt)