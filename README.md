# tilequest

Core gameplay systems for a top-down, tile-based adventure game, written as
plain Python with no third-party dependencies.

## What is inside

- `tilequest.easings`: easing curves (`ease_in_sine`, `ease_out_sine`,
  `ease_in_out_sine`, `ease_in_quad`, `ease_out_quad`, `ease_in_out_quad`,
  `ease_in_expo`, `ease_out_expo`, `ease_in_out_expo`) mapping `[0, 1]` onto
  `[0, 1]`.
- `tilequest.pool`: a generational `Pool` that hands out `Handle`s. A handle
  stops resolving (`get` returns `None`) once its slot is freed, even if the
  slot is later reused.
- `tilequest.tiled_types`: data classes for tile maps and tilesets (`Map`,
  `Layer`, `Tileset`, `Tile`, `Frame`, `Object`, `WangSet`, `TileGid`,
  `Property`, ...) and `find_property` for lookup by name and `PropertyType`.
  `TileGid` splits a 32-bit value into the tile id and its flip flags.
- `tilequest.registry`: a small entity/component `Registry`. Entities are
  integers and each holds at most one component per type. `view(*types)`
  yields `(entity, *components)`.
- `tilequest.world`: a `World` over a registry with names, tags, editor
  properties, `Lifetime`s, deep copies and deferred destruction.
- `tilequest.commands`: typed console commands (`Command`, `Param`,
  `ParamType`) in a `CommandRegistry` that parses and runs command lines. A
  command that is unknown, has no callback, or gets missing or badly typed
  arguments raises `CommandError`.
- `tilequest.console`: a `Console` with built-in commands (`help`, `clear`,
  `sleep`, `log`, `log_error`, `execute`, `execute_script`, `bind`,
  `unbind`). It keeps a bounded log history (`LogEntry`, `LogKind`) and a
  command history that you step through with `previous_command` and
  `next_command`. It can defer commands and run script files, completes names
  with `complete`, and binds keys to commands.
- `tilequest.damage` and `tilequest.interactions`: per-entity damage and
  interaction callbacks. `apply_damage_to_all` and `interact_with_all` take
  the entities to affect, for example the result of an overlap query.
- `tilequest.animations`: `TileAnimation`, driven by a tileset's frame lists,
  and grid-based `FlipbookAnimation`, with `update_tile_animations` and
  `update_flipbook_animations` to advance every entity in a world.
- `tilequest.camera`: `Camera` components and a `CameraSystem` that handles
  following, confinement (`confine_camera_center`), trauma-based shake from a
  noise function you supply, and blending between active cameras.
- `tilequest.ai_action`: `AiAction` components with `ai_none`, `ai_wait`,
  `ai_move_to`, `ai_pursue`, `ai_flee` and `ai_wander`. There are also
  `advance_running_times` and `magnetic_field_line_at`, a dipole field-line
  helper for smoothing movement along a path.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short tour

```python
from tilequest.easings import ease_out_expo
from tilequest.pool import Pool
from tilequest.world import World

ease_out_expo(1.0)           # 1.0

pool = Pool()
handle = pool.emplace("footsteps")
pool.get(handle)             # "footsteps"
pool.free(handle)
pool.get(handle)             # None

world = World()
player = world.create()
world.set_name(player, "hero")
world.find_entity_by_name("hero") == player   # True
world.set_lifetime(player, 0.5)
world.update_lifetimes(1.0)
world.destroy_entities_to_be_destroyed_at_end_of_frame()
world.valid(player)          # False
```

Commands get one positional argument for each parameter:

```python
from tilequest.commands import Command, CommandRegistry, Param, ParamType

registry = CommandRegistry()
registry.add(Command(
    name="greet",
    desc="Greets someone",
    params=[Param(ParamType.STRING, "who", "Who to greet")],
    callback=lambda who: print("hello", who),
))
registry.parse_and_execute('greet "old friend"')   # prints: hello old friend
```

The console writes errors to its history and does not raise them:

```python
from tilequest.console import Console

console = Console()
console.execute("log hello")
console.history[-1].text          # "hello"
console.execute("nope")
console.history[-1].text          # "Unknown command: nope"
console.visible                   # True: errors show the console

console.execute("sleep 1")
console.execute("log later", defer=True)
console.update(0.5)               # still sleeping; "log later" waits
console.update(0.6)               # runs "log later"
```

## What it does not do

The package contains game logic only. It does not open a window, draw sprites
or text, play audio, simulate physics, load map files from disk, or find
paths. It has no game loop and no command to start a game. The AI actions
store what an entity should do, but the package does not move entities. The
camera follows whatever positions your `follow_position` function returns.