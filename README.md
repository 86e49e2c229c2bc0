# voidengine

Building blocks for a small game engine: an entity-component-system, a queued
event manager and a few utilities. It also has the enumerations and plain
records that describe windows, input, graphics state and resources.

## Installation

```
pip install voidengine
```

It needs Python 3.10 or newer and has no third-party dependencies.

## Entities and components

`voidengine.ecs.world.World` owns entities and their components. Any Python
object can be a component, and it is stored under its type. If you pass a type
instead of an instance, the world creates a component by calling the type with
no arguments. If the entity already has a component of that type, it returns the
existing one.

```python
from dataclasses import dataclass

from voidengine.ecs.entity import entity_index, entity_version
from voidengine.ecs.world import World


@dataclass
class Position:
    x: int = 0
    y: int = 0


@dataclass
class Velocity:
    x: int = 0
    y: int = 0


world = World()
player = world.create(Position(10, 20), Velocity(1, 0))
print(entity_index(player), entity_version(player))  # 0 0

for entity in world.query(Position, Velocity):
    position, velocity = world.fetch(entity, Position, Velocity)
    position.x += velocity.x

world.attach(player, Velocity)        # existing Velocity is returned
world.detach(player, Velocity)
assert not world.has(player, Velocity)
world.destroy(player)
assert player not in world
```

- `attach` and `fetch` return a single component for one argument and a tuple
  for several.
- `query()` with no types lists every entity that has at least one component.
- Operating on an entity that is not alive raises `KeyError`.
- Calling `attach`, `detach`, `fetch` or `has` without any component raises
  `TypeError`.

An entity is a plain integer. The slot index is in the upper 32 bits and the
version is in the lower 32 bits. Use `voidengine.ecs.entity.create_entity`,
`entity_index` and `entity_version` to build and read handles. When an entity is
destroyed, its slot is reused first-in first-out with the version incremented.
A stale handle therefore no longer counts as alive.

You can also use the lower-level pieces directly:

- `voidengine.ecs.entity_manager.EntityManager`: `create`, `destroy`, `contains`.
- `voidengine.ecs.component_pool.ComponentPool`: a sparse set of one component
  type, built with a factory for default components. It has `create`,
  `destroy`, `clear`, `get`, `contains` and `entities`.
- `voidengine.ecs.component_pool_manager.ComponentPoolManager`: one pool per
  component type, with `create`, `destroy`, `clear`, `get`, `contains` and
  `query`.

## Events

`voidengine.utility.event.EventManager` queues events and delivers them to the
listeners of their type when `poll()` is called. Events are delivered in the
order they were emitted.

```python
from voidengine.display.events import WindowSizeEvent
from voidengine.utility.event import EventManager

events = EventManager()
listener_id = events.add_listener(WindowSizeEvent, lambda e: print(e.size))
events.emit(WindowSizeEvent((800.0, 600.0)))
events.poll()                         # prints (800.0, 600.0)
events.remove_listener(WindowSizeEvent, listener_id)
```

- `emit` also accepts an event type. In that case it queues an instance of that
  type built with no arguments.
- `clear(event_type)` drops all listeners of a type.
- Removing an unknown listener id raises `KeyError`.
- If the manager was built with event types, any other type raises `TypeError`.
  `voidengine.display.events.WindowEvents` is such a manager. It is limited to
  the window event records in that module, for example `KeyboardKeyEvent`,
  `MouseButtonEvent` and `WindowSizeEvent`.

## Utilities

- `voidengine.utility.bit_mask.BitMask` holds enum flags such as `KeyMod` in
  one integer. It has these methods:
  - `set`, `unset`, `toggle`, `clear`, `is_set` and `value`.
  - `|`, `&` and `^`, together with their in-place forms. In-place `&=` clears
    the flag.
- `voidengine.utility.state.State` keeps a `current` and a `previous` value.
  `set` moves current to previous. `changed`, `entered` and `exited` report
  transitions.
- `voidengine.utility.timer.Timer` measures seconds with `start`, `stop`,
  `reset`, `elapsed` and `is_running`. The clock can be injected.
- `voidengine.utility.logger` writes lines of the form
  `HH:MM:SS.mmm: LEVEL: message` using `debug`, `info`, `warning`, `error` or
  `log`. Messages are formatted with `str.format`.
  - The default threshold is `Level.INFO`, and `Level.NONE` silences
    everything. Change it with `set_level`.
  - Output goes to standard output unless `set_output` is given another stream.

## Enumerations and records

- `voidengine.display.enums`: context, key, key action, modifier, mouse
  button, cursor mode and cursor shape enumerations.
- `voidengine.display.hints`: window creation hints (`Hints`, `WindowHints`,
  `FramebufferHints`, `ContextHints`, ...) and `VideoMode`.
- `voidengine.graphics.enums`: render state, buffer and camera enumerations
  carrying their OpenGL values.
- `voidengine.graphics.attributes`: the `Attributes` vertex record.
- `voidengine.resource.enums`: texture, shader and image enumerations.
- `voidengine.resource.records`: the `ShaderSource` and `Glyph` records.

## What it does not do

The package opens no windows and reads no input devices. It does not render,
and it does not load textures, shaders, images or fonts. The display, graphics
and resource modules only describe those things with enumerations and records.

## Running the tests

```
pip install -e ".[test]"
pytest
```