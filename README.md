# game2d

Core building blocks for a 2D role-playing game, in plain Python with no
runtime dependencies.

## Modules

### `game2d.enums`

The game's enumerations, all `IntEnum` subclasses with upper-case member
names: `Action`, `Alignment`, `Anchor`, `Attribute`, `Biome`, `Body`,
`Build`, `Building`, `Codex`, `Color`, `Consumable`, `Entity`, `Equipment`,
`Event`, `Folder`, `Font`, `FontStyle`, `Frame`, `Graphic`, `Hability`,
`HabilityFrame`, `Hand`, `HudRoute`, `Icon`, `Item`, `Language`, `LogLevel`,
`LoggerLevel`, `Mouse`, `Opacity`, `Place`, `Primary`, `Profession`,
`Proficiency`, `Quality`, `Race`, `Skill`, `Sound`, `Terrain`, `ViewRoute`,
`MusicVolume`, `SoundVolume`, `WindowMode`, `WindowResolution` and
`WorldSize`.

Most count up from 0 in declaration order. Some carry fixed codes:
`Attribute` conditions are negative (`POISONED = -1` down to `LULLED = -16`),
`Mouse.NONE` is `-99`, `Frame` holds frame-rate limits (30, 60, 75),
`Opacity` alpha values (0, 64, 128, 255), `Skill` starts at 1 for gathering
and 11 for crafting, `WorldSize` runs from `TINY = 12` to `VERY_LARGE = 64`,
and `MusicVolume` / `SoundVolume` are volume steps in percent.

### `game2d.event`

`Event` is a small multicast dispatcher:

- `subscribe(handler)` registers a callable and returns an integer id
  (ids start at 1 and are never reused);
- `unsubscribe(event_id)` removes that handler; unknown ids are ignored;
- `invoke(sender)` calls every handler with `sender`, in subscription order;
- `len(event)` is the number of subscribed handlers.

### `game2d.vector`

`Vector2` is a frozen float pair (`x`, `y`).

`VectorAdapter(horizontal=0, vertical=0, row=0, column=0)` holds unsigned
16-bit coordinates and an 8-bit grid row and column; values wrap to those
widths. `+`, `-`, `*` and `/` work with another `VectorAdapter` (component
by component) or with an `int` (applied to both coordinates). They change
only the coordinates, wrap like unsigned 16-bit integers, and `/` is integer
division. The plain operators return a new vector; `+=`, `-=`, `*=` and
`/=` change the vector in place. `from_vector2()` builds one from a
`Vector2`, truncating; `to_vector2()` converts back. Two vectors are equal
when all four fields match. `str()` gives `VA -> H:.. V:.. R:.. C:..`.

### `game2d.viewport`

`ViewportAdapter(size=None, center=None)` keeps copies of a size and a center
vector, a `position` set from the initial center, and a `zoom` attribute
(default `1.0`). `size` and `center` are properties whose setters store a
copy; `reset(rect)` replaces the size. `to_camera()` returns a frozen
`Camera2D` whose `offset` is the size, `target` the center, `rotation` 0
and `zoom` the current zoom.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from game2d.enums import Race, Profession
from game2d.event import Event
from game2d.vector import VectorAdapter
from game2d.viewport import ViewportAdapter

print(Race.ELF.value, Profession.RANGER.value)  # 2 9

on_hit = Event()
hits = []
handler_id = on_hit.subscribe(hits.append)
on_hit.invoke("goblin")
on_hit.unsubscribe(handler_id)
print(hits, len(on_hit))  # ['goblin'] 0

position = VectorAdapter(10, 20, 1, 2)
position += 5
print(position)  # VA -> H:15 V:25 R:1 C:2

viewport = ViewportAdapter(VectorAdapter(800, 600), VectorAdapter(400, 300))
viewport.zoom = 2
print(viewport.to_camera())
```

## What this package does not do

There is no game here to run: no window, no rendering, no input handling,
no audio playback and no game loop. `Camera2D` and `Vector2` are plain data
descriptions, not bound to any graphics library, and the package offers no
command-line entry point.