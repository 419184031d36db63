# dungeonweave

Building blocks for dungeons made of hand-made room templates laid out on a
grid. Each room occupies a box of grid cells and has doors on its edges. You
place rooms door to door, turn them to fit, reject placements that overlap,
and then query the resulting graph of rooms: count rooms by template, find
rooms carrying some custom data, or find a path that avoids locked rooms.

## Installation

```
pip install dungeonweave
```

The package has no dependencies outside the standard library.

## Modules

- `dungeonweave.settings`: `DungeonSettings` and the global settings accessors
  `get_settings()`, `set_settings()` and `reset_settings()`.
- `dungeonweave.types`: grid math and door types: `IntVector`, `int_min`,
  `int_max`, `DoorDirection`, `DoorType`, `door_type_size`, `DoorDef`,
  `BoxMinAndMax`, `rotate`, `rotate_box`, and the enums `GenerationState`,
  `GenerationType` and `SeedType`.
- `dungeonweave.units`: conversions between grid cells and world space:
  `to_world_location`, `to_room_location`, `to_room_vector`, `snap_point`.
- `dungeonweave.room_data`: `RoomData` (a room template) and
  `BoxCenterAndExtent` (a world-space box).
- `dungeonweave.room`: `Room` (a placed copy of a template) and
  `RoomConnection`.
- `dungeonweave.graph`: `DungeonGraph`, `GraphState`, `find_path` and
  `traverse_rooms`.
- `dungeonweave.trigger`: `TriggerZone`, which counts actors inside it and
  activates past a threshold.
- `dungeonweave.room_level`: `RoomLevel`, which holds a room's actors, and
  the `RoomVisitor` base class.
- `dungeonweave.visibility`: `RoomVisibilityComponent` and `VisibilityMode`,
  which show or hide a moving object according to the rooms it stands in.

## Grid math and directions

`DoorDirection` has `NORTH`, `EAST`, `SOUTH`, `WEST` and `NONE`. Adding two
directions combines their quarter turns, subtracting undoes one, `-d` is the
reverse turn, and `~d` (or `d.opposite()`) is the opposite facing. `next()`
and `previous()` turn a quarter clockwise or counter-clockwise. Arithmetic on
`NONE` raises `ValueError`.

```python
from dungeonweave.types import BoxMinAndMax, DoorDirection, IntVector, rotate_box

assert DoorDirection.EAST + DoorDirection.EAST is DoorDirection.SOUTH
assert ~DoorDirection.WEST is DoorDirection.EAST

box = BoxMinAndMax(IntVector(3, 2, 1), IntVector(-1, -2, -3))
assert box.min == IntVector(-1, -2, -3)   # corners are always reordered
assert box.size() == IntVector(4, 4, 4)

turned = rotate_box(BoxMinAndMax(IntVector(-1, 0, -1), IntVector(3, 1, 1)), DoorDirection.EAST)
assert (turned.min, turned.max) == (IntVector(0, -1, -1), IntVector(1, 3, 1))
```

`BoxMinAndMax.overlap(a, b)` is true only when the boxes share volume;
touching faces do not count.

## Room templates

A `RoomData` holds a name, a level identifier, its extent (`first_point`,
`second_point`), its doors and a set of custom data types. Two doors are
compatible when they have the same `DoorType` (or both have none).

```python
from dungeonweave.room_data import RoomData
from dungeonweave.types import DoorDef, DoorDirection, IntVector

corridor = RoomData(
    name="corridor",
    level="corridor_level",
    doors=[
        DoorDef(IntVector(0, 0, 0), DoorDirection.NORTH),
        DoorDef(IntVector(0, 0, 0), DoorDirection.SOUTH),
    ],
)
assert corridor.validate() == []
```

`validate()` returns a list of messages describing problems: no level, a size
of zero on some axis, no doors, a door outside the room or not on the edge it
faces (see `is_door_valid`), duplicated doors, or `None` among the custom data.

`bounds(offset, rotation)` gives the room's world-space `BoxCenterAndExtent`,
using the cell size from the settings.

## Placing rooms and building a graph

```python
from dungeonweave.graph import DungeonGraph, find_path
from dungeonweave.room import Room

graph = DungeonGraph()
first = Room(corridor, room_id=0)
graph.add_room(first)

# The cell just outside the first room's north door, facing back into it.
facing = first.door_world_orientation(0)
cell = first.door_world_position(0) + facing.to_int_vector()

second = Room(corridor, room_id=1)
second.set_position_and_rotation_from_door(1, cell, ~facing)
if not Room.overlaps_any(second, list(graph.rooms)):
    Room.connect(second, 1, first, 0)
    second.try_connect_to_existing_doors(list(graph.rooms))
    graph.add_room(second)

assert find_path(first, second) == [first, second]
```

A `Room` converts between its own cells and world cells with `room_to_world`,
`world_to_room`, the `_direction` and `_box` variants, and reports
`is_occupied(cell)`, `int_bounds()` and `bounds()`. `Room.room_at(cell, rooms)`
returns the room covering a cell. Door indices out of range raise
`IndexError`; `door_index_at` and `first_empty_connection` return `None` when
nothing matches.

Each room can carry custom data: `create_custom_data(SomeType)` makes one
instance per type, `has_custom_data` and `get_custom_data` read it back.
`DungeonGraph.init_rooms()` creates the custom data listed in each room's
template, then calls `initialize_room(room, graph)` on each template.

### Graph queries

`DungeonGraph` offers `count()`, `rooms_from_data`, `rooms_from_data_list`,
`first_room_from_data`, `rooms_with_custom_data`,
`rooms_with_all_custom_data`, `rooms_with_any_custom_data`,
`count_room_data`, `count_total_room_data`, `count_room_type`,
`count_total_room_type` and the matching `has_already_*` checks,
`room_at(cell)`, `room_by_index(index)` and `random_room(rooms, rng)` with a
`random.Random`.

It also carries a `GraphState`: `request_generation()`, `request_unload()` and
`mark_synchronized()` set it, and `is_dirty()` and
`is_requesting_generation()` read it.

### Pathfinding

`find_path(start, goal, ignore_locked=False)` runs a bidirectional
breadth-first search over room connections and returns the list of rooms from
`start` to `goal`, or `None` when there is no path. A path from a room to
itself is always `[room]`. Unless `ignore_locked` is true, locked rooms
(`room.lock(True)`) block the way, including as start or goal.
`DungeonGraph.has_valid_path` returns whether such a path exists.

`traverse_rooms(rooms, distance, func)` returns every room at most
`distance - 1` connections away from any of the given rooms and calls `func`
on each room reached.

## Runtime pieces

- `TriggerZone` keeps a list of actors (optionally only instances of
  `actor_type`). It activates once `required_actor_count` actors are inside,
  after `activation_delay` if one is set, and deactivates when any actor
  leaves. Time only passes through `advance(elapsed)`, which also fires the
  periodic tick every `tick_duration`. Callbacks go in `on_actor_enter`,
  `on_actor_exit`, `on_activation`, `on_deactivation` and `on_trigger_tick`.
- `RoomLevel` holds a room's actors (objects with a `hidden` attribute).
  `attach(room)` binds it to a room; afterwards `room.set_visible(...)` hides
  or shows the actors, skipping those whose `replicated` attribute is true,
  and calls the listeners in `visibility_changed`. `trigger_actor(actor,
  inside)` tells `RoomVisitor` actors, and `RoomVisitor` objects in the
  actor's `components`, when they enter or leave.
- `RoomVisibilityComponent` is a `RoomVisitor` that makes its owner (an
  object with a `visible` attribute) visible while at least one visible room
  level holds it. `VisibilityMode` can force it hidden, force it visible, or
  leave it to you.

## Settings

`get_settings()` returns the `DungeonSettings` in effect: the size of one
grid cell (`room_unit`), the default door size, the door height offset,
whether occlusion is on and how far it reaches, whether dynamic actors are
occluded, and a few flags for debugging. `set_settings()` replaces them (and
raises `TypeError` for anything that is not a `DungeonSettings`);
`reset_settings()` restores the defaults.

## What this package does not do

- It has no generator that picks templates, grows a dungeon door by door and
  retries until a layout is accepted. The placement helpers above are the
  pieces such a loop is built from; the loop itself is yours to write.
- It has no door objects that open, close or lock between rooms; a room's
  connections only store whatever you put in them with `set_door_instance`.
- It loads no level assets and draws nothing. Levels, actors and owners are
  plain Python objects that you supply.
- It has no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```