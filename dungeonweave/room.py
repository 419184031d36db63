"""A room placed in the dungeon: its placement, connections and runtime state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .room_data import BoxCenterAndExtent, RoomData
from .settings import get_settings
from .types import BoxMinAndMax, DoorDef, DoorDirection, IntVector, rotate, rotate_box


@dataclass(eq=False)
class RoomConnection:
    """What lies behind one door of a room."""

    other_room: Room | None = field(default=None, repr=False)
    other_door_index: int = -1
    door_instance: Any = None


class Room:
    """An instance of a :class:`RoomData` placed on the room grid."""

    def __init__(self, room_data: RoomData, generator: Any = None, room_id: int = 0) -> None:
        if room_data is None:
            raise ValueError("no room data provided")
        self.room_data = room_data
        self.generator = generator
        self.room_id = room_id
        self.position = IntVector(0, 0, 0)
        self.direction = DoorDirection.NORTH
        self.connections = [RoomConnection() for _ in room_data.doors]
        self.locked = False
        self.visible = True
        self.player_inside = False
        self.level: Any = None
        self._custom_data: dict[type, Any] = {}

    def __repr__(self) -> str:
        return (
            f"Room(id={self.room_id}, data={self.room_data.name!r}, "
            f"position={self.position}, direction={self.direction.name})"
        )

    # ----- connections -----

    def _check_connection_index(self, index: int) -> None:
        if not 0 <= index < len(self.connections):
            raise IndexError(f"connection index {index} out of range")

    def _check_door_index(self, door_index: int) -> None:
        if not 0 <= door_index < len(self.room_data.doors):
            raise IndexError(f"door index {door_index} out of range")

    def is_connected(self, index: int) -> bool:
        self._check_connection_index(index)
        return self.connections[index].other_room is not None

    def set_connection(self, index: int, room: Room | None, other_index: int) -> None:
        self._check_connection_index(index)
        connection = self.connections[index]
        connection.other_room = room
        connection.other_door_index = other_index

    def get_connection(self, index: int) -> Room | None:
        self._check_connection_index(index)
        return self.connections[index].other_room

    def first_empty_connection(self) -> int | None:
        """Index of the first door with nothing behind it, or None."""
        return next(
            (i for i, c in enumerate(self.connections) if c.other_room is None), None
        )

    def lock(self, locked: bool) -> None:
        self.locked = locked

    # ----- doors -----

    def door_world_orientation(self, door_index: int) -> DoorDirection:
        self._check_door_index(door_index)
        return self.room_data.doors[door_index].direction + self.direction

    def door_world_position(self, door_index: int) -> IntVector:
        self._check_door_index(door_index)
        return self.room_to_world(self.room_data.doors[door_index].position)

    def door_index_at(self, world_pos: IntVector, world_rot: DoorDirection) -> int | None:
        """Index of the door at a world cell with a world facing, or None."""
        local_pos = self.world_to_room(world_pos)
        local_rot = self.world_to_room_direction(world_rot)
        return next(
            (
                i
                for i, door in enumerate(self.room_data.doors)
                if door.position == local_pos and door.direction == local_rot
            ),
            None,
        )

    def is_door_instanced(self, door_index: int) -> bool:
        self._check_door_index(door_index)
        return self.connections[door_index].door_instance is not None

    def set_door_instance(self, door_index: int, door: Any) -> None:
        self._check_door_index(door_index)
        self.connections[door_index].door_instance = door

    def other_door_index(self, door_index: int) -> int:
        self._check_door_index(door_index)
        return self.connections[door_index].other_door_index

    def get_door(self, door_index: int) -> Any:
        if not 0 <= door_index < len(self.connections):
            return None
        return self.connections[door_index].door_instance

    def all_doors(self) -> list[Any]:
        return [c.door_instance for c in self.connections if c.door_instance is not None]

    # ----- coordinate conversions -----

    def world_to_room(self, world_pos: IntVector) -> IntVector:
        return rotate(world_pos - self.position, -self.direction)

    def room_to_world(self, room_pos: IntVector) -> IntVector:
        return rotate(room_pos, self.direction) + self.position

    def world_to_room_direction(self, world_rot: DoorDirection) -> DoorDirection:
        return world_rot - self.direction

    def room_to_world_direction(self, room_rot: DoorDirection) -> DoorDirection:
        return room_rot + self.direction

    def world_to_room_box(self, world_box: BoxMinAndMax) -> BoxMinAndMax:
        return rotate_box(world_box - self.position, -self.direction)

    def room_to_world_box(self, room_box: BoxMinAndMax) -> BoxMinAndMax:
        return rotate_box(room_box, self.direction) + self.position

    # ----- placement -----

    def set_rotation_from_door(self, door_index: int, world_rot: DoorDirection) -> None:
        self._check_door_index(door_index)
        self.direction = world_rot - self.room_data.doors[door_index].direction

    def set_position_from_door(self, door_index: int, world_pos: IntVector) -> None:
        self._check_door_index(door_index)
        door_pos = self.room_data.doors[door_index].position
        self.position = world_pos - rotate(door_pos, self.direction)

    def set_position_and_rotation_from_door(
        self, door_index: int, world_pos: IntVector, world_rot: DoorDirection
    ) -> None:
        """Place the room so that the given door sits at a world cell with a world facing."""
        self.set_rotation_from_door(door_index, world_rot)
        self.set_position_from_door(door_index, world_pos)

    def is_occupied(self, cell: IntVector) -> bool:
        local = self.world_to_room(cell)
        box = self.room_data.int_bounds()
        return (
            box.min.x <= local.x < box.max.x
            and box.min.y <= local.y < box.max.y
            and box.min.z <= local.z < box.max.z
        )

    def try_connect_to_existing_doors(self, rooms: list[Room]) -> None:
        """Connect each free door to a compatible door of a room right behind it."""
        for i, door in enumerate(self.room_data.doors):
            if self.is_connected(i):
                continue
            direction = self.door_world_orientation(i)
            pos = self.door_world_position(i) + direction.to_int_vector()
            other = Room.room_at(pos, rooms)
            if other is None:
                continue
            j = other.door_index_at(pos, ~direction)
            if j is not None and DoorDef.are_compatible(door, other.room_data.doors[j]):
                Room.connect(self, i, other, j)

    # ----- bounds -----

    def _world_offset(self) -> tuple[float, float, float]:
        unit = get_settings().room_unit
        return tuple(u * p for u, p in zip(unit, self.position))

    def bounds(self) -> BoxCenterAndExtent:
        return self.room_data.bounds(self._world_offset(), self.direction)

    def local_bounds(self) -> BoxCenterAndExtent:
        return self.room_data.bounds()

    def int_bounds(self) -> BoxMinAndMax:
        return self.room_to_world_box(self.room_data.int_bounds())

    # ----- runtime state -----

    def set_visible(self, visible: bool) -> None:
        if visible == self.visible:
            return
        self.visible = visible
        if get_settings().use_legacy_occlusion and self.level is not None:
            self.level.set_actors_visible(visible)

    def set_player_inside(self, player_inside: bool) -> None:
        self.player_inside = player_inside

    # ----- custom data -----

    def create_custom_data(self, data_type: type | None) -> bool:
        """Create an instance of data_type for this room; False if none or already present."""
        if data_type is None or self.has_custom_data(data_type):
            return False
        self._custom_data[data_type] = data_type()
        return True

    def get_custom_data(self, data_type: type) -> Any:
        datum = self._custom_data.get(data_type)
        if datum is None or not isinstance(datum, data_type):
            return None
        return datum

    def has_custom_data(self, data_type: type) -> bool:
        return data_type in self._custom_data

    # ----- static helpers -----

    @staticmethod
    def overlap(a: Room, b: Room) -> bool:
        return BoxMinAndMax.overlap(a.int_bounds(), b.int_bounds())

    @staticmethod
    def overlaps_any(room: Room, rooms: list[Room]) -> bool:
        return any(Room.overlap(room, other) for other in rooms)

    @staticmethod
    def connect(room_a: Room, door_a: int, room_b: Room, door_b: int) -> None:
        room_a.set_connection(door_a, room_b, door_b)
        room_b.set_connection(door_b, room_a, door_a)

    @staticmethod
    def room_at(cell: IntVector, rooms: list[Room]) -> Room | None:
        return next((r for r in rooms if r is not None and r.is_occupied(cell)), None)