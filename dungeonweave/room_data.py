"""Static description of a room: its extent in cells, its doors and its data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .settings import get_settings
from .types import BoxMinAndMax, DoorDef, DoorDirection, IntVector

Vector = tuple[float, float, float]


def _rotate_vector(vector: Vector, rot: DoorDirection) -> Vector:
    """Rotate a float vector around the vertical axis by a direction."""
    x, y, z = vector
    if rot is DoorDirection.NORTH:
        return (x, y, z)
    if rot is DoorDirection.EAST:
        return (-y, x, z)
    if rot is DoorDirection.SOUTH:
        return (-x, -y, z)
    if rot is DoorDirection.WEST:
        return (y, -x, z)
    raise ValueError("cannot rotate by an invalid direction")


@dataclass(frozen=True)
class BoxCenterAndExtent:
    """A world-space box given by its center and half size."""

    center: Vector = (0.0, 0.0, 0.0)
    extent: Vector = (0.0, 0.0, 0.0)

    @property
    def min(self) -> Vector:
        return tuple(c - e for c, e in zip(self.center, self.extent))

    @property
    def max(self) -> Vector:
        return tuple(c + e for c, e in zip(self.center, self.extent))

    def intersects(self, other: BoxCenterAndExtent) -> bool:
        """True when the two boxes share some volume or touch."""
        return all(
            a_min <= b_max and b_min <= a_max
            for a_min, a_max, b_min, b_max in zip(self.min, self.max, other.min, other.max)
        )


@dataclass(eq=False)
class RoomData:
    """Template of a room that the generator can place in the dungeon."""

    name: str = "RoomData"
    level: str | None = None
    random_door: bool = True
    doors: list[DoorDef] = field(default_factory=lambda: [DoorDef()])
    first_point: IntVector = IntVector(0, 0, 0)
    second_point: IntVector = IntVector(1, 1, 1)
    custom_data: set[Any] = field(default_factory=set)

    def door_count(self) -> int:
        return len(self.doors)

    def has_compatible_door(self, door_def: DoorDef) -> bool:
        """True if any door of this room can connect to the given door."""
        return any(DoorDef.are_compatible(door, door_def) for door in self.doors)

    def initialize_room(self, room: Any, graph: Any) -> None:
        """Hook called once every room of a new dungeon exists; does nothing by default."""

    def size(self) -> IntVector:
        return self.int_bounds().size()

    def int_bounds(self) -> BoxMinAndMax:
        return BoxMinAndMax(self.first_point, self.second_point)

    def bounds(
        self,
        offset: Vector = (0.0, 0.0, 0.0),
        rotation: DoorDirection = DoorDirection.NORTH,
    ) -> BoxCenterAndExtent:
        """World-space bounds of the room once rotated and then moved by offset."""
        local = self.int_bounds()
        unit = get_settings().room_unit
        corner = local.min + local.max - IntVector(1, 1, 0)
        center_local = tuple(0.5 * u * c for u, c in zip(unit, corner))
        extent_local = tuple(0.5 * u * s for u, s in zip(unit, local.size()))
        center = tuple(c + o for c, o in zip(_rotate_vector(center_local, rotation), offset))
        extent = tuple(abs(e) for e in _rotate_vector(extent_local, rotation))
        return BoxCenterAndExtent(center, extent)

    def is_door_valid(self, door_index: int) -> bool:
        """True if the door lies inside the room and on the edge it faces."""
        if not 0 <= door_index < len(self.doors):
            raise IndexError(f"door index {door_index} out of range")
        door = self.doors[door_index]
        box = self.int_bounds()
        lo, hi, pos = box.min, box.max, door.position
        if not (lo.x <= pos.x < hi.x and lo.y <= pos.y < hi.y and lo.z <= pos.z < hi.z):
            return False
        if door.direction is DoorDirection.SOUTH:
            return pos.x == lo.x
        if door.direction is DoorDirection.NORTH:
            return pos.x == hi.x - 1
        if door.direction is DoorDirection.WEST:
            return pos.y == lo.y
        if door.direction is DoorDirection.EAST:
            return pos.y == hi.y - 1
        raise ValueError("door has an invalid direction")

    def validate(self) -> list[str]:
        """Return the problems found in this room data; empty when it is valid."""
        errors: list[str] = []
        if not self.level:
            errors.append(
                f'Room data "{self.name}" has no level set. You have to set up a room level.'
            )
        a, b = self.first_point, self.second_point
        if a.x == b.x or a.y == b.y or a.z == b.z:
            errors.append(f'Room data "{self.name}" has a size of 0 on at least one axis.')
        if not self.doors:
            errors.append(f'Room data "{self.name}" should have at least one door.')
        else:
            for i, door in enumerate(self.doors):
                if not self.is_door_valid(i):
                    errors.append(f'Room data "{self.name}" has invalid door: {door}.')
                for other in self.doors[i + 1:]:
                    if door == other:
                        errors.append(
                            f'Room data "{self.name}" has duplicated doors: {door}.'
                        )
        if None in self.custom_data:
            errors.append(f'Room data "{self.name}" has value None in CustomData.')
        return errors