"""Core geometric and door types used to lay out dungeon rooms."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .settings import get_settings

Vector = tuple[float, float, float]


@dataclass(frozen=True)
class IntVector:
    """An integer 3D vector addressing cells of the room grid."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: IntVector) -> IntVector:
        if not isinstance(other, IntVector):
            return NotImplemented
        return IntVector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: IntVector) -> IntVector:
        if not isinstance(other, IntVector):
            return NotImplemented
        return IntVector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> IntVector:
        return IntVector(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


def int_min(a: IntVector, b: IntVector) -> IntVector:
    """Component-wise minimum of two vectors."""
    return IntVector(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def int_max(a: IntVector, b: IntVector) -> IntVector:
    """Component-wise maximum of two vectors."""
    return IntVector(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))


class DoorDirection(enum.Enum):
    """Cardinal direction of a door; NONE stands for no direction."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3
    NONE = 4

    def is_valid(self) -> bool:
        return self is not DoorDirection.NONE

    def _checked(self) -> int:
        if not self.is_valid():
            raise ValueError("operation requires a valid door direction")
        return self.value

    def __add__(self, other: DoorDirection) -> DoorDirection:
        if not isinstance(other, DoorDirection):
            return NotImplemented
        return DoorDirection((self._checked() + other._checked()) % 4)

    def __sub__(self, other: DoorDirection) -> DoorDirection:
        if not isinstance(other, DoorDirection):
            return NotImplemented
        return DoorDirection((self._checked() - other._checked()) % 4)

    def __neg__(self) -> DoorDirection:
        return DoorDirection.NORTH - self

    def __invert__(self) -> DoorDirection:
        return self + DoorDirection.SOUTH

    def opposite(self) -> DoorDirection:
        return ~self

    def next(self) -> DoorDirection:
        """The direction a quarter turn clockwise."""
        return self + DoorDirection.EAST

    def previous(self) -> DoorDirection:
        """The direction a quarter turn counter-clockwise."""
        return self - DoorDirection.EAST

    def to_int_vector(self) -> IntVector:
        self._checked()
        return _INT_DIRECTIONS[self]

    def to_vector(self) -> Vector:
        x, y, z = self.to_int_vector()
        return (float(x), float(y), float(z))

    def yaw(self) -> float:
        """Rotation around the vertical axis, in degrees."""
        return 90.0 * self._checked()


_INT_DIRECTIONS = {
    DoorDirection.NORTH: IntVector(1, 0, 0),
    DoorDirection.EAST: IntVector(0, 1, 0),
    DoorDirection.SOUTH: IntVector(-1, 0, 0),
    DoorDirection.WEST: IntVector(0, -1, 0),
}


class GenerationState(enum.Enum):
    IDLE = 0
    GENERATION = 1
    LOAD = 2
    INITIALIZATION = 3
    UNLOAD = 4
    PLAY = 5


class GenerationType(enum.Enum):
    DFS = 0
    BFS = 1


class SeedType(enum.Enum):
    RANDOM = 0
    AUTO_INCREMENT = 1
    FIXED = 2


@dataclass(eq=False)
class DoorType:
    """A kind of door; doors connect only to doors of the same kind."""

    name: str = "DoorType"
    size: Vector = field(default_factory=lambda: get_settings().door_size)
    description: str = "No Description"


def door_type_size(door_type: DoorType | None) -> Vector:
    """Size of a door type, or the default door size for no type."""
    return door_type.size if door_type is not None else get_settings().door_size


@dataclass(frozen=True, eq=False)
class DoorDef:
    """A door of a room: its cell, its facing and its type."""

    position: IntVector = IntVector()
    direction: DoorDirection = DoorDirection.NORTH
    type: DoorType | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoorDef):
            return NotImplemented
        return self.position == other.position and self.direction == other.direction

    def __hash__(self) -> int:
        return hash((self.position, self.direction))

    @staticmethod
    def are_compatible(a: DoorDef, b: DoorDef) -> bool:
        return a.type is b.type

    def door_size(self) -> Vector:
        return door_type_size(self.type)

    def type_name(self) -> str:
        return self.type.name if self.type is not None else "Default"

    def __str__(self) -> str:
        p = self.position
        return f"({p.x},{p.y},{p.z}) [{self.direction.name.capitalize()}]"

    @staticmethod
    def real_door_position(
        door_cell: IntVector,
        door_rot: DoorDirection | None,
        include_offset: bool = True,
    ) -> Vector:
        """World-space position of a door placed in a cell with a facing."""
        settings = get_settings()
        if door_rot is None or not door_rot.is_valid():
            direction = (0.0, 0.0, 0.0)
        else:
            direction = tuple(0.5 * c for c in door_rot.to_vector())
        height = (0.0, 0.0, settings.door_offset) if include_offset else (0.0, 0.0, 0.0)
        return tuple(
            unit * (cell + d + h)
            for unit, cell, d, h in zip(settings.room_unit, door_cell, direction, height)
        )


@dataclass(frozen=True)
class BoxMinAndMax:
    """Integer axis-aligned box; corners are reordered into min and max."""

    min: IntVector = IntVector()
    max: IntVector = IntVector()

    def __post_init__(self) -> None:
        a, b = self.min, self.max
        object.__setattr__(self, "min", int_min(a, b))
        object.__setattr__(self, "max", int_max(a, b))

    def size(self) -> IntVector:
        return self.max - self.min

    @staticmethod
    def overlap(a: BoxMinAndMax, b: BoxMinAndMax) -> bool:
        return (
            a.max.x > b.min.x and a.min.x < b.max.x
            and a.max.y > b.min.y and a.min.y < b.max.y
            and a.max.z > b.min.z and a.min.z < b.max.z
        )

    def __add__(self, offset: IntVector) -> BoxMinAndMax:
        if not isinstance(offset, IntVector):
            return NotImplemented
        return BoxMinAndMax(self.min + offset, self.max + offset)

    def __sub__(self, offset: IntVector) -> BoxMinAndMax:
        if not isinstance(offset, IntVector):
            return NotImplemented
        return BoxMinAndMax(self.min - offset, self.max - offset)


def rotate(pos: IntVector, rot: DoorDirection) -> IntVector:
    """Rotate a cell position around the origin by a direction."""
    if rot is DoorDirection.NORTH:
        return pos
    if rot is DoorDirection.EAST:
        return IntVector(-pos.y, pos.x, pos.z)
    if rot is DoorDirection.SOUTH:
        return IntVector(-pos.x, -pos.y, pos.z)
    if rot is DoorDirection.WEST:
        return IntVector(pos.y, -pos.x, pos.z)
    raise ValueError("cannot rotate by an invalid direction")


_BOX_COMPENSATION = {
    DoorDirection.EAST: IntVector(1, 0, 0),
    DoorDirection.WEST: IntVector(0, 1, 0),
    DoorDirection.SOUTH: IntVector(1, 1, 0),
}


def rotate_box(box: BoxMinAndMax, rot: DoorDirection) -> BoxMinAndMax:
    """Rotate a box of cells so that it covers the rotated cells."""
    compensation = _BOX_COMPENSATION.get(rot, IntVector())
    return BoxMinAndMax(rotate(box.min, rot) + compensation, rotate(box.max, rot) + compensation)