"""Conversions between room-grid cells and world-space coordinates."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .settings import get_settings
from .types import IntVector

Vector = tuple[float, float, float]


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def to_world_location(room_point: IntVector) -> Vector:
    """World position of the corner of a room cell."""
    ux, uy, uz = get_settings().room_unit
    return (ux * (room_point.x - 0.5), uy * (room_point.y - 0.5), uz * room_point.z)


def to_room_location(world_point: Sequence[float]) -> IntVector:
    """Room cell nearest to a world position."""
    ux, uy, uz = get_settings().room_unit
    x, y, z = world_point
    return IntVector(_round(0.5 + x / ux), _round(0.5 + y / uy), _round(z / uz))


def to_room_vector(world_vector: Sequence[float]) -> IntVector:
    """Convert a world-space displacement into a whole number of cells."""
    ux, uy, uz = get_settings().room_unit
    x, y, z = world_vector
    return IntVector(_round(x / ux), _round(y / uy), _round(z / uz))


def snap_point(point: Sequence[float]) -> Vector:
    """Snap a world position onto the room grid."""
    return to_world_location(to_room_location(point))