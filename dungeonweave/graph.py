"""The set of rooms making up a dungeon, with queries and path finding."""

from __future__ import annotations

import enum
import random
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any

from .room import Room
from .room_data import RoomData
from .types import IntVector


class GraphState(enum.Enum):
    """Whether the room list is in sync or something was requested."""

    NONE = 0
    ROOM_LIST_CHANGED = 1
    REQUEST_GENERATION = 2


class DungeonGraph:
    """Holds the rooms of a dungeon and answers questions about them."""

    def __init__(self) -> None:
        self._rooms: list[Room] = []
        self.state = GraphState.NONE

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self):
        return iter(self._rooms)

    @property
    def rooms(self) -> tuple[Room, ...]:
        """All rooms, in the order they were added."""
        return tuple(self._rooms)

    # ----- building -----

    def add_room(self, room: Room) -> None:
        self._rooms.append(room)

    def init_rooms(self) -> None:
        """Create each room's custom data, then let each room data initialize its room."""
        for room in self._rooms:
            for data_type in room.room_data.custom_data:
                room.create_custom_data(data_type)
        for room in self._rooms:
            room.room_data.initialize_room(room, self)

    def clear(self) -> None:
        self._rooms.clear()

    # ----- state -----

    def has_rooms(self) -> bool:
        return bool(self._rooms)

    def is_dirty(self) -> bool:
        return self.state is not GraphState.NONE

    def is_requesting_generation(self) -> bool:
        return self.state is GraphState.REQUEST_GENERATION

    def request_generation(self) -> None:
        self.state = GraphState.REQUEST_GENERATION

    def request_unload(self) -> None:
        self.state = GraphState.ROOM_LIST_CHANGED

    def mark_synchronized(self) -> None:
        """Record that the room list is up to date again."""
        self.state = GraphState.NONE

    # ----- queries -----

    def count(self) -> int:
        return len(self._rooms)

    def _filter(self, predicate: Callable[[Room], bool]) -> list[Room]:
        return [room for room in self._rooms if predicate(room)]

    def _count(self, predicate: Callable[[Room], bool]) -> int:
        return sum(1 for room in self._rooms if predicate(room))

    def rooms_from_data(self, data: RoomData) -> list[Room]:
        return self._filter(lambda room: room.room_data is data)

    def rooms_from_data_list(self, data_list: Iterable[RoomData]) -> list[Room]:
        wanted = list(data_list)
        return self._filter(lambda room: any(room.room_data is d for d in wanted))

    def first_room_from_data(self, data: RoomData) -> Room | None:
        return next((room for room in self._rooms if room.room_data is data), None)

    def rooms_with_custom_data(self, data_type: type) -> list[Room]:
        return self._filter(lambda room: room.has_custom_data(data_type))

    def rooms_with_all_custom_data(self, data_types: Iterable[type]) -> list[Room]:
        wanted = list(data_types)
        return self._filter(lambda room: all(room.has_custom_data(t) for t in wanted))

    def rooms_with_any_custom_data(self, data_types: Iterable[type]) -> list[Room]:
        wanted = list(data_types)
        return self._filter(lambda room: any(room.has_custom_data(t) for t in wanted))

    def random_room(self, rooms: list[Room], rng: random.Random) -> Room | None:
        """Pick a room from a list with the given random stream; None for an empty list."""
        if rng is None:
            raise ValueError("a random stream is required to pick a room")
        if not rooms:
            return None
        return rooms[rng.randrange(len(rooms))]

    def has_already_room_data(self, room_data: RoomData) -> bool:
        return self.count_room_data(room_data) > 0

    def has_already_one_room_data_from(self, room_data_list: Iterable[RoomData]) -> bool:
        return self.count_total_room_data(room_data_list) > 0

    def count_room_data(self, room_data: RoomData) -> int:
        return self._count(lambda room: room.room_data is room_data)

    def count_total_room_data(self, room_data_list: Iterable[RoomData]) -> int:
        wanted = list(room_data_list)
        return self._count(lambda room: any(room.room_data is d for d in wanted))

    def has_already_room_type(self, room_type: type) -> bool:
        return self.count_room_type(room_type) > 0

    def has_already_one_room_type_from(self, room_types: Iterable[type]) -> bool:
        return self.count_total_room_type(room_types) > 0

    def count_room_type(self, room_type: type) -> int:
        return self._count(lambda room: isinstance(room.room_data, room_type))

    def count_total_room_type(self, room_types: Iterable[type]) -> int:
        wanted = tuple(room_types)
        return self._count(lambda room: any(isinstance(room.room_data, t) for t in wanted))

    def has_valid_path(self, start: Room | None, goal: Room | None, ignore_locked: bool = False) -> bool:
        """True if no locked room blocks the way between two rooms."""
        return find_path(start, goal, ignore_locked) is not None

    def room_at(self, cell: IntVector) -> Room | None:
        return Room.room_at(cell, self._rooms)

    def room_by_index(self, index: int) -> Room | None:
        return next((room for room in self._rooms if room.room_id == index), None)


def _neighbours(room: Room) -> Iterable[Room]:
    for connection in room.connections:
        if connection.other_room is not None:
            yield connection.other_room


def traverse_rooms(
    rooms: Iterable[Room],
    distance: int,
    func: Callable[[Room], Any] | None = None,
) -> set[Room]:
    """Rooms at most ``distance - 1`` connections away from any given room.

    ``func`` is applied to each room reached.
    """
    open_rooms = set(rooms)
    closed: set[Room] = set()
    while distance > 0 and open_rooms:
        closed |= open_rooms
        current, open_rooms = open_rooms, set()
        for room in current:
            if func is not None:
                func(room)
            for nxt in _neighbours(room):
                if nxt not in closed:
                    open_rooms.add(nxt)
        distance -= 1
    return closed


def _bfs_step(
    queue: deque,
    marked_this: set,
    marked_other: set,
    parents: dict,
    ignore_locked: bool,
) -> Room | None:
    current = queue.popleft()
    for nxt in _neighbours(current):
        if (ignore_locked or not nxt.locked) and nxt not in marked_this:
            parents[nxt] = current
            if nxt in marked_other:
                return nxt
            queue.append(nxt)
            marked_this.add(nxt)
    return None


def _reconstruct(common: Room, forward: dict, reverse: dict) -> list[Room]:
    head: list[Room] = []
    node = forward.get(common)
    while node is not None:
        head.append(node)
        node = forward.get(node)
    path = head[::-1]
    path.append(common)
    node = reverse.get(common)
    while node is not None:
        path.append(node)
        node = reverse.get(node)
    return path


def find_path(
    start: Room | None, goal: Room | None, ignore_locked: bool = False
) -> list[Room] | None:
    """Shortest path of rooms from start to goal, or None when there is none."""
    if start is None or goal is None:
        return None
    if start is goal:
        return [start]
    if not ignore_locked and (start.locked or goal.locked):
        return None

    parents_forward: dict[Room, Room] = {}
    parents_reverse: dict[Room, Room] = {}
    marked_forward = {start}
    marked_reverse = {goal}
    queue_forward = deque([start])
    queue_reverse = deque([goal])

    common: Room | None = None
    while common is None and queue_forward and queue_reverse:
        common = _bfs_step(
            queue_forward, marked_forward, marked_reverse, parents_forward, ignore_locked
        )
        if common is None:
            common = _bfs_step(
                queue_reverse, marked_reverse, marked_forward, parents_reverse, ignore_locked
            )

    if common is None:
        return None
    return _reconstruct(common, parents_forward, parents_reverse)