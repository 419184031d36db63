"""The level that holds a room's actors and tracks who is inside it."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from .room import Room
from .room_data import BoxCenterAndExtent, RoomData
from .settings import get_settings

log = logging.getLogger(__name__)

VisibilityListener = Callable[["RoomLevel", bool], Any]


class RoomVisitor:
    """Something told when it enters or leaves a room level."""

    def on_room_enter(self, room_level: RoomLevel) -> None:
        """Called when the visitor enters the room level."""

    def on_room_exit(self, room_level: RoomLevel) -> None:
        """Called when the visitor leaves the room level."""


class RoomLevel:
    """Holds the actors of a room and relays the room's state to them.

    Actors are objects with a ``hidden`` attribute; those whose ``replicated``
    attribute is true are left alone when visibility changes.
    """

    def __init__(self, data: RoomData | None = None, actors: Iterable[Any] = ()) -> None:
        self.data = data
        self.room: Room | None = None
        self.actors: list[Any] = list(actors)
        self.visibility_changed: list[VisibilityListener] = []
        self.visitors: set[RoomVisitor] = set()
        self.bounds = BoxCenterAndExtent()
        self.is_init = False
        self.update_bounds()

    def attach(self, room: Room) -> None:
        """Bind this level to the room it was loaded for and make it ready."""
        if room is None:
            raise ValueError("a room is required to attach a room level")
        self.room = room
        self.is_init = False
        room.level = self
        self.update_bounds()
        if self.data is not None and self.data is not room.room_data:
            log.error(
                "RoomLevel's Data does not match RoomData's Level [Data \"%s\" | Level \"%s\"]",
                room.room_data.name,
                self.data.name,
            )
        self.set_actors_visible(room.visible)
        self.is_init = True

    def is_player_inside(self) -> bool:
        return self.room.player_inside if self.room is not None else False

    def is_visible(self) -> bool:
        return self.room.visible if self.room is not None else True

    def is_locked(self) -> bool:
        return self.room.locked if self.room is not None else False

    def lock(self, locked: bool) -> None:
        if self.room is not None:
            self.room.lock(locked)

    def update_bounds(self) -> None:
        """Refresh the world bounds from the room, or from the data when unattached."""
        if self.room is not None:
            self.bounds = self.room.bounds()
        elif self.data is not None:
            self.bounds = self.data.bounds()

    def set_actors_visible(self, visible: bool) -> None:
        """Show or hide the level's actors and notify listeners."""
        if not get_settings().occlusion_culling:
            visible = True
        for actor in self.actors:
            if actor is None or getattr(actor, "replicated", False):
                continue
            actor.hidden = not visible
        for listener in list(self.visibility_changed):
            listener(self, visible)

    def update_visitor(self, visitor: Any, inside: bool) -> None:
        """Record a visitor entering or leaving, telling it when that changes."""
        if not isinstance(visitor, RoomVisitor):
            raise TypeError(f"{type(visitor).__name__} is not a RoomVisitor")
        if inside and visitor not in self.visitors:
            self.visitors.add(visitor)
            visitor.on_room_enter(self)
        elif not inside and visitor in self.visitors:
            self.visitors.discard(visitor)
            visitor.on_room_exit(self)

    def trigger_actor(self, actor: Any, inside: bool) -> None:
        """Handle an actor entering or leaving, along with its visitor components."""
        if actor is None:
            return
        if isinstance(actor, RoomVisitor):
            self.update_visitor(actor, inside)
        for component in getattr(actor, "components", ()):
            if isinstance(component, RoomVisitor):
                self.update_visitor(component, inside)