"""Visibility of dynamic actors following the rooms they stand in."""

from __future__ import annotations

import enum
import logging
import weakref
from collections.abc import Callable
from typing import Any

from .room_level import RoomLevel, RoomVisitor
from .settings import get_settings

log = logging.getLogger(__name__)


class VisibilityMode(enum.Enum):
    DEFAULT = 0
    FORCE_HIDDEN = 1
    FORCE_VISIBLE = 2
    CUSTOM = 3


class RoomVisibilityComponent(RoomVisitor):
    """Shows its owner while at least one visible room holds it.

    The owner is any object with a ``visible`` attribute.
    """

    def __init__(self, owner: Any = None, mode: VisibilityMode = VisibilityMode.DEFAULT) -> None:
        self.owner = owner
        self.visibility_mode = mode
        self._enablers: weakref.WeakSet = weakref.WeakSet()
        self.on_room_visibility_changed: list[Callable[[Any, bool], Any]] = []
        self.update_visibility()

    @property
    def enablers(self) -> set[Any]:
        """Objects currently making the owner visible."""
        return set(self._enablers)

    def on_room_enter(self, room_level: RoomLevel) -> None:
        if room_level is None:
            return
        self.set_visible(room_level, room_level.is_visible())
        if self.room_visibility_changed not in room_level.visibility_changed:
            room_level.visibility_changed.append(self.room_visibility_changed)

    def on_room_exit(self, room_level: RoomLevel) -> None:
        if room_level is None:
            return
        if self.room_visibility_changed in room_level.visibility_changed:
            room_level.visibility_changed.remove(self.room_visibility_changed)
        self.set_visible(room_level, False)

    def is_visible(self) -> bool:
        if not get_settings().occlude_dynamic_actors:
            return True
        return len(self._enablers) > 0

    def set_visible(self, owner: Any, visible: bool) -> None:
        """Let owner enable or stop enabling visibility."""
        was_visible = self.is_visible()
        if visible:
            self._enablers.add(owner)
        else:
            self._enablers.discard(owner)
        now_visible = self.is_visible()
        if was_visible != now_visible:
            self.update_visibility()
            for listener in list(self.on_room_visibility_changed):
                listener(self.owner, now_visible)

    def reset_visible(self, owner: Any) -> None:
        self.set_visible(owner, False)

    def set_visibility_mode(self, mode: VisibilityMode) -> None:
        self.visibility_mode = mode
        self.update_visibility()

    def update_visibility(self) -> None:
        """Apply the visibility mode to the owner."""
        if self.owner is None:
            return
        mode = self.visibility_mode
        if mode is VisibilityMode.DEFAULT:
            self.owner.visible = self.is_visible()
        elif mode is VisibilityMode.FORCE_HIDDEN:
            self.owner.visible = False
        elif mode is VisibilityMode.FORCE_VISIBLE:
            self.owner.visible = True
        elif mode is not VisibilityMode.CUSTOM:
            raise ValueError(f"unsupported visibility mode: {mode}")

    def room_visibility_changed(self, room_level: RoomLevel, visible: bool) -> None:
        self.set_visible(room_level, visible)