import gc

import pytest

from dungeonweave.room_level import RoomLevel
from dungeonweave.settings import get_settings, reset_settings
from dungeonweave.visibility import RoomVisibilityComponent, VisibilityMode


@pytest.fixture(autouse=True)
def _settings():
    reset_settings()
    yield
    reset_settings()


class Owner:
    def __init__(self):
        self.visible = None


class Enabler:
    pass


def test_hidden_without_enablers():
    owner = Owner()
    component = RoomVisibilityComponent(owner)
    assert component.is_visible() is False
    assert owner.visible is False


def test_visible_when_dynamic_occlusion_disabled():
    get_settings().occlude_dynamic_actors = False
    owner = Owner()
    component = RoomVisibilityComponent(owner)
    assert component.is_visible() is True
    assert owner.visible is True


def test_set_visible_broadcasts_on_change_only():
    owner = Owner()
    component = RoomVisibilityComponent(owner)
    calls = []
    component.on_room_visibility_changed.append(lambda o, v: calls.append((o, v)))
    first, second = Enabler(), Enabler()
    component.set_visible(first, True)
    component.set_visible(second, True)
    assert owner.visible is True
    assert calls == [(owner, True)]
    component.reset_visible(first)
    assert owner.visible is True
    component.reset_visible(second)
    assert owner.visible is False
    assert calls == [(owner, True), (owner, False)]


def test_enter_visible_room_and_follow_it():
    owner = Owner()
    component = RoomVisibilityComponent(owner)
    level = RoomLevel()
    component.on_room_enter(level)
    assert owner.visible is True
    assert level.enablers if False else component.enablers == {level}
    level.set_actors_visible(False)
    assert owner.visible is False
    level.set_actors_visible(True)
    assert owner.visible is True


def test_exit_room_stops_following():
    owner = Owner()
    component = RoomVisibilityComponent(owner)
    level = RoomLevel()
    component.on_room_enter(level)
    component.on_room_exit(level)
    assert owner.visible is False
    assert level.visibility_changed == []
    level.set_actors_visible(True)
    assert owner.visible is False


def test_enter_twice_registers_once():
    component = RoomVisibilityComponent(Owner())
    level = RoomLevel()
    component.on_room_enter(level)
    component.on_room_enter(level)
    assert len(level.visibility_changed) == 1


@pytest.mark.parametrize(
    "mode, expected",
    [(VisibilityMode.FORCE_HIDDEN, False), (VisibilityMode.FORCE_VISIBLE, True)],
)
def test_forced_modes(mode, expected):
    owner = Owner()
    component = RoomVisibilityComponent(owner)
    component.set_visible(Enabler(), not expected) if False else None
    component.set_visibility_mode(mode)
    assert owner.visible is expected


def test_forced_hidden_ignores_enablers():
    owner = Owner()
    component = RoomVisibilityComponent(owner, VisibilityMode.FORCE_HIDDEN)
    enabler = Enabler()
    component.set_visible(enabler, True)
    assert component.is_visible() is True
    assert owner.visible is False


def test_custom_mode_leaves_owner_alone():
    owner = Owner()
    component = RoomVisibilityComponent(owner, VisibilityMode.CUSTOM)
    assert owner.visible is None
    component.set_visible(Enabler(), True)
    assert owner.visible is None


def test_dead_enablers_are_dropped():
    owner = Owner()
    component = RoomVisibilityComponent(owner)
    enabler = Enabler()
    component.set_visible(enabler, True)
    assert component.is_visible() is True
    del enabler
    gc.collect()
    component.update_visibility()
    assert component.is_visible() is False
    assert owner.visible is False