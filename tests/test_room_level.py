import pytest

from dungeonweave.room import Room
from dungeonweave.room_data import RoomData
from dungeonweave.room_level import RoomLevel, RoomVisitor
from dungeonweave.settings import get_settings, reset_settings
from dungeonweave.types import DoorDef, DoorDirection, IntVector


@pytest.fixture(autouse=True)
def _settings():
    reset_settings()
    yield
    reset_settings()


class Actor:
    def __init__(self, replicated=False, components=()):
        self.hidden = False
        self.replicated = replicated
        self.components = list(components)


class Visitor(RoomVisitor):
    def __init__(self):
        self.events = []

    def on_room_enter(self, room_level):
        self.events.append(("enter", room_level))

    def on_room_exit(self, room_level):
        self.events.append(("exit", room_level))


def make_data():
    return RoomData(
        name="A",
        doors=[DoorDef(IntVector(0, 0, 0), DoorDirection.NORTH)],
        second_point=IntVector(2, 3, 1),
    )


def test_attach_none_raises():
    with pytest.raises(ValueError):
        RoomLevel().attach(None)


def test_unattached_defaults():
    level = RoomLevel()
    level.lock(True)
    assert level.is_visible() is True
    assert level.is_locked() is False
    assert level.is_player_inside() is False
    assert level.is_init is False


def test_unattached_bounds_come_from_data():
    data = make_data()
    level = RoomLevel(data)
    assert level.bounds == data.bounds()


def test_attach_binds_room():
    data = make_data()
    room = Room(data)
    room.position = IntVector(3, 1, 0)
    level = RoomLevel(data)
    level.attach(room)
    assert level.room is room
    assert room.level is level
    assert level.is_init is True
    assert level.bounds == room.bounds()


def test_room_state_is_relayed():
    data = make_data()
    room = Room(data)
    level = RoomLevel(data)
    level.attach(room)
    level.lock(True)
    assert room.locked is True
    assert level.is_locked() is True
    room.set_player_inside(True)
    assert level.is_player_inside() is True


def test_set_actors_visible_skips_replicated():
    plain = Actor()
    replicated = Actor(replicated=True)
    level = RoomLevel(actors=[plain, replicated, None])
    calls = []
    level.visibility_changed.append(lambda lvl, vis: calls.append((lvl, vis)))
    level.set_actors_visible(False)
    assert plain.hidden is True
    assert replicated.hidden is False
    assert calls == [(level, False)]


def test_occlusion_disabled_forces_visible():
    get_settings().occlusion_culling = False
    actor = Actor()
    level = RoomLevel(actors=[actor])
    calls = []
    level.visibility_changed.append(lambda lvl, vis: calls.append(vis))
    level.set_actors_visible(False)
    assert actor.hidden is False
    assert calls == [True]


def test_room_visibility_propagates_to_actors():
    data = make_data()
    room = Room(data)
    actor = Actor()
    level = RoomLevel(data, [actor])
    level.attach(room)
    room.set_visible(False)
    assert actor.hidden is True
    assert level.is_visible() is False
    room.set_visible(True)
    assert actor.hidden is False


def test_update_visitor_enter_exit_once():
    level = RoomLevel()
    visitor = Visitor()
    level.update_visitor(visitor, True)
    level.update_visitor(visitor, True)
    assert visitor.events == [("enter", level)]
    assert visitor in level.visitors
    level.update_visitor(visitor, False)
    level.update_visitor(visitor, False)
    assert visitor.events == [("enter", level), ("exit", level)]
    assert visitor not in level.visitors


def test_update_visitor_rejects_non_visitor():
    with pytest.raises(TypeError):
        RoomLevel().update_visitor(object(), True)


def test_trigger_actor_reaches_components():
    component = Visitor()
    actor = Actor(components=[component, object()])
    level = RoomLevel()
    level.trigger_actor(actor, True)
    assert component.events == [("enter", level)]
    level.trigger_actor(actor, False)
    assert component.events[-1] == ("exit", level)


def test_trigger_actor_that_is_visitor():
    class VisitorActor(Visitor):
        components = ()

    actor = VisitorActor()
    level = RoomLevel()
    level.trigger_actor(actor, True)
    level.trigger_actor(None, True)
    assert actor.events == [("enter", level)]