import pytest

from dungeonweave.settings import (
    DungeonSettings,
    get_settings,
    reset_settings,
    set_settings,
)


@pytest.fixture(autouse=True)
def _restore_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults_match_documented_values():
    settings = get_settings()
    assert settings.room_unit == (1000.0, 1000.0, 400.0)
    assert settings.door_size == (40.0, 640.0, 400.0)
    assert settings.door_offset == 0.0
    assert settings.occlusion_culling is True
    assert settings.occlusion_distance == 2
    assert settings.occlude_dynamic_actors is True
    assert settings.draw_debug is True
    assert settings.show_room_origin is False
    assert settings.on_screen_print_debug is False
    assert settings.print_debug_duration == 60.0
    assert settings.can_loop is True


def test_set_settings_replaces_current():
    custom = DungeonSettings(room_unit=(2.0, 2.0, 2.0), can_loop=False)
    set_settings(custom)
    assert get_settings() is custom
    assert get_settings().room_unit == (2.0, 2.0, 2.0)
    assert get_settings().can_loop is False


def test_reset_restores_defaults():
    set_settings(DungeonSettings(occlusion_distance=7))
    restored = reset_settings()
    assert restored == DungeonSettings()
    assert get_settings() is restored


def test_set_settings_rejects_wrong_type():
    with pytest.raises(TypeError):
        set_settings({"room_unit": (1.0, 1.0, 1.0)})
    assert get_settings() == DungeonSettings()


def test_mutating_current_settings_is_visible():
    get_settings().occlusion_culling = False
    assert get_settings().occlusion_culling is False
    reset_settings()
    assert get_settings().occlusion_culling is True