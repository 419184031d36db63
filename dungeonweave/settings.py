"""Global settings shared by the dungeon generation code."""

from __future__ import annotations

from dataclasses import dataclass

Vector = tuple[float, float, float]


@dataclass
class DungeonSettings:
    """Tunable values that affect room sizing, doors and occlusion."""

    room_unit: Vector = (1000.0, 1000.0, 400.0)
    door_size: Vector = (40.0, 640.0, 400.0)
    door_offset: float = 0.0
    occlusion_culling: bool = True
    occlusion_distance: int = 2
    occlude_dynamic_actors: bool = True
    draw_debug: bool = True
    show_room_origin: bool = False
    on_screen_print_debug: bool = False
    print_debug_duration: float = 60.0
    can_loop: bool = True
    use_legacy_occlusion: bool = True


_current = DungeonSettings()


def get_settings() -> DungeonSettings:
    """Return the settings currently in effect."""
    return _current


def set_settings(settings: DungeonSettings) -> None:
    """Replace the settings currently in effect."""
    global _current
    if not isinstance(settings, DungeonSettings):
        raise TypeError(f"expected DungeonSettings, got {type(settings).__name__}")
    _current = settings


def reset_settings() -> DungeonSettings:
    """Restore the default settings and return them."""
    global _current
    _current = DungeonSettings()
    return _current