"""A trigger zone that tracks actors inside it and activates past a threshold."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

ActorCallback = Callable[[Any], None]
ActorsCallback = Callable[[list], None]


@dataclass(eq=False)
class TriggerZone:
    """Zone counting actors; activates when enough are inside.

    Time only moves through :meth:`advance`, which runs the periodic tick
    and the delayed activation.
    """

    actor_type: type | None = None
    required_actor_count: int = 1
    tick_duration: float = 0.5
    activation_delay: float = 0.0
    is_client: bool = False
    actors: list[Any] = field(default_factory=list)
    is_activated: bool = False
    on_actor_enter: list[ActorCallback] = field(default_factory=list)
    on_actor_exit: list[ActorCallback] = field(default_factory=list)
    on_activation: list[ActorsCallback] = field(default_factory=list)
    on_deactivation: list[ActorsCallback] = field(default_factory=list)
    on_trigger_tick: list[ActorsCallback] = field(default_factory=list)
    _activation_remaining: float | None = field(default=None, repr=False)
    _tick_elapsed: float = field(default=0.0, repr=False)

    def _accepts(self, actor: Any) -> bool:
        return self.actor_type is None or (
            actor is not None and isinstance(actor, self.actor_type)
        )

    def on_trigger_enter(self, actor: Any) -> None:
        if self.is_client or not self._accepts(actor) or actor in self.actors:
            return
        self.actors.append(actor)
        for callback in self.on_actor_enter:
            callback(actor)
        if len(self.actors) >= self.required_actor_count:
            if self.activation_delay > 0:
                self._activation_remaining = self.activation_delay
            else:
                self.trigger_activate()

    def on_trigger_exit(self, actor: Any) -> None:
        if self.is_client or not self._accepts(actor) or actor not in self.actors:
            return
        self.actors.remove(actor)
        for callback in self.on_actor_exit:
            callback(actor)
        self._activation_remaining = None
        self.trigger_deactivate()

    def advance(self, elapsed: float) -> None:
        """Let time pass, firing the pending activation and periodic ticks."""
        if self.is_client:
            return
        if elapsed < 0:
            raise ValueError("elapsed time cannot be negative")
        if self._activation_remaining is not None:
            self._activation_remaining -= elapsed
            if self._activation_remaining <= 0:
                self._activation_remaining = None
                self.trigger_activate()
        if self.tick_duration > 0:
            self._tick_elapsed += elapsed
            while self._tick_elapsed >= self.tick_duration:
                self._tick_elapsed -= self.tick_duration
                self.trigger_tick()

    def trigger_tick(self) -> None:
        for callback in self.on_trigger_tick:
            callback(list(self.actors))

    def trigger_activate(self) -> None:
        if not self.is_activated:
            self.is_activated = True
            for callback in self.on_activation:
                callback(list(self.actors))

    def trigger_deactivate(self) -> None:
        if self.is_activated:
            self.is_activated = False
            for callback in self.on_deactivation:
                callback(list(self.actors))