"""The game world: its systems, entities, resources and event routing."""

from __future__ import annotations

import abc
import enum
from typing import Any, ClassVar, Optional

from tombgrid.events import (
    CameraUpdateEvent,
    EventBus,
    FramebufferSizeEvent,
    OnLaraDiedEvent,
    OnLevelSpawned,
    OnStartBot,
    RequestLevelEvent,
    RequestLevelRestart,
)
from tombgrid.resources.entities import Registry
from tombgrid.resources.resource_manager import ResourceManager
from tombgrid.transform import CameraComponent

DEFAULT_RESOURCE_DIR = "res/"

# Events that reach their handlers even while the game is paused.
ALWAYS_DELIVERED: frozenset[type] = frozenset(
    {
        FramebufferSizeEvent,
        CameraUpdateEvent,
        OnLevelSpawned,
        RequestLevelEvent,
        RequestLevelRestart,
        OnLaraDiedEvent,
        OnStartBot,
    }
)


class GameState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"


class System(abc.ABC):
    """A piece of game logic advanced once per frame."""

    runs_when_paused: ClassVar[bool] = False

    def __init__(self, game: "Game") -> None:
        self.game = game

    @abc.abstractmethod
    def update(self, dt: float) -> None:
        """Advance the system by ``dt`` seconds."""


class Game:
    """Owns the entity registry, the event bus, the resources and the systems."""

    def __init__(
        self,
        resource_manager: Optional[Any] = None,
        resource_dir: str = DEFAULT_RESOURCE_DIR,
    ) -> None:
        self.resource_manager = (
            resource_manager if resource_manager is not None else ResourceManager(resource_dir)
        )
        self.registry = Registry()
        self.event_bus = EventBus()
        self.state = GameState.RUNNING
        self.systems: list[System] = []

        self.camera = self.registry.create()
        self.registry.emplace(self.camera, CameraComponent())

    def add_system(self, system: System) -> System:
        self.systems.append(system)
        return system

    def update(self, dt: float) -> None:
        """Run every system; while paused only those that render are run."""
        paused = self.state is GameState.PAUSED
        for system in self.systems:
            if not paused or system.runs_when_paused:
                system.update(dt)

    def reload_resources(self) -> None:
        self.resource_manager.load_resources()

    def raise_event(self, event: Any) -> None:
        """Deliver an event; most are dropped while the game is paused."""
        if type(event) in ALWAYS_DELIVERED or self.state is not GameState.PAUSED:
            self.event_bus.trigger(event)