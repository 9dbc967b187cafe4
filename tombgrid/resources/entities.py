"""A small entity registry and the object templates that populate it."""

from __future__ import annotations

from itertools import count
from typing import Any, TypeVar

T = TypeVar("T")


class Registry:
    """Entities are integers; each holds at most one component per type."""

    def __init__(self) -> None:
        self._ids = count()
        self._entities: dict[int, dict[type, Any]] = {}

    def create(self) -> int:
        entity = next(self._ids)
        self._entities[entity] = {}
        return entity

    def _components(self, entity: int) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"unknown entity {entity}") from None

    def emplace(self, entity: int, component: Any) -> Any:
        components = self._components(entity)
        component_type = type(component)
        if component_type in components:
            raise ValueError(f"entity {entity} already has a {component_type.__name__}")
        components[component_type] = component
        return component

    def get(self, entity: int, component_type: type[T]) -> T:
        components = self._components(entity)
        try:
            return components[component_type]
        except KeyError:
            raise KeyError(f"entity {entity} has no {component_type.__name__}") from None

    def view(self, component_type: type) -> list[int]:
        """Entities that hold a component of exactly this type, oldest first."""
        return [entity for entity, components in self._entities.items() if component_type in components]


class Object:
    """A named set of components that can be stamped out as an entity."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.components: dict[type, Any] = {}

    def add_component(self, component: Any) -> None:
        if not callable(getattr(component, "assign_to_entity", None)):
            raise TypeError(f"{type(component).__name__} cannot be assigned to an entity")
        self.components[type(component)] = component

    def create(self, registry: Registry) -> int:
        entity = registry.create()
        for component in self.components.values():
            component.assign_to_entity(entity, registry)
        return entity