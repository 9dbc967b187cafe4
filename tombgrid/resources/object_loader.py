"""Reading object definitions and their components from XML files."""

from __future__ import annotations

import copy
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar, Union

from tombgrid.cells import CellPos, Surface, surface_from_string
from tombgrid.events import OskEvent
from tombgrid.resources.entities import Object
from tombgrid.resources.mesh_loader import MeshRes, load_mesh

Vector3 = tuple[float, float, float]
N = TypeVar("N", int, float)


class _Component:
    def assign_to_entity(self, entity, registry) -> None:
        registry.emplace(entity, copy.deepcopy(self))


@dataclass
class MeshComponent(_Component):
    mesh: MeshRes

    def assign_to_entity(self, entity, registry) -> None:
        # The mesh resource itself is shared, not duplicated.
        registry.emplace(entity, MeshComponent(self.mesh))


@dataclass
class Trigger:
    value: str = ""
    cell_offset: CellPos = field(default_factory=CellPos)


@dataclass
class RouteNode:
    template_name: str = ""
    cell: CellPos = field(default_factory=CellPos)
    trigger: Optional[str] = None
    trap: bool = False
    allow_saw: bool = False
    camera_trigger: Optional[Vector3] = None
    level_trigger: Optional[str] = None
    switch_trigger: Optional[str] = None
    enemy: Optional[str] = None
    triggers: list[Trigger] = field(default_factory=list)


@dataclass
class RouteComponent(_Component):
    tiles: list[RouteNode] = field(default_factory=list)


@dataclass
class LaraComponent(_Component):
    initial_pos: CellPos = field(default_factory=CellPos)
    offset: Vector3 = (0.0, 0.0, 0.0)
    surface: Surface = Surface.GROUND


@dataclass
class AutoNavComponent(_Component):
    events: list[OskEvent] = field(default_factory=list)


def _as_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value[:1] in ("1", "t", "T", "y", "Y")


def _read_three(text: str, convert: Callable[[str], N]) -> tuple[N, N, N]:
    parsed: list[N] = []
    for token in text.split()[:3]:
        try:
            parsed.append(convert(token))
        except ValueError:
            break
    parsed.extend(convert("0") for _ in range(3 - len(parsed)))
    a, b, c = parsed
    return a, b, c


def read_i3(node: ET.Element, name: str) -> CellPos:
    """Read three whitespace-separated integers from an attribute."""
    return CellPos(*_read_three(node.get(name, ""), int))


def read_f3(node: ET.Element, name: str) -> Vector3:
    """Read three whitespace-separated floats from an attribute."""
    return _read_three(node.get(name, ""), float)


def _read_trigger(node: ET.Element) -> Trigger:
    trigger = Trigger(value=node.get("value", ""))
    for child in node:
        if child.tag != "cell":
            raise ValueError(f"unexpected element <{child.tag}> in trigger")
        trigger.cell_offset = read_i3(child, "offset")
    return trigger


def read_route_node(node: ET.Element) -> RouteNode:
    """Read one route tile and the triggers attached to it."""
    route_node = RouteNode(template_name=node.get("template", ""), cell=read_i3(node, "cell"))
    route_node.trigger = node.get("trigger")
    if "is_trap" in node.attrib:
        route_node.trap = _as_bool(node.get("is_trap"))
    if "allow_saw" in node.attrib:
        route_node.allow_saw = _as_bool(node.get("allow_saw"))

    for child in node:
        if child.tag == "trigger_camera":
            route_node.camera_trigger = read_f3(child, "position")
        elif child.tag == "trigger_level":
            route_node.level_trigger = child.get("target", "")
        elif child.tag == "trigger_switch":
            route_node.switch_trigger = child.get("toggle", "")
        elif child.tag == "enemy":
            route_node.enemy = child.get("template", "")
        elif child.tag == "trigger":
            route_node.triggers.append(_read_trigger(child))
    return route_node


def _read_osk_event(node: ET.Element) -> OskEvent:
    event_id = node.get("id", "")
    try:
        return OskEvent(event_id)
    except ValueError:
        raise ValueError(f"unknown auto-nav event {event_id!r}") from None


class ObjectLoader:
    """Builds objects from XML; mesh paths are relative to the resource directory."""

    def __init__(self, resource_manager) -> None:
        self.resource_manager = resource_manager

    def _mesh(self, node: ET.Element) -> MeshComponent:
        path = self.resource_manager.resource_dir + node.get("filename", "")
        return MeshComponent(load_mesh(path))

    def load_object(self, filename: Union[str, os.PathLike]) -> Object:
        try:
            root = ET.parse(filename).getroot()
        except (OSError, ET.ParseError) as exc:
            raise RuntimeError(f"Failed to load file {os.fspath(filename)}") from exc

        obj = Object()
        if root.tag != "object":
            return obj

        for node in root:
            if node.tag == "name":
                obj.name = node.text or ""
            elif node.tag == "mesh":
                obj.add_component(self._mesh(node))
            elif node.tag == "route":
                obj.add_component(RouteComponent([read_route_node(tile) for tile in node.iter("tile")]))
            elif node.tag == "auto_nav":
                obj.add_component(AutoNavComponent([_read_osk_event(e) for e in node.findall("event")]))
            elif node.tag == "lara":
                obj.add_component(
                    LaraComponent(
                        read_i3(node, "cell"),
                        read_f3(node, "offset"),
                        surface_from_string(node.get("surface", "")),
                    )
                )
        return obj