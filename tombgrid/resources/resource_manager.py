"""The catalogue of meshes, templates, settings and objects a game loads."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, TypeVar

from tombgrid.cells import Surface, surface_from_string
from tombgrid.enemies import EnemyType, MovementPattern, enemy_type_from_string, movement_pattern_from_string
from tombgrid.resources.mesh_loader import load_mesh
from tombgrid.resources.object_loader import ObjectLoader

log = logging.getLogger(__name__)

T = TypeVar("T")


class ResourceTypeError(TypeError):
    """A resource was asked for as a type it does not have."""


@dataclass
class ConfigValue:
    value: str = ""


@dataclass
class NavigationHints:
    allow_forward: bool = True
    allow_backward: bool = True
    allow_left: bool = True
    allow_right: bool = True


@dataclass
class TileTemplate:
    surface: Surface = Surface.GROUND
    navigation: NavigationHints = field(default_factory=NavigationHints)
    mesh_name: str = ""
    mesh_cracked_name: str = ""


@dataclass
class EnemyTemplate:
    type: EnemyType = EnemyType.SAW
    surface: Surface = Surface.GROUND
    pattern: MovementPattern = MovementPattern.FORWARD
    mesh_name: str = ""


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value[:1] in ("1", "t", "T", "y", "Y")


class ResourceManager:
    """Loads every resource listed in ``<resource_dir>resources.xml`` plus the object files."""

    def __init__(self, resource_dir: str) -> None:
        self.resource_dir = resource_dir
        self.object_loader = ObjectLoader(self)
        self.resources: dict[str, Any] = {}
        self.load_resources()

    def _tile_template(self, resource_id: str, node: ET.Element) -> TileTemplate:
        navigation = NavigationHints(
            allow_forward=_as_bool(node.get("allow_forward"), True),
            allow_backward=_as_bool(node.get("allow_backward"), True),
            allow_left=_as_bool(node.get("allow_left"), True),
            allow_right=_as_bool(node.get("allow_right"), True),
        )
        if all(vars(navigation).values()):
            log.info("Tile template '%s' missing navigation hints", resource_id)
        mesh_name = node.get("mesh", "")
        if not mesh_name:
            raise ValueError(f"tile template {resource_id!r} has no mesh")
        return TileTemplate(
            surface=surface_from_string(node.get("surface", "")),
            navigation=navigation,
            mesh_name=mesh_name,
            mesh_cracked_name=node.get("mesh_cracked", ""),
        )

    def _enemy_template(self, resource_id: str, node: ET.Element) -> EnemyTemplate:
        template = EnemyTemplate(
            type=enemy_type_from_string(node.get("enemy", "")),
            surface=surface_from_string(node.get("surface", "")),
            pattern=movement_pattern_from_string(node.get("pattern", "")),
            mesh_name=node.get("mesh", ""),
        )
        if not template.mesh_name:
            raise ValueError(f"enemy template {resource_id!r} has no mesh")
        return template

    def load_resources(self) -> None:
        """(Re)load the resource list and every object in the ``objects`` directory."""
        try:
            root = ET.parse(self.resource_dir + "resources.xml").getroot()
        except (OSError, ET.ParseError):
            log.error('ResourceManager.load_resources cannot read xml file "%s"', self.resource_dir)
            return

        nodes = root.findall("resource") if root.tag == "resources" else []
        for node in nodes:
            kind = node.get("type", "")
            resource_id = node.get("id", "")
            filename = node.get("filename", "")

            if kind == "mesh":
                mesh = load_mesh(self.resource_dir + filename)
                mesh.debug_name = resource_id
                self.set_resource(resource_id, mesh)
            elif kind == "shader":
                self.set_resource(resource_id, ConfigValue(self.resource_dir + filename))
            elif kind == "tile_template":
                self.set_resource(resource_id, self._tile_template(resource_id, node))
            elif kind == "enemy_template":
                self.set_resource(resource_id, self._enemy_template(resource_id, node))
            elif kind == "config_value":
                self.set_resource(resource_id, ConfigValue(node.get("value", "")))
            else:
                raise ValueError(f"unknown resource type {kind!r} for {resource_id!r}")

        objects_dir = self.resource_dir + "objects"
        with os.scandir(objects_dir) as entries:
            paths = sorted(entry.path for entry in entries if entry.is_file())
        for path in paths:
            stem, ext = os.path.splitext(os.path.basename(path))
            if ext == ".xml":
                self.set_resource(f"object.{stem}", self.object_loader.load_object(path))

    def set_resource(self, resource_id: str, resource: Any) -> None:
        self.resources[resource_id] = resource

    def get_resource(self, resource_id: str, resource_type: type[T] = object) -> T:
        try:
            resource = self.resources[resource_id]
        except KeyError:
            raise KeyError(f"unknown resource {resource_id!r}") from None
        if not isinstance(resource, resource_type):
            raise ResourceTypeError(
                f"resource {resource_id!r} is a {type(resource).__name__}, not a {resource_type.__name__}"
            )
        return resource