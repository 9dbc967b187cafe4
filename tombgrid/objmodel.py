"""Reading Wavefront OBJ models and their MTL material libraries.

Models are read into plain Python data: flattened per-triangle vertex,
texture coordinate and normal arrays for every object in the file, and
materials whose texture maps are resolved to file paths.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

log = logging.getLogger(__name__)

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_ZERO2: Vec2 = (0.0, 0.0)
_ZERO3: Vec3 = (0.0, 0.0, 0.0)
_HASH_MASK = (1 << 64) - 1

IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass(frozen=True)
class Edge:
    """One corner of a face: 1-based vertex, texture and normal indices."""

    vertex: int
    texcoord: int = 0
    normal: int = 0


@dataclass(frozen=True)
class Face:
    edges: tuple[Edge, Edge, Edge]


@dataclass
class ObjMaterial:
    """A material as written in an MTL library."""

    name: Optional[str] = None
    name_hash: int = 0
    base: Optional[str] = None
    ambient: Vec3 = _ZERO3
    diffuse: Vec3 = _ZERO3
    specular: Vec3 = _ZERO3
    opacity: float = 1.0
    ambient_map: Optional[str] = None
    diffuse_map: Optional[str] = None
    specular_map: Optional[str] = None
    highlight_map: Optional[str] = None
    alpha_map: Optional[str] = None
    bump_map: Optional[str] = None
    displacement_map: Optional[str] = None
    decal_map: Optional[str] = None
    reflection_map: Optional[str] = None


@dataclass
class Mesh:
    """Triangle soup: three vertices per triangle, flattened."""

    vertices: list[float] = field(default_factory=list)
    texcoords: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    @property
    def triangle_count(self) -> int:
        return self.vertex_count // 3


@dataclass(frozen=True)
class MaterialColor:
    r: int
    g: int
    b: int
    a: int = 255


_WHITE = MaterialColor(255, 255, 255, 255)


@dataclass
class Material:
    """A render material: map colours and the texture files they use."""

    albedo_color: MaterialColor = _WHITE
    metalness_color: MaterialColor = _WHITE
    albedo_texture: Optional[str] = None
    metalness_texture: Optional[str] = None
    roughness_texture: Optional[str] = None
    normal_texture: Optional[str] = None


@dataclass
class Model:
    meshes: list[Mesh] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)
    mesh_material: list[int] = field(default_factory=list)
    transform: tuple[float, ...] = IDENTITY


def djb2_hash(text: Union[str, bytes]) -> int:
    """The 64-bit djb2 hash used to match material names."""
    data = text.encode("utf-8", "surrogateescape") if isinstance(text, str) else bytes(text)
    value = 5381
    for byte in data:
        value = (value * 33 + byte) & _HASH_MASK
    return value


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def vector_to_color(vec: Vec3, opacity: float) -> MaterialColor:
    """Convert an RGB vector in 0..1 and an opacity to an 8-bit colour."""
    r, g, b = (_round_half_away(channel * 255.0) & 0xFF for channel in vec)
    return MaterialColor(r, g, b, _round_half_away(opacity * 255.0) & 0xFF)


def _add_base(path: str, base: Optional[str]) -> str:
    if not base or path.startswith("/"):
        return path
    return f"{base}/{path}"


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8", errors="surrogateescape")


class _Cursor:
    """A read position in a text, with the token readers both formats share."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def ignore_line(self) -> None:
        end = self.text.find("\n", self.pos)
        self.pos = len(self.text) if end < 0 else end + 1

    def clear_whitespace(self) -> bool:
        """Skip blanks; False if the line ended first (the newline is kept)."""
        while (ch := self.peek()) in _WHITESPACE:
            if ch == "\n":
                return False
            self.pos += 1
        return True

    def read_name(self) -> str:
        self.clear_whitespace()
        start = self.pos
        while (ch := self.peek()) and ch not in _WHITESPACE:
            self.pos += 1
        return self.text[start:self.pos]

    def read_float(self) -> float:
        result = 0.0
        factor = 1.0
        point_seen = False
        if self.peek() == "-":
            self.pos += 1
            factor = -1.0
        while ch := self.peek():
            if ch == ".":
                point_seen = True
                self.pos += 1
                continue
            if ch not in _DIGITS:
                break
            if point_seen:
                factor /= 10.0
            result = result * 10.0 + int(ch)
            self.pos += 1
        return result * factor

    def read_valid_float(self) -> Optional[float]:
        return self.read_float() if self.clear_whitespace() else None

    def read_float_default(self, default: float) -> float:
        if self.clear_whitespace() and self.peek() in _DIGITS:
            return self.read_float()
        return default

    def read_int(self) -> int:
        result = 0
        while (ch := self.peek()) in _DIGITS:
            result = result * 10 + int(ch)
            self.pos += 1
        return result

    def read_valid_int(self) -> Optional[int]:
        return self.read_int() if self.clear_whitespace() else None

    def read_int_default(self, default: int) -> int:
        if self.clear_whitespace() and self.peek() in _DIGITS:
            return self.read_int()
        return default

    def read_color(self) -> Optional[Vec3]:
        r, g, b = (self.read_valid_float() for _ in range(3))
        if r is None or g is None or b is None:
            return None
        return (r, g, b)


_COLORS = {"a": "ambient", "d": "diffuse", "s": "specular"}
_COLOR_MAPS = {"a": "ambient_map", "d": "diffuse_map", "s": "specular_map"}


def _read_mtl_material(cur: _Cursor) -> ObjMaterial:
    mat = ObjMaterial()
    seen_newmtl = False

    while not cur.at_end():
        ch = cur.peek()
        if ch == "K":
            cur.advance()
            attr = _COLORS.get(cur.peek())
            if attr:
                cur.advance()
                color = cur.read_color()
                if color is not None:
                    setattr(mat, attr, color)
        elif ch == "d":
            # Checked before "disp" and "decal", which therefore land here too.
            cur.advance()
            opacity = cur.read_valid_float()
            if opacity is not None:
                mat.opacity = opacity
            mat.opacity = min(mat.opacity, 1.0)
        elif cur.startswith("newmtl"):
            if seen_newmtl:
                break
            seen_newmtl = True
            cur.advance(6)
            mat.name = cur.read_name()
            mat.name_hash = djb2_hash(mat.name)
        elif cur.startswith("map_"):
            cur.advance(4)
            if cur.peek() == "K":
                cur.advance()
                attr = _COLOR_MAPS.get(cur.peek())
                if attr:
                    cur.advance()
                    setattr(mat, attr, cur.read_name())
            elif cur.peek() == "d":
                cur.advance()
                mat.alpha_map = cur.read_name()
            elif cur.startswith("Ns"):
                cur.advance(2)
                mat.highlight_map = cur.read_name()
            elif cur.startswith("bump") or cur.startswith("Bump"):
                cur.advance(4)
                mat.bump_map = cur.read_name()
        elif cur.startswith("bump"):
            cur.advance(4)
            mat.bump_map = cur.read_name()
        elif cur.startswith("disp"):
            cur.advance(4)
            mat.displacement_map = cur.read_name()
        elif cur.startswith("decal"):
            cur.advance(5)
            mat.decal_map = cur.read_name()
        elif cur.startswith("refl"):
            cur.advance(4)
            mat.reflection_map = cur.read_name()
        cur.ignore_line()

    return mat


def parse_mtl(text: str, base: Optional[str] = None) -> list[ObjMaterial]:
    """Parse an MTL library; ``base`` is the directory its texture paths are relative to."""
    cur = _Cursor(text)
    materials = []
    while not cur.at_end():
        mat = _read_mtl_material(cur)
        mat.base = base or None
        materials.append(mat)
    return materials


def load_mtl(path: Union[str, os.PathLike]) -> list[ObjMaterial]:
    """Read an MTL library from disk."""
    filename = os.fspath(path)
    return parse_mtl(_read_text(filename), os.path.dirname(filename))


def _lookup(items: list, index: int, default):
    return items[index - 1] if 1 <= index <= len(items) else default


class _ObjReader:
    def __init__(self, text: str, base: Optional[str]) -> None:
        self.cursor = _Cursor(text)
        self.base = base or None
        self.vertices: list[Vec3] = []
        self.texcoords: list[Vec2] = []
        self.normals: list[Vec3] = []
        self.materials: list[ObjMaterial] = []
        self._warned = False

    def read_vertex(self) -> None:
        x, y, z = (self.cursor.read_valid_float() for _ in range(3))
        if x is None or y is None or z is None:
            return
        self.cursor.read_float_default(1.0)  # w is ignored
        self.vertices.append((x, y, z))

    def read_texcoord(self) -> None:
        u = self.cursor.read_valid_float()
        v = self.cursor.read_float_default(0.0)
        self.cursor.read_float_default(0.0)  # w is ignored
        if u is None:
            return
        self.texcoords.append((u, v))

    def read_normal(self) -> None:
        x, y, z = (self.cursor.read_valid_float() for _ in range(3))
        if x is None or y is None or z is None:
            return
        self.normals.append((x, y, z))

    def read_edge(self) -> Optional[Edge]:
        cur = self.cursor
        vertex = cur.read_valid_int()
        if vertex is None:
            return None
        if cur.peek() != "/":
            return Edge(vertex)
        cur.advance()
        texcoord = cur.read_int_default(0)
        if cur.peek() == "/":
            cur.advance()
            normal = cur.read_valid_int()
            if normal is None:
                return None
            return Edge(vertex, texcoord or 1, normal)
        if texcoord == 0:
            return None
        # A lone "v/n" pair is taken as a vertex and a normal index.
        return Edge(vertex, 1, texcoord)

    def read_face(self, faces: list[Face]) -> None:
        edges = []
        for _ in range(3):
            edge = self.read_edge()
            if edge is None:
                return
            edges.append(edge)
        first, second, third = edges
        faces.append(Face((first, second, third)))

        self.cursor.clear_whitespace()
        while self.cursor.peek() in _DIGITS:
            if not self._warned:
                log.warning("MESH: Triangulation is only very basic. Try doing that in your modeling software.")
                self._warned = True
            edge = self.read_edge()
            if edge is None:
                return
            second, third = third, edge
            faces.append(Face((first, second, third)))
            self.cursor.clear_whitespace()

    def read_mtl(self, name: str) -> None:
        path = _add_base(name, self.base)
        try:
            text = _read_text(path)
        except OSError:
            return
        self.materials.extend(parse_mtl(text, os.path.dirname(path)))

    def read_mesh(self) -> tuple[Mesh, Optional[int]]:
        cur = self.cursor
        faces: list[Face] = []
        mat_hash: Optional[int] = None
        seen_o = False

        while not cur.at_end():
            ch = cur.peek()
            if ch == "v":
                cur.advance()
                kind = cur.peek()
                if kind in _WHITESPACE:
                    cur.advance()
                    self.read_vertex()
                elif kind == "t":
                    cur.advance()
                    self.read_texcoord()
                elif kind == "n":
                    cur.advance()
                    self.read_normal()
            elif ch == "f":
                cur.advance()
                self.read_face(faces)
            elif ch == "o":
                if seen_o:
                    break
                seen_o = True
            elif cur.startswith("usemtl"):
                cur.advance(6)
                mat_hash = djb2_hash(cur.read_name())
            elif cur.startswith("mtllib"):
                cur.advance(6)
                self.read_mtl(cur.read_name())
            cur.ignore_line()

        return self.build_mesh(faces), mat_hash

    def _vertex(self, index: int) -> Vec3:
        if not 1 <= index <= len(self.vertices):
            raise ValueError(f"face refers to vertex {index}, but {len(self.vertices)} are defined")
        return self.vertices[index - 1]

    def build_mesh(self, faces: list[Face]) -> Mesh:
        mesh = Mesh()
        if not self.vertices:
            return mesh
        for face in faces:
            for edge in face.edges:
                mesh.vertices.extend(self._vertex(edge.vertex))
                u, v = _lookup(self.texcoords, edge.texcoord, _ZERO2)
                mesh.texcoords.extend((u, 1.0 - v))  # textures are stored upside down
                mesh.normals.extend(_lookup(self.normals, edge.normal, _ZERO3))
        return mesh


def _material_from(mat: ObjMaterial) -> Material:
    material = Material(
        albedo_color=vector_to_color(mat.diffuse, mat.opacity),
        metalness_color=vector_to_color(mat.specular, mat.opacity),
    )
    if mat.diffuse_map is not None:
        material.albedo_texture = _add_base(mat.diffuse_map, mat.base)
    if mat.reflection_map is not None:
        material.metalness_texture = _add_base(mat.reflection_map, mat.base)
    if mat.specular_map is not None:
        material.metalness_texture = _add_base(mat.specular_map, mat.base)
    if mat.highlight_map is not None:
        material.roughness_texture = _add_base(mat.highlight_map, mat.base)
    if mat.bump_map is not None:
        material.normal_texture = _add_base(mat.bump_map, mat.base)
    return material


def parse_obj(text: str, base: Optional[str] = None) -> Model:
    """Parse OBJ text; ``base`` is the directory material libraries are found in."""
    reader = _ObjReader(text, base)
    read: list[tuple[Mesh, Optional[int]]] = []
    while not reader.cursor.at_end():
        read.append(reader.read_mesh())

    materials = [_material_from(mat) for mat in reader.materials] or [Material()]
    mesh_material = [
        max((j for j, mat in enumerate(reader.materials) if mat.name_hash == mat_hash), default=0)
        for _, mat_hash in read
    ]
    return Model(
        meshes=[mesh for mesh, _ in read],
        materials=materials,
        mesh_material=mesh_material,
    )


def load_obj(path: Union[str, os.PathLike]) -> Model:
    """Read an OBJ model, and the material libraries it names, from disk."""
    filename = os.fspath(path)
    return parse_obj(_read_text(filename), os.path.dirname(filename))