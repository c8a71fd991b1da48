"""Triangle meshes and loading them from Wavefront OBJ files."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import NamedTuple

from . import log
from .asset import Asset, AssetError, AssetMetadata, AssetType
from .ids import UUID
from .importer import get_project_root

__all__ = ["Vec2", "Vec3", "Vertex", "Mesh", "calculate_surface_normal", "load_obj"]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_UP: Vec3 = (0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Vertex:
    position: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    color: Vec3 = (1.0, 1.0, 1.0)
    uv: Vec2 = (0.0, 0.0)


class Mesh(Asset):
    """An indexed triangle list."""

    def __init__(
        self,
        handle: UUID | None = None,
        vertices: list[Vertex] | None = None,
        indices: list[int] | None = None,
    ) -> None:
        super().__init__(handle)
        self.vertices: list[Vertex] = list(vertices) if vertices else []
        self.indices: list[int] = list(indices) if indices else []

    def asset_type(self) -> AssetType:
        return AssetType.MESH


def calculate_surface_normal(v0: Vertex, v1: Vertex, v2: Vertex) -> Vec3:
    """Unit normal of the triangle, or +Y if the triangle is degenerate."""
    ax, ay, az = (b - a for a, b in zip(v0.position, v1.position))
    bx, by, bz = (b - a for a, b in zip(v0.position, v2.position))
    nx = ay * bz - az * by
    ny = az * bx - ax * bz
    nz = ax * by - ay * bx
    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length <= 0.0:
        return _UP
    return (nx / length, ny / length, nz / length)


class _Index(NamedTuple):
    vertex: int
    texcoord: int
    normal: int


@dataclass
class _ObjData:
    vertices: list[Vec3] = field(default_factory=list)
    colors: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    texcoords: list[Vec2] = field(default_factory=list)
    triangles: list[tuple[_Index, _Index, _Index]] = field(default_factory=list)


def _floats(values: list[str], count: int, path: Path, line_number: int) -> list[float]:
    try:
        parsed = [float(value) for value in values[:count]]
    except ValueError as exc:
        raise AssetError(f"Failed to load OBJ file '{path}': line {line_number}: {exc}") from exc
    return parsed + [0.0] * (count - len(parsed))


def _fix_index(text: str, count: int, path: Path, line_number: int) -> int:
    if not text:
        return -1
    try:
        value = int(text)
    except ValueError as exc:
        raise AssetError(f"Failed to load OBJ file '{path}': line {line_number}: {exc}") from exc
    if value == 0:
        raise AssetError(f"Failed to load OBJ file '{path}': line {line_number}: index 0 is invalid")
    return value - 1 if value > 0 else count + value


def _parse_face_index(token: str, data: _ObjData, path: Path, line_number: int) -> _Index:
    parts = token.split("/")
    vertex = _fix_index(parts[0], len(data.vertices), path, line_number)
    texcoord = _fix_index(parts[1], len(data.texcoords), path, line_number) if len(parts) > 1 else -1
    normal = _fix_index(parts[2], len(data.normals), path, line_number) if len(parts) > 2 else -1
    return _Index(vertex, texcoord, normal)


def _parse_obj(path: Path) -> _ObjData:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise AssetError(f"Failed to load OBJ file '{path}': {exc}") from exc

    data = _ObjData()
    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens or tokens[0].startswith("#"):
            continue
        keyword, args = tokens[0], tokens[1:]
        if keyword == "v":
            x, y, z = _floats(args, 3, path, line_number)
            data.vertices.append((x, y, z))
            if len(args) >= 6:
                r, g, b = _floats(args[3:], 3, path, line_number)
                data.colors.append((r, g, b))
            else:
                data.colors.append((1.0, 1.0, 1.0))
        elif keyword == "vn":
            x, y, z = _floats(args, 3, path, line_number)
            data.normals.append((x, y, z))
        elif keyword == "vt":
            u, v = _floats(args, 2, path, line_number)
            data.texcoords.append((u, v))
        elif keyword == "f":
            polygon = [_parse_face_index(token, data, path, line_number) for token in args]
            if len(polygon) < 3:
                continue
            first = polygon[0]
            for second, third in zip(polygon[1:], polygon[2:]):
                data.triangles.append((first, second, third))
    return data


def _has_normal(data: _ObjData, index: _Index) -> bool:
    return 0 <= index.normal < len(data.normals)


def _read_vertex(data: _ObjData, index: _Index) -> Vertex:
    vertex = Vertex()

    if index.vertex >= 0:
        if index.vertex >= len(data.vertices):
            log.core().error("OBJ vertex index out of range: %d", index.vertex)
            return vertex
        vertex = replace(vertex, position=data.vertices[index.vertex])
        if data.colors:
            if index.vertex < len(data.colors):
                vertex = replace(vertex, color=data.colors[index.vertex])
            else:
                log.core().warning("OBJ vertex color index out of range: %d", index.vertex)

    if _has_normal(data, index):
        vertex = replace(vertex, normal=data.normals[index.normal])

    if index.texcoord >= 0:
        if index.texcoord >= len(data.texcoords):
            log.core().warning("OBJ texcoord index out of range: %d", index.texcoord)
            return vertex
        vertex = replace(vertex, uv=data.texcoords[index.texcoord])

    return vertex


def load_obj(metadata: AssetMetadata) -> Mesh:
    """Load the OBJ file named by the metadata as an unindexed-by-sharing triangle mesh."""
    if metadata.file_path is None:
        raise AssetError("Failed to load OBJ file: metadata has no file path")
    path = get_project_root() / metadata.file_path
    data = _parse_obj(path)

    vertices: list[Vertex] = []
    for triangle in data.triangles:
        corners = [_read_vertex(data, index) for index in triangle]
        if not all(_has_normal(data, index) for index in triangle):
            normal = calculate_surface_normal(*corners)
            corners = [replace(corner, normal=normal) for corner in corners]
        vertices.extend(corners)

    if not vertices:
        raise AssetError(f"No valid vertices found in OBJ file '{path}'")

    return Mesh(handle=metadata.handle, vertices=vertices, indices=list(range(len(vertices))))