"""Loading Wavefront OBJ models and their MTL material libraries."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field

from .assets import asset_path
from .textures import Texture, load_texture

log = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]

_FACE_VERTEX = re.compile(r"(\d+)/(\d+)")


class ObjError(ValueError):
    """Raised when a model or material file cannot be read."""


@dataclass
class Material:
    """A surface material; only materials with a diffuse map are kept."""

    name: str = ""
    ambient: Vec3 = (0.0, 0.0, 0.0)
    diffuse: Vec3 = (0.0, 0.0, 0.0)
    specular: Vec3 = (0.0, 0.0, 0.0)
    shininess: float = 0.0
    texture: Texture | None = None
    map_kd_path: str = ""


@dataclass
class Model:
    """Triangle mesh with per-face material assignments."""

    vertices: list[Vec3] = field(default_factory=list)
    tex_coords: list[Vec2] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    face_materials: list[int] = field(default_factory=list)
    materials: list[Material] = field(default_factory=list)

    def groups(self) -> list[list[int]]:
        """Return the vertex indices of the triangles, grouped by material.

        The result has one list per material, in material order. Faces
        whose material is out of range are dropped.
        """
        groups: list[list[int]] = [[] for _ in self.materials]
        triangles = zip(*[iter(self.indices)] * 3)
        for face, (triangle, material) in enumerate(zip(triangles, self.face_materials)):
            if 0 <= material < len(groups):
                groups[material].extend(triangle)
            else:
                log.warning("face %d refers to unknown material %d", face, material)
        return groups


def _first_token(text: str) -> str | None:
    tokens = text.split()
    return tokens[0] if tokens else None


def _open_text(path: str | os.PathLike[str], kind: str):
    try:
        return open(path, encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ObjError(f"failed to open {kind} file: {os.fspath(path)}") from exc


def load_mtl(
    path: str | os.PathLike[str], base: str | os.PathLike[str] | None = None
) -> list[Material]:
    """Load the materials of an MTL file.

    A material is recorded when its ``map_Kd`` line is reached; its texture
    is looked up under ``base``. A texture that cannot be loaded leaves the
    material without one.
    """
    materials: list[Material] = []
    pending: Material | None = None
    with _open_text(path, "MTL") as stream:
        for line in stream:
            if line.startswith("newmtl "):
                pending = Material(name=_first_token(line[7:]) or "")
            elif line.startswith("map_Kd "):
                material = pending if pending is not None else Material()
                pending = None
                token = _first_token(line[7:])
                if token is not None:
                    material.map_kd_path = token
                texture_path = asset_path(material.map_kd_path, base)
                try:
                    material.texture = load_texture(texture_path)
                except OSError:
                    log.warning("cannot load texture: %s", texture_path)
                materials.append(material)
    return materials


def _floats(line: str, count: int, kind: str) -> tuple[float, ...]:
    tokens = line.split()[1 : 1 + count]
    if len(tokens) < count:
        raise ObjError(f"malformed {kind} line: {line.strip()!r}")
    try:
        return tuple(float(token) for token in tokens)
    except ValueError as exc:
        raise ObjError(f"malformed {kind} line: {line.strip()!r}") from exc


def _face(line: str) -> tuple[int, int, int]:
    tokens = line.split()[1:4]
    if len(tokens) < 3:
        raise ObjError(f"malformed face line: {line.strip()!r}")
    result = []
    for token in tokens:
        match = _FACE_VERTEX.fullmatch(token)
        if match is None:
            raise ObjError(f"face vertices must be v/vt pairs: {line.strip()!r}")
        vertex = int(match.group(1))
        if vertex == 0:
            raise ObjError(f"face vertex index must start at 1: {line.strip()!r}")
        result.append(vertex - 1)
    return result[0], result[1], result[2]


def load_obj(
    path: str | os.PathLike[str], base: str | os.PathLike[str] | None = None
) -> Model:
    """Load an OBJ model; its ``mtllib`` and textures are looked up under ``base``.

    Texture coordinates are flipped vertically. Only the first triangle of
    each face is used.
    """
    with _open_text(path, "OBJ") as stream:
        lines = list(stream)

    mtl_file = None
    for line in lines:
        if line.startswith("mtllib "):
            token = _first_token(line[7:])
            if token is not None:
                mtl_file = token

    model = Model()
    if mtl_file:
        try:
            model.materials = load_mtl(asset_path(mtl_file, base), base)
        except ObjError as exc:
            log.warning("%s", exc)

    current_material = 0
    for line in lines:
        if line.startswith("v "):
            x, y, z = _floats(line, 3, "vertex")
            model.vertices.append((x, y, z))
        elif line.startswith("vt "):
            s, t = _floats(line, 2, "texture coordinate")
            model.tex_coords.append((s, 1.0 - t))
        elif line.startswith("usemtl "):
            name = _first_token(line[7:])
            for number, material in enumerate(model.materials):
                if material.name == name:
                    current_material = number
                    break
        elif line.startswith("f "):
            model.indices.extend(_face(line))
            model.face_materials.append(current_material)

    return model