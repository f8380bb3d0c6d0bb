"""Reading and writing ``.bmap`` map files.

A map file holds a 16-byte header (magic ``BMAP``, version, model count,
placement count), then the model table and then the placements, all in
little-endian byte order.
"""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from typing import BinaryIO

MAGIC = b"BMAP"
VERSION = 1
MAX_MODELS = 64
MAX_PLACEMENTS = 1024
FILENAME_SIZE = 32

_HEADER = struct.Struct("<4sIII")
_U32 = struct.Struct("<I")
_VEC3 = struct.Struct("<3f")

Vec3 = tuple[float, float, float]


class BMapError(ValueError):
    """Raised when a map file cannot be read or written."""


@dataclass
class ModelEntry:
    """A model file referenced by the map."""

    filename: str
    index: int


@dataclass
class Placement:
    """One instance of a model in the world; rotation is in degrees."""

    model_index: int
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)


@dataclass
class MapData:
    """The models and placements of a map."""

    models: list[ModelEntry] = field(default_factory=list)
    placements: list[Placement] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        """Serialise the map in the ``.bmap`` format."""
        if len(self.models) > MAX_MODELS:
            raise BMapError(f"too many models: {len(self.models)}")
        if len(self.placements) > MAX_PLACEMENTS:
            raise BMapError(f"too many placements: {len(self.placements)}")

        parts = [_HEADER.pack(MAGIC, VERSION, len(self.models), len(self.placements))]
        for model in self.models:
            name = model.filename.encode("utf-8", "surrogateescape")
            if len(name) >= FILENAME_SIZE:
                raise BMapError(f"model filename too long: {model.filename!r}")
            parts.append(_U32.pack(model.index))
            parts.append(_U32.pack(len(name)))
            parts.append(name)
        for placement in self.placements:
            parts.append(_U32.pack(placement.model_index))
            parts.append(_VEC3.pack(*placement.position))
            parts.append(_VEC3.pack(*placement.rotation))
            parts.append(_VEC3.pack(*placement.scale))
        return b"".join(parts)


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise BMapError(f"unexpected end of data while reading {what}")
    return data


def _read_u32(stream: BinaryIO, what: str) -> int:
    (value,) = _U32.unpack(_read_exact(stream, _U32.size, what))
    return value


def read_string(stream: BinaryIO, max_len: int = FILENAME_SIZE) -> str:
    """Read a length-prefixed string of at most ``max_len - 1`` bytes.

    A longer stored string is cut short: only ``max_len - 1`` bytes are
    consumed and the rest is left in the stream.
    """
    if max_len <= 0:
        raise BMapError("string buffer size must be positive")
    length = min(_read_u32(stream, "string length"), max_len - 1)
    raw = _read_exact(stream, length, "string data")
    raw = raw.split(b"\0", 1)[0]
    return raw.decode("utf-8", "surrogateescape")


def read_vec3(stream: BinaryIO) -> Vec3:
    """Read three little-endian 32-bit floats."""
    x, y, z = _VEC3.unpack(_read_exact(stream, _VEC3.size, "vector"))
    return (x, y, z)


def parse_bmap(stream: BinaryIO) -> MapData:
    """Parse a map from a binary stream."""
    header = stream.read(_HEADER.size)
    if len(header) != _HEADER.size:
        raise BMapError("header is not correct")
    magic, version, model_count, placement_count = _HEADER.unpack(header)
    if magic != MAGIC or version != VERSION:
        raise BMapError("header version not correct")

    data = MapData()
    for _ in range(model_count):
        if len(data.models) >= MAX_MODELS:
            raise BMapError(f"too many models (limit {MAX_MODELS})")
        index = _read_u32(stream, "model index")
        filename = read_string(stream, FILENAME_SIZE)
        data.models.append(ModelEntry(filename=filename, index=index))

    for _ in range(placement_count):
        if len(data.placements) >= MAX_PLACEMENTS:
            raise BMapError(f"too many placements (limit {MAX_PLACEMENTS})")
        model_index = _read_u32(stream, "placement model index")
        position = read_vec3(stream)
        rotation = read_vec3(stream)
        scale = read_vec3(stream)
        data.placements.append(Placement(model_index, position, rotation, scale))

    return data


def load_bmap(path: str | os.PathLike[str]) -> MapData:
    """Load a map from a ``.bmap`` file."""
    try:
        stream = open(path, "rb")
    except OSError as exc:
        raise BMapError(f"cannot open file: {os.fspath(path)}") from exc
    with stream:
        return parse_bmap(stream)