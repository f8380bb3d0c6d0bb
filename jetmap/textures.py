"""Loading texture images as RGB pixel data."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class Texture:
    """An RGB image, rows top to bottom, three bytes per pixel."""

    width: int
    height: int
    data: bytes


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file and convert it to 8-bit RGB.

    Raises ``OSError`` when the file is missing or is not a readable image.
    """
    with Image.open(path) as image:
        rgb = image.convert("RGB")
        return Texture(width=rgb.width, height=rgb.height, data=rgb.tobytes())