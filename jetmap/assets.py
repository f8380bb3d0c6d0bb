"""Locating game assets on disk."""

from __future__ import annotations

import os

ASSETS_PATH = "assets/"
DREAMCAST_ASSETS_PATH = "/cd/assets/"


def assets_dir(dreamcast: bool = False) -> str:
    """Return the asset directory prefix for the chosen platform."""
    return DREAMCAST_ASSETS_PATH if dreamcast else ASSETS_PATH


def asset_path(name: str, base: str | os.PathLike[str] | None = None) -> str:
    """Return the path of asset ``name`` under ``base``.

    A string base is used as a plain prefix, so it should end with a
    separator. Any other path-like base is joined with ``name``. Without
    a base the default asset directory is used.
    """
    if base is None:
        base = ASSETS_PATH
    if isinstance(base, str):
        return base + name
    return os.path.join(os.fspath(base), name)