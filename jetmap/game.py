"""Game state: the player, the chase camera, input handling and scene loading."""

from __future__ import annotations

import argparse
import logging
import math
import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .assets import asset_path, assets_dir
from .bmap import BMapError, MapData, Placement, load_bmap
from .obj import Model, ObjError, load_obj

log = logging.getLogger(__name__)

RENDER_DISTANCE = 15.0
STICK_DEADZONE = 16
PLAYER_MODEL = "rhyth.obj"
MAP_FILE = "map00.bmap"

Vec3 = tuple[float, float, float]


@dataclass
class Player:
    """The player's position, facing and model."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotation: float = 0.0
    model: Model = field(default_factory=Model)


@dataclass
class Camera:
    """A camera orbiting the player at a fixed distance and height."""

    distance: float = 5.0
    angle: float = 0.0
    height: float = 2.0

    def eye(self, player: Player) -> Vec3:
        """Return the camera position for the given player."""
        return (
            player.x + self.distance * math.cos(self.angle),
            player.y + self.height,
            player.z + self.distance * math.sin(self.angle),
        )


@dataclass
class Game:
    """The running game: player, camera, map and the models it uses."""

    player: Player = field(default_factory=Player)
    camera: Camera = field(default_factory=Camera)
    map: MapData = field(default_factory=MapData)
    models: list[Model] = field(default_factory=list)

    def handle_keys(self, keys: Iterable[str], delta: float) -> None:
        """Apply held keyboard keys over ``delta`` seconds."""
        held = set(keys)
        move = 2.0 * delta
        rotate = 1.5 * delta
        if "w" in held:
            self.player.z += move
        if "s" in held:
            self.player.z -= move
        if "a" in held:
            self.player.x += move
        if "d" in held:
            self.player.x -= move
        if "q" in held:
            self.camera.angle += rotate
        if "e" in held:
            self.camera.angle -= rotate
        if "r" in held:
            self.camera.height += move
        if "f" in held:
            self.camera.height -= move

    def handle_stick(self, joyx: float, joyy: float, ltrig: float, rtrig: float) -> None:
        """Apply one frame of analogue stick and trigger input."""
        if abs(joyx) > STICK_DEADZONE or abs(joyy) > STICK_DEADZONE:
            angle = math.atan2(joyy, joyx)
            magnitude = min(math.hypot(joyx, joyy) / 128.0, 1.0)
            speed = magnitude * 0.1
            self.player.x -= math.cos(angle) * speed
            self.player.z -= math.sin(angle) * speed

        if rtrig > 64:
            self.camera.angle += 0.03
        if rtrig > 32:
            self.camera.angle += 0.015
        if ltrig > 32:
            self.camera.angle -= 0.015
        if ltrig > 64:
            self.camera.angle -= 0.03

    def visible_placements(self) -> list[Placement]:
        """Return the placements within render distance of the player, in map order."""
        limit = RENDER_DISTANCE * RENDER_DISTANCE
        visible = []
        for placement in self.map.placements:
            dx = placement.position[0] - self.player.x
            dz = placement.position[2] - self.player.z
            if dx * dx + dz * dz <= limit:
                visible.append(placement)
        return visible

    def load_scene(self, base: str | os.PathLike[str] | None = None) -> None:
        """Load the player model, the map and every model the map lists.

        Raises ``ObjError`` or ``BMapError`` when a file cannot be read.
        """
        player_path = asset_path(PLAYER_MODEL, base)
        self.player.model = load_obj(player_path, base)
        if not self.player.model.vertices:
            log.warning("failed to load player model: %s", player_path)

        self.map = load_bmap(asset_path(MAP_FILE, base))

        self.models = []
        for entry in self.map.models:
            path = asset_path(entry.filename, base)
            model = load_obj(path, base)
            if not model.vertices:
                log.warning("failed to load model: %s", path)
            self.models.append(model)


def main(argv: list[str] | None = None) -> int:
    """Load the scene and report what was loaded."""
    parser = argparse.ArgumentParser(prog="jetmap", description="Load a game scene.")
    parser.add_argument("--assets", default=None, help="asset directory")
    parser.add_argument(
        "--dreamcast", action="store_true", help="use the console asset directory"
    )
    args = parser.parse_args(argv)

    print("Game initialization\nJET SET RADIO!", flush=True)
    base = args.assets
    if base is None:
        base = assets_dir(args.dreamcast)
    elif not base.endswith(("/", os.sep)):
        base += "/"

    game = Game()
    try:
        game.load_scene(base)
    except BMapError as exc:
        print(f"Failed to load map: {exc}")
        return 1
    except ObjError as exc:
        print(exc)
        return 1

    print(
        f"Loaded {len(game.models)} models and {len(game.map.placements)} placements; "
        f"{len(game.visible_placements())} visible",
        flush=True,
    )
    return 0