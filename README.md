# jetmap

Asset loading and scene logic for a small third-person street game: a
binary `.bmap` map format, Wavefront OBJ/MTL models and RGB textures, and
the player and camera rules that decide what is in view.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Assets

`jetmap.assets.assets_dir(dreamcast=False)` gives `"assets/"`, or
`"/cd/assets/"` for a console disc. `asset_path(name, base=None)` gives the
path of an asset: a string `base` is used as a plain prefix (so it should end
with a separator), any other path-like `base` is joined with the name, and
without a base `"assets/"` is used.

## Maps

A `.bmap` file starts with the magic `BMAP`, version `1`, a model count and a
placement count, all little-endian 32-bit. Each model is an index and a
length-prefixed file name (at most 31 bytes are kept); each placement is a
model index followed by position, rotation (degrees) and scale vectors of
three 32-bit floats.

```python
from jetmap.bmap import load_bmap, BMapError

try:
    level = load_bmap("assets/map00.bmap")
except BMapError as err:
    print("Failed to load map:", err)
else:
    for placement in level.placements:
        print(placement.model_index, placement.position)
    data = level.to_bytes()  # the same format back
```

`parse_bmap(stream)` reads a map from an open binary stream, and
`read_string` and `read_vec3` read its single fields. A map may hold at most
64 models and 1024 placements; a bad header, short data or too many entries
raise `BMapError`.

## Models

```python
from jetmap.obj import load_obj

model = load_obj("assets/rhyth.obj", base="assets/")
for material, indices in zip(model.materials, model.groups()):
    print(material.name, len(indices) // 3, "triangles")
```

`load_obj` reads vertices, texture coordinates (with V flipped), faces whose
vertices are `v/vt` pairs (only the first three vertices of a face are used)
and the `usemtl` switches. The material library named by `mtllib` is loaded
from under `base` with `load_mtl`; if it cannot be opened the model has no
materials. A material is kept only once its `map_Kd` line is read, and its
texture is loaded with `jetmap.textures.load_texture`, which returns a
`Texture` with width, height and RGB pixel bytes. `Model.groups()` gives the
vertex indices of the triangles grouped by material. A file that cannot be
opened or a malformed line raises `ObjError`.

## Game logic

```
jetmap [--assets DIR] [--dreamcast]
```

This loads the player model `rhyth.obj`, the map `map00.bmap` and every model
the map lists from the assets directory, then prints how many models and
placements were loaded and how many are in view. It exits with status 1 if a
file cannot be read.

The `Game` class in `jetmap.game` holds the `Player` and `Camera`:

- `handle_keys(keys, delta)` applies held keys over `delta` seconds: `w`,
  `s`, `a`, `d` move the player, `q`, `e` turn the camera, `r`, `f` raise and
  lower it.
- `handle_stick(joyx, joyy, ltrig, rtrig)` applies one frame of analogue
  stick and trigger input.
- `visible_placements()` gives the map placements within 15 units of the
  player on the ground plane.
- `Camera.eye(player)` gives the camera position orbiting the player.

## What it does not do

The package opens no window, draws nothing and plays no audio; there is no
real-time game loop. It loads and holds the scene data and applies the
movement and visibility rules, leaving drawing to whatever code uses it.