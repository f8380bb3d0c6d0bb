from pathlib import Path

from jetmap.assets import ASSETS_PATH, DREAMCAST_ASSETS_PATH, asset_path, assets_dir


def test_assets_dir_desktop():
    assert assets_dir(False) == "assets/"


def test_assets_dir_dreamcast():
    assert assets_dir(True) == "/cd/assets/"


def test_assets_dir_defaults_to_desktop():
    assert assets_dir() == ASSETS_PATH


def test_asset_path_default_base():
    assert asset_path("rhyth.obj") == "assets/rhyth.obj"


def test_asset_path_string_base_is_prefix():
    assert asset_path("map00.bmap", "/data/") == "/data/map00.bmap"


def test_asset_path_dreamcast_base():
    result = asset_path("output.adx", assets_dir(True))
    assert result == DREAMCAST_ASSETS_PATH + "output.adx"


def test_asset_path_pathlike_base_joins(tmp_path):
    result = asset_path("rhyth.obj", tmp_path)
    assert Path(result) == tmp_path / "rhyth.obj"