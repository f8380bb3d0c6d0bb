import io
import struct

import pytest

from jetmap.bmap import (
    MAX_MODELS,
    BMapError,
    MapData,
    ModelEntry,
    Placement,
    load_bmap,
    parse_bmap,
    read_string,
    read_vec3,
)


def _sample_map():
    return MapData(
        models=[ModelEntry("rhyth.obj", 0), ModelEntry("wall.obj", 7)],
        placements=[
            Placement(0, (1.5, 0.0, -2.25), (0.0, 90.0, 0.0), (1.0, 1.0, 1.0)),
            Placement(1, (10.0, 2.0, 3.0), (45.0, 0.0, 180.0), (0.5, 2.0, 0.25)),
        ],
    )


def _header(magic=b"BMAP", version=1, models=0, placements=0):
    return struct.pack("<4sIII", magic, version, models, placements)


def test_round_trip():
    original = _sample_map()
    assert parse_bmap(io.BytesIO(original.to_bytes())) == original


def test_to_bytes_header_fields():
    data = _sample_map().to_bytes()
    assert data[:4] == b"BMAP"
    assert struct.unpack("<III", data[4:16]) == (1, 2, 2)


def test_empty_map_is_header_only():
    data = MapData().to_bytes()
    assert data == _header()
    assert parse_bmap(io.BytesIO(data)) == MapData()


def test_bad_magic_rejected():
    with pytest.raises(BMapError):
        parse_bmap(io.BytesIO(_header(magic=b"XMAP")))


def test_bad_version_rejected():
    with pytest.raises(BMapError):
        parse_bmap(io.BytesIO(_header(version=2)))


def test_short_header_rejected():
    with pytest.raises(BMapError):
        parse_bmap(io.BytesIO(b"BMAP\x01\x00"))


def test_truncated_placement_rejected():
    data = _sample_map().to_bytes()
    with pytest.raises(BMapError):
        parse_bmap(io.BytesIO(data[:-4]))


def test_missing_model_data_rejected():
    with pytest.raises(BMapError):
        parse_bmap(io.BytesIO(_header(models=1)))


def test_model_limit_accepted():
    original = MapData(models=[ModelEntry(f"m{i}.obj", i) for i in range(MAX_MODELS)])
    parsed = parse_bmap(io.BytesIO(original.to_bytes()))
    assert len(parsed.models) == MAX_MODELS


def test_too_many_models_in_file_rejected():
    body = b"".join(
        struct.pack("<II", i, 1) + b"a" for i in range(MAX_MODELS + 1)
    )
    with pytest.raises(BMapError):
        parse_bmap(io.BytesIO(_header(models=MAX_MODELS + 1) + body))


def test_too_many_models_not_written():
    data = MapData(models=[ModelEntry("m.obj", i) for i in range(MAX_MODELS + 1)])
    with pytest.raises(BMapError):
        data.to_bytes()


def test_long_filename_not_written():
    data = MapData(models=[ModelEntry("x" * 40, 0)])
    with pytest.raises(BMapError):
        data.to_bytes()


def test_read_string_plain():
    stream = io.BytesIO(struct.pack("<I", 5) + b"hello" + b"rest")
    assert read_string(stream) == "hello"
    assert stream.read() == b"rest"


def test_read_string_truncates_and_leaves_remainder():
    max_len = 8
    stream = io.BytesIO(struct.pack("<I", 20) + b"b" * 20)
    result = read_string(stream, max_len)
    assert result == "b" * (max_len - 1)
    assert stream.read() == b"b" * (20 - (max_len - 1))


def test_read_string_zero_buffer_rejected():
    with pytest.raises(BMapError):
        read_string(io.BytesIO(struct.pack("<I", 1) + b"a"), 0)


def test_read_string_short_data_rejected():
    with pytest.raises(BMapError):
        read_string(io.BytesIO(struct.pack("<I", 10) + b"abc"))


def test_read_vec3_values():
    stream = io.BytesIO(struct.pack("<3f", 1.5, -2.0, 0.25))
    assert read_vec3(stream) == (1.5, -2.0, 0.25)


def test_read_vec3_short_rejected():
    with pytest.raises(BMapError):
        read_vec3(io.BytesIO(struct.pack("<2f", 1.0, 2.0)))


def test_load_bmap_from_file(tmp_path):
    original = _sample_map()
    path = tmp_path / "map00.bmap"
    path.write_bytes(original.to_bytes())
    assert load_bmap(path) == original


def test_load_bmap_missing_file(tmp_path):
    with pytest.raises(BMapError):
        load_bmap(tmp_path / "absent.bmap")