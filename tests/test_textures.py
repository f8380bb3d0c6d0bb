import pytest
from PIL import Image

from jetmap.textures import Texture, load_texture


def test_rgb_image_roundtrip(tmp_path):
    image = Image.new("RGB", (2, 3), (10, 20, 30))
    image.putpixel((1, 2), (200, 100, 50))
    path = tmp_path / "tex.png"
    image.save(path)

    texture = load_texture(path)

    assert texture.width == 2
    assert texture.height == 3
    assert texture.data == image.tobytes()


def test_rgba_is_converted_to_rgb(tmp_path):
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (4, 2), (1, 2, 3, 4)).save(path)

    texture = load_texture(str(path))

    assert len(texture.data) == 4 * 2 * 3
    assert texture.data[:3] == bytes([1, 2, 3])


def test_greyscale_is_expanded(tmp_path):
    path = tmp_path / "grey.png"
    Image.new("L", (1, 1), 77).save(path)

    assert load_texture(path) == Texture(width=1, height=1, data=bytes([77, 77, 77]))


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_texture(tmp_path / "nope.png")


def test_not_an_image_raises(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"this is not an image")
    with pytest.raises(OSError):
        load_texture(path)