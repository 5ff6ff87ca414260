import pytest
from PIL import Image

from imgtoascii.decoder import load_image
from imgtoascii.errors import DecodeError


def flat(image):
    """Pixels in row-major order as (r, g, b) tuples."""
    return [tuple(p) for p in image.pixels.reshape(-1, 3).tolist()]


def test_load_png(png_path):
    image = load_image(png_path)
    assert (image.width, image.height) == (2, 1)
    assert flat(image) == [(0, 0, 0), (255, 255, 255)]


def test_load_accepts_str_path(png_path):
    assert load_image(str(png_path)).width == 2


def test_load_grayscale_and_alpha(tmp_path):
    path = tmp_path / "la.png"
    Image.new("LA", (2, 2), (90, 10)).save(path)
    image = load_image(path)
    assert flat(image) == [(90, 90, 90)] * 4


def test_load_palette_gif_uses_first_frame(tmp_path):
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (1, 1), (255, 255, 255)), Image.new("RGB", (1, 1), (0, 0, 0))]
    frames[0].save(path, save_all=True, append_images=frames[1:])
    assert flat(load_image(path)) == [(255, 255, 255)]


def test_missing_file(tmp_path):
    with pytest.raises(DecodeError, match="File not found"):
        load_image(tmp_path / "nope.png")


def test_zero_byte_file(tmp_path):
    path = tmp_path / "empty.png"
    path.write_bytes(b"")
    with pytest.raises(DecodeError, match="Cannot decode"):
        load_image(path)


def test_garbage_file(tmp_path):
    path = tmp_path / "junk.jpg"
    path.write_bytes(b"not an image at all" * 10)
    with pytest.raises(DecodeError, match="Cannot decode"):
        load_image(path)


def test_directory_is_not_an_image(tmp_path):
    with pytest.raises(DecodeError):
        load_image(tmp_path)
