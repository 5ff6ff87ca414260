import pytest
from PIL import Image


@pytest.fixture
def png_path(tmp_path):
    """A 2x1 PNG with a black pixel followed by a white one."""
    img = Image.new("RGB", (2, 1))
    img.putpixel((0, 0), (0, 0, 0))
    img.putpixel((1, 0), (255, 255, 255))
    path = tmp_path / "input.png"
    img.save(path)
    return path
