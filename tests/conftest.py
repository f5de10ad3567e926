import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Save a row-major list of (r, g, b) pixels as a PNG and return its path."""
    def _make(name, pixels, width=None):
        width = width or len(pixels)
        height = len(pixels) // width
        img = Image.new('RGB', (width, height))
        img.putdata(pixels)
        path = tmp_path / name
        img.save(path)
        return str(path)
    return _make

