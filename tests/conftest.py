import numpy as np
import pytest
from PIL import Image

from asciiconv.buffer import ImageBuffer

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def _make_buffer(rows):
    """Build an ImageBuffer from a nested list of (r, g, b) or (r, g, b, a) pixels."""
    return ImageBuffer.from_array(np.array(rows, dtype=np.uint8))


@pytest.fixture
def make_buffer():
    return _make_buffer


@pytest.fixture
def random_buffer():
    rng = np.random.default_rng(42)
    return ImageBuffer.from_array(rng.integers(0, 256, size=(60, 80, 3), dtype=np.uint8))


@pytest.fixture
def image_file(tmp_path):
    """A small PNG with a white left half and black right half."""
    img = Image.new("RGB", (40, 40), BLACK)
    img.paste(WHITE, (0, 0, 20, 40))
    path = tmp_path / "input.png"
    img.save(path)
    return path
