import numpy as np
import pytest
from PIL import Image

from asciiconv.buffer import ImageBuffer, load_image
from asciiconv.errors import ContextUnavailable, PixelAccessDenied


class _BrokenImage:
    """Stand-in for a Pillow image whose conversion fails."""

    mode = "X"
    size = (4, 4)

    def __init__(self, exc):
        self.exc = exc

    def convert(self, mode):
        raise self.exc


def test_from_image_rgb():
    img = Image.new("RGB", (5, 3), (10, 20, 30))
    buf = ImageBuffer.from_image(img)
    assert (buf.width, buf.height) == (5, 3)
    assert buf.pixels.shape == (3, 5, 4)
    assert buf.pixels[0, 0].tolist() == [10, 20, 30, 255]


def test_from_image_grayscale_mode():
    img = Image.new("L", (2, 2), 200)
    buf = ImageBuffer.from_image(img)
    assert buf.pixels[1, 1].tolist() == [200, 200, 200, 255]


def test_pixels_are_read_only():
    buf = ImageBuffer.from_image(Image.new("RGB", (2, 2)))
    with pytest.raises(ValueError):
        buf.pixels[0, 0, 0] = 1


def test_from_array_adds_opaque_alpha():
    buf = ImageBuffer.from_array(np.zeros((2, 3, 3), dtype=np.uint8))
    assert (buf.width, buf.height) == (3, 2)
    assert (buf.pixels[..., 3] == 255).all()


def test_from_array_copies_input():
    arr = np.zeros((2, 2, 4), dtype=np.uint8)
    buf = ImageBuffer.from_array(arr)
    arr[0, 0, 0] = 99
    assert buf.pixels[0, 0, 0] == 0


def test_from_array_rejects_bad_shape():
    with pytest.raises(ValueError, match="Expected an"):
        ImageBuffer.from_array(np.zeros((4, 4), dtype=np.uint8))


def test_zero_sized_image_has_no_pixels():
    buf = ImageBuffer.from_image(Image.new("RGB", (0, 0)))
    assert (buf.width, buf.height) == (0, 0)
    assert buf.pixels is None


def test_unconvertible_mode_raises_context_unavailable():
    with pytest.raises(ContextUnavailable, match="RGBA surface"):
        ImageBuffer.from_image(_BrokenImage(ValueError("conversion not supported")))


def test_unreadable_pixels_raise_pixel_access_denied():
    with pytest.raises(PixelAccessDenied, match="truncated"):
        ImageBuffer.from_image(_BrokenImage(OSError("image file is truncated")))


def test_load_image(image_file):
    buf = load_image(image_file)
    assert (buf.width, buf.height) == (40, 40)
    assert buf.pixels[0, 0].tolist() == [255, 255, 255, 255]
    assert buf.pixels[0, 39].tolist() == [0, 0, 0, 255]


def test_from_array_accepts_wider_integer_dtype():
    buf = ImageBuffer.from_array(np.array([[[255, 128, 0]]], dtype=np.int64))
    assert buf.pixels.dtype == np.uint8
    assert buf.pixels[0, 0].tolist() == [255, 128, 0, 255]


@pytest.mark.parametrize("value", [256, -1])
def test_from_array_rejects_out_of_range_channels(value):
    with pytest.raises(ValueError, match="0-255"):
        ImageBuffer.from_array([[[255, 255, 255], [value] * 3]])


def test_from_array_rejects_float_channels():
    with pytest.raises(ValueError, match="0-255"):
        ImageBuffer.from_array(np.full((1, 1, 3), 0.9))
