import logging

import numpy as np

from asciiconv.buffer import ImageBuffer
from asciiconv.engine import WHITE, CellGrid
from asciiconv.errors import InvalidDimensions, PixelAccessDenied
from asciiconv.sampling import brightness, char_indices, compute_strides, glyph_colours, sample_pixels
from asciiconv.settings import ConversionSettings

logger = logging.getLogger(__name__)


def _check_buffer(image: ImageBuffer) -> np.ndarray:
    if image.width <= 0 or image.height <= 0:
        raise InvalidDimensions(f"Invalid image dimensions: {image.width}x{image.height}")
    if image.pixels is None:
        raise PixelAccessDenied("Image has no readable pixel data")
    shape = image.pixels.shape
    if len(shape) != 3 or shape[:2] != (image.height, image.width) or shape[2] < 3:
        raise PixelAccessDenied(
            f"Pixel data of shape {shape} does not match a {image.width}x{image.height} image"
        )
    return image.pixels


def convert(image: ImageBuffer, settings: ConversionSettings) -> CellGrid:
    """Convert an image to a grid of coloured characters.

    Raises a ConversionError subclass if the image cannot be sampled; no
    partial grid is ever returned.
    """
    pixels = _check_buffer(image)
    ramp = settings.ramp

    col_stride, row_stride = compute_strides(image.width, image.height, settings.resolution)
    rgb = sample_pixels(pixels, col_stride, row_stride)
    indices = char_indices(brightness(rgb, settings.grayscale, settings.inverted), len(ramp))

    if settings.grayscale:
        colours = np.empty(rgb.shape, dtype=np.uint8)
        colours[...] = WHITE
    else:
        colours = glyph_colours(rgb, indices, len(ramp))

    char_arr = np.array(list(ramp))
    chars = ["".join(row) for row in char_arr[indices]]

    logger.debug(
        "Converted %dx%d image to %dx%d cells (strides %d, %d)",
        image.width,
        image.height,
        len(chars[0]),
        len(chars),
        col_stride,
        row_stride,
    )
    return CellGrid(chars=chars, colours=colours, grayscale=settings.grayscale)


def format_ansi(grid: CellGrid) -> str:
    """Wrap each character in ANSI truecolor foreground escape sequences.

    Like CellGrid.text, every row ends with a newline.
    """
    out = []
    for r, line in enumerate(grid.chars):
        parts = []
        for c, char in enumerate(line):
            fr, fg, fb = (int(v) for v in grid.colours[r, c])
            parts.append(f"\033[38;2;{fr};{fg};{fb}m{char}")
        parts.append("\033[0m")
        out.append("".join(parts) + "\n")
    return "".join(out)
