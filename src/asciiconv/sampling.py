import math

import numpy as np

# Monospace glyphs are roughly twice as tall as wide; halving the row count
# keeps the output from looking vertically stretched
FONT_ASPECT = 0.5

# Colour mode scales each glyph's colour by a factor in [0.5, 2.0]
FACTOR_SCALE = 1.5
FACTOR_OFFSET = 0.5
# Keeps near-black glyphs visible against a dark background
MIN_CHANNEL = 40
MAX_CHANNEL = 255


def compute_strides(width: int, height: int, resolution: float) -> tuple[int, int]:
    """Return (col_stride, row_stride) in pixels for the sampling walk."""
    sample_cols = max(1, math.floor(width * resolution))
    sample_rows = max(1, math.floor(height * resolution))
    col_stride = max(1, math.ceil(width / sample_cols))
    row_stride = max(1, math.ceil(height / sample_rows / FONT_ASPECT))
    return col_stride, row_stride


def sample_pixels(pixels: np.ndarray, col_stride: int, row_stride: int) -> np.ndarray:
    """Visit every row_stride-th row and col_stride-th column starting at (0, 0).

    Returns the (r, g, b) channels of the visited pixels as an array of shape
    (rows, cols, 3), ordered top-to-bottom, left-to-right.
    """
    return pixels[::row_stride, ::col_stride, :3]


def luma_brightness(rgb: np.ndarray) -> np.ndarray:
    """Linear luma in [0, 1]."""
    rgb = rgb.astype(np.float64)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    return (r * 0.299 + g * 0.587 + b * 0.114) / 255


def perceived_brightness(rgb: np.ndarray) -> np.ndarray:
    """Root of the weighted squared channels, in [0, 1]."""
    rgb = rgb.astype(np.float64) / 255
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    return np.sqrt(0.299 * r * r + 0.587 * g * g + 0.114 * b * b)


def brightness(rgb: np.ndarray, grayscale: bool, inverted: bool) -> np.ndarray:
    values = luma_brightness(rgb) if grayscale else perceived_brightness(rgb)
    if inverted:
        values = 1 - values
    return values


def char_indices(brightness: np.ndarray, ramp_length: int) -> np.ndarray:
    """Map brightness to ramp indices, 0 for darkest and ramp_length - 1 for brightest."""
    top = ramp_length - 1
    indices = np.floor(brightness * top).astype(np.intp)
    return np.clip(indices, 0, top)


def glyph_colours(rgb: np.ndarray, indices: np.ndarray, ramp_length: int) -> np.ndarray:
    """Scale source colours by glyph density.

    Denser glyphs get brighter colours. Channels are rounded half up and
    clamped to [MIN_CHANNEL, MAX_CHANNEL]. Returns uint8 of the same shape as rgb.
    """
    factor = (indices / (ramp_length - 1)) * FACTOR_SCALE + FACTOR_OFFSET
    scaled = np.floor(rgb.astype(np.float64) * factor[..., np.newaxis] + 0.5)
    return np.clip(scaled, MIN_CHANNEL, MAX_CHANNEL).astype(np.uint8)
