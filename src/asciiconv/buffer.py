from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from asciiconv.errors import ContextUnavailable, PixelAccessDenied


@dataclass(frozen=True)
class ImageBuffer:
    """A decoded RGBA image.

    ``pixels`` is a read-only uint8 array of shape (height, width, 4), or None
    when the source's dimensions are known but its pixels cannot be read.
    """

    width: int
    height: int
    pixels: np.ndarray | None

    @classmethod
    def from_array(cls, array) -> ImageBuffer:
        """Wrap an (H, W, 3) or (H, W, 4) array of 8-bit channels."""
        arr = np.asarray(array)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (H, W, 3|4) array, got shape {arr.shape}")
        if arr.dtype != np.uint8 and arr.size:
            if not np.issubdtype(arr.dtype, np.integer) or arr.min() < 0 or arr.max() > 255:
                raise ValueError(f"Expected 8-bit channel values in 0-255, got dtype {arr.dtype}")
        if arr.shape[2] == 3:
            alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
            arr = np.concatenate([arr.astype(np.uint8), alpha], axis=2)
        else:
            arr = arr.astype(np.uint8, copy=True)
        arr.flags.writeable = False
        return cls(width=arr.shape[1], height=arr.shape[0], pixels=arr)

    @classmethod
    def from_image(cls, image: Image.Image) -> ImageBuffer:
        width, height = image.size
        if width == 0 or height == 0:
            return cls(width=width, height=height, pixels=None)
        try:
            rgba = image.convert("RGBA")
        except ValueError as exc:
            raise ContextUnavailable(f"Cannot obtain an RGBA surface for mode {image.mode!r}") from exc
        except OSError as exc:
            raise PixelAccessDenied(f"Failed to read pixel data: {exc}") from exc
        return cls.from_array(np.asarray(rgba))


def load_image(path: str | Path) -> ImageBuffer:
    """Decode an image file into an ImageBuffer."""
    with Image.open(path) as image:
        return ImageBuffer.from_image(image)
