from pathlib import Path
from typing import NamedTuple

import numpy as np
from loguru import logger
from PIL import Image

from asciiartist.errors import EmptySourceError


class Color(NamedTuple):
    red: int
    green: int
    blue: int


class PixelGrid:
    """Read-only RGB samples of a decoded image, stored as a (height, width, 3) uint8 array.

    An alpha channel is discarded: transparent pixels keep whatever RGB value
    they were stored with.
    """

    __slots__ = ("_array",)

    def __init__(self, pixels):
        arr = np.asarray(pixels)
        if arr.ndim != 3 or arr.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (height, width, 3|4) pixel array, got shape {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise EmptySourceError(f"Source image is empty: {arr.shape[1]}x{arr.shape[0]} pixels")
        arr = np.array(arr[:, :, :3], dtype=np.uint8)
        arr.flags.writeable = False
        self._array = arr

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelGrid":
        if image.width == 0 or image.height == 0:
            raise EmptySourceError(f"Source image is empty: {image.width}x{image.height} pixels")
        return cls(np.asarray(image.convert("RGB")))

    @classmethod
    def open(cls, path: str | Path) -> "PixelGrid":
        """Decode an image file with Pillow. Format detection is left to Pillow."""
        with Image.open(path) as image:
            logger.debug("Decoded {} ({} {}x{})", path, image.format, image.width, image.height)
            return cls.from_image(image)

    @classmethod
    def from_rows(cls, rows) -> "PixelGrid":
        """Build from nested rows of (r, g, b) triples, top row first."""
        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise EmptySourceError("Source image is empty: no pixel rows")
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Pixel rows must all have the same length")
        return cls(np.array(rows, dtype=np.uint8))

    @property
    def array(self) -> np.ndarray:
        return self._array

    @property
    def width(self) -> int:
        return self._array.shape[1]

    @property
    def height(self) -> int:
        return self._array.shape[0]

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def pixel(self, x: int, y: int) -> Color:
        r, g, b = self._array[y, x]
        return Color(int(r), int(g), int(b))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PixelGrid):
            return np.array_equal(self._array, other._array)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"PixelGrid({self.width}x{self.height})"
