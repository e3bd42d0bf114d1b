import numpy as np
import pytest
from PIL import Image

from asciiartist.source import PixelGrid

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def solid(width, height, colour):
    """PixelGrid of a single colour."""
    return PixelGrid(np.full((height, width, 3), colour, dtype=np.uint8))


@pytest.fixture
def gradient():
    """64x32 horizontal grayscale ramp, black on the left to white on the right."""
    ramp = np.linspace(0, 255, 64).round().astype(np.uint8)
    arr = np.repeat(ramp[np.newaxis, :, np.newaxis], 32, axis=0).repeat(3, axis=2)
    return PixelGrid(arr)


@pytest.fixture
def noisy():
    rng = np.random.default_rng(42)
    return PixelGrid(rng.integers(0, 256, size=(47, 61, 3), dtype=np.uint8))


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGB", (40, 20), (255, 0, 0)).save(path)
    return path
