from pathlib import Path

from PIL import Image

from asciiartist.config import RenderConfig
from asciiartist.grid import OutputGrid, assemble_grid, render_cell
from asciiartist.luminance import map_characters
from asciiartist.sampling import resample
from asciiartist.source import PixelGrid
from asciiartist.terminal import format_grid


def convert(pixels: PixelGrid, config: RenderConfig | None = None) -> OutputGrid:
    """Render a pixel grid as a grid of character cells.

    Pure: the same pixels and config always give an identical grid.
    """
    if config is None:
        config = RenderConfig()
    colours = resample(pixels, config)
    rows, cols = colours.shape[:2]
    chars = map_characters(colours, config.charset, config.luma)
    cells = (render_cell(chars[r][c], colours[r, c], config.colour) for r in range(rows) for c in range(cols))
    return assemble_grid(cells, rows, cols)


def image_to_ascii(
    image: PixelGrid | Image.Image | str | Path,
    config: RenderConfig | None = None,
) -> str:
    if isinstance(image, Image.Image):
        pixels = PixelGrid.from_image(image)
    elif isinstance(image, PixelGrid):
        pixels = image
    else:
        pixels = PixelGrid.open(image)
    return format_grid(convert(pixels, config))
