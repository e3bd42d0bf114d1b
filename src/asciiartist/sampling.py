import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from loguru import logger

from asciiartist.config import RenderConfig
from asciiartist.errors import ConfigurationError, EmptySourceError
from asciiartist.source import PixelGrid


def grid_shape(width: int, height: int, config: RenderConfig) -> tuple[int, int]:
    """Return (rows, cols) of the character grid for a width x height source.

    Terminal cells are taller than wide, so the row count is scaled by the
    aspect factor; 0.5 suits most fonts.
    """
    if width < 1 or height < 1:
        raise EmptySourceError(f"Resampler: source image is empty ({width}x{height} pixels)")
    factor = config.aspect_factor
    if not factor > 0:
        raise ConfigurationError(f"Resampler: aspect factor must be > 0, got {factor!r}")
    cols = max(1, config.width)
    rows = max(1, math.floor(cols * (height / width) * factor + 0.5))
    return rows, cols


def cell_bounds(length: int, cells: int) -> np.ndarray:
    """Pixel boundaries splitting ``length`` pixels into ``cells`` half-open runs.

    Boundary i is round(i * length / cells), rounded half up in integer
    arithmetic. The first boundary is 0 and the last is ``length``, so the runs
    tile the axis exactly; runs are empty when there are more cells than pixels.
    """
    i = np.arange(cells + 1, dtype=np.int64)
    return (2 * i * length + cells) // (2 * cells)


def _centre_indices(length: int, cells: int) -> np.ndarray:
    """Index of the pixel containing each cell's centre."""
    i = np.arange(cells, dtype=np.int64)
    return np.minimum((2 * i + 1) * length // (2 * cells), length - 1)


def _average_band(arr: np.ndarray, ys: np.ndarray, xs: np.ndarray, ny: np.ndarray, nx: np.ndarray) -> np.ndarray:
    """Average one band of output rows.

    ``ys`` holds the band's row boundaries (one more than its row count), ``ny``
    the centre row of each of its cells. Cells whose rectangle is empty keep
    the colour of their centre pixel.
    """
    out = arr[ny][:, nx].astype(np.int64)
    heights = np.diff(ys)
    widths = np.diff(xs)
    row_mask = heights > 0
    col_mask = widths > 0
    if row_mask.any() and col_mask.any():
        # Non-empty runs are contiguous, so reduceat over their starts sums each run exactly
        block = arr[ys[0] : ys[-1]]
        row_sums = np.add.reduceat(block, ys[:-1][row_mask] - ys[0], axis=0, dtype=np.int64)
        sums = np.add.reduceat(row_sums, xs[:-1][col_mask], axis=1)
        counts = (heights[row_mask][:, None] * widths[col_mask][None, :])[..., None]
        out[np.ix_(row_mask, col_mask)] = (2 * sums + counts) // (2 * counts)
    return out.astype(np.uint8)


def average_colours(pixels: PixelGrid, rows: int, cols: int, workers: int = 1) -> np.ndarray:
    """Mean colour of each cell's source rectangle. Returns (rows, cols, 3) uint8.

    With ``workers > 1`` bands of output rows are averaged on a thread pool.
    Every band reads a disjoint slice of the read-only pixel array and fills a
    disjoint slice of the result.
    """
    if rows < 1 or cols < 1:
        raise ConfigurationError(f"Resampler: grid must be at least 1x1, got {rows}x{cols}")
    arr = pixels.array
    height, width = arr.shape[:2]
    ys = cell_bounds(height, rows)
    xs = cell_bounds(width, cols)
    ny = _centre_indices(height, rows)
    nx = _centre_indices(width, cols)

    bands = min(workers, rows)
    if bands <= 1:
        return _average_band(arr, ys, xs, ny, nx)

    splits = cell_bounds(rows, bands)
    result = np.empty((rows, cols, 3), dtype=np.uint8)

    def run(r0, r1):
        result[r0:r1] = _average_band(arr, ys[r0 : r1 + 1], xs, ny[r0:r1], nx)

    with ThreadPoolExecutor(max_workers=bands) as executor:
        # list() re-raises the first failure from any band
        list(executor.map(run, splits[:-1], splits[1:]))
    return result


def nearest_colours(pixels: PixelGrid, rows: int, cols: int) -> np.ndarray:
    """Point-sample the pixel at floor(i * length / cells) on each axis."""
    if rows < 1 or cols < 1:
        raise ConfigurationError(f"Resampler: grid must be at least 1x1, got {rows}x{cols}")
    arr = pixels.array
    height, width = arr.shape[:2]
    iy = np.arange(rows, dtype=np.int64) * height // rows
    ix = np.arange(cols, dtype=np.int64) * width // cols
    return arr[iy][:, ix].copy()


def resample(pixels: PixelGrid, config: RenderConfig) -> np.ndarray:
    rows, cols = grid_shape(pixels.width, pixels.height, config)
    logger.debug(
        "Resampling {}x{} -> {} rows x {} cols ({}, workers={})",
        pixels.width,
        pixels.height,
        rows,
        cols,
        config.sampling,
        config.workers,
    )
    if config.sampling == "nearest":
        return nearest_colours(pixels, rows, cols)
    return average_colours(pixels, rows, cols, workers=config.workers)
