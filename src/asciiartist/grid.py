from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from asciiartist.errors import ShapeMismatchError
from asciiartist.source import Color


class Cell(NamedTuple):
    char: str
    colour: Color | None = None


def render_cell(char: str, colour, colour_enabled: bool) -> Cell:
    """Pair a character with its cell colour, or with nothing in monochrome mode."""
    if not colour_enabled:
        return Cell(char)
    r, g, b = colour
    return Cell(char, Color(int(r), int(g), int(b)))


@dataclass(frozen=True)
class OutputGrid:
    cells: tuple[tuple[Cell, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def __iter__(self) -> Iterator[tuple[Cell, ...]]:
        return iter(self.cells)

    def __getitem__(self, row: int) -> tuple[Cell, ...]:
        return self.cells[row]

    def lines(self) -> list[str]:
        """Characters only, one string per row."""
        return ["".join(cell.char for cell in row) for row in self.cells]

    def text(self) -> str:
        return "\n".join(self.lines())


def assemble_grid(cells: Iterable[Cell], rows: int, cols: int) -> OutputGrid:
    """Arrange row-major cells into a rows x cols grid."""
    if rows < 1 or cols < 1:
        raise ShapeMismatchError(f"Grid assembler: grid must be at least 1x1, got {rows}x{cols}")
    flat = tuple(cells)
    if len(flat) != rows * cols:
        raise ShapeMismatchError(
            f"Grid assembler: got {len(flat)} cells for a {rows}x{cols} grid (expected {rows * cols})"
        )
    return OutputGrid(tuple(flat[r * cols : (r + 1) * cols] for r in range(rows)))
