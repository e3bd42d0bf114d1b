import os
import sys
from typing import TextIO

from asciiartist.grid import OutputGrid

RESET = "\033[0m"


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def format_grid(grid: OutputGrid) -> str:
    """Render cells as text, wrapping coloured cells in ANSI truecolor foreground codes."""
    out = []
    for row in grid:
        parts = []
        coloured = False
        for cell in row:
            if cell.colour is None:
                parts.append(cell.char)
            else:
                r, g, b = cell.colour
                parts.append(f"\033[38;2;{r};{g};{b}m{cell.char}")
                coloured = True
        if coloured:
            parts.append(RESET)
        out.append("".join(parts))
    return "\n".join(out)


def write_grid(grid: OutputGrid, stream: TextIO | None = None) -> None:
    stream = sys.stdout if stream is None else stream
    stream.write(format_grid(grid))
    stream.write("\n")
