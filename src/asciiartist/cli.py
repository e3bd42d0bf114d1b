import argparse
import sys
import time
from pathlib import Path

from loguru import logger

from asciiartist.charsets import DEFAULT, PRESETS
from asciiartist.config import DEFAULT_ASPECT_FACTOR, DEFAULT_WIDTH, LUMA_CHOICES, SAMPLING_CHOICES, RenderConfig
from asciiartist.converter import convert
from asciiartist.errors import AsciiArtistError
from asciiartist.source import PixelGrid
from asciiartist.terminal import get_terminal_size, write_grid


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciiartist",
        description="Convert an image into coloured or black-and-white ASCII art",
    )
    parser.add_argument("-i", "--input", required=True, help="Path to the input image")
    size = parser.add_mutually_exclusive_group()
    size.add_argument(
        "-w", "--width", type=int, default=DEFAULT_WIDTH, help=f"Output width in characters (default: {DEFAULT_WIDTH})"
    )
    size.add_argument("--fit", action="store_true", help="Use the terminal width as the output width")
    parser.add_argument(
        "-c",
        "--charset",
        default=None,
        help=f"Characters ordered brightest to darkest (default: {DEFAULT!r})",
    )
    parser.add_argument(
        "-p", "--preset", choices=sorted(PRESETS), default=None, help="Use a predefined character set instead"
    )
    parser.add_argument(
        "-C",
        "--color",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Colour each character with its cell's average colour",
    )
    parser.add_argument(
        "-A",
        "--aspect-ratio-compensation",
        type=float,
        default=DEFAULT_ASPECT_FACTOR,
        help=(
            f"Character aspect ratio compensation (default: {DEFAULT_ASPECT_FACTOR:.2f}). "
            "Decrease if the image looks squashed vertically, increase if it looks stretched."
        ),
    )
    parser.add_argument("--luma", choices=LUMA_CHOICES, default="rec601", help="Brightness weighting (default: rec601)")
    parser.add_argument(
        "--sampling",
        choices=SAMPLING_CHOICES,
        default="average",
        help="average: mean colour of each cell's pixels; nearest: one pixel per cell (default: average)",
    )
    parser.add_argument("-j", "--workers", type=int, default=1, help="Threads used for resampling (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    return parser


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format="<level>{message}</level>")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    image_path = Path(args.input)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    charset = PRESETS[args.preset] if args.preset else (args.charset if args.charset is not None else DEFAULT)
    width = get_terminal_size()[0] if args.fit else args.width

    start = time.perf_counter()
    try:
        config = RenderConfig(
            width=width,
            aspect_factor=args.aspect_ratio_compensation,
            charset=charset,
            colour=args.color,
            luma=args.luma,
            sampling=args.sampling,
            workers=args.workers,
        )
        logger.info("Loading image from: {}", image_path)
        pixels = PixelGrid.open(image_path)
        logger.info("Image dimensions: {}x{}", pixels.width, pixels.height)
        grid = convert(pixels, config)
    except AsciiArtistError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Cannot read image {image_path}: {exc}", file=sys.stderr)
        return 1

    write_grid(grid)
    logger.info("Conversion complete: {}x{} cells in {:.2f}s", grid.cols, grid.rows, time.perf_counter() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
