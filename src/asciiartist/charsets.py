import math
from collections.abc import Iterator
from dataclasses import dataclass

from asciiartist.errors import ConfigurationError

# All sets are ordered brightest first: index 0 is used for white, the last index for black.
DEFAULT = " .:-=+*#%@"

# Finer grayscale ramp
DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Shade blocks: U+2591-U+2593 and the full block U+2588
BLOCKS = " ░▒▓█"

# Dense glyphs first, for light-on-dark terminals
INVERTED = DEFAULT[::-1]

PRESETS = {
    "default": DEFAULT,
    "detailed": DETAILED,
    "blocks": BLOCKS,
    "inverted": INVERTED,
}


@dataclass(frozen=True)
class CharacterSet:
    """Ordered characters, brightest first, with a clamped brightness lookup."""

    chars: str

    def __post_init__(self):
        if not isinstance(self.chars, str):
            raise ConfigurationError(f"Character set must be a string, got {type(self.chars).__name__}")
        if not self.chars:
            raise ConfigurationError("Character set must contain at least one character")

    def __len__(self) -> int:
        return len(self.chars)

    def __getitem__(self, index: int) -> str:
        return self.chars[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    def index_for(self, brightness: float) -> int:
        """Index of the character for a brightness in [0, 1].

        1.0 maps to index 0 (brightest) and 0.0 to the last index. Out of range
        input is clamped first, NaN counts as black.
        """
        last = len(self.chars) - 1
        if last == 0:
            return 0
        if not brightness > 0.0:
            return last
        if brightness >= 1.0:
            return 0
        index = math.floor((1.0 - brightness) * last)
        return min(max(index, 0), last)

    def char_for(self, brightness: float) -> str:
        return self.chars[self.index_for(brightness)]
