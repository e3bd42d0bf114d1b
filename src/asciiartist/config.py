import math
from dataclasses import dataclass, field, replace

from asciiartist.charsets import DEFAULT, CharacterSet
from asciiartist.errors import ConfigurationError

DEFAULT_WIDTH = 120
DEFAULT_ASPECT_FACTOR = 0.50

LUMA_CHOICES = ("rec601", "rec709")
SAMPLING_CHOICES = ("average", "nearest")


@dataclass(frozen=True)
class RenderConfig:
    width: int = DEFAULT_WIDTH
    aspect_factor: float = DEFAULT_ASPECT_FACTOR
    charset: CharacterSet = field(default_factory=lambda: CharacterSet(DEFAULT))
    colour: bool = True
    luma: str = "rec601"
    sampling: str = "average"
    workers: int = 1

    def __post_init__(self):
        if isinstance(self.charset, str):
            # frozen dataclass: normalise through object.__setattr__
            object.__setattr__(self, "charset", CharacterSet(self.charset))
        elif not isinstance(self.charset, CharacterSet):
            raise ConfigurationError(f"charset must be a string or CharacterSet, got {type(self.charset).__name__}")
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 1:
            raise ConfigurationError(f"width must be a positive integer, got {self.width!r}")
        if not (self.aspect_factor > 0 and math.isfinite(self.aspect_factor)):
            raise ConfigurationError(f"aspect_factor must be a finite number > 0, got {self.aspect_factor!r}")
        if self.luma not in LUMA_CHOICES:
            raise ConfigurationError(f"Unknown luma weighting {self.luma!r}, expected one of {LUMA_CHOICES}")
        if self.sampling not in SAMPLING_CHOICES:
            raise ConfigurationError(f"Unknown sampling mode {self.sampling!r}, expected one of {SAMPLING_CHOICES}")
        if isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers < 1:
            raise ConfigurationError(f"workers must be a positive integer, got {self.workers!r}")

    def replace(self, **changes) -> "RenderConfig":
        """Return a validated copy with some fields changed."""
        return replace(self, **changes)
