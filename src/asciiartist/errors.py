class AsciiArtistError(Exception):
    """Base class for every error raised by the conversion pipeline."""


class ConfigurationError(AsciiArtistError, ValueError):
    """A render setting is out of range: width, aspect factor, character set, luma or sampling."""


class EmptySourceError(AsciiArtistError, ValueError):
    """The source image has zero width or height."""


class ShapeMismatchError(AsciiArtistError, RuntimeError):
    """The assembled cell count disagrees with the computed grid shape. Indicates a bug."""
