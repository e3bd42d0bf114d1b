import numpy as np

from asciiartist.charsets import CharacterSet
from asciiartist.errors import ConfigurationError

# Per-channel weights approximating perceived brightness
LUMA_WEIGHTS = {
    "rec601": (0.299, 0.587, 0.114),
    "rec709": (0.2126, 0.7152, 0.0722),
}


def _weights(luma: str) -> tuple[float, float, float]:
    try:
        return LUMA_WEIGHTS[luma]
    except KeyError:
        raise ConfigurationError(f"Unknown luma weighting {luma!r}, expected one of {tuple(LUMA_WEIGHTS)}") from None


def luminance(colour, luma: str = "rec601") -> float:
    """Brightness of an (r, g, b) colour in [0, 1]."""
    wr, wg, wb = _weights(luma)
    r, g, b = colour
    value = (wr * r + wg * g + wb * b) / 255.0
    return min(max(value, 0.0), 1.0)


def luminance_grid(colours: np.ndarray, luma: str = "rec601") -> np.ndarray:
    """Brightness of every colour in a (..., 3) array, clipped to [0, 1]."""
    weights = np.asarray(_weights(luma), dtype=np.float64)
    return np.clip(colours.astype(np.float64) @ weights / 255.0, 0.0, 1.0)


def map_characters(colours: np.ndarray, charset: CharacterSet, luma: str = "rec601") -> list[list[str]]:
    """Pick a character for each cell of a (rows, cols, 3) colour grid."""
    brightness = luminance_grid(colours, luma)
    return [[charset.char_for(float(b)) for b in row] for row in brightness]
