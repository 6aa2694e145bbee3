"""
Color Converter - hex color tokens to HSL triples.

Dealer colors arrive as hex strings (``#2563eb`` or the ``#abc``
shorthand) and are rendered into CSS as space-separated HSL components
(``"221 83% 53%"``) so they can be dropped into ``hsl(var(--primary))``
style declarations.

Usage:
    from dealersite.theme.colors import hex_to_hsl

    hex_to_hsl("#2563eb")      # "221 83% 53%"
    hex_to_hsl("not-a-color")  # "221 83% 53%" (fallback, never raises)
"""

from dataclasses import dataclass
import logging
import math
import re

from ..exceptions import ColorParseError

logger = logging.getLogger(__name__)

# NOTE: this is a blue, while the default brand primary is purple (#8B5CF6).
FALLBACK_HSL = "221 83% 53%"

_HEX_PATTERN = re.compile(r"(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_HSL_PATTERN = re.compile(r"\s*(-?\d+(?:\.\d+)?)\s+(-?\d+(?:\.\d+)?)%?\s+(-?\d+(?:\.\d+)?)%?\s*")


@dataclass(frozen=True)
class HslTriple:
    """Hue in degrees, saturation and lightness in percent."""
    hue: int
    saturation: int
    lightness: int

    def __str__(self) -> str:
        return f"{self.hue} {self.saturation}% {self.lightness}%"


def _round(value: float) -> int:
    """Round half up, matching the browser's Math.round for CSS output."""
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def is_valid_hex(color: str) -> bool:
    """Check whether a string is a 3- or 6-digit hex color (``#`` optional)."""
    if not isinstance(color, str):
        return False
    return bool(_HEX_PATTERN.fullmatch(color.replace("#", "", 1)))


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """
    Parse a hex color token into 8-bit RGB channels.

    Args:
        color: ``#RRGGBB`` or ``#RGB``, with or without the leading ``#``

    Returns:
        Tuple of (red, green, blue) in [0, 255]

    Raises:
        ColorParseError: If the token is not valid hex
    """
    if not isinstance(color, str):
        raise ColorParseError(repr(color), cause="not a string")

    digits = color.replace("#", "", 1)
    if not _HEX_PATTERN.fullmatch(digits):
        raise ColorParseError(color)

    if len(digits) == 3:
        digits = "".join(c + c for c in digits)

    value = int(digits, 16)
    return (value >> 16) & 255, (value >> 8) & 255, value & 255


def rgb_to_hsl(red: int, green: int, blue: int) -> HslTriple:
    """
    Convert 8-bit RGB channels to a rounded HSL triple.

    Achromatic colors (all channels equal) yield hue 0 and saturation 0.
    """
    r, g, b = red / 255, green / 255, blue / 255
    high = max(r, g, b)
    low = min(r, g, b)

    hue = 0.0
    saturation = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            hue = (g - b) / d + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / d + 2
        else:
            hue = (r - g) / d + 4
        hue /= 6

    return HslTriple(
        hue=_round(hue * 360) % 360,
        saturation=_round(_clamp(saturation) * 100),
        lightness=_round(_clamp(lightness) * 100),
    )


def hex_to_hsl(color: str) -> str:
    """
    Convert a hex color token to an ``"H S% L%"`` string.

    Never raises: malformed input yields ``FALLBACK_HSL``.

    Args:
        color: Hex color token

    Returns:
        Space-separated HSL components suitable for CSS custom properties
    """
    try:
        return str(rgb_to_hsl(*hex_to_rgb(color)))
    except (ColorParseError, ValueError, TypeError, ZeroDivisionError) as e:
        logger.debug(f"Using fallback HSL for {color!r}: {e}")
        return FALLBACK_HSL


def parse_hsl(value: str) -> HslTriple:
    """
    Parse an ``"H S% L%"`` string back into integer components.

    Raises:
        ColorParseError: If the string is not in HSL component form
    """
    match = _HSL_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise ColorParseError(str(value), cause="not an HSL component string")
    h, s, l = (float(part) for part in match.groups())
    return HslTriple(hue=int(h), saturation=int(s), lightness=int(l))
