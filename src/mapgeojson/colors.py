"""Color value handed to the host renderer, plus simplestyle color parsing.

Accepts "#rgb" and "#rrggbb" (the leading "#" is optional, as in the
simplestyle convention) and the CSS named colors most often seen in GeoJSON.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

NAMED_COLORS: dict[str, str] = {
    "black": "000000",
    "silver": "c0c0c0",
    "gray": "808080",
    "grey": "808080",
    "white": "ffffff",
    "maroon": "800000",
    "red": "ff0000",
    "purple": "800080",
    "fuchsia": "ff00ff",
    "magenta": "ff00ff",
    "green": "008000",
    "lime": "00ff00",
    "olive": "808000",
    "yellow": "ffff00",
    "navy": "000080",
    "blue": "0000ff",
    "teal": "008080",
    "aqua": "00ffff",
    "cyan": "00ffff",
    "orange": "ffa500",
    "brown": "a52a2a",
    "pink": "ffc0cb",
    "gold": "ffd700",
    "darkgreen": "006400",
    "darkblue": "00008b",
    "darkred": "8b0000",
    "lightblue": "add8e6",
    "lightgreen": "90ee90",
    "lightgray": "d3d3d3",
    "lightgrey": "d3d3d3",
    "darkgray": "a9a9a9",
    "darkgrey": "a9a9a9",
    "royalblue": "4169e1",
    "steelblue": "4682b4",
    "forestgreen": "228b22",
    "limegreen": "32cd32",
    "saddlebrown": "8b4513",
    "crimson": "dc143c",
    "tomato": "ff6347",
    "coral": "ff7f50",
    "indigo": "4b0082",
    "violet": "ee82ee",
}

_HEX_DIGITS = frozenset("0123456789abcdef")


@dataclass(frozen=True)
class Color:
    """An sRGB color with channels in 0-255 and alpha in [0.0, 1.0]."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def with_alpha(self, alpha: float) -> Color:
        """Return a copy with alpha clamped to [0, 1]."""
        return replace(self, alpha=min(max(alpha, 0.0), 1.0))

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_argb(self) -> int:
        """Pack into a 32-bit ARGB integer, the format most map SDKs take."""
        a = round(self.alpha * 255)
        return (a << 24) | (self.red << 16) | (self.green << 8) | self.blue


def parse_color(value: str, alpha: float = 1.0) -> Color:
    """Parse a hex or named color string.

    Args:
        value: "#rgb", "#rrggbb", "rgb", "rrggbb" or a CSS color name.
        alpha: Opacity to attach, clamped to [0, 1].

    Returns:
        The parsed Color.

    Raises:
        ValueError: If the string is not a recognised color.
    """
    if not isinstance(value, str):
        raise ValueError(f"Color must be a string, got {type(value).__name__}")

    text = value.strip().lower()
    digits = NAMED_COLORS.get(text)
    if digits is None:
        digits = text[1:] if text.startswith("#") else text
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6 or not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"Unrecognised color: {value!r}")

    return Color(
        red=int(digits[0:2], 16),
        green=int(digits[2:4], 16),
        blue=int(digits[4:6], 16),
    ).with_alpha(alpha)
