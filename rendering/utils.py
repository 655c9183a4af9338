"""
Rendering utility functions.
"""

from typing import Tuple


def parse_color(color) -> Tuple[float, float, float, float]:
    """
    Convert a color to a cairo RGBA tuple with components in [0, 1].

    Accepts CSS-style hex strings (#rgb, #rgba, #rrggbb, #rrggbbaa) or
    3/4-tuples of floats already in [0, 1].
    """
    if isinstance(color, str):
        digits = color.strip().lstrip('#')
        if len(digits) in (3, 4):
            digits = ''.join(ch * 2 for ch in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Unrecognized color: {color!r}")
        try:
            channels = [int(digits[k:k + 2], 16) / 255.0 for k in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Unrecognized color: {color!r}") from None
    else:
        try:
            channels = [float(c) for c in color]
        except TypeError:
            raise ValueError(f"Unrecognized color: {color!r}") from None
        if len(channels) not in (3, 4) or not all(0.0 <= c <= 1.0 for c in channels):
            raise ValueError(f"Color tuples need 3 or 4 components in [0, 1], got {color!r}")

    if len(channels) == 3:
        channels.append(1.0)
    return tuple(channels)
