"""
Palette Mapping
===============

Brightness to character lookup.

The palette is ordered darkest (ink-heavy) to lightest. Brightness is
inverted before indexing, for the inverted effect:

    inverted = 255 - value
    index    = floor(inverted * L / 256), clamped to [0, L - 1]

So a black source pixel (value 0) selects the LAST palette character and a
white pixel (value 255) selects the first.
"""

import numpy as np


def palette_index(value: int, palette_length: int) -> int:
    """
    Compute the palette index for one brightness value.

    Args:
        value: Channel value in [0, 255]
        palette_length: Number of characters in the palette (>= 1)

    Returns:
        Index in [0, palette_length - 1]

    Raises:
        ValueError: If value or palette_length is out of range
    """
    if palette_length < 1:
        raise ValueError("palette_length must be >= 1")
    if not 0 <= value <= 255:
        raise ValueError(f"value must be in [0, 255], got {value}")

    inverted = 255 - value
    index = inverted * palette_length // 256
    return min(max(index, 0), palette_length - 1)


def build_lookup(palette: str) -> np.ndarray:
    """
    Precompute the palette character for every brightness value.

    Vectorised form of palette_index: indexing the result with a uint8
    image yields the character grid in one step.

    Args:
        palette: Characters from darkest to lightest

    Returns:
        Array of shape (256,), dtype '<U1'
    """
    if not palette:
        raise ValueError("palette must not be empty")

    length = len(palette)
    values = np.arange(256, dtype=np.int64)
    indices = np.clip((255 - values) * length // 256, 0, length - 1)
    return np.array(list(palette))[indices]
