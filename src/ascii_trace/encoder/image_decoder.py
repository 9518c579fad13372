"""
Image Decoder
=============

Loads sampled stills and quantizes them into rows of palette characters.

Design Rules:
    - This is the ONLY place in the codebase that reads still images
    - Resamples to exactly width x height with an area filter
    - Uses a single brightness channel (red by default)
    - Fails fast on unreadable stills
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import cv2
import numpy as np

from ascii_trace.encoder.palette import build_lookup
from ascii_trace.errors import InputError


logger = logging.getLogger(__name__)


CHANNELS = ("red", "luma")


def load_still(path: Union[str, Path]) -> np.ndarray:
    """
    Read a still image from disk.

    Args:
        path: Image file written during frame extraction

    Returns:
        BGR image as np.ndarray (H, W, 3), dtype=uint8

    Raises:
        InputError: If the file cannot be decoded
    """
    image = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if image is None:
        raise InputError(f"Failed to read still image: {path}")
    return image


def extract_channel(image: np.ndarray, channel: str = "red") -> np.ndarray:
    """
    Reduce an image to a single brightness channel.

    Args:
        image: BGR image (H, W, 3) or an already single-channel image (H, W)
        channel: 'red' for the red channel, 'luma' for weighted grayscale

    Returns:
        Single-channel image (H, W)
    """
    if image.ndim == 2:
        return image

    if image.ndim != 3 or image.shape[2] < 3:
        raise ValueError(f"Invalid image shape: {image.shape}")

    if channel == "red":
        # OpenCV stores channels as BGR
        return image[:, :, 2]
    if channel == "luma":
        return cv2.cvtColor(image[:, :, :3], cv2.COLOR_BGR2GRAY)

    raise ValueError(f"Unknown channel: {channel}")


def image_to_rows(
    image: np.ndarray,
    width: int,
    height: int,
    palette: str,
    channel: str = "red",
    lookup: Optional[np.ndarray] = None,
) -> List[str]:
    """
    Convert an image to rows of palette characters.

    Args:
        image: BGR or single-channel uint8 image at native resolution
        width: Grid width in characters
        height: Grid height in characters
        palette: Characters from darkest to lightest
        channel: Brightness channel to read
        lookup: Precomputed build_lookup(palette), built if omitted

    Returns:
        `height` strings of `width` characters, top to bottom
    """
    if width < 1 or height < 1:
        raise ValueError("width and height must be >= 1")
    if image.dtype != np.uint8:
        raise ValueError(f"Invalid dtype: {image.dtype}")

    if lookup is None:
        lookup = build_lookup(palette)

    resized = cv2.resize(image, (width, height), interpolation=cv2.INTER_AREA)
    values = extract_channel(resized, channel)

    chars = lookup[values]
    return ["".join(row) for row in chars]
