# -*- coding: utf-8 -*-
# Pixmesh/raster/bitmap.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Enforce the raster input contract (width, height, 4 bytes per pixel) and turn the
pixel buffer into a binary foreground grid for the graph builder.

Main Tasks:
-----------
   1) `validate_pixels`: dimension and byte-length checks before anything is allocated.
   2) `binarize`: (height, width) uint8 grid of 0/1 under a channel rule.

Notes:
------
   - Channel order is irrelevant; only "is the byte zero" matters.
   - "any"   : a pixel is foreground when any of its four bytes is nonzero.
   - "first" : a pixel is foreground when its first byte is nonzero.
"""

from typing import Any, Tuple
import numpy as np

from mesh.errors import InvalidInput, ConfigError

BYTES_PER_PIXEL = 4
CHANNEL_RULES = ("any", "first")


def _buffer_length(pixels: Any) -> int:
    """
    Number of bytes in a bytes-like object, numpy array or sequence of ints.
    """
    if isinstance(pixels, np.ndarray):
        return int(pixels.size)
    if isinstance(pixels, memoryview):
        return int(pixels.nbytes)
    try:
        return len(pixels)
    except TypeError:
        raise InvalidInput("pixels must be a bytes-like object or array.", {"type": type(pixels).__name__})


def validate_pixels(width: int, height: int, pixels: Any) -> Tuple[int, int]:
    """
    Check the raster contract and return (width, height) as plain ints.

    Raises
    ------
    InvalidInput
        If a dimension is negative or not an integer, or the buffer length is not
        width * height * 4.
    """
    for name, val in (("width", width), ("height", height)):
        if isinstance(val, bool) or not isinstance(val, (int, np.integer)):
            raise InvalidInput("{} must be an integer.".format(name), {name: val})
        if val < 0:
            raise InvalidInput("{} must be >= 0.".format(name), {name: val})

    width, height = int(width), int(height)
    expected = width * height * BYTES_PER_PIXEL
    got = _buffer_length(pixels)
    if got != expected:
        raise InvalidInput(
            "pixel buffer length does not match dimensions.",
            {"width": width, "height": height, "expected": expected, "got": got},
        )
    return width, height


def binarize(width: int, height: int, pixels: Any, channel_rule: str = "any") -> np.ndarray:
    """
    Convert an RGBA-like buffer into a (height, width) grid of 0/1.

    Parameters
    ----------
    width, height : int
        Raster dimensions.
    pixels : bytes-like or np.ndarray
        width * height * 4 bytes, row-major, 4 bytes per pixel.
    channel_rule : {"any", "first"}
        Foreground rule (see module notes).

    Returns
    -------
    np.ndarray
        uint8 array of shape (height, width).
    """
    if channel_rule not in CHANNEL_RULES:
        raise ConfigError("unknown channel rule.", {"channel_rule": channel_rule, "allowed": CHANNEL_RULES})

    width, height = validate_pixels(width, height, pixels)

    if isinstance(pixels, np.ndarray):
        flat = np.ascontiguousarray(pixels, dtype=np.uint8).reshape(-1)
    elif isinstance(pixels, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixels, dtype=np.uint8)
    else:
        flat = np.asarray(pixels, dtype=np.uint8).reshape(-1)

    rgba = flat.reshape(height, width, BYTES_PER_PIXEL)
    if channel_rule == "first":
        mask = rgba[..., 0] != 0
    else:
        mask = np.any(rgba != 0, axis=2)
    return mask.astype(np.uint8)
