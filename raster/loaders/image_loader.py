# -*- coding: utf-8 -*-
# Pixmesh/raster/loaders/image_loader.py

"""
Project: Pixmesh
Date: 10/19/2026

Purpose:
--------
Read a silhouette image from disk and hand the pipeline a fully materialized RGBA
byte buffer plus its dimensions. Decoding is done by Pillow; nothing downstream ever
sees a partial buffer.

Main Features:
--------------
   1) Any Pillow-readable format, converted to RGBA.
   2) Optional inversion for images drawn dark-on-light (background becomes zero).

Notes:
------
   - This module does no binarization or meshing, just I/O.
"""

from dataclasses import dataclass
import numpy as np
from PIL import Image

from raster.bitmap import validate_pixels


@dataclass(frozen=True)
class RasterImage:
    """
    Decoded raster: dimensions and width * height * 4 bytes (row-major RGBA).
    """
    width: int
    height: int
    pixels: bytes


def load_image(filename: str, invert: bool = False) -> RasterImage:
    """
    Load an image into a RasterImage.

    Parameters
    ----------
    filename : str
        Path to the image (PNG, BMP, GIF, ...).
    invert : bool, optional
        If True, the foreground is taken to be the dark pixels: RGB is inverted and
        alpha is set to zero wherever the inverted color is black, so that the
        "any channel nonzero" rule selects only the drawn shape.

    Returns
    -------
    RasterImage

    Raises
    ------
    RuntimeError
        If the file is missing or cannot be decoded.
    """
    try:
        with Image.open(filename) as img:
            rgba = np.asarray(img.convert("RGBA"), dtype=np.uint8)
    except Exception as e:
        raise RuntimeError("[image_loader] Failed to load raster from {}: {}".format(filename, e))

    if invert:
        rgba = rgba.copy()
        rgb = 255 - rgba[..., :3]
        rgba[..., :3] = rgb
        rgba[..., 3] = np.where(np.any(rgb != 0, axis=2), 255, 0).astype(np.uint8)

    height, width = rgba.shape[:2]
    pixels = rgba.tobytes()
    validate_pixels(width, height, pixels)
    return RasterImage(width=int(width), height=int(height), pixels=pixels)
