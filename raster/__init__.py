# -*- coding: utf-8 -*-
# Pixmesh/raster/__init__.py

"""
Project: Pixmesh
Date: 10/19/2026

Modules:
--------
- bitmap:  input-contract validation and foreground binarization.
- loaders: image files -> RGBA byte buffers.
"""

from .bitmap import BYTES_PER_PIXEL, CHANNEL_RULES, binarize, validate_pixels
from .loaders import RasterImage, load_image

__all__ = [
    "BYTES_PER_PIXEL",
    "CHANNEL_RULES",
    "binarize",
    "validate_pixels",
    "RasterImage",
    "load_image",
]
