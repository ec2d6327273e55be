# -*- coding: utf-8 -*-
# Pixmesh/raster/loaders/__init__.py

"""
Project: Pixmesh
Date: 10/19/2026

Modules
-------
- image_loader: Pillow-backed image decoding into RasterImage(width, height, pixels).
"""

from .image_loader import RasterImage, load_image

__all__ = ["RasterImage", "load_image"]
