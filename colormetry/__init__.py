# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Colormetry -- Colors as points, gradients and colormaps.

Converts between color spaces through CIE XYZ, treats colors as points in
3-space for distance, blending and averaging, and maps [0, 1] onto colors.

Quick start::

    from colormetry import GradientColorMap, RGBColor

    red = RGBColor.from_hex_code("#FF0000")
    blue = RGBColor.from_hex_code("#0000FF")
    cmap = GradientColorMap.linear(red, blue)
    cmap.transform_single(0.2).to_hex()   # "#CC0033"
"""

from __future__ import annotations

__version__ = "1.0.0"

from colormetry.colormap import (
    ColorMap,
    GradientColorMap,
    ListedColorMap,
    NormalizeMapping,
    get_colormap,
)
from colormetry.schema import (
    CIELUVColor,
    Color,
    ColorPoint,
    Coord,
    Illuminant,
    MismatchedWeightsError,
    RGBColor,
    XYZColor,
)

__all__ = [
    # Capabilities
    "Color",
    "ColorPoint",
    "ColorMap",
    # Types (commonly needed)
    "Coord",
    "Illuminant",
    "XYZColor",
    "RGBColor",
    "CIELUVColor",
    # Colormaps
    "GradientColorMap",
    "ListedColorMap",
    "NormalizeMapping",
    "get_colormap",
    # Errors
    "MismatchedWeightsError",
    # Version
    "__version__",
]
