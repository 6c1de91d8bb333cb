# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Colormaps: continuous functions from [0, 1] to colors.
"""

from colormetry.colormap.base import CBRT, LINEAR, ColorMap, NormalizeKind, NormalizeMapping
from colormetry.colormap.gradient import DEFAULT_PADDING, GradientColorMap
from colormetry.colormap.listed import ListedColorMap
from colormetry.colormap.presets import available_colormaps, get_colormap, register

__all__ = [
    "ColorMap",
    "NormalizeKind",
    "NormalizeMapping",
    "LINEAR",
    "CBRT",
    "GradientColorMap",
    "DEFAULT_PADDING",
    "ListedColorMap",
    # Presets
    "register",
    "get_colormap",
    "available_colormaps",
]
