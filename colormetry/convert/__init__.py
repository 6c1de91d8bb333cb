# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Array-level color space math.

Pure NumPy functions over arrays of shape (..., 3). The color types in
colormetry.schema are thin wrappers around these.
"""

from colormetry.convert.colorspace import (
    adapt_xyz,
    hex_to_srgb,
    linear_rgb_to_xyz,
    linear_to_srgb,
    luv_to_xyz,
    srgb_to_hex,
    srgb_to_linear,
    xyz_to_linear_rgb,
    xyz_to_luv,
)

__all__ = [
    "srgb_to_linear",
    "linear_to_srgb",
    "linear_rgb_to_xyz",
    "xyz_to_linear_rgb",
    "adapt_xyz",
    "xyz_to_luv",
    "luv_to_xyz",
    "hex_to_srgb",
    "srgb_to_hex",
]
