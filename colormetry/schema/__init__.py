# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Core value types.

All color and coordinate types in this module are immutable (frozen
dataclasses).
"""

from colormetry.schema.color import (
    APPROX_TOLERANCE,
    CIELUVColor,
    Color,
    ColorPoint,
    RGBColor,
    XYZColor,
)
from colormetry.schema.coord import Coord
from colormetry.schema.errors import (
    ColorCalcError,
    InvalidHexCodeError,
    MismatchedWeightsError,
    UnknownColorMapError,
)
from colormetry.schema.illuminants import DEFAULT_ILLUMINANT, WHITE_POINTS, Illuminant

__all__ = [
    # Geometry
    "Coord",
    # Capabilities
    "Color",
    "ColorPoint",
    # Color types
    "XYZColor",
    "RGBColor",
    "CIELUVColor",
    # Illuminants
    "Illuminant",
    "WHITE_POINTS",
    "DEFAULT_ILLUMINANT",
    "APPROX_TOLERANCE",
    # Errors
    "ColorCalcError",
    "MismatchedWeightsError",
    "InvalidHexCodeError",
    "UnknownColorMapError",
]
