# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Standard illuminants (reference white points).

White points are CIE 1931 2° observer values normalized to Y = 1,
taken from http://brucelindbloom.com/Eqn_ChromAdapt.html.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from numpy.typing import NDArray


class Illuminant(Enum):
    """
    Supported reference white points.

    D50 is the hub illuminant used whenever colors convert between types.
    """
    A = "a"      # incandescent / tungsten
    B = "b"      # direct sunlight at noon (obsolete)
    C = "c"      # average daylight (obsolete)
    D50 = "d50"  # horizon light, ICC profile PCS
    D55 = "d55"  # mid-morning / mid-afternoon daylight
    D65 = "d65"  # noon daylight, sRGB reference white
    D75 = "d75"  # north sky daylight
    E = "e"      # equal energy
    F2 = "f2"    # cool white fluorescent
    F7 = "f7"    # D65 simulator
    F11 = "f11"  # narrow band white fluorescent

    @property
    def white_point(self) -> tuple[float, float, float]:
        """XYZ coordinates of this illuminant's white."""
        return WHITE_POINTS[self]

    def as_array(self) -> NDArray[np.float64]:
        """White point as an array of shape (3,)."""
        return np.array(WHITE_POINTS[self], dtype=np.float64)


WHITE_POINTS = {
    Illuminant.A: (1.09850, 1.00000, 0.35585),
    Illuminant.B: (0.99072, 1.00000, 0.85223),
    Illuminant.C: (0.98074, 1.00000, 1.18232),
    Illuminant.D50: (0.96422, 1.00000, 0.82521),
    Illuminant.D55: (0.95682, 1.00000, 0.92149),
    Illuminant.D65: (0.95047, 1.00000, 1.08883),
    Illuminant.D75: (0.94972, 1.00000, 1.22638),
    Illuminant.E: (1.00000, 1.00000, 1.00000),
    Illuminant.F2: (0.99186, 1.00000, 0.67393),
    Illuminant.F7: (0.95041, 1.00000, 1.08747),
    Illuminant.F11: (1.00962, 1.00000, 0.64350),
}

# Illuminant used as the hub for Color.convert
DEFAULT_ILLUMINANT = Illuminant.D50
