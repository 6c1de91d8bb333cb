# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Lookup-table colormaps.

Modeled on matplotlib's ListedColormap: a table of equally spaced sRGB
samples, linearly interpolated between neighboring rows.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from colormetry.colormap.base import ColorMap, clamp_unit
from colormetry.schema.color import Color, RGBColor
from colormetry.schema.coord import Coord

C = TypeVar("C", bound=Color)


@dataclass(frozen=True, eq=False)
class ListedColorMap(ColorMap[C]):
    """
    A colormap backed by N >= 2 equally spaced sRGB samples.

    Row 0 sits at 0, row N-1 at 1. Only the two rows bounding an input are
    turned into colors on each call, so large tables cost nothing extra.

    Attributes:
        vals: Array of shape (N, 3) with sRGB channel values (read-only)
        color_type: Color type produced by transform_single
    """
    vals: NDArray[np.float64]
    color_type: type[C] = RGBColor

    def __post_init__(self) -> None:
        """Copy the samples into a read-only (N, 3) float array."""
        vals = np.array(self.vals, dtype=np.float64)
        if vals.ndim != 2 or vals.shape[1] != 3:
            raise ValueError(f"Samples must have shape (N, 3), got {vals.shape}")
        vals.setflags(write=False)
        object.__setattr__(self, "vals", vals)

    @classmethod
    def from_hex(cls, codes: Sequence[str], color_type: type[C] = RGBColor) -> ListedColorMap[C]:
        """Build a table from hex strings like "#440154"."""
        from colormetry.convert.colorspace import hex_to_srgb
        return cls(np.stack([hex_to_srgb(code) for code in codes]), color_type)

    def __len__(self) -> int:
        return len(self.vals)

    def transform_single(self, x: float) -> C:
        float_ind = clamp_unit(x) * (len(self.vals) - 1)
        lower = math.floor(float_ind)
        upper = math.ceil(float_ind)
        if lower == upper:
            # exactly on a sample, no interpolation
            coord = Coord.from_array(self.vals[lower])
        else:
            coord = Coord.from_array(self.vals[lower]).weighted_midpoint(
                Coord.from_array(self.vals[upper]), float_ind - lower
            )
        return RGBColor.from_coord(coord).convert(self.color_type)
