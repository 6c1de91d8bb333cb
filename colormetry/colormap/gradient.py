# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""Two-color gradient colormaps."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeVar

from colormetry.colormap.base import CBRT, LINEAR, ColorMap, NormalizeMapping, clamp_unit
from colormetry.schema.color import ColorPoint

P = TypeVar("P", bound=ColorPoint)

DEFAULT_PADDING = (0.0, 1.0)


@dataclass(frozen=True)
class GradientColorMap(ColorMap[P]):
    """
    A continuous shift from start to end in the colors' own coordinates.

    Input is clamped to [0, 1], passed through the normalization, and then
    placed inside the padding window (lo, hi) of the full start → end
    segment. With the default padding (0, 1), 0 maps to start and 1 maps to
    end. Padding (1/8, 1) drops the lowest eighth of the gradient while
    keeping it continuous; a window reaching outside [0, 1] extrapolates
    past the endpoint colors.

    Attributes:
        start: Color at parameter 0 of the full segment
        end: Color at parameter 1 of the full segment
        normalization: Nonlinearity applied before padding
        padding: (lo, hi) window of the segment actually used, lo < hi
    """
    start: P
    end: P
    normalization: NormalizeMapping = LINEAR
    padding: tuple[float, float] = DEFAULT_PADDING

    @classmethod
    def linear(cls, start: P, end: P) -> GradientColorMap[P]:
        """Unpadded linear gradient."""
        return cls(start, end, LINEAR)

    @classmethod
    def cbrt(cls, start: P, end: P) -> GradientColorMap[P]:
        """Unpadded cube-root gradient."""
        return cls(start, end, CBRT)

    def with_padding(self, lo: float, hi: float) -> GradientColorMap[P]:
        """Copy of this colormap using the window (lo, hi)."""
        return replace(self, padding=(lo, hi))

    def transform_single(self, x: float) -> P:
        t = self.normalization.normalize(clamp_unit(x))
        lo, hi = self.padding
        return self.start.padded_gradient(self.end, lo, hi)(t)
