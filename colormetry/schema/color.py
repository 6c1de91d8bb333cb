# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Color types and the capabilities they share.

Two capabilities:
- Color: converts to and from CIE XYZ under a given illuminant.
- ColorPoint: a Color that is also a plain point in 3-space. Distance,
  midpoints and averages are defined once here, in terms of Coord, and
  every ColorPoint type inherits them.

Concrete types:
- XYZColor: the canonical tristimulus coordinate (carries its illuminant,
  so it is a Color but not a ColorPoint)
- RGBColor: sRGB, channels in [0, 1]
- CIELUVColor: CIE 1976 L*u*v*
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from colormetry.schema.coord import Coord
from colormetry.schema.errors import MismatchedWeightsError
from colormetry.schema.illuminants import DEFAULT_ILLUMINANT, Illuminant

logger = logging.getLogger(__name__)

# Absolute per-channel XYZ tolerance for approx_equal
APPROX_TOLERANCE = 1e-6

C = TypeVar("C", bound="Color")
P = TypeVar("P", bound="ColorPoint")


# =============================================================================
# Capabilities
# =============================================================================


class Color(ABC):
    """
    Anything that can be expressed as CIE XYZ.

    Converting to XYZ and back under the same illuminant reproduces the
    original value within floating tolerance. Round trips through a
    different illuminant are space-dependent.
    """
    __slots__ = ()

    @classmethod
    @abstractmethod
    def from_xyz(cls: type[C], xyz: XYZColor) -> C:
        """Build this color type from XYZ, relative to xyz.illuminant."""

    @abstractmethod
    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        """Express this color as XYZ under the given illuminant."""

    def convert(self, target: type[C]) -> C:
        """
        Convert to another color type through XYZ under DEFAULT_ILLUMINANT.

        Returns self unchanged when it already is the target type.
        """
        if type(self) is target:
            return self
        logger.debug("Converting %r to %s", self, target.__name__)
        return target.from_xyz(self.to_xyz(DEFAULT_ILLUMINANT))

    def approx_equal(self, other: Color, tol: float = APPROX_TOLERANCE) -> bool:
        """True if both colors land within tol of each other in XYZ (D50)."""
        a = self.to_xyz(DEFAULT_ILLUMINANT).as_array()
        b = other.to_xyz(DEFAULT_ILLUMINANT).as_array()
        return bool(np.all(np.abs(a - b) <= tol))


class ColorPoint(Color):
    """
    A Color that is bijective with Coord and carries no other state.

    Subclasses implement to_coord and from_coord; the geometric operations
    below come for free.
    """
    __slots__ = ()

    @abstractmethod
    def to_coord(self) -> Coord:
        """Embed this color in 3-space."""

    @classmethod
    @abstractmethod
    def from_coord(cls: type[P], coord: Coord) -> P:
        """Inverse of to_coord."""

    def euclidean_distance(self: P, other: P) -> float:
        """
        Straight-line distance between two colors in their own coordinates.

        This is a metric on the embedding, not a measure of perceived
        similarity: it is non-negative, zero only for identical colors,
        symmetric, and obeys the triangle inequality.
        """
        return self.to_coord().euclidean_distance(other.to_coord())

    def weighted_midpoint(self: P, other: P, weight: float) -> P:
        """
        The color a fraction `weight` of the way from self to other.

        Weight 0 returns self, weight 1 returns other. Most callers want
        a weight in [0, 1]; values outside that range extrapolate.
        """
        coord = self.to_coord().weighted_midpoint(other.to_coord(), weight)
        return type(self).from_coord(coord)

    def midpoint(self: P, other: P) -> P:
        """The color halfway between self and other."""
        return type(self).from_coord(self.to_coord().midpoint(other.to_coord()))

    def weighted_average(self: P, others: Sequence[P], weights: Sequence[float]) -> P:
        """
        Weighted mean of self and others.

        Weights are normalized to sum to 1. weights[0] belongs to self,
        weights[i] to others[i - 1].

        Raises:
            MismatchedWeightsError: If len(weights) != len(others) + 1
        """
        if len(weights) != len(others) + 1:
            raise MismatchedWeightsError(len(others) + 1, len(weights))
        norm = float(sum(weights))
        coord = self.to_coord() * (weights[0] / norm)
        for color, weight in zip(others, weights[1:]):
            coord = coord + color.to_coord() * (weight / norm)
        return type(self).from_coord(coord)

    def average(self: P, others: Sequence[P]) -> Coord:
        """Unweighted mean of self and others, as a raw Coord."""
        return self.to_coord().average([color.to_coord() for color in others])

    def gradient(self: P, other: P) -> Callable[[float], P]:
        """A function mapping t in [0, 1] to the color t of the way to other."""
        return self.padded_gradient(other, 0.0, 1.0)

    def padded_gradient(self: P, other: P, lower: float, upper: float) -> Callable[[float], P]:
        """
        Like gradient, but restricted to the window [lower, upper].

        The returned function maps 0 to the color at `lower` and 1 to the
        color at `upper` along the full self → other segment. Windows
        reaching past [0, 1] extrapolate beyond the endpoints.
        """
        span = upper - lower

        def evaluate(t: float) -> P:
            return self.weighted_midpoint(other, lower + t * span)

        return evaluate


# =============================================================================
# Concrete color types
# =============================================================================


@dataclass(frozen=True, slots=True)
class XYZColor(Color):
    """
    CIE 1931 XYZ tristimulus values relative to an illuminant.

    The canonical representation every other type converts through.

    Attributes:
        x: X tristimulus value
        y: Y tristimulus value (luminance, 1.0 = reference white)
        z: Z tristimulus value
        illuminant: Reference white these values are relative to
    """
    x: float
    y: float
    z: float
    illuminant: Illuminant = DEFAULT_ILLUMINANT

    @classmethod
    def white_point(cls, illuminant: Illuminant) -> XYZColor:
        """The reference white of an illuminant as an XYZColor."""
        x, y, z = illuminant.white_point
        return cls(x, y, z, illuminant)

    @classmethod
    def from_array(
        cls,
        values: NDArray[np.float64],
        illuminant: Illuminant = DEFAULT_ILLUMINANT,
    ) -> XYZColor:
        """Build from an array of shape (3,)."""
        x, y, z = (float(v) for v in values)
        return cls(x, y, z, illuminant)

    def as_array(self) -> NDArray[np.float64]:
        """Tristimulus values as an array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> XYZColor:
        return xyz

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        return self.color_adapt(illuminant)

    def color_adapt(self, illuminant: Illuminant) -> XYZColor:
        """Re-express under another illuminant with a Bradford transform."""
        if illuminant is self.illuminant:
            return self
        from colormetry.convert.colorspace import adapt_xyz
        logger.debug(
            "Adapting XYZ from %s to %s", self.illuminant.name, illuminant.name
        )
        adapted = adapt_xyz(
            self.as_array(), self.illuminant.as_array(), illuminant.as_array()
        )
        return XYZColor.from_array(adapted, illuminant)


@dataclass(frozen=True, slots=True)
class RGBColor(ColorPoint):
    """
    A color in sRGB.

    Attributes:
        r: Red channel (0.0-1.0 for in-gamut colors)
        g: Green channel
        b: Blue channel
    """
    r: float
    g: float
    b: float

    def __str__(self) -> str:
        return self.to_hex()

    @classmethod
    def from_hex_code(cls, hex_color: str) -> RGBColor:
        """
        Parse a string like "#3941C8" (case-insensitive).

        Raises:
            InvalidHexCodeError: If the string is malformed
        """
        from colormetry.convert.colorspace import hex_to_srgb
        r, g, b = (float(v) for v in hex_to_srgb(hex_color))
        return cls(r, g, b)

    def to_hex(self) -> str:
        """Uppercase hex string like "#3941C8", clipped to the gamut."""
        from colormetry.convert.colorspace import srgb_to_hex
        return srgb_to_hex(np.array([self.r, self.g, self.b]))

    def to_coord(self) -> Coord:
        return Coord(self.r, self.g, self.b)

    @classmethod
    def from_coord(cls, coord: Coord) -> RGBColor:
        return cls(coord.x, coord.y, coord.z)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> RGBColor:
        from colormetry.convert.colorspace import linear_to_srgb, xyz_to_linear_rgb
        d65 = xyz.color_adapt(Illuminant.D65)
        srgb = linear_to_srgb(xyz_to_linear_rgb(d65.as_array()))
        return cls(float(srgb[0]), float(srgb[1]), float(srgb[2]))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        from colormetry.convert.colorspace import linear_rgb_to_xyz, srgb_to_linear
        linear = srgb_to_linear(np.array([self.r, self.g, self.b]))
        d65 = XYZColor.from_array(linear_rgb_to_xyz(linear), Illuminant.D65)
        return d65.color_adapt(illuminant)


@dataclass(frozen=True, slots=True)
class CIELUVColor(ColorPoint):
    """
    A color in CIE 1976 L*u*v*.

    u and v are measured from the white point of whichever illuminant the
    color was built under. White-point handling is a simple translation, so
    reading a color back under a different illuminant than the one it came
    from can produce colors outside the physically realizable gamut. Keep
    to one illuminant (D50 when using convert).

    Attributes:
        L: Lightness (0 = black, 100 = reference white)
        u: Red-green chrominance
        v: Yellow-blue chrominance
    """
    L: float
    u: float
    v: float

    def to_coord(self) -> Coord:
        return Coord(self.L, self.u, self.v)

    @classmethod
    def from_coord(cls, coord: Coord) -> CIELUVColor:
        return cls(coord.x, coord.y, coord.z)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> CIELUVColor:
        from colormetry.convert.colorspace import xyz_to_luv
        L, u, v = xyz_to_luv(xyz.as_array(), xyz.illuminant.as_array())
        return cls(float(L), float(u), float(v))

    def to_xyz(self, illuminant: Illuminant) -> XYZColor:
        from colormetry.convert.colorspace import luv_to_xyz
        xyz = luv_to_xyz(np.array([self.L, self.u, self.v]), illuminant.as_array())
        return XYZColor.from_array(xyz, illuminant)
