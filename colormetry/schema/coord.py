# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Points in Euclidean 3-space.

Every ColorPoint type embeds into this space; distances, midpoints and
averages are computed here and converted back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class Coord:
    """
    A point (or vector) in 3-space.

    Attributes:
        x: First component
        y: Second component
        z: Third component
    """
    x: float
    y: float
    z: float

    def __add__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Coord) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Coord:
        if isinstance(k, Coord):
            return NotImplemented
        return Coord(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Coord:
        if isinstance(k, Coord):
            return NotImplemented
        return Coord(self.x / k, self.y / k, self.z / k)

    def __neg__(self) -> Coord:
        return Coord(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def euclidean_distance(self, other: Coord) -> float:
        """Straight-line distance between two points."""
        delta = self.as_array() - other.as_array()
        return float(np.sqrt(np.sum(delta ** 2)))

    def weighted_midpoint(self, other: Coord, weight: float) -> Coord:
        """
        Point on the line through self and other.

        Weight 0 gives self, weight 1 gives other. Weights outside [0, 1]
        extrapolate past the endpoints.
        """
        return self * (1.0 - weight) + other * weight

    def midpoint(self, other: Coord) -> Coord:
        """Halfway point between self and other."""
        return self.weighted_midpoint(other, 0.5)

    def average(self, others: Sequence[Coord]) -> Coord:
        """Arithmetic mean of self and every point in others."""
        total = self
        for coord in others:
            total = total + coord
        return total / (len(others) + 1)

    def as_array(self) -> NDArray[np.float64]:
        """Components as an array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float] | NDArray[np.float64]) -> Coord:
        """
        Build a Coord from any 3-element sequence.

        Raises:
            ValueError: If values does not hold exactly three components
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Coord needs exactly 3 components, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))
