# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Colormap capability and normalization mappings.

A colormap is a continuous function from [0, 1] to colors. Inputs outside
that range are clamped by every colormap here; NaN input is undefined.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Iterable, Optional, TypeVar

import numpy as np

from colormetry.schema.color import Color

C = TypeVar("C", bound=Color)


def clamp_unit(x: float) -> float:
    """Clamp x to [0, 1]."""
    if x < 0.0:
        return 0.0
    if x > 1.0:
        return 1.0
    return x


class ColorMap(ABC, Generic[C]):
    """A mapping of the numbers between 0 and 1 to colors of one type."""

    @abstractmethod
    def transform_single(self, x: float) -> C:
        """Map a single number to a color. Out-of-range input is clamped."""

    def transform(self, xs: Iterable[float]) -> list[C]:
        """
        Map every number in xs, in order.

        Evaluation is eager so that colormaps carrying state between calls
        still see the inputs in sequence.
        """
        return [self.transform_single(float(x)) for x in xs]


# =============================================================================
# Normalization
# =============================================================================


class NormalizeKind(Enum):
    """Which self-map of [0, 1] a NormalizeMapping applies."""
    LINEAR = "linear"    # identity
    CBRT = "cbrt"        # cube root, stretches the low end
    GENERIC = "generic"  # caller-supplied function


@dataclass(frozen=True, slots=True)
class NormalizeMapping:
    """
    A monotonic map of [0, 1] onto itself, applied to gradient parameters.

    Every mapping must send 0 to 0 and 1 to 1 and stay in range for inputs
    in between. This is not checked.

    Equality of GENERIC mappings is identity of the wrapped function;
    two different functions with the same behavior compare unequal.

    Attributes:
        kind: Which mapping to apply
        func: The wrapped function (GENERIC only)
    """
    kind: NormalizeKind
    func: Optional[Callable[[float], float]] = None

    def __post_init__(self) -> None:
        """Validate that func is given exactly for GENERIC mappings."""
        if self.kind is NormalizeKind.GENERIC and self.func is None:
            raise ValueError("GENERIC normalization requires a function")
        if self.kind is not NormalizeKind.GENERIC and self.func is not None:
            raise ValueError(f"{self.kind.name} normalization takes no function")

    @classmethod
    def linear(cls) -> NormalizeMapping:
        return cls(NormalizeKind.LINEAR)

    @classmethod
    def cbrt(cls) -> NormalizeMapping:
        """Cube root: 1/8 maps to 1/2. Emphasizes differences near 0."""
        return cls(NormalizeKind.CBRT)

    @classmethod
    def generic(cls, func: Callable[[float], float]) -> NormalizeMapping:
        return cls(NormalizeKind.GENERIC, func)

    def normalize(self, x: float) -> float:
        """Apply the mapping. x must already lie in [0, 1]."""
        if self.kind is NormalizeKind.LINEAR:
            return x
        if self.kind is NormalizeKind.CBRT:
            return float(np.cbrt(x))
        return float(self.func(x))


LINEAR = NormalizeMapping.linear()
CBRT = NormalizeMapping.cbrt()
