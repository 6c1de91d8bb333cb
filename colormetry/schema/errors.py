# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""Exceptions raised throughout Colormetry."""

from __future__ import annotations


class ColorCalcError(Exception):
    """Base exception for all Colormetry errors."""


class MismatchedWeightsError(ColorCalcError, ValueError):
    """
    Raised when a weighted average receives a different number of weights
    than colors.
    """

    def __init__(self, n_colors: int, n_weights: int) -> None:
        super().__init__(
            f"Expected {n_colors} weights (one per color), got {n_weights}"
        )
        self.n_colors = n_colors
        self.n_weights = n_weights


class InvalidHexCodeError(ColorCalcError, ValueError):
    """Raised when a string is not a '#RRGGBB' hex color."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Invalid hex color code: {code!r}")
        self.code = code


class UnknownColorMapError(ColorCalcError, KeyError):
    """Raised when a preset colormap name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No colormap registered under {self.name!r}"
