# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Named preset colormaps.

Presets are registered as factories and built on first lookup. The tables
shipped here are coarse samplings of well-known maps, named with a
`_coarse` suffix: interpolating between so few stops drifts from the
full-resolution originals (viridis_coarse at 0.2 gives #404284 where
matplotlib gives #414487). Callers with full-resolution data register
their own.
"""

from __future__ import annotations

import logging
from typing import Callable

from colormetry.colormap.listed import ListedColorMap
from colormetry.schema.errors import UnknownColorMapError

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, Callable[[], ListedColorMap]] = {}


def register(name: str, factory: Callable[[], ListedColorMap]) -> None:
    """
    Register a preset under a case-insensitive name.

    Registering an existing name replaces it.
    """
    key = name.lower()
    if key in _REGISTRY:
        logger.debug("Replacing colormap preset %r", key)
    _REGISTRY[key] = factory


def get_colormap(name: str) -> ListedColorMap:
    """
    Build the preset registered under name.

    Raises:
        UnknownColorMapError: If no preset has that name
    """
    key = name.lower()
    try:
        factory = _REGISTRY[key]
    except KeyError:
        raise UnknownColorMapError(name) from None
    logger.debug("Building colormap preset %r", key)
    return factory()


def available_colormaps() -> tuple[str, ...]:
    """Registered preset names, sorted."""
    return tuple(sorted(_REGISTRY))


# =============================================================================
# Built-in tables
# =============================================================================

_GREYS = [
    [0.0, 0.0, 0.0],
    [1.0, 1.0, 1.0],
]

# viridis sampled at 9 points; intermediate values only approximate it
_VIRIDIS_HEX = [
    "#440154", "#472C7A", "#3B518B", "#2C718E", "#21918C",
    "#2DB27D", "#73D055", "#DCE319", "#FDE725",
]

# magma sampled at 6 points; intermediate values only approximate it
_MAGMA_HEX = [
    "#000004", "#3B0F70", "#8C2981", "#DE4968", "#FE9F6D", "#FCFDBF",
]

# vik-like diverging map around a light grey center, not the published table
_VIK_HEX = [
    "#00224E", "#2E6DB4", "#F5F5F5", "#C14A3B", "#5A0000",
]


def _register_builtins() -> None:
    register("greys", lambda: ListedColorMap(_GREYS))
    register("viridis_coarse", lambda: ListedColorMap.from_hex(_VIRIDIS_HEX))
    register("magma_coarse", lambda: ListedColorMap.from_hex(_MAGMA_HEX))
    register("vik_coarse", lambda: ListedColorMap.from_hex(_VIK_HEX))


_register_builtins()
