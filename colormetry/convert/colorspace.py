# Copyright (c) 2026 Colormetry
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion hub: every color type converts through CIE XYZ.

    sRGB → Linear RGB → XYZ (D65) → Bradford adaptation → XYZ (any white)
    XYZ  ↔ CIELUV (relative to the white point of the XYZ illuminant)

References:
- sRGB: IEC 61966-2-1
- Bradford adaptation: http://brucelindbloom.com/Eqn_ChromAdapt.html
- CIELUV: https://en.wikipedia.org/wiki/CIELUV

All conversions are pure NumPy and operate on arrays of shape (..., 3).
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray

from colormetry.schema.errors import InvalidHexCodeError


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4

    Negative values are mirrored so that extrapolated colors survive a
    round trip.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    linear = np.where(
        magnitude <= 0.04045,
        magnitude / 12.92,
        np.power((magnitude + 0.055) / 1.055, 2.4)
    )
    return np.sign(srgb) * linear


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values.

    Inverse of srgb_to_linear. Values are not clipped: out-of-gamut input
    produces out-of-range output.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    srgb = np.where(
        magnitude <= 0.0031308,
        magnitude * 12.92,
        1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055
    )
    return np.sign(linear) * srgb


# =============================================================================
# Linear RGB ↔ XYZ
# =============================================================================

# Linear sRGB to XYZ, D65 reference white
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear sRGB to XYZ relative to D65.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (Y = 1 for white)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ relative to D65 to linear sRGB.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)


# =============================================================================
# Chromatic adaptation
# =============================================================================

# XYZ to cone response domain
_BRADFORD = np.array([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
], dtype=np.float64)

_BRADFORD_INV = np.linalg.inv(_BRADFORD)


def adaptation_matrix(
    source_white: NDArray[np.float64],
    target_white: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Bradford transform taking XYZ under source_white to XYZ under target_white.

    Args:
        source_white: XYZ of the source white point, shape (3,)
        target_white: XYZ of the target white point, shape (3,)

    Returns:
        Matrix of shape (3, 3) acting on column vectors
    """
    cone_source = _BRADFORD @ np.asarray(source_white, dtype=np.float64)
    cone_target = _BRADFORD @ np.asarray(target_white, dtype=np.float64)
    scale = np.diag(cone_target / cone_source)
    return _BRADFORD_INV @ scale @ _BRADFORD


def adapt_xyz(
    xyz: NDArray[np.float64],
    source_white: NDArray[np.float64],
    target_white: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Re-express XYZ values under a different reference white.

    Args:
        xyz: Array of shape (..., 3) with XYZ values under source_white
        source_white: XYZ of the source white point
        target_white: XYZ of the target white point

    Returns:
        Array of shape (..., 3) with XYZ values under target_white
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    matrix = adaptation_matrix(source_white, target_white)
    return np.einsum('...j,ij->...i', xyz, matrix)


# =============================================================================
# XYZ ↔ CIELUV
# =============================================================================

# Same junction point as CIELAB
_DELTA = 6.0 / 29.0


def _uv_prime(xyz: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Chromaticity coordinates (u', v'). Zero denominators yield NaN."""
    x = xyz[..., 0]
    y = xyz[..., 1]
    z = xyz[..., 2]
    denom = x + 15.0 * y + 3.0 * z
    with np.errstate(divide="ignore", invalid="ignore"):
        u_prime = 4.0 * x / denom
        v_prime = 9.0 * y / denom
    return u_prime, v_prime


def xyz_to_luv(
    xyz: NDArray[np.float64],
    white: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Convert XYZ to CIELUV.

    Lightness is piecewise:
    - For Y/Yn <= (6/29)^3: (29/3)^3 * Y/Yn
    - Otherwise: 116 * (Y/Yn)^(1/3) - 16

    Args:
        xyz: Array of shape (..., 3) with XYZ values
        white: XYZ of the reference white, shape (3,)

    Returns:
        Array of shape (..., 3) with CIELUV values (L, u, v)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    white = np.asarray(white, dtype=np.float64)

    u_prime_n, v_prime_n = _uv_prime(white)
    u_prime, v_prime = _uv_prime(xyz)

    # Black has no chromaticity; pin it to the white point
    u_prime = np.where(np.isnan(u_prime), u_prime_n, u_prime)
    v_prime = np.where(np.isnan(v_prime), v_prime_n, v_prime)

    y_scaled = xyz[..., 1] / white[1]
    L = np.where(
        y_scaled <= _DELTA ** 3,
        (2.0 / _DELTA) ** 3 * y_scaled,
        116.0 * np.cbrt(y_scaled) - 16.0
    )

    u = 13.0 * L * (u_prime - u_prime_n)
    v = 13.0 * L * (v_prime - v_prime_n)

    return np.stack([L, u, v], axis=-1)


def luv_to_xyz(
    luv: NDArray[np.float64],
    white: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Convert CIELUV to XYZ.

    Inverse of xyz_to_luv. Zero lightness maps to black; negative lightness
    (from negative Y) inverts through the linear branch.

    Args:
        luv: Array of shape (..., 3) with CIELUV values (L, u, v)
        white: XYZ of the reference white, shape (3,)

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    luv = np.asarray(luv, dtype=np.float64)
    white = np.asarray(white, dtype=np.float64)

    L = luv[..., 0]
    u = luv[..., 1]
    v = luv[..., 2]

    u_prime_n, v_prime_n = _uv_prime(white)
    dark = np.expand_dims(L == 0.0, -1)

    with np.errstate(divide="ignore", invalid="ignore"):
        u_prime = u / (13.0 * L) + u_prime_n
        v_prime = v / (13.0 * L) + v_prime_n

        y = np.where(
            L <= 8.0,
            white[1] * L * (_DELTA / 2.0) ** 3,
            white[1] * ((L + 16.0) / 116.0) ** 3
        )

        x = y * 9.0 * u_prime / (4.0 * v_prime)
        z = y * (12.0 - 3.0 * u_prime - 20.0 * v_prime) / (4.0 * v_prime)

    xyz = np.stack([x, y, z], axis=-1)
    return np.where(dark, 0.0, xyz)


# =============================================================================
# Hex text I/O
# =============================================================================

_HEX_RE = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def hex_to_srgb(hex_color: str) -> NDArray[np.float64]:
    """
    Parse a hex color string into sRGB values [0,1].

    Args:
        hex_color: Hex string like "#3941C8" (case-insensitive, '#' required,
            no surrounding whitespace)

    Returns:
        Array of shape (3,) with sRGB values

    Raises:
        InvalidHexCodeError: If the string is not '#' followed by six hex digits
    """
    m = _HEX_RE.fullmatch(hex_color)
    if not m:
        raise InvalidHexCodeError(hex_color)
    channels = [int(group, 16) for group in m.groups()]
    return np.array(channels, dtype=np.float64) / 255.0


def srgb_to_hex(srgb: NDArray[np.float64]) -> str:
    """
    Format sRGB values [0,1] as an uppercase hex string.

    Channels are clipped to [0,1] and rounded half-up to 0-255.

    Returns:
        Hex string like "#3941C8"
    """
    srgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
    r, g, b = np.floor(srgb * 255.0 + 0.5).astype(int)
    return f"#{r:02X}{g:02X}{b:02X}"
