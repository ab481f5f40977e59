import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..constants import (
    SRGB_DECODE_THRESHOLD, SRGB_ENCODE_THRESHOLD, SRGB_LINEAR_SLOPE, SRGB_GAMMA, SRGB_OFFSET,
    LINEAR_RGB_TO_LMS, LMS_TO_OKLAB, OKLAB_TO_LMS, LMS_TO_LINEAR_RGB,
)
from ..types.color_types import OklabSample, PackedColor, UnitTriple
from ..utils.num_utils import nan_safe_clamp01
from .bits import byte_to_unit, pack_rgba8888, unit_to_byte, unpack_rgba8888

M1 = np.array(LINEAR_RGB_TO_LMS, dtype=np.float64)
M2 = np.array(LMS_TO_OKLAB, dtype=np.float64)
M2_INV = np.array(OKLAB_TO_LMS, dtype=np.float64)
M1_INV = np.array(LMS_TO_LINEAR_RGB, dtype=np.float64)


def _mat_vec(m, x: float, y: float, z: float) -> Tuple[float, float, float]:
    return (m[0][0] * x + m[0][1] * y + m[0][2] * z,
            m[1][0] * x + m[1][1] * y + m[1][2] * z,
            m[2][0] * x + m[2][1] * y + m[2][2] * z)

## Transfer curve

def srgb_to_linear(c: float) -> float:
    """Remove sRGB gamma. Negative inputs stay on the linear segment."""
    if c <= SRGB_DECODE_THRESHOLD:
        return c / SRGB_LINEAR_SLOPE
    return ((c + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA


def linear_to_srgb(c: float) -> float:
    """Apply sRGB gamma. Negative inputs stay on the linear segment."""
    if c <= SRGB_ENCODE_THRESHOLD:
        return c * SRGB_LINEAR_SLOPE
    return (1 + SRGB_OFFSET) * c ** (1 / SRGB_GAMMA) - SRGB_OFFSET


def np_srgb_to_linear(c) -> NDArray:
    c = np.asarray(c, dtype=np.float64)
    curved = ((np.maximum(c, SRGB_DECODE_THRESHOLD) + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA
    return np.where(c <= SRGB_DECODE_THRESHOLD, c / SRGB_LINEAR_SLOPE, curved)


def np_linear_to_srgb(c) -> NDArray:
    c = np.asarray(c, dtype=np.float64)
    curved = (1 + SRGB_OFFSET) * np.maximum(c, SRGB_ENCODE_THRESHOLD) ** (1 / SRGB_GAMMA) - SRGB_OFFSET
    return np.where(c <= SRGB_ENCODE_THRESHOLD, c * SRGB_LINEAR_SLOPE, curved)

## sRGB <-> Oklab

def rgb_to_oklab(r: float, g: float, b: float) -> OklabSample:
    """
    Convert sRGB to Oklab.

    Args:
        r, g, b: Channels in [0, 1]; values outside are clamped first

    Returns:
        OklabSample: (L, a, b)
    """
    lr, lg, lb = (srgb_to_linear(nan_safe_clamp01(c)) for c in (r, g, b))
    l, m, s = _mat_vec(LINEAR_RGB_TO_LMS, lr, lg, lb)
    # cube root is only taken of non-negative values
    l, m, s = (max(v, 0.0) ** (1.0 / 3.0) for v in (l, m, s))
    return OklabSample(*_mat_vec(LMS_TO_OKLAB, l, m, s))


def oklab_to_linear_rgb(L: float, a: float, b: float) -> UnitTriple:
    """Oklab to linear sRGB, unclamped. Out-of-gamut colors leave [0, 1]."""
    l, m, s = _mat_vec(OKLAB_TO_LMS, L, a, b)
    return _mat_vec(LMS_TO_LINEAR_RGB, l * l * l, m * m * m, s * s * s)


def oklab_to_rgb(L: float, a: float, b: float) -> UnitTriple:
    """
    Convert Oklab to sRGB.

    The full inverse chain runs unclamped; each channel is clamped to [0, 1]
    only at the end so that out-of-gamut colors keep their hue.

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    return tuple(nan_safe_clamp01(linear_to_srgb(c)) for c in oklab_to_linear_rgb(L, a, b))


def np_rgb_to_oklab(rgb) -> NDArray:
    """
    Vectorized: sRGB array of shape (..., 3) to Oklab array of shape (..., 3).
    """
    rgb = np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)
    lms = np_srgb_to_linear(rgb) @ M1.T
    return np.cbrt(np.maximum(lms, 0.0)) @ M2.T


def np_oklab_to_linear_rgb(lab) -> NDArray:
    lms = np.asarray(lab, dtype=np.float64) @ M2_INV.T
    return (lms ** 3) @ M1_INV.T


def np_oklab_to_rgb(lab) -> NDArray:
    """
    Vectorized: Oklab array of shape (..., 3) to sRGB in [0, 1], clamped last.
    """
    return np.clip(np_linear_to_srgb(np_oklab_to_linear_rgb(lab)), 0.0, 1.0)

## Packed colors

def packed_to_oklab(packed: PackedColor) -> OklabSample:
    """Read the RGB bytes of a 0xRRGGBBAA color as Oklab. Alpha is ignored."""
    r, g, b, _ = unpack_rgba8888(packed)
    return rgb_to_oklab(byte_to_unit(r), byte_to_unit(g), byte_to_unit(b))


def oklab_to_packed(L: float, a: float, b: float, alpha: float = 1.0) -> PackedColor:
    """Convert Oklab plus a [0, 1] alpha to a 0xRRGGBBAA color."""
    r, g, b_ = oklab_to_rgb(L, a, b)
    return pack_rgba8888(unit_to_byte(r), unit_to_byte(g), unit_to_byte(b_), unit_to_byte(alpha))
