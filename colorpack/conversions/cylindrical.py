"""
Cylindrical view of Oklab: hue in turns, saturation relative to the sRGB
gamut edge, and lightness.

Saturation 1 means "as much chroma as sRGB can show at this lightness and
hue". The gamut edge is found by bisection over chroma, which is slower than
a lookup table but needs no precomputed data and gives the same answer on
every platform.
"""
import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import UnitFloat

from ..constants import (
    GAMUT_TOLERANCE, CHROMA_CEILING, CHROMA_BISECTION_STEPS, ACHROMATIC_EPSILON,
    SATURATION_LIGHTNESS_SQUEEZE,
)
from ..types.color_types import CylindricalSample, OklabSample, PackedColor
from ..utils.num_utils import nan_safe_clamp01, RealNumber
from .numbers import Turns, wrap_turns
from .oklab import oklab_to_linear_rgb, np_oklab_to_linear_rgb, oklab_to_packed, packed_to_oklab
from .trig import cos_turns, sin_turns, np_cos_turns, np_sin_turns

## Gamut

def in_gamut(L: float, a: float, b: float) -> bool:
    """True if the Oklab color maps to linear sRGB inside [0, 1] (with a 1e-7 slack)."""
    lo, hi = -GAMUT_TOLERANCE, 1.0 + GAMUT_TOLERANCE
    return all(lo <= c <= hi for c in oklab_to_linear_rgb(L, a, b))


def max_chroma(L: float, hue: float) -> float:
    """
    Largest chroma that stays inside the sRGB gamut.

    Args:
        L: Oklab lightness
        hue: Hue in turns

    Returns:
        float: Chroma in [0, CHROMA_CEILING]; 0 at or beyond black and white
    """
    if L <= 0.0 or L >= 1.0:
        return 0.0
    dx, dy = cos_turns(hue), sin_turns(hue)
    lo, hi = 0.0, CHROMA_CEILING
    for _ in range(CHROMA_BISECTION_STEPS):
        mid = (lo + hi) * 0.5
        if in_gamut(L, dx * mid, dy * mid):
            lo = mid
        else:
            hi = mid
    return lo


def np_in_gamut(lab) -> NDArray:
    """Vectorized: boolean array of shape (...) for Oklab array of shape (..., 3)."""
    rgb = np_oklab_to_linear_rgb(lab)
    return np.all((rgb >= -GAMUT_TOLERANCE) & (rgb <= 1.0 + GAMUT_TOLERANCE), axis=-1)


def np_max_chroma(L, hue) -> NDArray:
    """Vectorized: max_chroma over broadcast arrays of lightness and hue."""
    L, hue = np.broadcast_arrays(np.asarray(L, dtype=np.float64), np.asarray(hue, dtype=np.float64))
    dx, dy = np_cos_turns(hue), np_sin_turns(hue)
    lo = np.zeros(L.shape)
    hi = np.full(L.shape, CHROMA_CEILING)
    for _ in range(CHROMA_BISECTION_STEPS):
        mid = (lo + hi) * 0.5
        inside = np_in_gamut(np.stack([L, dx * mid, dy * mid], axis=-1))
        lo = np.where(inside, mid, lo)
        hi = np.where(inside, hi, mid)
    return np.where((L <= 0.0) | (L >= 1.0), 0.0, lo)


def limit_to_gamut(L: float, a: float, b: float) -> OklabSample:
    """
    Pull an Oklab color into the sRGB gamut, keeping lightness and hue.

    Lightness is clamped to [0, 1]; chroma is then shrunk to max_chroma if
    the color still falls outside.
    """
    L = nan_safe_clamp01(L)
    if in_gamut(L, a, b):
        return OklabSample(L, a, b)
    chroma = math.hypot(a, b)
    if chroma < ACHROMATIC_EPSILON:
        return OklabSample(L, 0.0, 0.0)
    limit = max_chroma(L, _hue_of(a, b))
    return OklabSample(L, a * limit / chroma, b * limit / chroma)


def np_limit_to_gamut(lab) -> NDArray:
    """Vectorized: limit_to_gamut over an Oklab array of shape (..., 3)."""
    lab = np.array(lab, dtype=np.float64)
    lab[..., 0] = np.clip(lab[..., 0], 0.0, 1.0)
    chroma = np.hypot(lab[..., 1], lab[..., 2])
    hue = np.mod(np.arctan2(lab[..., 2], lab[..., 1]) / (2.0 * np.pi), 1.0)
    outside = ~np_in_gamut(lab)
    limit = np_max_chroma(lab[..., 0], hue)
    scale = np.where(outside, limit / np.maximum(chroma, ACHROMATIC_EPSILON), 1.0)
    scale = np.where(outside & (chroma < ACHROMATIC_EPSILON), 0.0, scale)
    lab[..., 1:] *= scale[..., np.newaxis]
    return lab

## Oklab <-> cylindrical

def _hue_of(a: float, b: float) -> float:
    return wrap_turns(math.atan2(b, a) / (2.0 * math.pi))


def oklab_to_cylindrical(L: float, a: float, b: float) -> CylindricalSample:
    """
    Convert Oklab to (hue, saturation, lightness).

    Colors with chroma below ACHROMATIC_EPSILON are treated as gray and get
    hue 0 and saturation 0. Chroma beyond the gamut edge reads as
    saturation 1.
    """
    chroma = math.hypot(a, b)
    if chroma < ACHROMATIC_EPSILON:
        return CylindricalSample(Turns(0.0), UnitFloat(0.0), UnitFloat(L))
    hue = _hue_of(a, b)
    limit = max_chroma(L, hue)
    saturation = 1.0 if limit <= 0.0 else chroma / limit
    return CylindricalSample(Turns(hue), UnitFloat(saturation), UnitFloat(L))


def oklab_by_hsl(hue: RealNumber, sat: RealNumber, lit: RealNumber, alpha: RealNumber = 1.0) -> PackedColor:
    """
    Build a packed color from Oklab hue, saturation and lightness.

    Hue wraps modulo 1; sat, lit and alpha are clamped to [0, 1]. Lightness
    is squeezed toward 0.5 as saturation rises, so saturated colors keep
    room for chroma. With sat == 0 the chroma is exactly zero and the result
    is the same gray for every hue.

    Args:
        hue: Hue in turns
        sat: Fraction of the largest in-gamut chroma
        lit: Lightness before the saturation squeeze
        alpha: Opacity

    Returns:
        int: 0xRRGGBBAA

    Example:
        >>> hex(oklab_by_hsl(0.3, 0.0, 1.0))
        '0xffffffff'
    """
    hue = wrap_turns(hue)
    sat, lit, alpha = nan_safe_clamp01(sat), nan_safe_clamp01(lit), nan_safe_clamp01(alpha)
    L = 0.5 + (lit - 0.5) * (1.0 - SATURATION_LIGHTNESS_SQUEEZE * sat)
    chroma = sat * max_chroma(L, hue) if sat > 0.0 else 0.0
    return oklab_to_packed(L, cos_turns(hue) * chroma, sin_turns(hue) * chroma, alpha)

## Packed color components

def oklab_hue(packed: PackedColor) -> float:
    return float(oklab_to_cylindrical(*packed_to_oklab(packed)).hue)


def oklab_saturation(packed: PackedColor) -> float:
    return float(oklab_to_cylindrical(*packed_to_oklab(packed)).saturation)


def oklab_lightness(packed: PackedColor) -> float:
    return packed_to_oklab(packed).L

## Sample edits

def lighten(sample: OklabSample, amount: float) -> OklabSample:
    """Move lightness toward 1 by a fraction of the remaining distance."""
    amount = nan_safe_clamp01(amount)
    return sample._replace(L=sample.L + (1.0 - sample.L) * amount)


def darken(sample: OklabSample, amount: float) -> OklabSample:
    """Move lightness toward 0 by a fraction of the current value."""
    amount = nan_safe_clamp01(amount)
    return sample._replace(L=sample.L - sample.L * amount)


def enrich(sample: OklabSample, amount: float) -> OklabSample:
    """Scale chroma up by (1 + amount). Gamut limiting is left to the caller."""
    factor = 1.0 + max(amount, 0.0)
    return sample._replace(a=sample.a * factor, b=sample.b * factor)


def dullen(sample: OklabSample, amount: float) -> OklabSample:
    """Scale chroma down by (1 - amount), never below zero."""
    factor = max(1.0 - max(amount, 0.0), 0.0)
    return sample._replace(a=sample.a * factor, b=sample.b * factor)


def rotate_hue(sample: OklabSample, turns: float) -> OklabSample:
    """Rotate the (a, b) vector by the given number of turns."""
    c, s = cos_turns(turns), sin_turns(turns)
    return sample._replace(a=sample.a * c - sample.b * s, b=sample.a * s + sample.b * c)
