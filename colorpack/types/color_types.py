from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union
import numpy as np
from numpy import ndarray

from .format_type import ModifierKind

PackedColor = int           # 0xRRGGBBAA
FloatColorBits = int        # 0xAABBGGRR, alpha low bit clear
ByteQuad = Tuple[int, int, int, int]
UnitTriple = Tuple[float, float, float]


class OklabSample(NamedTuple):
    """Oklab lightness and the two chroma axes. May sit outside the sRGB gamut."""
    L: float
    a: float
    b: float


class CylindricalSample(NamedTuple):
    """Hue in turns [0, 1), saturation as a fraction of the gamut limit, lightness."""
    hue: float
    saturation: float
    lightness: float


@dataclass(frozen=True)
class NamedColorEntry:
    name: str
    packed: PackedColor


@dataclass(frozen=True)
class Modifier:
    """Fixed effect of one adjective: lightness, saturation and hue deltas."""
    name: str
    kind: ModifierKind
    lightness: float = 0.0
    saturation: float = 0.0
    hue: float = 0.0


class PaletteEntry(NamedTuple):
    index: int
    packed: PackedColor


class LatticePoint(NamedTuple):
    hue: float
    saturation: float
    lightness: float


def sample_to_array(sample: Union[OklabSample, Tuple[float, ...], ndarray]) -> np.ndarray:
    """
    Convert an Oklab sample (or any 3-sequence) to a float64 numpy array.

    Args:
        sample: OklabSample, tuple, or already an ndarray

    Returns:
        numpy array of shape (3,) or the input array unchanged
    """
    if isinstance(sample, ndarray):
        return sample
    return np.array(sample, dtype=np.float64)


def is_transparent(packed: PackedColor) -> bool:
    """
    Check whether a packed color is the reserved "no color" sentinel.

    Args:
        packed: 0xRRGGBBAA value
    Returns:
        True only for exactly 0x00000000
    """
    return (packed & 0xFFFFFFFF) == 0
