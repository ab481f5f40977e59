"""
The fixed hue/saturation/lightness lattice behind the generated palette.

Four hue bands a quarter turn apart each hold eight variants. Inside a band
the variants walk a 2x2x2 Hilbert curve over (hue offset, saturation,
lightness), so neighbouring palette indices stay perceptually close. The
last band walks the curve backwards to end near the light achromatic tail.
"""
from typing import Tuple

from ..conversions.numbers import wrap_turns
from ..types.color_types import LatticePoint

HUE_BANDS: Tuple[float, ...] = (0.0, 0.25, 0.5, 0.75)

# (hue offset, saturation, lightness)
BAND_VARIANTS: Tuple[Tuple[float, float, float], ...] = (
    (-0.08, 0.447, 0.2),
    (-0.08, 0.447, 0.8),
    (-0.125, 0.894, 0.72),
    (-0.125, 0.894, 0.28),
    (0.0, 1.0, 0.392),
    (0.0, 1.0, 0.608),
    (0.08, 0.632, 0.76),
    (0.08, 0.632, 0.24),
)

# the same eight corners, traversed the other way round the curve
REVERSED_BAND_VARIANTS: Tuple[Tuple[float, float, float], ...] = (
    (-0.08, 0.447, 0.2),
    (-0.125, 0.894, 0.28),
    (0.0, 1.0, 0.392),
    (0.08, 0.632, 0.24),
    (0.08, 0.632, 0.76),
    (0.0, 1.0, 0.608),
    (-0.125, 0.894, 0.72),
    (-0.08, 0.447, 0.8),
)

# achromatic Oklab lightness stops before and after the hue bands
LEADING: Tuple[float, ...] = (0.0, 0.25)
TRAILING: Tuple[float, ...] = (0.85, 1.0)


def _band(hue: float, variants) -> Tuple[LatticePoint, ...]:
    return tuple(LatticePoint(wrap_turns(hue + offset), sat, lit) for offset, sat, lit in variants)


def build_lattice() -> Tuple[LatticePoint, ...]:
    points = [LatticePoint(0.0, 0.0, lit) for lit in LEADING]
    for hue in HUE_BANDS:
        points.extend(_band(hue, REVERSED_BAND_VARIANTS if hue == HUE_BANDS[-1] else BAND_VARIANTS))
    points.extend(LatticePoint(0.0, 0.0, lit) for lit in TRAILING)
    return tuple(points)


LATTICE: Tuple[LatticePoint, ...] = build_lattice()
