from functools import lru_cache
from typing import Tuple

from ..constants import PALETTE_LIGHTNESS_BIAS, TRANSPARENT
from ..conversions.cylindrical import oklab_by_hsl
from ..conversions.trig import sin_turns
from ..types.color_types import PackedColor, PaletteEntry
from .lattice import LATTICE

LIGHTNESS_BIAS = PALETTE_LIGHTNESS_BIAS


def palette_color(hue: float, sat: float, lit: float) -> PackedColor:
    """
    Opaque packed color for one lattice point.

    Lightness is nudged by ``sin_turns(hue) * LIGHTNESS_BIAS`` so yellows
    come out lighter and blues darker, as the eye expects.
    """
    return oklab_by_hsl(hue, sat, lit + sin_turns(hue) * LIGHTNESS_BIAS, 1.0)


@lru_cache(maxsize=None)
def generate_palette() -> Tuple[PackedColor, ...]:
    """
    The fixed palette: TRANSPARENT followed by one color per lattice point.

    Always the same 37 colors in the same order. Computed on first call.
    """
    return (TRANSPARENT,) + tuple(palette_color(*point) for point in LATTICE)


def palette_entries() -> Tuple[PaletteEntry, ...]:
    return tuple(PaletteEntry(index, packed) for index, packed in enumerate(generate_palette()))
