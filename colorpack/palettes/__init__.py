"""
Colorpack Palettes
==================

A fixed, deterministic 37-color palette sampled from an Oklab
hue/saturation/lightness lattice, and the literal-array text form used to
embed it in source code.

Usage
-----
>>> from colorpack.palettes import generate_palette, format_literal_array
>>> palette = generate_palette()
>>> len(palette), palette[0], hex(palette[-1])
(37, 0, '0xffffffff')
>>> print(format_literal_array(palette[:3]))
{
0x00000000, 0x000000FF, 0x222222FF, }
"""

from .lattice import HUE_BANDS, BAND_VARIANTS, LEADING, TRAILING, LATTICE
from .generator import LIGHTNESS_BIAS, palette_color, generate_palette, palette_entries
from .literal import to_hex_literal, format_literal_array, parse_literal_array, to_render_floats

__all__ = [
    'HUE_BANDS',
    'BAND_VARIANTS',
    'LEADING',
    'TRAILING',
    'LATTICE',
    'LIGHTNESS_BIAS',
    'palette_color',
    'generate_palette',
    'palette_entries',
    'to_hex_literal',
    'format_literal_array',
    'parse_literal_array',
    'to_render_floats',
]
