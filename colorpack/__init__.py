"""Colorpack: packed RGBA colors, Oklab conversions, color descriptions and palettes."""

from .constants import TRANSPARENT
from .conversions import (
    pack_rgba8888,
    unpack_rgba8888,
    unit_to_byte,
    byte_to_unit,
    float_color_bits,
    encode_float_color_sign_bit,
    encode_float_color_rounded,
    encode_float_color,
    decode_float_color,
    rgb_to_oklab,
    oklab_to_rgb,
    np_rgb_to_oklab,
    np_oklab_to_rgb,
    packed_to_oklab,
    oklab_to_packed,
    oklab_to_cylindrical,
    oklab_by_hsl,
    sin_turns,
    cos_turns,
    AlphaStrategy,
)
from .colors import NAMED, ALIASES, lookup, parse_description, describe
from .palettes import generate_palette, palette_entries, format_literal_array, parse_literal_array, to_hex_literal
from .types.color_types import OklabSample, CylindricalSample, NamedColorEntry, PaletteEntry

__all__ = [
    'TRANSPARENT',
    'pack_rgba8888',
    'unpack_rgba8888',
    'unit_to_byte',
    'byte_to_unit',
    'float_color_bits',
    'encode_float_color_sign_bit',
    'encode_float_color_rounded',
    'encode_float_color',
    'decode_float_color',
    'rgb_to_oklab',
    'oklab_to_rgb',
    'np_rgb_to_oklab',
    'np_oklab_to_rgb',
    'packed_to_oklab',
    'oklab_to_packed',
    'oklab_to_cylindrical',
    'oklab_by_hsl',
    'sin_turns',
    'cos_turns',
    'AlphaStrategy',
    'NAMED',
    'ALIASES',
    'lookup',
    'parse_description',
    'describe',
    'generate_palette',
    'palette_entries',
    'format_literal_array',
    'parse_literal_array',
    'to_hex_literal',
    'OklabSample',
    'CylindricalSample',
    'NamedColorEntry',
    'PaletteEntry',
]
