"""
Colorpack Conversions
=====================

This module provides the packed-color encodings and the Oklab color space
conversions, with both scalar and vectorized (numpy) implementations.

Features
--------
- RGBA8888 packing: four bytes <-> one 0xRRGGBBAA integer
- Float-bit colors: the 0xAABBGGRR float32 pattern used by rendering
  pipelines, with two alpha restore strategies
- sRGB <-> Oklab, clamped only after the full inverse transform
- Cylindrical Oklab (hue in turns, gamut-relative saturation, lightness)
- Turn-based sine and cosine backed by a small lookup table

Conversion Functions
--------------------

Packing:
    pack_rgba8888(r, g, b, a) / unpack_rgba8888(packed)
        Bytes <-> 0xRRGGBBAA
    np_pack_rgba8888(rgba) / np_unpack_rgba8888(packed)
        Vectorized versions over (..., 4) arrays

Float-bit colors:
    float_color_bits(r, g, b, a)
        Raw 0xAABBGGRR pattern, alpha low bit cleared
    encode_float_color_sign_bit(r, g, b, a)
        Round trip through the float layout, alpha rebuilt from its top bit
    encode_float_color_rounded(r, g, b, a)
        Round trip through the float layout, alpha rescaled by 255/254
    encode_float_color(r, g, b, a, strategy)
        Dispatch on AlphaStrategy

sRGB <-> Oklab:
    rgb_to_oklab(r, g, b) / oklab_to_rgb(L, a, b)
    np_rgb_to_oklab(rgb) / np_oklab_to_rgb(lab)
    packed_to_oklab(packed) / oklab_to_packed(L, a, b, alpha)

Cylindrical:
    oklab_by_hsl(hue, sat, lit, alpha=1.0)
        Hue/saturation/lightness straight to a packed color
    oklab_to_cylindrical(L, a, b)
    max_chroma(L, hue), in_gamut(L, a, b), limit_to_gamut(L, a, b)

Examples
--------
>>> from colorpack.conversions import pack_rgba8888, rgb_to_oklab, oklab_by_hsl
>>> hex(pack_rgba8888(255, 128, 0, 255))
'0xff8000ff'
>>> L, a, b = rgb_to_oklab(1.0, 1.0, 1.0)
>>> round(L, 6)
1.0
>>> oklab_by_hsl(0.0, 0.0, 0.5) == oklab_by_hsl(0.5, 0.0, 0.5)
True
"""

# Packing and float-bit colors
from .bits import (
    pack_rgba8888,
    unpack_rgba8888,
    np_pack_rgba8888,
    np_unpack_rgba8888,
    unit_to_byte,
    byte_to_unit,
    float_color_bits,
    encode_float_color_sign_bit,
    encode_float_color_rounded,
    encode_float_color,
    decode_float_color,
    bits_to_float,
    float_to_bits,
    abgr_to_rgba,
    rgba_to_abgr,
)

# Turn trigonometry
from .trig import sin_turns, cos_turns

# sRGB <-> Oklab
from .oklab import (
    srgb_to_linear,
    linear_to_srgb,
    rgb_to_oklab,
    oklab_to_rgb,
    oklab_to_linear_rgb,
    np_rgb_to_oklab,
    np_oklab_to_rgb,
    packed_to_oklab,
    oklab_to_packed,
)

# Cylindrical Oklab
from .cylindrical import (
    in_gamut,
    max_chroma,
    limit_to_gamut,
    oklab_to_cylindrical,
    oklab_by_hsl,
    oklab_hue,
    oklab_saturation,
    oklab_lightness,
    lighten,
    darken,
    enrich,
    dullen,
    rotate_hue,
)

# Types and enums
from ..types.format_type import AlphaStrategy

__all__ = [
    # Packing
    'pack_rgba8888',
    'unpack_rgba8888',
    'np_pack_rgba8888',
    'np_unpack_rgba8888',
    'unit_to_byte',
    'byte_to_unit',

    # Float-bit colors
    'float_color_bits',
    'encode_float_color_sign_bit',
    'encode_float_color_rounded',
    'encode_float_color',
    'decode_float_color',
    'bits_to_float',
    'float_to_bits',
    'abgr_to_rgba',
    'rgba_to_abgr',

    # Trig
    'sin_turns',
    'cos_turns',

    # Oklab
    'srgb_to_linear',
    'linear_to_srgb',
    'rgb_to_oklab',
    'oklab_to_rgb',
    'oklab_to_linear_rgb',
    'np_rgb_to_oklab',
    'np_oklab_to_rgb',
    'packed_to_oklab',
    'oklab_to_packed',

    # Cylindrical
    'in_gamut',
    'max_chroma',
    'limit_to_gamut',
    'oklab_to_cylindrical',
    'oklab_by_hsl',
    'oklab_hue',
    'oklab_saturation',
    'oklab_lightness',
    'lighten',
    'darken',
    'enrich',
    'dullen',
    'rotate_hue',

    # Types
    'AlphaStrategy',
]
