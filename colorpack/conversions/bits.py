import math
from typing import Callable, Dict, Tuple, Union
import numpy as np
from numpy import ndarray as NDArray

from ..constants import BYTE_MASK, PACKED_MASK, FLOAT_COLOR_MASK
from ..types.color_types import ByteQuad, FloatColorBits, PackedColor
from ..types.format_type import AlphaStrategy, max_byte, float_alpha_steps
from ..utils.num_utils import nan_safe_clamp01, RealNumber

## Byte <-> unit float

def unit_to_byte(x: RealNumber) -> int:
    """
    Quantize a [0, 1] float to a byte, rounding half up.

    Values outside [0, 1] are clamped first, NaN maps to 0.
    """
    return int(math.floor(nan_safe_clamp01(x) * max_byte + 0.5))


def byte_to_unit(v: int) -> float:
    return (int(v) & BYTE_MASK) / max_byte

## RGBA8888

def pack_rgba8888(r: int, g: int, b: int, a: int) -> PackedColor:
    """
    Pack four bytes into a 0xRRGGBBAA integer.

    Args:
        r, g, b, a: Channel bytes. Only the low 8 bits of each are used.

    Returns:
        int: The packed color, in [0, 2**32)
    """
    return ((int(r) & BYTE_MASK) << 24
            | (int(g) & BYTE_MASK) << 16
            | (int(b) & BYTE_MASK) << 8
            | (int(a) & BYTE_MASK))


def unpack_rgba8888(packed: PackedColor) -> ByteQuad:
    """
    Split a 0xRRGGBBAA integer into its (r, g, b, a) bytes.

    Exact inverse of pack_rgba8888 for every byte tuple.
    """
    packed = int(packed) & PACKED_MASK
    return (packed >> 24, packed >> 16 & BYTE_MASK, packed >> 8 & BYTE_MASK, packed & BYTE_MASK)


def np_pack_rgba8888(rgba) -> NDArray:
    """
    Vectorized: pack an array of shape (..., 4) of bytes into uint32 values.

    Args:
        rgba: array-like of shape (..., 4), channel order r, g, b, a

    Returns:
        uint32 array of shape (...)
    """
    rgba = np.asarray(rgba).astype(np.uint32) & BYTE_MASK
    return (rgba[..., 0] << 24) | (rgba[..., 1] << 16) | (rgba[..., 2] << 8) | rgba[..., 3]


def np_unpack_rgba8888(packed) -> NDArray:
    """
    Vectorized: unpack uint32 values into an array of shape (..., 4) of bytes.
    """
    packed = np.asarray(packed).astype(np.uint32)
    shifts = np.array([24, 16, 8, 0], dtype=np.uint32)
    return ((packed[..., np.newaxis] >> shifts) & BYTE_MASK).astype(np.uint8)


def rgba_to_abgr(packed: PackedColor) -> int:
    """Reverse the byte order: 0xRRGGBBAA becomes 0xAABBGGRR."""
    r, g, b, a = unpack_rgba8888(packed)
    return a << 24 | b << 16 | g << 8 | r


def abgr_to_rgba(bits: int) -> PackedColor:
    """Reverse the byte order: 0xAABBGGRR becomes 0xRRGGBBAA."""
    # byte reversal is its own inverse
    return rgba_to_abgr(bits)

## Float-bit colors
#
# Rendering pipelines pass a color as one float32 whose raw bits are laid out
# 0xAABBGGRR. The lowest alpha bit is always cleared so the exponent can never
# be all ones, which keeps the float from being NaN. Only 128 alpha levels
# survive; the two restore strategies below turn the stored even value back
# into a full byte.

def float_color_bits(r: RealNumber, g: RealNumber, b: RealNumber, a: RealNumber) -> FloatColorBits:
    """
    Build the raw 0xAABBGGRR bit pattern for four [0, 1] floats.

    Returns:
        int: The pattern with alpha's low bit cleared
    """
    bits = (unit_to_byte(a) << 24
            | unit_to_byte(b) << 16
            | unit_to_byte(g) << 8
            | unit_to_byte(r))
    return bits & FLOAT_COLOR_MASK


def restore_alpha_sign_bit(stored: int) -> int:
    """Fill the cleared low bit from the top bit: 0xFE -> 0xFF, 0x7E -> 0x7E."""
    stored &= 0xFE
    return stored | stored >> 7


def restore_alpha_rounded(stored: int) -> int:
    """Rescale the even stored value from [0, 254] back onto [0, 255]."""
    stored &= 0xFE
    return int(math.floor(stored * max_byte / float_alpha_steps + 0.5))


ALPHA_RESTORERS: Dict[AlphaStrategy, Callable[[int], int]] = {
    AlphaStrategy.SIGN_BIT: restore_alpha_sign_bit,
    AlphaStrategy.ROUNDED: restore_alpha_rounded,
}


def decode_float_color(bits: FloatColorBits, strategy: Union[AlphaStrategy, str]) -> ByteQuad:
    """
    Read (r, g, b, a) bytes back out of a float-bit color pattern.

    Args:
        bits: 0xAABBGGRR pattern
        strategy: How to reconstruct the alpha byte from its stored 7 bits

    Returns:
        Tuple[int, int, int, int]: r, g, b, a bytes
    """
    restore = ALPHA_RESTORERS[AlphaStrategy(strategy)]
    bits = int(bits) & PACKED_MASK
    return (bits & BYTE_MASK,
            bits >> 8 & BYTE_MASK,
            bits >> 16 & BYTE_MASK,
            restore(bits >> 24))


def encode_float_color_sign_bit(r: RealNumber, g: RealNumber, b: RealNumber, a: RealNumber) -> PackedColor:
    """
    Round-trip four [0, 1] floats through the float-bit layout and return
    the 0xRRGGBBAA color a renderer reads back. This is not a FloatColorBits
    pattern; float_color_bits builds that. Alpha is rebuilt by copying its
    top bit into the cleared low bit.

    RGB survives exactly for byte-quantized input. Alpha is exact for even
    values below 128 and odd values from 128 up (0 and 255 included), and one
    step off otherwise.
    """
    return pack_rgba8888(*decode_float_color(float_color_bits(r, g, b, a), AlphaStrategy.SIGN_BIT))


def encode_float_color_rounded(r: RealNumber, g: RealNumber, b: RealNumber, a: RealNumber) -> PackedColor:
    """
    Round-trip four [0, 1] floats through the float-bit layout and return
    the 0xRRGGBBAA color a renderer reads back. This is not a FloatColorBits
    pattern; float_color_bits builds that. Alpha is rebuilt by scaling the
    stored even value by 255/254.

    RGB survives exactly for byte-quantized input. Alpha is always within
    one step.
    """
    return pack_rgba8888(*decode_float_color(float_color_bits(r, g, b, a), AlphaStrategy.ROUNDED))


FLOAT_COLOR_ENCODERS: Dict[AlphaStrategy, Callable[..., PackedColor]] = {
    AlphaStrategy.SIGN_BIT: encode_float_color_sign_bit,
    AlphaStrategy.ROUNDED: encode_float_color_rounded,
}


def encode_float_color(r: RealNumber, g: RealNumber, b: RealNumber, a: RealNumber,
                       strategy: Union[AlphaStrategy, str]) -> PackedColor:
    """
    Dispatch to one of the named float-color encoders. The strategies share
    the float layout and differ only in how alpha is rebuilt.

    Raises:
        ValueError: If strategy is not a known AlphaStrategy
    """
    return FLOAT_COLOR_ENCODERS[AlphaStrategy(strategy)](r, g, b, a)

## Raw float reinterpretation

def bits_to_float(bits: int) -> float:
    """Reinterpret a 32-bit pattern as an IEEE-754 float32."""
    return float(np.array(int(bits) & PACKED_MASK, dtype=np.uint32).view(np.float32))


def float_to_bits(value: float) -> int:
    """Reinterpret a float32 value as its 32-bit pattern."""
    return int(np.array(value, dtype=np.float32).view(np.uint32))


def packed_to_units(packed: PackedColor) -> Tuple[float, float, float, float]:
    """Packed color to four [0, 1] floats."""
    return tuple(byte_to_unit(v) for v in unpack_rgba8888(packed))
