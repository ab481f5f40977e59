"""
Float-bit colors keep only the top 7 bits of alpha. These tests pin down
exactly which alpha bytes survive under each restore strategy.

For byte-quantized input both strategies give the same result:
- RGB is always exact.
- Alpha is exact for even values below 128 and odd values from 128 up,
  so 0 and 255 survive. Every other alpha comes back one step off, low
  below 128 and high from 128 up.
"""
import math
import pytest

from colorpack.conversions.bits import (
    float_color_bits, decode_float_color, bits_to_float,
    encode_float_color_sign_bit, encode_float_color_rounded, encode_float_color,
    restore_alpha_sign_bit, restore_alpha_rounded, pack_rgba8888, unpack_rgba8888,
)
from colorpack.types.format_type import AlphaStrategy
from tests.samples import edge_bytes

ENCODERS = {
    AlphaStrategy.SIGN_BIT: encode_float_color_sign_bit,
    AlphaStrategy.ROUNDED: encode_float_color_rounded,
}


def expected_alpha(a: int) -> int:
    if a < 128:
        return a & 0xFE
    return a | 1


def test_float_color_bits_layout():
    assert float_color_bits(1.0, 0.0, 0.0, 1.0) == 0xFE0000FF
    assert float_color_bits(0.0, 0.0, 1.0, 0.0) == 0x00FF0000
    assert float_color_bits(18 / 255, 52 / 255, 86 / 255, 120 / 255) == 0x78563412


def test_float_color_bits_never_nan():
    for a in range(256):
        bits = float_color_bits(1.0, 1.0, 1.0, a / 255)
        assert not math.isnan(bits_to_float(bits))
        assert bits & 0x01000000 == 0


@pytest.mark.parametrize("strategy", list(AlphaStrategy))
def test_rgb_exact(strategy):
    encode = ENCODERS[strategy]
    for r in edge_bytes:
        for g in edge_bytes:
            for b in edge_bytes:
                out = unpack_rgba8888(encode(r / 255, g / 255, b / 255, 1.0))
                assert out[:3] == (r, g, b)


@pytest.mark.parametrize("strategy", list(AlphaStrategy))
def test_alpha_within_one_step(strategy):
    encode = ENCODERS[strategy]
    for a in range(256):
        alpha = unpack_rgba8888(encode(0.2, 0.4, 0.6, a / 255))[3]
        assert abs(alpha - a) <= 1


@pytest.mark.parametrize("strategy", list(AlphaStrategy))
def test_alpha_exact_values(strategy):
    encode = ENCODERS[strategy]
    for a in range(256):
        alpha = unpack_rgba8888(encode(0.0, 0.0, 0.0, a / 255))[3]
        assert alpha == expected_alpha(a)
        assert (alpha == a) == ((a < 128 and a % 2 == 0) or (a >= 128 and a % 2 == 1))


def test_opaque_and_clear_survive():
    for encode in ENCODERS.values():
        assert encode(1.0, 1.0, 1.0, 1.0) == 0xFFFFFFFF
        assert encode(1.0, 1.0, 1.0, 0.0) == 0xFFFFFF00


def test_strategies_agree_on_byte_input():
    for a in range(256):
        assert encode_float_color_sign_bit(0.5, 0.5, 0.5, a / 255) == encode_float_color_rounded(0.5, 0.5, 0.5, a / 255)


def test_restore_functions_on_stored_values():
    for stored in range(0, 256, 2):
        assert restore_alpha_sign_bit(stored) == restore_alpha_rounded(stored)
    assert restore_alpha_sign_bit(0xFE) == 0xFF
    assert restore_alpha_rounded(0xFE) == 0xFF
    assert restore_alpha_sign_bit(0x7E) == 0x7E


def test_encode_dispatch():
    for strategy, encode in ENCODERS.items():
        assert encode_float_color(0.1, 0.2, 0.3, 0.4, strategy) == encode(0.1, 0.2, 0.3, 0.4)
        assert encode_float_color(0.1, 0.2, 0.3, 0.4, strategy.value) == encode(0.1, 0.2, 0.3, 0.4)


def test_encode_dispatch_unknown_strategy():
    with pytest.raises(ValueError):
        encode_float_color(0.1, 0.2, 0.3, 0.4, "bogus")


def test_encode_dispatch_requires_strategy():
    with pytest.raises(TypeError):
        encode_float_color(0.1, 0.2, 0.3, 0.4)


def test_decode_float_color():
    bits = float_color_bits(1.0, 128 / 255, 0.0, 1.0)
    assert decode_float_color(bits, AlphaStrategy.SIGN_BIT) == (255, 128, 0, 255)
    assert decode_float_color(bits, "rounded") == (255, 128, 0, 255)


def test_channels_clamped():
    assert encode_float_color_sign_bit(2.0, -1.0, 0.5, 5.0) == encode_float_color_sign_bit(1.0, 0.0, 0.5, 1.0)


@pytest.mark.parametrize("strategy", list(AlphaStrategy))
def test_encoders_return_read_back_color(strategy):
    for r, g, b, a in ((18, 52, 86, 120), (255, 0, 128, 129), (7, 200, 33, 254)):
        units = (r / 255, g / 255, b / 255, a / 255)
        bits = float_color_bits(*units)
        assert ENCODERS[strategy](*units) == pack_rgba8888(*decode_float_color(bits, strategy))
        # rgb never depends on the strategy, only alpha is rebuilt
        assert ENCODERS[strategy](*units) >> 8 == (r << 16 | g << 8 | b)
