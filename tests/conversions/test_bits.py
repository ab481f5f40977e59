import itertools
import math
import numpy as np
import pytest

from colorpack.conversions.bits import (
    pack_rgba8888, unpack_rgba8888, np_pack_rgba8888, np_unpack_rgba8888,
    unit_to_byte, byte_to_unit, abgr_to_rgba, rgba_to_abgr,
    bits_to_float, float_to_bits, packed_to_units,
)
from tests.samples import samples_packed_bytes, edge_bytes


def test_pack_known_values():
    for packed, channels in samples_packed_bytes.items():
        assert pack_rgba8888(*channels) == packed
        assert unpack_rgba8888(packed) == channels


def test_rgba8888_round_trip_edge_bytes():
    for channels in itertools.product(edge_bytes, repeat=4):
        assert unpack_rgba8888(pack_rgba8888(*channels)) == channels


def test_rgba8888_round_trip_random(rng):
    for channels in rng.integers(0, 256, size=(2000, 4)):
        channels = tuple(int(c) for c in channels)
        assert unpack_rgba8888(pack_rgba8888(*channels)) == channels


def test_pack_masks_out_of_range_bytes():
    assert pack_rgba8888(256, 0, 0, 0) == 0
    assert pack_rgba8888(0x1FF, 0, 0, 0x100) == 0xFF000000
    assert pack_rgba8888(-1, 0, 0, 0) == 0xFF000000


def test_unpack_masks_to_32_bits():
    assert unpack_rgba8888(0x1_12345678) == (0x12, 0x34, 0x56, 0x78)


def test_pack_numpy():
    channels = np.array(list(samples_packed_bytes.values()))
    expected = np.array(list(samples_packed_bytes.keys()), dtype=np.uint32)
    assert np.array_equal(np_pack_rgba8888(channels), expected)
    assert np.array_equal(np_unpack_rgba8888(expected), channels)


def test_unpack_numpy_scalar():
    assert np_unpack_rgba8888(0xFF8000FF).tolist() == [255, 128, 0, 255]


def test_unit_to_byte_rounds_half_up():
    assert unit_to_byte(0.0) == 0
    assert unit_to_byte(1.0) == 255
    assert unit_to_byte(0.5) == 128
    assert unit_to_byte(127.4 / 255) == 127
    for v in range(256):
        assert unit_to_byte(v / 255) == v


def test_unit_to_byte_clamps():
    assert unit_to_byte(-0.5) == 0
    assert unit_to_byte(3.0) == 255
    assert unit_to_byte(math.nan) == 0


def test_byte_to_unit():
    assert byte_to_unit(0) == 0.0
    assert byte_to_unit(255) == 1.0
    assert abs(byte_to_unit(51) - 0.2) < 1e-12


def test_byte_order_swap():
    assert rgba_to_abgr(0x11223344) == 0x44332211
    assert abgr_to_rgba(0x44332211) == 0x11223344
    for packed in samples_packed_bytes:
        assert abgr_to_rgba(rgba_to_abgr(packed)) == packed


def test_float_bit_reinterpretation():
    assert float_to_bits(1.0) == 0x3F800000
    assert float_to_bits(-2.0) == 0xC0000000
    assert bits_to_float(0x3F800000) == 1.0
    assert bits_to_float(0) == 0.0


def test_packed_to_units():
    assert packed_to_units(0xFF000080) == (1.0, 0.0, 0.0, 128 / 255)
