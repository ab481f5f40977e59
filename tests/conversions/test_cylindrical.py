import math
import numpy as np
import pytest
from boundednumbers import UnitFloat

from colorpack.conversions.bits import unpack_rgba8888
from colorpack.conversions.cylindrical import (
    in_gamut, max_chroma, np_max_chroma, limit_to_gamut, np_limit_to_gamut,
    oklab_to_cylindrical, oklab_by_hsl, oklab_hue, oklab_saturation, oklab_lightness,
    lighten, darken, enrich, dullen, rotate_hue,
)
from colorpack.conversions.numbers import Turns, wrap_turns
from colorpack.conversions.oklab import rgb_to_oklab
from colorpack.types.color_types import OklabSample

hue_tolerance = 0.02


@pytest.mark.parametrize("lit", [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0])
def test_achromatic_invariant(lit):
    colors = {oklab_by_hsl(h, 0.0, lit, 1.0) for h in np.linspace(0.0, 1.0, 97, endpoint=False)}
    assert len(colors) == 1
    r, g, b, a = unpack_rgba8888(colors.pop())
    assert r == g == b
    assert a == 255


def test_achromatic_lightness_order():
    grays = [unpack_rgba8888(oklab_by_hsl(0.0, 0.0, lit))[0] for lit in (0.0, 0.25, 0.5, 0.75, 1.0)]
    assert grays == sorted(grays)
    assert grays[0] == 0 and grays[-1] == 255


def test_oklab_by_hsl_clamps_inputs():
    assert oklab_by_hsl(0.1, 2.0, 0.5) == oklab_by_hsl(0.1, 1.0, 0.5)
    assert oklab_by_hsl(0.1, 0.5, -1.0) == oklab_by_hsl(0.1, 0.5, 0.0)
    assert oklab_by_hsl(0.1, 0.5, 0.5, 7.0) == oklab_by_hsl(0.1, 0.5, 0.5, 1.0)
    assert oklab_by_hsl(0.3, 0.5, 0.5, 0.0) & 0xFF == 0


def test_oklab_by_hsl_wraps_hue():
    assert oklab_by_hsl(1.25, 0.7, 0.5) == oklab_by_hsl(0.25, 0.7, 0.5)
    assert oklab_by_hsl(-0.75, 0.7, 0.5) == oklab_by_hsl(0.25, 0.7, 0.5)


@pytest.mark.parametrize("hue", [0.0, 0.1, 0.3, 0.5, 0.7, 0.9])
def test_oklab_by_hsl_keeps_hue(hue):
    packed = oklab_by_hsl(hue, 1.0, 0.5)
    diff = abs(oklab_hue(packed) - hue)
    assert min(diff, 1.0 - diff) < hue_tolerance
    assert oklab_saturation(packed) > 0.8


def test_oklab_by_hsl_squeezes_lightness():
    # full saturation pulls lightness toward the middle
    light_gray = oklab_lightness(oklab_by_hsl(0.6, 0.0, 0.9))
    light_color = oklab_lightness(oklab_by_hsl(0.6, 1.0, 0.9))
    assert light_color < light_gray


def test_max_chroma_edges():
    assert max_chroma(0.0, 0.3) == 0.0
    assert max_chroma(1.0, 0.3) == 0.0
    assert 0.0 < max_chroma(0.6, 0.3) < 0.5


@pytest.mark.parametrize("hue", [0.05, 0.3, 0.55, 0.8])
def test_max_chroma_is_gamut_edge(hue):
    L = 0.6
    c = max_chroma(L, hue)
    dx, dy = math.cos(2 * math.pi * hue), math.sin(2 * math.pi * hue)
    assert in_gamut(L, dx * c * 0.999, dy * c * 0.999)
    assert not in_gamut(L, dx * c * 1.01, dy * c * 1.01)


def test_max_chroma_numpy():
    L = np.array([0.0, 0.3, 0.6, 0.9, 1.0])
    hue = np.array([0.1, 0.2, 0.4, 0.7, 0.9])
    expected = [max_chroma(l, h) for l, h in zip(L, hue)]
    assert np.allclose(np_max_chroma(L, hue), expected, atol=1e-9)


def test_limit_to_gamut():
    L, a, b = limit_to_gamut(0.6, 0.4, 0.0)
    assert L == 0.6
    assert abs(b) < 1e-12
    assert 0.0 < a < 0.4
    assert in_gamut(L, a, b)


def test_limit_to_gamut_leaves_inside_alone():
    sample = rgb_to_oklab(0.3, 0.5, 0.7)
    assert limit_to_gamut(*sample) == sample


def test_limit_to_gamut_clamps_lightness():
    assert limit_to_gamut(1.5, 0.0, 0.0).L == 1.0
    assert limit_to_gamut(-0.5, 0.0, 0.0).L == 0.0


def test_limit_to_gamut_numpy():
    lab = np.array([[0.6, 0.4, 0.0], [0.5, 0.0, 0.0], [0.8, -0.2, 0.3], [1.2, 0.1, 0.1]])
    expected = np.array([limit_to_gamut(*row) for row in lab])
    assert np.allclose(np_limit_to_gamut(lab), expected, atol=1e-6)


def test_oklab_to_cylindrical_gray():
    hue, sat, lit = oklab_to_cylindrical(*rgb_to_oklab(0.5, 0.5, 0.5))
    assert hue == 0.0
    assert sat == 0.0
    assert isinstance(sat, UnitFloat)
    assert isinstance(hue, Turns)
    assert 0.0 < lit < 1.0


def test_oklab_to_cylindrical_red():
    hue, sat, lit = oklab_to_cylindrical(*rgb_to_oklab(1.0, 0.0, 0.0))
    assert abs(hue - math.atan2(0.125846, 0.224863) / (2 * math.pi)) < 1e-3
    assert sat > 0.99
    assert abs(lit - 0.627955) < 1e-4


def test_component_extractors():
    assert oklab_saturation(0x808080FF) == 0.0
    assert oklab_lightness(0xFFFFFFFF) == pytest.approx(1.0, abs=1e-7)
    assert oklab_lightness(0x000000FF) == 0.0
    assert 0.0 <= oklab_hue(0x0000FFFF) < 1.0


def test_lighten_darken():
    sample = OklabSample(0.5, 0.01, -0.02)
    assert lighten(sample, 0.5) == OklabSample(0.75, 0.01, -0.02)
    assert darken(sample, 0.5) == OklabSample(0.25, 0.01, -0.02)
    assert lighten(sample, 5.0).L == 1.0
    assert darken(sample, 5.0).L == 0.0


def test_enrich_dullen():
    sample = OklabSample(0.5, 0.1, -0.2)
    assert enrich(sample, 0.5) == pytest.approx((0.5, 0.15, -0.3))
    assert dullen(sample, 0.5) == pytest.approx((0.5, 0.05, -0.1))
    assert dullen(sample, 2.0) == (0.5, 0.0, -0.0)


def test_rotate_hue():
    a, b = rotate_hue(OklabSample(0.5, 0.1, 0.0), 0.25)[1:]
    assert abs(a) < 1e-12 and abs(b - 0.1) < 1e-12
    a, b = rotate_hue(OklabSample(0.5, 0.1, 0.0), 0.5)[1:]
    assert abs(a + 0.1) < 1e-12 and abs(b) < 1e-12


def test_wrap_turns():
    assert wrap_turns(-0.25) == 0.75
    assert wrap_turns(1.0) == 0.0
    assert wrap_turns(2.5) == 0.5
    assert 0.0 <= wrap_turns(-1e-20) < 1.0


def test_cylindrical_components_are_clamped():
    # chroma 0.9 is far past the gamut edge at any hue
    hue, sat, lit = oklab_to_cylindrical(0.5, 0.9, 0.0)
    assert isinstance(sat, UnitFloat) and sat == 1.0
    assert isinstance(lit, UnitFloat) and lit == 0.5
    assert isinstance(hue, Turns) and hue == 0.0


def test_wrap_turns_matches_cyclic_range():
    for value in (-3.75, -0.5, 0.0, 0.999, 1.25, 7.5):
        assert 0.0 <= wrap_turns(value) < 1.0
        assert wrap_turns(value) == pytest.approx(value - math.floor(value))
