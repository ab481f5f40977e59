"""
Descriptive color text.

A description is a run of words such as ``"light pale denim"`` or
``"darker rich red orange"``. Each word is a base color name (see
``colors.named``), a modifier adjective, or noise that is skipped. Base
colors are averaged in Oklab; modifiers accumulate into one lightness,
saturation and hue adjustment that is applied to the average.

Modifiers
---------
light / dark        lightness up / down
rich / dull         saturation up / down
bright              lighter and richer
pale                lighter and duller
deep                darker and richer
weak                darker and duller
warm / cool         hue toward red / toward blue

Each adjective also has ``-er``, ``-est`` and ``-most`` forms (``paler``,
``palest``, ``palemost``) with increasingly strong effects.

Examples
--------
>>> from colorpack.colors.description import parse_description, describe
>>> hex(parse_description("gray"))
'0x808080ff'
>>> parse_description("not a color")
0
>>> parse_description(describe(0xD2B48CFF)) == parse_description("tan")
True
"""
import re
import warnings
from itertools import combinations_with_replacement
from types import MappingProxyType
from typing import Dict, List, Tuple
import numpy as np

from ..constants import TRANSPARENT
from ..conversions.bits import byte_to_unit, unpack_rgba8888
from ..conversions.cylindrical import (
    darken, dullen, enrich, lighten, limit_to_gamut, np_limit_to_gamut, rotate_hue,
)
from ..conversions.oklab import np_rgb_to_oklab, oklab_to_packed, packed_to_oklab
from ..types.color_types import Modifier, OklabSample, PackedColor, sample_to_array
from ..types.format_type import ModifierKind, intensity_suffixes
from .named import ALIASES, NAMED, NAMES_BY_HUE

# effect of the base, -er, -est and -most forms
LIGHTNESS_STEPS = (0.15, 0.30, 0.45, 0.60)
SATURATION_STEPS = (0.10, 0.25, 0.45, 0.70)
HUE_STEPS = (0.02, 0.04, 0.06, 0.08)

# (kind, lightness sign, saturation sign, hue sign) per base adjective
_ADJECTIVES: Dict[str, Tuple[ModifierKind, int, int, int]] = {
    "light": (ModifierKind.LIGHTNESS, 1, 0, 0),
    "dark": (ModifierKind.LIGHTNESS, -1, 0, 0),
    "rich": (ModifierKind.SATURATION, 0, 1, 0),
    "dull": (ModifierKind.SATURATION, 0, -1, 0),
    "bright": (ModifierKind.COMBINED, 1, 1, 0),
    "pale": (ModifierKind.COMBINED, 1, -1, 0),
    "deep": (ModifierKind.COMBINED, -1, 1, 0),
    "weak": (ModifierKind.COMBINED, -1, -1, 0),
    "warm": (ModifierKind.HUE, 0, 0, -1),
    "cool": (ModifierKind.HUE, 0, 0, 1),
}

MAX_MIX_COUNT = 3

_TOKEN_SPLIT = re.compile(r"[^a-z]+")


def _inflect(base: str, suffix: str) -> str:
    if suffix in ("er", "est") and base.endswith("e"):
        return base + suffix[1:]
    return base + suffix


def _build_modifiers() -> Dict[str, Modifier]:
    table = {}
    for base, (kind, l_sign, s_sign, h_sign) in _ADJECTIVES.items():
        for step, suffix in enumerate(intensity_suffixes):
            name = _inflect(base, suffix)
            table[name] = Modifier(
                name,
                kind,
                lightness=l_sign * LIGHTNESS_STEPS[step],
                saturation=s_sign * SATURATION_STEPS[step],
                hue=h_sign * HUE_STEPS[step],
            )
    return table


MODIFIERS = MappingProxyType(_build_modifiers())


def tokenize(text: str) -> List[str]:
    """Lower-case the text and split it on anything that is not a letter."""
    return [token for token in _TOKEN_SPLIT.split(text.lower()) if token]


def _apply_adjustment(sample: OklabSample, lightness: float, saturation: float, hue: float) -> OklabSample:
    if lightness > 0.0:
        sample = lighten(sample, lightness)
    elif lightness < 0.0:
        sample = darken(sample, -lightness)
    if saturation > 0.0:
        sample = enrich(sample, saturation)
    elif saturation < 0.0:
        sample = dullen(sample, -saturation)
    if hue:
        sample = rotate_hue(sample, hue)
    return sample


def parse_description(text: str) -> PackedColor:
    """
    Turn a color description into a packed color.

    Unknown words are ignored. Without at least one base color the result
    is TRANSPARENT (0x00000000), whatever modifiers were given.

    Args:
        text: Words separated by spaces or any other non-letter characters

    Returns:
        int: 0xRRGGBBAA

    Raises:
        TypeError: If text is not a str
    """
    if not isinstance(text, str):
        raise TypeError(f"Color description must be a str, not {type(text).__name__}")

    total_L = total_a = total_b = total_alpha = 0.0
    count = 0
    lightness = saturation = hue = 0.0

    for token in tokenize(text):
        name = ALIASES.get(token, token)
        if name in NAMED:
            packed = NAMED[name]
            L, a, b = packed_to_oklab(packed)
            total_L += L
            total_a += a
            total_b += b
            total_alpha += byte_to_unit(unpack_rgba8888(packed)[3])
            count += 1
            continue
        modifier = MODIFIERS.get(token)
        if modifier is not None:
            lightness += modifier.lightness
            saturation += modifier.saturation
            hue += modifier.hue

    if count == 0:
        return TRANSPARENT

    sample = OklabSample(total_L / count, total_a / count, total_b / count)
    sample = _apply_adjustment(sample, lightness, saturation, hue)
    return oklab_to_packed(*limit_to_gamut(*sample), alpha=total_alpha / count)

## Reverse search

# darkmost .. dark, none, light .. lightmost, and the same for saturation
_LIGHTNESS_WORDS = tuple(_inflect("dark", s) for s in reversed(intensity_suffixes)) + ("",) \
    + tuple(_inflect("light", s) for s in intensity_suffixes)
_SATURATION_WORDS = tuple(_inflect("dull", s) for s in reversed(intensity_suffixes)) + ("",) \
    + tuple(_inflect("rich", s) for s in intensity_suffixes)


def _grid_candidates(base: np.ndarray) -> np.ndarray:
    """
    Apply every lightness and saturation word to a batch of base colors.

    Args:
        base: Oklab array of shape (n, 3)

    Returns:
        Gamut-limited Oklab array of shape (n, 9, 9, 3)
    """
    l_shift = np.array([MODIFIERS[w].lightness if w else 0.0 for w in _LIGHTNESS_WORDS])
    s_shift = np.array([MODIFIERS[w].saturation if w else 0.0 for w in _SATURATION_WORDS])

    L = base[:, 0][:, np.newaxis]
    L = np.where(l_shift > 0, L + (1.0 - L) * l_shift, L + L * l_shift)
    factor = np.maximum(1.0 + s_shift, 0.0)

    n = base.shape[0]
    out = np.empty((n, l_shift.size, s_shift.size, 3))
    out[..., 0] = L[:, :, np.newaxis]
    out[..., 1] = base[:, 1][:, np.newaxis, np.newaxis] * factor
    out[..., 2] = base[:, 2][:, np.newaxis, np.newaxis] * factor
    return np_limit_to_gamut(out)


def describe(packed: PackedColor, mix_count: int = 1) -> str:
    """
    Find the description whose parsed color is closest to the given color.

    Tries every combination of ``mix_count`` base names together with every
    lightness and saturation word, and returns the text of the best match
    in Oklab distance. The result always parses back with
    parse_description.

    Args:
        packed: 0xRRGGBBAA color to describe
        mix_count: How many base names to mix, at least 1. Values above 3
            work but the search grows as 49 ** mix_count.

    Returns:
        str: A description such as ``"lighter dull sky"``, or
        ``"transparent"`` for colors with alpha below 128

    Raises:
        ValueError: If mix_count is less than 1
    """
    if mix_count < 1:
        raise ValueError(f"mix_count must be at least 1, got {mix_count}")
    if mix_count > MAX_MIX_COUNT:
        warnings.warn(
            f"describe() with mix_count={mix_count} searches {len(NAMES_BY_HUE) - 1}**{mix_count} "
            f"combinations and may be very slow",
            RuntimeWarning,
            stacklevel=2,
        )
    if unpack_rgba8888(packed)[3] < 128:
        return "transparent"

    target = sample_to_array(packed_to_oklab(packed))
    names = [name for name in NAMES_BY_HUE if name != "transparent"]
    rgb = np.array([[byte_to_unit(c) for c in unpack_rgba8888(NAMED[name])[:3]] for name in names])
    name_lab = np_rgb_to_oklab(rgb)

    combos = np.array(list(combinations_with_replacement(range(len(names)), mix_count)))
    base = name_lab[combos].mean(axis=1)
    candidates = _grid_candidates(base)

    distance = np.sum((candidates - target) ** 2, axis=-1)
    combo_index, l_index, s_index = np.unravel_index(np.argmin(distance), distance.shape)

    words = [_LIGHTNESS_WORDS[l_index], _SATURATION_WORDS[s_index]]
    words.extend(names[i] for i in combos[combo_index])
    return " ".join(word for word in words if word)
