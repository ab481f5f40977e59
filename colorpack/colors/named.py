"""
Named base colors for descriptive parsing.

Every name maps to one 0xRRGGBBAA value. The tables are built once at import
and exposed read-only.
"""
from types import MappingProxyType
from typing import Dict, Optional, Tuple

from ..constants import TRANSPARENT
from ..conversions.cylindrical import oklab_hue, oklab_lightness, oklab_saturation
from ..types.color_types import NamedColorEntry, PackedColor, is_transparent

ACHROMATIC_SATURATION = 0.05

_NAMED: Dict[str, PackedColor] = {
    "transparent": TRANSPARENT,
    "black": 0x000000FF,
    "gray": 0x808080FF,
    "silver": 0xB6B6B6FF,
    "white": 0xFFFFFFFF,
    "red": 0xFF0000FF,
    "orange": 0xFF7F00FF,
    "yellow": 0xFFFF00FF,
    "green": 0x00FF00FF,
    "blue": 0x0000FFFF,
    "indigo": 0x520FE0FF,
    "violet": 0x9040EFFF,
    "purple": 0xC000FFFF,
    "brown": 0x8F573BFF,
    "pink": 0xFFA0E0FF,
    "magenta": 0xF500F5FF,
    "brick": 0xD5524AFF,
    "ember": 0xF55A32FF,
    "salmon": 0xFF6262FF,
    "chocolate": 0x683818FF,
    "tan": 0xD2B48CFF,
    "bronze": 0xCE8E31FF,
    "cinnamon": 0xD2691DFF,
    "apricot": 0xFFA828FF,
    "peach": 0xFFBF81FF,
    "pear": 0xD3E330FF,
    "saffron": 0xFFD510FF,
    "butter": 0xFFF288FF,
    "chartreuse": 0xC8FF41FF,
    "cactus": 0x30A000FF,
    "lime": 0x93D300FF,
    "olive": 0x818000FF,
    "fern": 0x4E7942FF,
    "moss": 0x204608FF,
    "celery": 0x7DFF73FF,
    "sage": 0xABE3C5FF,
    "jade": 0x3FBF3FFF,
    "cyan": 0x00FFFFFF,
    "mint": 0x7FFFD4FF,
    "teal": 0x007F7FFF,
    "turquoise": 0x2ED6C9FF,
    "sky": 0x10C0E0FF,
    "cobalt": 0x0046ABFF,
    "denim": 0x3088B8FF,
    "navy": 0x000080FF,
    "lavender": 0xB991FFFF,
    "plum": 0xBE0DC6FF,
    "mauve": 0xAB73ABFF,
    "rose": 0xE61E78FF,
    "raspberry": 0x911437FF,
}

_ALIASES: Dict[str, str] = {
    "grey": "gray",
    "gold": "saffron",
    "puce": "mauve",
    "sand": "tan",
    "skin": "peach",
    "coral": "salmon",
    "azure": "sky",
    "ocean": "teal",
    "sapphire": "cobalt",
}

NAMED = MappingProxyType(_NAMED)
ALIASES = MappingProxyType(_ALIASES)

ENTRIES: Tuple[NamedColorEntry, ...] = tuple(NamedColorEntry(name, packed) for name, packed in _NAMED.items())

NAMES: Tuple[str, ...] = tuple(sorted(_NAMED))


def _hue_order(name: str):
    packed = _NAMED[name]
    if is_transparent(packed):
        return (0, 0.0, 0.0)
    if oklab_saturation(packed) <= ACHROMATIC_SATURATION:
        return (1, 0.0, oklab_lightness(packed))
    return (2, oklab_hue(packed), oklab_lightness(packed))


# transparent first, then grays dark to light, then the rest around the hue circle
NAMES_BY_HUE: Tuple[str, ...] = tuple(sorted(_NAMED, key=_hue_order))

NAMES_BY_LIGHTNESS: Tuple[str, ...] = tuple(sorted(_NAMED, key=lambda name: (oklab_lightness(_NAMED[name]), name)))


def lookup(name: str) -> Optional[PackedColor]:
    """
    Find a base color by name, case-insensitively, following aliases.

    Returns:
        The packed color, or None when the name is unknown
    """
    key = name.strip().lower()
    return _NAMED.get(_ALIASES.get(key, key))
