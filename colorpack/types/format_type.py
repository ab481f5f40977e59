# No dependencies
from enum import Enum


class AlphaStrategy(str, Enum):
    SIGN_BIT = "sign_bit"
    ROUNDED = "rounded"


class ModifierKind(str, Enum):
    LIGHTNESS = "lightness"
    SATURATION = "saturation"
    HUE = "hue"
    COMBINED = "combined"


max_byte = 255
float_alpha_steps = 254  # alpha levels that survive the cleared low bit, minus one

intensity_suffixes = ("", "er", "est", "most")
