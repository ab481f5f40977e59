"""
Numeric constants shared by the conversion, parsing and palette modules.

Nothing here is read from the environment; change a value here and every
module picks it up.
"""

# Packed colors

TRANSPARENT = 0x00000000
"""Reserved "no color" value. Distinct from every other alpha-0 color."""

BYTE_MASK = 0xFF
PACKED_MASK = 0xFFFFFFFF
FLOAT_COLOR_MASK = 0xFEFFFFFF  # clears alpha's low bit so the float is never NaN

# sRGB transfer curve

SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055

# Oklab matrices (Björn Ottosson, 2021)

LINEAR_RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

LMS_TO_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

OKLAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

LMS_TO_LINEAR_RGB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# Gamut search

GAMUT_TOLERANCE = 1e-7
CHROMA_CEILING = 0.5  # no sRGB color has Oklab chroma above ~0.33
CHROMA_BISECTION_STEPS = 32
ACHROMATIC_EPSILON = 1e-6

# Cylindrical mapping

SATURATION_LIGHTNESS_SQUEEZE = 0.2

# Turn trigonometry

TRIG_TABLE_BITS = 12
TRIG_TABLE_SIZE = 1 << TRIG_TABLE_BITS
TRIG_TABLE_MASK = TRIG_TABLE_SIZE - 1

# Palette

PALETTE_LIGHTNESS_BIAS = 0.15
LITERAL_ENTRIES_PER_LINE = 8
