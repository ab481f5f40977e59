"""
Text form of packed colors and palette listings.

A single color is written ``0xRRGGBBAA`` with uppercase digits. A listing is
wrapped in braces, each entry followed by ``", "``, with a line break after
every eighth entry::

    {
    0x00000000, 0x000000FF, ...
    ..., 0xFFFFFFFF, }
"""
import re
from typing import Iterable, Tuple

from ..constants import LITERAL_ENTRIES_PER_LINE, PACKED_MASK
from ..conversions.bits import packed_to_units
from ..types.color_types import PackedColor

_HEX_LITERAL = re.compile(r"0[xX][0-9A-Fa-f]{8}")


def to_hex_literal(packed: PackedColor) -> str:
    return f"0x{int(packed) & PACKED_MASK:08X}"


def format_literal_array(colors: Iterable[PackedColor], per_line: int = LITERAL_ENTRIES_PER_LINE) -> str:
    """
    Format colors as a brace-wrapped literal array.

    Args:
        colors: Packed colors in output order
        per_line: Entries before each line break

    Returns:
        str: ``"{\\n"`` + entries + ``"}"``

    Raises:
        ValueError: If per_line is less than 1
    """
    if per_line < 1:
        raise ValueError(f"per_line must be at least 1, got {per_line}")
    parts = ["{\n"]
    for i, packed in enumerate(colors, start=1):
        parts.append(to_hex_literal(packed) + ", ")
        if i % per_line == 0:
            parts.append("\n")
    parts.append("}")
    return "".join(parts)


def parse_literal_array(text: str) -> Tuple[PackedColor, ...]:
    """
    Read back a listing written by format_literal_array.

    Whitespace and line breaks between entries are free; a trailing comma is
    allowed.

    Raises:
        ValueError: If the braces are missing or an entry is not 0x + 8 hex digits
    """
    body = text.strip()
    if not (body.startswith("{") and body.endswith("}")):
        raise ValueError("Literal array must be wrapped in '{' and '}'")
    colors = []
    for token in body[1:-1].split(","):
        token = token.strip()
        if not token:
            continue
        if not _HEX_LITERAL.fullmatch(token):
            raise ValueError(f"Malformed color literal: {token!r}")
        colors.append(int(token, 16))
    return tuple(colors)


def to_render_floats(packed: PackedColor) -> Tuple[float, float, float, float]:
    """The (r, g, b, a) floats in [0, 1] a renderer expects."""
    return packed_to_units(packed)
