"""
Colorpack Named and Descriptive Colors
======================================

Free-text color descriptions built from base color names and modifier
adjectives, and the reverse search that turns a color back into words.

Features
--------
- 50 base colors plus aliases (``grey``, ``gold``, ``coral`` ...)
- Modifiers for lightness, saturation and hue, each with -er/-est/-most forms
- Fail-open parsing: unknown words are skipped, never raised
- ``describe`` finds the closest description for any packed color

Usage
-----
>>> from colorpack.colors import parse_description, lookup
>>> lookup("Grey") == parse_description("gray")
True
>>> hex(parse_description(""))
'0x0'
"""

from .named import (
    NAMED,
    ALIASES,
    NAMES,
    NAMES_BY_HUE,
    NAMES_BY_LIGHTNESS,
    lookup,
)
from .description import MODIFIERS, parse_description, describe, tokenize

__all__ = [
    'NAMED',
    'ALIASES',
    'NAMES',
    'NAMES_BY_HUE',
    'NAMES_BY_LIGHTNESS',
    'lookup',
    'MODIFIERS',
    'parse_description',
    'describe',
    'tokenize',
]
