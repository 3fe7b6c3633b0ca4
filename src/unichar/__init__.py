"""Grapheme-aware character classification and measurement."""

from __future__ import annotations

from unichar.char import Character, decompose
from unichar.chartype import CharType, Position
from unichar.classify import classify
from unichar.display import format_char
from unichar.errors import CodePointError, GraphemeError
from unichar.measure import calculate_position, visual_width

__version__ = "0.1.0"

__all__ = [
    "CharType",
    "Character",
    "CodePointError",
    "GraphemeError",
    "Position",
    "calculate_position",
    "classify",
    "decompose",
    "format_char",
    "visual_width",
]
