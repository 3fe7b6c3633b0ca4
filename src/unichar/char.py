"""The Character value object and the string decomposition factory."""

from __future__ import annotations

import unicodedata
from array import array
from collections.abc import Iterable

import regex

from unichar.chartype import UNSET, CharType, Position
from unichar.classify import classify
from unichar.errors import MAX_CODE_POINT, CodePointError, GraphemeError
from unichar.measure import graphemes, handle_escape, iter_positions, max_line_width

_CONTROL = regex.compile(r"\p{Cc}")
_UPPERCASE = regex.compile(r"\p{Lu}")
_LOWERCASE = regex.compile(r"\p{Ll}")
_NON_DIGIT = regex.compile(r"[^0-9]")

# Numeral glyphs whose value NFKD decomposition does not expose as digits
NUMERAL_MAP: dict[str, int] = {
    "Ⅰ": 1,
    "Ⅱ": 2,
    "Ⅲ": 3,
    "Ⅳ": 4,
    "Ⅴ": 5,
    "Ⅵ": 6,
    "Ⅶ": 7,
    "Ⅷ": 8,
    "Ⅸ": 9,
    "Ⅹ": 10,
    "Ⅺ": 11,
    "Ⅻ": 12,
    "Ⅼ": 50,
    "Ⅽ": 100,
    "Ⅾ": 500,
    "Ⅿ": 1000,
    "①": 1,
    "②": 2,
    "③": 3,
    "④": 4,
    "⑤": 5,
    "⑥": 6,
    "⑦": 7,
    "⑧": 8,
    "⑨": 9,
    "⑩": 10,
}


class Character:
    """A single user-perceived character (one extended grapheme cluster).

    The code points and the CharType are fixed at construction. The position
    and ``max_width`` are context supplied by :func:`decompose`.
    """

    __slots__ = ("_code_points", "_raw", "_type", "_is_substring", "_position", "max_width")

    def __init__(
        self,
        grapheme: str,
        *,
        is_substring: bool = False,
        position: Position | None = None,
    ) -> None:
        clusters = graphemes(grapheme)
        if len(clusters) != 1:
            raise GraphemeError(grapheme, len(clusters))

        validated = clusters[0]
        self._code_points = _store(ord(ch) for ch in validated)
        self._raw = validated
        self._type = classify(validated)
        self._is_substring = is_substring
        self._position = position if position is not None else Position()
        self.max_width = 0

    @classmethod
    def from_code_points(
        cls,
        code_points: Iterable[int],
        *,
        is_substring: bool = False,
        position: Position | None = None,
    ) -> Character:
        """Build a Character from raw code points, validating each one."""
        stored = _store(code_points)
        return cls(
            "".join(chr(cp) for cp in stored),
            is_substring=is_substring,
            position=position,
        )

    @classmethod
    def from_string(cls, text: str) -> list[Character]:
        return decompose(text)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def value(self) -> str:
        parts: list[str] = []
        for cp in self._code_points:
            parts.append(chr(cp))
        return "".join(parts)

    @property
    def type(self) -> CharType:
        return self._type

    @property
    def position(self) -> Position:
        return self._position

    @property
    def is_substring(self) -> bool:
        return self._is_substring and self._position.index != UNSET

    @property
    def code_points(self) -> tuple[int, ...]:
        return tuple(self._code_points)

    def get_value(self) -> array:
        """Return the stored code point array."""
        return self._code_points

    def get_raw_string(self) -> str:
        """Return the validated grapheme exactly as it was segmented."""
        return self._raw

    def retag(self, char_type: CharType) -> None:
        """Overwrite the assigned CharType.

        Construction always classifies; this exists to force states such as
        ``UNDEFINED`` that no real grapheme reaches.
        """
        if not isinstance(char_type, CharType):
            raise TypeError(f"expected CharType, got {type(char_type).__name__}")
        self._type = char_type

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Return a printable form: escapes for control characters, else the grapheme."""
        value = self.value
        escaped = handle_escape(value)
        if escaped != value:
            return escaped

        if _CONTROL.search(value):
            return "".join(f"\\u{{{ord(ch):X}}}" for ch in value)

        return value

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        extra = ""
        if self.is_substring:
            p = self._position
            extra = f", position=Position({p.index}, {p.line}, {p.column})"
        return f"Character({self.value!r}, type=CharType.{self._type.name}{extra})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Character):
            return NotImplemented
        return (
            self._code_points == other._code_points
            and self._type == other._type
            and self._position == other._position
        )

    def __hash__(self) -> int:
        return hash(self._raw)

    # ------------------------------------------------------------------
    # Category queries
    # ------------------------------------------------------------------

    def is_eof(self) -> bool:
        return self._type is CharType.EOF

    def is_number(self) -> bool:
        return self._type is CharType.NUMBER

    def is_letter(self) -> bool:
        return self._type is CharType.LETTER

    def is_letter_or_number(self) -> bool:
        return self.is_letter() or self.is_number()

    def is_newline(self) -> bool:
        return self._type is CharType.NEWLINE

    def is_whitespace(self) -> bool:
        return self._type is CharType.WHITESPACE

    def is_emoji(self) -> bool:
        return self._type is CharType.EMOJI

    def is_currency(self) -> bool:
        return self._type is CharType.CURRENCY

    def is_punctuation(self) -> bool:
        return self._type is CharType.PUNCTUATION

    def is_symbol(self) -> bool:
        return self._type is CharType.SYMBOL

    def is_unicode(self) -> bool:
        return self._type is CharType.UNICODE

    def is_undefined(self) -> bool:
        return self._type is CharType.UNDEFINED

    # Case is a property of the grapheme, not of the coarse CharType
    def is_upper_case(self) -> bool:
        return _UPPERCASE.search(self.value) is not None

    def is_lower_case(self) -> bool:
        return _LOWERCASE.search(self.value) is not None

    def get_numeric_value(self) -> int:
        """Return the integer a numeral grapheme denotes, or -1.

        Glyphs in NUMERAL_MAP are looked up directly. Anything else is NFKD
        normalised and its ASCII digits are read as a base-10 integer.
        """
        value = self.value
        if value in NUMERAL_MAP:
            return NUMERAL_MAP[value]

        digits = _NON_DIGIT.sub("", unicodedata.normalize("NFKD", value))
        if digits:
            return int(digits, 10)
        return UNSET


def _store(code_points: Iterable[int]) -> array:
    stored = array("I")
    for cp in code_points:
        if not 0 <= cp <= MAX_CODE_POINT:
            raise CodePointError(cp)
        stored.append(cp)
    return stored


def decompose(text: str) -> list[Character]:
    """Split *text* into Characters carrying their source positions.

    Every Character is marked as a substring, and its ``max_width`` is the
    widest grapheme width found on any line of *text*.
    """
    max_width = max_line_width(text)
    chars: list[Character] = []
    for cluster, position in iter_positions(text):
        ch = Character(cluster, is_substring=True, position=position)
        ch.max_width = max_width
        chars.append(ch)
    return chars
