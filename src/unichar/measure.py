"""Grapheme segmentation, source positions, and terminal column widths."""

from __future__ import annotations

from collections.abc import Iterator

import regex

from unichar.chartype import Position

ZERO_WIDTH = 0
SINGLE_WIDTH = 1
DOUBLE_WIDTH = 2

# Display forms for common control sequences
COMMON_ESCAPES: dict[str, str] = {
    "\n": "\\n",
    "\r": "\\r",
    "\r\n": "\\r\\n",
    "\t": "\\t",
    "\v": "\\v",
    "\f": "\\f",
    "\0": "\\0",
    "\\": "\\\\",
}

_ESCAPE_FORMS = frozenset(COMMON_ESCAPES.values())
_MULTI_CHARACTER = frozenset(("\\n", "\\t", "\\r", "\\v", "\\f"))

LINE_TERMINATORS = frozenset(("\n", "\r\n", "\r"))

_GRAPHEME = regex.compile(r"\X")
_LINE_SPLIT = regex.compile(r"\r\n|\r|\n")
_EMOJI_PRESENTATION = regex.compile(r"\p{Emoji_Presentation}")

_DOUBLE_WIDTH_RANGES: tuple[tuple[int, int], ...] = (
    (0x1100, 0x115F),  # Hangul Jamo
    (0x2329, 0x232A),  # Left/Right-Pointing Angle Bracket
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xAC00, 0xD7A3),  # Hangul Syllables
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0xFE10, 0xFE19),  # Vertical Forms
    (0xFE30, 0xFE6F),  # CJK Compatibility Forms
    (0xFF00, 0xFFEF),  # Halfwidth and Fullwidth Forms
    (0x1F300, 0x10FFFF),  # Modern emoji and pictographs onward
)

_ZERO_WIDTH_RANGES: tuple[tuple[int, int], ...] = (
    (0x0000, 0x001F),  # C0 controls
    (0x007F, 0x009F),  # DEL and C1 controls
    (0x0300, 0x036F),  # Combining Diacritical Marks
    (0x200B, 0x200F),  # Zero-width spaces and direction marks
    (0xFE00, 0xFE0F),  # Variation Selectors
    (0xFEFF, 0xFEFF),  # Zero-width no-break space
)


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------


def iter_graphemes(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, cluster)`` for each extended grapheme cluster in *text*."""
    for m in _GRAPHEME.finditer(text):
        yield m.start(), m.group()


def graphemes(text: str) -> list[str]:
    """Split *text* into extended grapheme clusters."""
    if not text:
        return []
    return _GRAPHEME.findall(text)


def grapheme_count(text: str) -> int:
    return sum(1 for _ in _GRAPHEME.finditer(text))


def split_lines(text: str) -> list[str]:
    """Split *text* on LF, CR and CRLF; the terminators are dropped."""
    return _LINE_SPLIT.split(text)


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


def calculate_position(text: str, target_index: int) -> Position:
    """Return the 1-based line and column of the grapheme at *target_index*.

    Walks grapheme clusters from the start of *text*, so a cluster made of
    several code points advances the column by one. LF, CR and CRLF end a
    line. A negative *target_index* is treated as 0.
    """
    target_index = max(target_index, 0)
    line = 1
    column = 1
    for offset, cluster in iter_graphemes(text):
        if offset >= target_index:
            break
        if cluster in LINE_TERMINATORS:
            line += 1
            column = 1
        else:
            column += 1
    return Position(target_index, line, column)


def iter_positions(text: str) -> Iterator[tuple[str, Position]]:
    """Yield each grapheme of *text* with its position, in a single pass.

    Produces the same positions as ``calculate_position(text, offset)`` for
    every cluster offset.
    """
    line = 1
    column = 1
    for offset, cluster in iter_graphemes(text):
        yield cluster, Position(offset, line, column)
        if cluster in LINE_TERMINATORS:
            line += 1
            column = 1
        else:
            column += 1


# ---------------------------------------------------------------------------
# Widths
# ---------------------------------------------------------------------------


def handle_escape(value: str) -> str:
    """Return the display form of a common control sequence, else *value*."""
    return COMMON_ESCAPES.get(value, value)


def is_escape_form(text: str) -> bool:
    """Return True if *text* is one of the display forms in COMMON_ESCAPES."""
    return text in _ESCAPE_FORMS


def is_multi_character(text: str) -> bool:
    """Return True for the two-character forms ``\\n \\t \\r \\v \\f``."""
    return text in _MULTI_CHARACTER


def is_double_width(code_point: int) -> bool:
    return any(lo <= code_point <= hi for lo, hi in _DOUBLE_WIDTH_RANGES)


def is_zero_width(code_point: int) -> bool:
    return any(lo <= code_point <= hi for lo, hi in _ZERO_WIDTH_RANGES)


def visual_width(text: str) -> int:
    """Estimate the monospace column width of the first grapheme in *text*.

    Returns 0 for the empty string, the literal length for an escape display
    form such as ``\\n``, and otherwise 1 or 2. Combining marks are part of
    their base cluster and never add width.
    """
    if is_escape_form(text):
        return len(text)

    m = _GRAPHEME.match(text)
    if m is None:
        return ZERO_WIDTH
    cluster = m.group()

    # VS16 forces emoji presentation
    if "\ufe0f" in cluster:
        return DOUBLE_WIDTH
    if _EMOJI_PRESENTATION.search(cluster):
        return DOUBLE_WIDTH
    if is_double_width(ord(cluster[0])):
        return DOUBLE_WIDTH
    return SINGLE_WIDTH


def line_max_widths(text: str) -> list[int]:
    """Return, for each line of *text*, the widest grapheme on that line."""
    return [
        max((visual_width(g) for g in graphemes(line)), default=ZERO_WIDTH)
        for line in split_lines(text)
    ]


def max_line_width(text: str) -> int:
    """Return the widest grapheme width across all lines of *text*."""
    return max(line_max_widths(text), default=ZERO_WIDTH)
