"""Human-readable formatting of Characters for console output."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from unichar.char import Character
from unichar.measure import grapheme_count, line_max_widths, visual_width

TARGET_CHAR_DISPLAY_WIDTH = 8
TYPE_NAME_WIDTH = 11

Stylize = Callable[[str, str], str]

# Style names follow the conventional inspect palette
_ANSI_STYLES: dict[str, tuple[int, int]] = {
    "special": (36, 39),  # cyan
    "number": (33, 39),  # yellow
    "string": (32, 39),  # green
    "date": (35, 39),  # magenta
    "title": (1, 22),  # bold
}


def plain_stylize(text: str, style: str) -> str:
    return text


def ansi_stylize(text: str, style: str) -> str:
    codes = _ANSI_STYLES.get(style)
    if codes is None:
        return text
    start, end = codes
    return f"\x1b[{start}m{text}\x1b[{end}m"


def display_width(char: Character) -> int:
    """Return the column width of *char* as :meth:`Character.to_string` renders it."""
    rendered = char.to_string()
    if rendered != char.value:
        return len(rendered)
    return visual_width(rendered)


def format_char(
    char: Character,
    stylize: Stylize = plain_stylize,
    *,
    depth: int = 0,
    width: int = TARGET_CHAR_DISPLAY_WIDTH,
) -> str:
    """Render *char* as a one-line inspection record.

    ``Character[ 3]:   'l'    : { type: CharType.Letter     , pos: [  1 :  4 ] }``

    The quoted display form is centred in *width* cells. Index and position
    are shown only for substring characters. A negative *depth* renders a
    placeholder.
    """
    if depth < 0:
        return stylize("[Character]", "special")

    classname = stylize(type(char).__name__, "special")

    content_width = display_width(char) + 2
    total_padding = max(0, width - content_width)
    pad_start = total_padding // 2
    pad_end = total_padding - pad_start
    quoted = " " * pad_start + f"'{char.to_string()}'" + " " * pad_end
    shown = stylize(quoted, "date")

    idx = ""
    pos = ""
    if char.is_substring:
        p = char.position
        idx = stylize(f"[{p.index:>2}]", "number")
        line_col = stylize(f"[ {p.line:>2} : {p.column:>2} ]", "number")
        pos = f", pos: {line_col}"

    type_name = stylize(f"{char.type.value:<{TYPE_NAME_WIDTH}}", "string")
    prefix = stylize("CharType.", "special")
    return f"{classname}{idx}: {shown}: {{ type: {prefix}{type_name}{pos} }}"


def dump_chars(
    chars: Sequence[Character],
    *,
    stylize: Stylize = plain_stylize,
    width: int = TARGET_CHAR_DISPLAY_WIDTH,
    file: TextIO | None = None,
) -> None:
    """Write one :func:`format_char` line per character to *file*.

    The cell width grows to fit the widest rendered character of the batch.
    """
    out = file if file is not None else sys.stdout
    if chars:
        width = max(width, max(display_width(c) for c in chars) + 2)
    for char in chars:
        out.write(format_char(char, stylize, width=width))
        out.write("\n")


def dump_widths(text: str, *, file: TextIO | None = None) -> None:
    """Print a per-line width report for *text* to *file*."""
    out = file if file is not None else sys.stderr
    widths = line_max_widths(text)
    out.write(f"graphemes: {grapheme_count(text)}\n")
    out.write(f"lines: {len(widths)}\n")
    for lineno, w in enumerate(widths, start=1):
        out.write(f"  line {lineno}: max width {w}\n")
    out.write(f"max width: {max(widths, default=0)}\n")
