"""Error types with formatted input context."""

from __future__ import annotations

MAX_CODE_POINT = 0x10FFFF


class CharError(Exception):
    """Base class for character construction errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.format())

    def format(self, label: str = "input") -> str:
        return f"error: {self.message}"


class GraphemeError(CharError, ValueError):
    """Raised when a Character is built from anything but one grapheme cluster."""

    def __init__(self, source: str, count: int) -> None:
        self.source = source
        self.count = count
        super().__init__("input must be a single visual character (grapheme)")

    def format(self, label: str = "input") -> str:
        noun = "grapheme" if self.count == 1 else "graphemes"
        shown = repr(self.source)
        # Underline the text between the quotes, or the quotes themselves for ''
        if self.count:
            start, length = 1, len(shown) - 2
        else:
            start, length = 0, len(shown)
        return _report(self.message, f"{label}: {self.count} {noun}", shown, start, length)


class CodePointError(CharError, ValueError):
    """Raised when a code point falls outside 0..0x10FFFF."""

    def __init__(self, code_point: int) -> None:
        self.code_point = code_point
        super().__init__(
            f"code point {_hex(code_point)} is outside the Unicode range "
            f"(0x0..{_hex(MAX_CODE_POINT)})"
        )

    def format(self, label: str = "input") -> str:
        shown = _hex(self.code_point)
        return _report(self.message, f"{label}: code point", shown, 0, len(shown))


def _report(message: str, locator: str, shown: str, start: int, length: int) -> str:
    gutter = "  |"
    pad = " " * start
    carets = "^" * max(1, length)
    return (
        f"error: {message}\n"
        f"  --> {locator}\n"
        f"{gutter}\n"
        f"{gutter} {shown}\n"
        f"{gutter} {pad}{carets}"
    )


def _hex(code_point: int) -> str:
    sign = "-" if code_point < 0 else ""
    return f"{sign}0x{abs(code_point):X}"
