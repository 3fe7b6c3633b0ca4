"""Character categories and source positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

UNSET = -1


class CharType(Enum):
    # Control / meta
    EOF = "EOF"
    ERROR = "Error"
    OTHER = "Other"
    UNDEFINED = "Undefined"

    # Formatting
    WHITESPACE = "Whitespace"
    NEWLINE = "NewLine"

    # Literals
    LETTER = "Letter"
    NUMBER = "Number"
    HEX = "Hex"

    # Quoting
    SINGLE_QUOTE = "SingleQuote"  # '
    DOUBLE_QUOTE = "DoubleQuote"  # "
    BACKTICK = "Backtick"  # `

    # Brackets
    LPAREN = "LParen"  # (
    RPAREN = "RParen"  # )
    LBRACKET = "LBracket"  # [
    RBRACKET = "RBracket"  # ]
    LBRACE = "LBrace"  # {
    RBRACE = "RBrace"  # }

    # Operators
    PLUS = "Plus"  # +
    MINUS = "Minus"  # -
    STAR = "Star"  # *
    SLASH = "Slash"  # /
    BACKSLASH = "BackSlash"  # \
    EQUAL_SIGN = "EqualSign"  # =
    PERCENT = "Percent"  # %
    CARET = "Caret"  # ^
    TILDE = "Tilde"  # ~
    PIPE = "Pipe"  # |
    LESS_THAN = "LessThan"  # <
    GREATER_THAN = "GreaterThan"  # >

    # Punctuation
    DOT = "Dot"  # .
    COMMA = "Comma"  # ,
    COLON = "Colon"  # :
    SEMICOLON = "SemiColon"  # ;
    EXCLAMATION = "Exclamation"  # !
    QUESTION = "Question"  # ?
    PUNCTUATION = "Punctuation"

    # Identifiers / symbols
    HASH = "Hash"  # #
    AT = "At"  # @
    AMPERSAND = "Ampersand"  # &
    DOLLAR = "Dollar"  # $
    UNDERSCORE = "Underscore"  # _
    CURRENCY = "Currency"
    SYMBOL = "Symbol"

    # International
    EMOJI = "Emoji"
    UNICODE = "Unicode"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Position:
    """Location of a grapheme within a larger text.

    ``index`` is a 0-based offset into the source string; ``line`` and
    ``column`` are 1-based. All three are ``-1`` when unset.
    """

    index: int = UNSET
    line: int = UNSET
    column: int = UNSET

    def __post_init__(self) -> None:
        for name in ("index", "line", "column"):
            if getattr(self, name) < UNSET:
                raise ValueError(f"position {name} must be >= {UNSET}")

    @property
    def is_set(self) -> bool:
        return self.index != UNSET
