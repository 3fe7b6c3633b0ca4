"""Ordered predicate table assigning a CharType to a grapheme."""

from __future__ import annotations

from collections.abc import Callable

import regex

from unichar.chartype import CharType

CharPredicate = Callable[[str], bool]

_NEWLINE = regex.compile("[\n\r\u2028\u2029]")
_WHITESPACE = regex.compile("[ \t\f\v]")
_LETTER = regex.compile(r"\p{L}")
_NUMBER = regex.compile(r"\p{N}")
_EMOJI = regex.compile(r"\p{Emoji}")
_CURRENCY = regex.compile(r"\p{Sc}")
_PUNCTUATION = regex.compile(r"\p{P}")
_SYMBOL = regex.compile(r"\p{S}")
_NON_ASCII = regex.compile(r"[^\x00-\x7f]")


def _matches(pattern: regex.Pattern[str]) -> CharPredicate:
    return lambda ch: pattern.search(ch) is not None


def _exact(expected: str) -> CharPredicate:
    return lambda ch: ch == expected


# Evaluated top to bottom; the first predicate that holds wins. Several
# property classes overlap (``#`` and ``*`` carry the Emoji property, ``$``
# is both Currency and ASCII), so the order is part of the contract.
CHAR_SPEC: tuple[tuple[CharType, CharPredicate], ...] = (
    (CharType.EOF, lambda ch: ch == ""),
    (CharType.NEWLINE, _matches(_NEWLINE)),
    (CharType.WHITESPACE, _matches(_WHITESPACE)),
    (CharType.LETTER, _matches(_LETTER)),
    (CharType.NUMBER, _matches(_NUMBER)),
    (CharType.EMOJI, _matches(_EMOJI)),
    (CharType.CURRENCY, _matches(_CURRENCY)),
    (CharType.HASH, _exact("#")),
    (CharType.PERCENT, _exact("%")),
    (CharType.SLASH, _exact("/")),
    (CharType.COMMA, _exact(",")),
    (CharType.LPAREN, _exact("(")),
    (CharType.RPAREN, _exact(")")),
    (CharType.PLUS, _exact("+")),
    (CharType.MINUS, _exact("-")),
    (CharType.STAR, _exact("*")),
    (CharType.DOT, _exact(".")),
    (CharType.BACKTICK, _exact("`")),
    (CharType.SINGLE_QUOTE, _exact("'")),
    (CharType.DOUBLE_QUOTE, _exact('"')),
    (CharType.BACKSLASH, _exact("\\")),
    (CharType.TILDE, _exact("~")),
    (CharType.EXCLAMATION, _exact("!")),
    (CharType.AT, _exact("@")),
    (CharType.DOLLAR, _exact("$")),
    (CharType.QUESTION, _exact("?")),
    (CharType.CARET, _exact("^")),
    (CharType.AMPERSAND, _exact("&")),
    (CharType.LESS_THAN, _exact("<")),
    (CharType.GREATER_THAN, _exact(">")),
    (CharType.UNDERSCORE, _exact("_")),
    (CharType.EQUAL_SIGN, _exact("=")),
    (CharType.LBRACKET, _exact("[")),
    (CharType.RBRACKET, _exact("]")),
    (CharType.LBRACE, _exact("{")),
    (CharType.RBRACE, _exact("}")),
    (CharType.SEMICOLON, _exact(";")),
    (CharType.COLON, _exact(":")),
    (CharType.PIPE, _exact("|")),
    (CharType.PUNCTUATION, _matches(_PUNCTUATION)),
    (CharType.SYMBOL, _matches(_SYMBOL)),
    (CharType.UNICODE, _matches(_NON_ASCII)),
)

_SPEC_BY_TYPE: dict[CharType, CharPredicate] = dict(CHAR_SPEC)


def classify(grapheme: str | None) -> CharType:
    """Return the first CharType whose predicate matches *grapheme*.

    Never raises. ``None`` yields ``CharType.ERROR``, any other non-string
    yields ``CharType.UNDEFINED``, and the empty string yields
    ``CharType.EOF``.
    """
    if grapheme is None:
        return CharType.ERROR
    if not isinstance(grapheme, str):
        return CharType.UNDEFINED

    for char_type, predicate in CHAR_SPEC:
        if predicate(grapheme):
            return char_type
    return CharType.UNDEFINED


def predicate_for(char_type: CharType) -> CharPredicate | None:
    """Return the predicate registered for *char_type*, if any."""
    return _SPEC_BY_TYPE.get(char_type)
