"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from unichar.char import Character, decompose
from unichar.chartype import CharType, Position


@pytest.fixture
def chars():
    """Return a helper that decomposes source into Characters."""

    def _chars(source: str) -> list[Character]:
        return decompose(source)

    return _chars


def assert_types(chars: list[Character], expected: list[CharType]) -> None:
    """Assert that the character types match the expected list."""
    actual = [c.type for c in chars]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(chars: list[Character], expected: list[str]) -> None:
    """Assert that the character values match the expected list."""
    actual = [c.value for c in chars]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_position(char: Character, index: int, line: int, column: int) -> None:
    """Assert a character's (index, line, column)."""
    expected = Position(index, line, column)
    assert char.position == expected, f"Expected {expected}, got {char.position}"


def stylize_tags(text: str, style: str) -> str:
    """Stylize callback that wraps text in visible [style:text] markers."""
    return f"[{style}:{text}]"
