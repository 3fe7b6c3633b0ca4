"""Test the Character value object."""

from __future__ import annotations

from array import array

import pytest

from unichar.char import NUMERAL_MAP, Character
from unichar.chartype import CharType, Position
from unichar.errors import CodePointError, GraphemeError

FAMILY = "\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466"


class TestConstruction:
    def test_letter(self):
        char = Character("A")
        assert char.value == "A"
        assert char.type == CharType.LETTER

    def test_defaults(self):
        char = Character("A")
        assert char.position == Position()
        assert char.is_substring is False
        assert char.max_width == 0

    def test_multi_code_point_cluster(self):
        char = Character(FAMILY)
        assert char.value == FAMILY
        assert len(char.code_points) == 7

    def test_decomposed_accent(self):
        char = Character("e\u0301")
        assert char.code_points == (0x65, 0x301)
        assert char.is_letter()

    def test_flag(self):
        assert Character("\U0001f1ef\U0001f1f5").is_emoji()

    @pytest.mark.parametrize("text", ["", "AB", "ab\n", "\U0001f602\U0001f602"])
    def test_arity_error(self, text):
        with pytest.raises(GraphemeError, match="single visual character"):
            Character(text)

    def test_arity_error_is_value_error(self):
        with pytest.raises(ValueError):
            Character("AB")

    def test_arity_error_count(self):
        with pytest.raises(GraphemeError) as exc_info:
            Character("abc")
        assert exc_info.value.count == 3
        assert exc_info.value.source == "abc"

    @pytest.mark.parametrize("text", ["A", "\n", "\r\n", "\U0001f4a9", FAMILY, "⚔\ufe0f", "字"])
    def test_round_trip(self, text):
        assert Character(text).value == text


class TestSubstring:
    def test_requires_flag_and_position(self):
        char = Character("G", is_substring=True, position=Position(10, 2, 5))
        assert char.is_substring
        assert char.position == Position(10, 2, 5)

    def test_flag_without_position(self):
        assert Character("G", is_substring=True).is_substring is False

    def test_position_without_flag(self):
        assert Character("G", position=Position(0, 1, 1)).is_substring is False


class TestCodePoints:
    def test_stored_array(self):
        stored = Character("\U0001fa96").get_value()
        assert isinstance(stored, array)
        assert list(stored) == [0x1FA96]

    def test_raw_string(self):
        assert Character("e\u0301").get_raw_string() == "e\u0301"

    def test_from_code_points(self):
        char = Character.from_code_points([0x65, 0x301])
        assert char.value == "e\u0301"
        assert char.type == CharType.LETTER

    def test_from_code_points_with_position(self):
        char = Character.from_code_points([0x41], is_substring=True, position=Position(0, 1, 1))
        assert char.is_substring

    @pytest.mark.parametrize("cp", [0x110000, -1])
    def test_out_of_range(self, cp):
        with pytest.raises(CodePointError) as exc_info:
            Character.from_code_points([0x41, cp])
        assert exc_info.value.code_point == cp

    def test_max_code_point_accepted(self):
        assert Character.from_code_points([0x10FFFF]).code_points == (0x10FFFF,)

    def test_from_code_points_arity(self):
        with pytest.raises(GraphemeError):
            Character.from_code_points([0x41, 0x42])


class TestToString:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("\n", "\\n"),
            ("\r", "\\r"),
            ("\r\n", "\\r\\n"),
            ("\t", "\\t"),
            ("\v", "\\v"),
            ("\f", "\\f"),
            ("\0", "\\0"),
            ("\\", "\\\\"),
        ],
    )
    def test_common_escapes(self, text, expected):
        assert Character(text).to_string() == expected

    def test_control_as_code_point(self):
        assert Character("\x1b").to_string() == "\\u{1B}"

    def test_c1_control(self):
        assert Character("\x85").to_string() == "\\u{85}"

    def test_delete(self):
        assert Character("\x7f").to_string() == "\\u{7F}"

    @pytest.mark.parametrize("text", ["X", "字", "\U0001f4a9", " "])
    def test_printable_unchanged(self, text):
        assert Character(text).to_string() == text

    def test_str(self):
        assert str(Character("\t")) == "\\t"

    def test_repr(self):
        assert repr(Character("A")) == "Character('A', type=CharType.LETTER)"

    def test_repr_substring(self):
        char = Character("b", is_substring=True, position=Position(1, 1, 2))
        assert repr(char) == "Character('b', type=CharType.LETTER, position=Position(1, 1, 2))"


class TestCategoryQueries:
    @pytest.mark.parametrize(
        "text, method",
        [
            ("a", "is_letter"),
            ("1", "is_number"),
            (" ", "is_whitespace"),
            ("\n", "is_newline"),
            ("\U0001f60a", "is_emoji"),
            ("$", "is_currency"),
            ("§", "is_punctuation"),
            ("→", "is_symbol"),
            ("\u00a0", "is_unicode"),
        ],
    )
    def test_true(self, text, method):
        assert getattr(Character(text), method)() is True

    def test_exclamation_has_own_tag(self):
        char = Character("!")
        assert char.type == CharType.EXCLAMATION
        assert not char.is_punctuation()

    def test_plus_has_own_tag(self):
        char = Character("+")
        assert char.type == CharType.PLUS
        assert not char.is_symbol()

    def test_letter_or_number(self):
        assert Character("a").is_letter_or_number()
        assert Character("7").is_letter_or_number()
        assert not Character("?").is_letter_or_number()

    def test_only_one_predicate_holds(self):
        char = Character("a")
        assert not char.is_number()
        assert not char.is_emoji()
        assert not char.is_unicode()

    def test_eof_via_retag(self):
        char = Character("a")
        char.retag(CharType.EOF)
        assert char.is_eof()

    def test_undefined_for_nul(self):
        assert Character("\0").is_undefined()


class TestRetag:
    def test_retag_undefined(self):
        char = Character("A")
        char.retag(CharType.UNDEFINED)
        assert char.is_undefined()
        assert not char.is_letter()

    def test_retag_keeps_value(self):
        char = Character("A")
        char.retag(CharType.SYMBOL)
        assert char.value == "A"

    def test_retag_rejects_strings(self):
        with pytest.raises(TypeError):
            Character("A").retag("Letter")  # type: ignore[arg-type]


class TestCase:
    def test_upper(self):
        char = Character("G")
        assert char.is_upper_case()
        assert not char.is_lower_case()

    def test_lower(self):
        char = Character("g")
        assert char.is_lower_case()
        assert not char.is_upper_case()

    def test_non_ascii(self):
        assert Character("É").is_upper_case()
        assert Character("ß").is_lower_case()

    def test_caseless(self):
        for text in ("1", "字", "!"):
            char = Character(text)
            assert not char.is_upper_case()
            assert not char.is_lower_case()

    def test_independent_of_type(self):
        char = Character("G")
        char.retag(CharType.UNDEFINED)
        assert char.is_upper_case()


class TestNumericValue:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("5", 5),
            ("0", 0),
            ("Ⅷ", 8),
            ("Ⅿ", 1000),
            ("Ⅼ", 50),
            ("⑦", 7),
            ("⑩", 10),
            ("５", 5),  # fullwidth
            ("²", 2),
            ("⑪", 11),
        ],
    )
    def test_values(self, text, expected):
        assert Character(text).get_numeric_value() == expected

    @pytest.mark.parametrize("text", ["A", "!", "٣", "\U0001f4a9"])
    def test_undefined(self, text):
        assert Character(text).get_numeric_value() == -1

    def test_map_covers_roman_and_circled(self):
        assert NUMERAL_MAP["Ⅰ"] == 1
        assert NUMERAL_MAP["①"] == 1
        assert len(NUMERAL_MAP) == 26


class TestEquality:
    def test_equal(self):
        assert Character("a") == Character("a")

    def test_different_value(self):
        assert Character("a") != Character("b")

    def test_different_position(self):
        a = Character("a", is_substring=True, position=Position(0, 1, 1))
        b = Character("a", is_substring=True, position=Position(3, 2, 1))
        assert a != b

    def test_hashable(self):
        assert len({Character("a"), Character("a"), Character("b")}) == 2

    def test_not_equal_to_str(self):
        assert Character("a") != "a"
