"""Tests for structure patterns and country records."""

from dataclasses import FrozenInstanceError

import pytest

from openiban.registry.models import (
    CharacterClass,
    CountryInfo,
    PatternToken,
    StructurePattern,
)

pytestmark = pytest.mark.unit


class TestCharacterClass:
    """Test per-character acceptance rules."""

    @pytest.mark.parametrize(
        "cls,char,expected",
        [
            (CharacterClass.DIGIT, "7", True),
            (CharacterClass.DIGIT, "A", False),
            (CharacterClass.DIGIT, "a", False),
            (CharacterClass.UPPERCASE_LETTER, "Q", True),
            (CharacterClass.UPPERCASE_LETTER, "q", False),
            (CharacterClass.UPPERCASE_LETTER, "1", False),
            (CharacterClass.ALPHANUMERIC, "1", True),
            (CharacterClass.ALPHANUMERIC, "Z", True),
            (CharacterClass.ALPHANUMERIC, "z", False),
            (CharacterClass.ALPHANUMERIC, "-", False),
        ],
    )
    def test_accepts_upper_case_only(self, cls, char, expected):
        """Without the lower case flag only upper case passes."""
        assert cls.accepts(char) is expected

    def test_lower_case_only_in_alphanumeric_when_allowed(self):
        """The lower case flag only widens alphanumeric segments."""
        assert CharacterClass.ALPHANUMERIC.accepts("z", allow_lower_case=True)
        assert not CharacterClass.UPPERCASE_LETTER.accepts("z", allow_lower_case=True)
        assert not CharacterClass.DIGIT.accepts("z", allow_lower_case=True)

    def test_non_ascii_rejected(self):
        """Non-ASCII letters and digits never match."""
        assert not CharacterClass.ALPHANUMERIC.accepts("é", allow_lower_case=True)
        assert not CharacterClass.DIGIT.accepts("٣")


class TestStructurePattern:
    """Test SWIFT notation parsing and matching."""

    def test_parse_tokens(self):
        """SWIFT notation parses into tokens and renders back."""
        pattern = StructurePattern.parse("4!a10!n")

        assert pattern.tokens == (
            PatternToken(CharacterClass.UPPERCASE_LETTER, 4),
            PatternToken(CharacterClass.DIGIT, 10),
        )
        assert pattern.length == 14
        assert str(pattern) == "4!a10!n"

    @pytest.mark.parametrize("bad", ["", "4a", "4!x", "!n", "4!n 2!a", "0!n"])
    def test_parse_invalid(self, bad):
        """Malformed notation raises ValueError."""
        with pytest.raises(ValueError):
            StructurePattern.parse(bad)

    def test_concatenation(self):
        """Patterns concatenate token by token."""
        pattern = StructurePattern.parse("2!a2!n") + StructurePattern.parse("4!a")
        assert str(pattern) == "2!a2!n4!a"
        assert pattern.length == 8

    def test_matches(self):
        """Values are matched position by position."""
        pattern = StructurePattern.parse("4!a10!n")

        assert pattern.matches("ABNA0417164300")
        assert not pattern.matches("ABN10417164300")  # digit in letter segment
        assert not pattern.matches("ABNA041716430A")  # letter in digit segment
        assert not pattern.matches("abna0417164300")  # lower case letters
        assert not pattern.matches("ABNA041716430")  # too short

    def test_matches_lower_case_in_alphanumeric(self):
        """Lower case passes in c segments only when allowed."""
        pattern = StructurePattern.parse("4!a5!n18!c")

        assert not pattern.matches("MALT011000012345mtlcast001S")
        assert pattern.matches("MALT011000012345mtlcast001S", allow_lower_case=True)
        assert not pattern.matches("malt011000012345mtlcast001S", allow_lower_case=True)


class TestCountryInfo:
    """Test country record construction."""

    def test_structure_includes_header(self):
        """The full structure prefixes the BBAN with 2!a2!n."""
        info = CountryInfo.from_swift("NL", "Netherlands", 18, "4!a10!n")

        assert str(info.structure) == "2!a2!n4!a10!n"
        assert info.structure.length == info.length

    def test_immutable(self):
        """Country records cannot be changed."""
        info = CountryInfo.from_swift("NL", "Netherlands", 18, "4!a10!n")

        with pytest.raises(FrozenInstanceError):
            info.length = 20  # type: ignore[misc]

    def test_length_mismatch_rejected(self):
        """Length must equal the structure length."""
        with pytest.raises(ValueError, match="expected 19"):
            CountryInfo.from_swift("NL", "Netherlands", 19, "4!a10!n")

    @pytest.mark.parametrize("code", ["nl", "N1", "NLD", ""])
    def test_invalid_country_code_rejected(self, code):
        """Country codes are two upper case letters."""
        with pytest.raises(ValueError, match="Invalid country code"):
            CountryInfo.from_swift(code, "Netherlands", 18, "4!a10!n")

    def test_equality_by_value(self):
        """Records with equal fields are equal and hash alike."""
        a = CountryInfo.from_swift("NL", "Netherlands", 18, "4!a10!n")
        b = CountryInfo.from_swift("NL", "Netherlands", 18, "4!a10!n")
        assert a == b
        assert hash(a) == hash(b)
