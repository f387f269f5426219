"""Country records and structure patterns for the IBAN registry.

Structure patterns use the notation of the SWIFT IBAN Registry: a sequence of
``<count>!<class>`` tokens, e.g. ``4!a10!n`` for "4 uppercase letters followed
by 10 digits". Supported classes:

    n   digits (0-9)
    a   uppercase letters (A-Z)
    c   alphanumeric (0-9, A-Z; a-z only for countries allowing lower case)

Source: SWIFT IBAN Registry
Reference: https://www.swift.com/standards/data-standards/iban-international-bank-account-number
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class CharacterClass(str, Enum):
    """Character class of a single structure token."""

    DIGIT = "n"
    UPPERCASE_LETTER = "a"
    ALPHANUMERIC = "c"

    def __str__(self) -> str:
        return self.value

    def accepts(self, char: str, allow_lower_case: bool = False) -> bool:
        """Whether ``char`` belongs to this class."""
        if "0" <= char <= "9":
            return self is not CharacterClass.UPPERCASE_LETTER
        if "A" <= char <= "Z":
            return self is not CharacterClass.DIGIT
        if "a" <= char <= "z":
            return allow_lower_case and self is CharacterClass.ALPHANUMERIC
        return False


@dataclass(frozen=True)
class PatternToken:
    """A run of ``count`` characters of the same class."""

    character_class: CharacterClass
    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"Token count must be positive, got {self.count}")

    def __str__(self) -> str:
        return f"{self.count}!{self.character_class}"


@dataclass(frozen=True)
class StructurePattern:
    """Ordered sequence of ``PatternToken`` describing a fixed-length value."""

    TOKEN_RE: ClassVar[re.Pattern[str]] = re.compile(r"(\d+)!([nac])")

    tokens: tuple[PatternToken, ...]

    @classmethod
    def parse(cls, pattern: str) -> "StructurePattern":
        """Parse SWIFT notation into a pattern.

        Example:
            >>> StructurePattern.parse("4!a10!n").length
            14

        Raises:
            ValueError: If the pattern is empty or contains unknown tokens
        """
        tokens: list[PatternToken] = []
        pos = 0
        while pos < len(pattern):
            match = cls.TOKEN_RE.match(pattern, pos)
            if match is None:
                raise ValueError(f"Invalid structure pattern {pattern!r} at position {pos}")
            tokens.append(PatternToken(CharacterClass(match.group(2)), int(match.group(1))))
            pos = match.end()

        if not tokens:
            raise ValueError("Structure pattern must not be empty")

        return cls(tuple(tokens))

    @property
    def length(self) -> int:
        """Total number of characters described by the pattern."""
        return sum(token.count for token in self.tokens)

    def __add__(self, other: "StructurePattern") -> "StructurePattern":
        return StructurePattern(self.tokens + other.tokens)

    def __str__(self) -> str:
        return "".join(str(token) for token in self.tokens)

    def matches(self, value: str, allow_lower_case: bool = False) -> bool:
        """Check every segment of ``value`` against its token.

        The value must be exactly as long as the pattern.
        """
        if len(value) != self.length:
            return False

        pos = 0
        for token in self.tokens:
            segment = value[pos : pos + token.count]
            if not all(token.character_class.accepts(ch, allow_lower_case) for ch in segment):
                return False
            pos += token.count
        return True


# Country code followed by the two check digits
IBAN_HEADER = StructurePattern.parse("2!a2!n")


@dataclass(frozen=True)
class CountryInfo:
    """IBAN rules for a single country.

    Attributes:
        country_code: ISO 3166-1 alpha-2 code (e.g., "NL", "MT")
        country_name: Full country name in English
        length: Total IBAN length including country code and check digits
        bban: Structure of the BBAN part
        allows_lower_case: Whether alphanumeric BBAN segments accept lower case
        example: Real-world example IBAN for testing
        is_sepa: Whether the country belongs to the SEPA scheme
    """

    country_code: str
    country_name: str
    length: int
    bban: StructurePattern
    allows_lower_case: bool = False
    example: str = ""
    is_sepa: bool = False
    structure: StructurePattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not re.fullmatch(r"[A-Z]{2}", self.country_code or ""):
            raise ValueError(f"Invalid country code: {self.country_code!r}")

        if self.length <= 0:
            raise ValueError(f"Length must be positive, got {self.length}")

        structure = IBAN_HEADER + self.bban
        if structure.length != self.length:
            raise ValueError(
                f"Structure of {self.country_code} describes {structure.length} "
                f"characters, expected {self.length}"
            )

        # Frozen dataclass: derived field is set once here
        object.__setattr__(self, "structure", structure)

    @classmethod
    def from_swift(
        cls,
        country_code: str,
        country_name: str,
        length: int,
        bban: str,
        example: str = "",
        *,
        allows_lower_case: bool = False,
        is_sepa: bool = False,
    ) -> "CountryInfo":
        """Build a record from a BBAN pattern in SWIFT notation."""
        return cls(
            country_code=country_code,
            country_name=country_name,
            length=length,
            bban=StructurePattern.parse(bban),
            allows_lower_case=allows_lower_case,
            example=example,
            is_sepa=is_sepa,
        )
