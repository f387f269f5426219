"""IBAN value object and normalization."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from openiban.registry.models import CountryInfo

GROUP_SIZE = 4


def normalize(value: str | None) -> str:
    """Remove all whitespace from an IBAN-like string.

    Case and every other character are left untouched, so the result can
    still be classified by the validator. ``None`` normalizes to ``""``.

    Example:
        >>> normalize(" NL91 ABNA\\t0417 1643 00 ")
        'NL91ABNA0417164300'
    """
    if not value:
        return ""
    return "".join(value.split())


class IbanFormat(str, Enum):
    """Display format for ``Iban.to_string``."""

    ELECTRONIC = "electronic"  # NL91ABNA0417164300
    PRINT = "print"  # NL91 ABNA 0417 1643 00
    OBFUSCATED = "obfuscated"  # NLXX XXXX XXXX XX43 00

    def __str__(self) -> str:
        return self.value


def _group(value: str) -> str:
    return " ".join(value[i : i + GROUP_SIZE] for i in range(0, len(value), GROUP_SIZE))


@dataclass(frozen=True)
class Iban:
    """A validated IBAN.

    Instances are produced by ``IbanParser``; the value is stored in its
    electronic form (no whitespace, upper case).
    """

    value: str
    country: CountryInfo = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", normalize(self.value).upper())

    @property
    def country_code(self) -> str:
        return self.value[:2]

    @property
    def check_digits(self) -> str:
        return self.value[2:4]

    @property
    def bban(self) -> str:
        return self.value[4:]

    def to_string(self, fmt: IbanFormat = IbanFormat.ELECTRONIC) -> str:
        """Render the IBAN.

        The obfuscated form keeps the country code and the last four
        characters, masking the rest with ``X`` in print grouping.
        """
        if fmt is IbanFormat.PRINT:
            return _group(self.value)
        if fmt is IbanFormat.OBFUSCATED:
            masked = self.value[:2] + "X" * (len(self.value) - 6) + self.value[-4:]
            return _group(masked)
        return self.value

    def __str__(self) -> str:
        return self.value
