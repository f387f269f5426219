"""ISO 7064 MOD 97-10 checksum for IBANs.

The IBAN is rearranged (first four characters moved to the end), letters are
expanded to two-digit numbers (A=10 .. Z=35) and the resulting digit string is
reduced modulo 97 in fixed-size chunks, so no big integer is ever built.
A valid IBAN leaves a remainder of exactly 1.
"""

import string

# A running remainder is at most 2 digits; 2 + 7 digits stays well inside 32 bits.
CHUNK_SIZE = 7

_LETTERS = {ord(d): str(i) for i, d in enumerate(string.digits + string.ascii_uppercase)}


def _to_digits(value: str) -> str:
    digits = value.upper().translate(_LETTERS)
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"Value contains non-alphanumeric characters: {value!r}")
    return digits


def mod97(value: str) -> int:
    """Return ``value`` (alphanumeric) modulo 97, letters expanded.

    Example:
        >>> mod97("ABNA0417164300NL91")
        1
    """
    digits = _to_digits(value)
    remainder = 0
    for pos in range(0, len(digits), CHUNK_SIZE):
        remainder = int(f"{remainder}{digits[pos : pos + CHUNK_SIZE]}") % 97
    return remainder


def rearrange(iban: str) -> str:
    """Move country code and check digits to the end."""
    return iban[4:] + iban[:4]


def is_valid_checksum(iban: str) -> bool:
    """Check the MOD-97 remainder of a normalized IBAN.

    Assumes the value only contains ASCII letters and digits; callers
    validate characters first.
    """
    if len(iban) < 5:
        return False
    return mod97(rearrange(iban)) == 1


def calculate_check_digits(country_code: str, bban: str) -> str:
    """Compute the two check digits for ``country_code`` + ``bban``.

    Example:
        >>> calculate_check_digits("NL", "ABNA0417164300")
        '91'
    """
    remainder = mod97(bban + country_code + "00")
    return f"{98 - remainder:0>2}"
