"""IBAN country registry.

Data-driven rules per country: the expected IBAN length, the BBAN structure
and the lower case policy. Adding a country is a change to
``swift_data._TABLE`` only.

Usage:
    >>> from openiban.registry import default_registry
    >>> default_registry()["NL"].country_name
    'Netherlands'
"""

__all__ = [
    "CharacterClass",
    "CountryInfo",
    "CountryRegistry",
    "PatternToken",
    "StructurePattern",
    "default_registry",
]

from .models import CharacterClass, CountryInfo, PatternToken, StructurePattern
from .registry import CountryRegistry, default_registry
