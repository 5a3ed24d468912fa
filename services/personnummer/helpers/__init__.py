"""
Building blocks for personnummer validation.

This module provides the Luhn checksum verifier and the structural pattern
matcher used by the validator.
"""

from .luhn import luhn_checksum, verify_checksum
from .pattern import ParsedPersonnummer, match

__all__ = [
    "luhn_checksum",
    "verify_checksum",
    "ParsedPersonnummer",
    "match",
]
