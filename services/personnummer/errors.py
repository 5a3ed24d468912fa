"""
Error types for personnummer validation.

Internally every failure carries a ``Reason`` so the cause can be logged and
tested. At the public boundary all reasons collapse into a single
``InvalidPersonnummerError`` with a fixed message.
"""

from enum import Enum


INVALID_MESSAGE = "Invalid Swedish SSN"


class Reason(Enum):
    """Internal failure causes."""

    NO_MATCH = "no match"
    BAD_ASSEMBLY = "malformed identifier"
    CHECKSUM_MISMATCH = "checksum mismatch"


class PersonnummerError(Exception):
    """Raised by the matcher, assembler and checksum verifier."""

    def __init__(self, reason: Reason):
        super().__init__(reason.value)
        self.reason = reason


class InvalidPersonnummerError(ValueError):
    """Raised by ``validate`` and ``normalize`` for any invalid input."""

    def __init__(self, message: str = INVALID_MESSAGE):
        super().__init__(message)
