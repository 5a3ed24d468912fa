"""
Structural matching of personnummer strings.

Accepted layouts (10 payload digits, optional century, optional separator):

    YYMMDDNNNN   YYMMDD-NNNN   YYMMDD+NNNN
    YYYYMMDDNNNN YYYYMMDD-NNNN YYYYMMDD+NNNN
"""

import re
from dataclasses import dataclass
from typing import Optional

from ..errors import PersonnummerError, Reason

# [0-9] rather than \d so non-ASCII digits never match
PERSONNUMMER_PATTERN = re.compile(
    r"(?P<year>[0-9]{2}|[0-9]{4})"
    r"(?P<month>[0-9]{2})"
    r"(?P<day>[0-9]{2})"
    r"(?P<separator>[-+]?)"
    r"(?P<control>[0-9]{4})"
)


@dataclass(frozen=True)
class ParsedPersonnummer:
    """Capture groups of a matched personnummer."""
    year: str
    month: str
    day: str
    separator: Optional[str]
    control: str


def match(text: str) -> ParsedPersonnummer:
    """
    Match ``text`` as a whole against the accepted layouts.

    Args:
        text: Raw, untrusted input

    Returns:
        ParsedPersonnummer with the five capture groups; ``separator`` is
        None when the input has no separator

    Raises:
        PersonnummerError: With reason NO_MATCH if the input is not a string
            or does not match exactly one accepted layout

    Examples:
        >>> match("811218-9876")
        ParsedPersonnummer(year='81', month='12', day='18', separator='-', control='9876')
        >>> match("198112189876").separator is None
        True
    """
    if not isinstance(text, str):
        raise PersonnummerError(Reason.NO_MATCH)

    # fullmatch, not ^...$: "$" would also accept a trailing newline
    m = PERSONNUMMER_PATTERN.fullmatch(text)
    if m is None:
        raise PersonnummerError(Reason.NO_MATCH)

    return ParsedPersonnummer(
        year=m.group("year"),
        month=m.group("month"),
        day=m.group("day"),
        separator=m.group("separator") or None,
        control=m.group("control"),
    )
