"""
Personnummer validation and normalization.

Combines the pattern matcher, century resolution and the Luhn verifier:

1. Match the input against the accepted layouts
2. Resolve a 2-digit year to a full year (reference date + separator)
3. Assemble the 12-digit candidate YYYYMMDDNNNN
4. Verify the Luhn checksum of its 10 rightmost digits

Every failure surfaces as InvalidPersonnummerError("Invalid Swedish SSN").
"""

import logging
from datetime import date
from typing import Optional

import structlog

from .errors import InvalidPersonnummerError, PersonnummerError, Reason
from .helpers.luhn import ASCII_DIGITS, verify_checksum
from .helpers.pattern import ParsedPersonnummer, match

# stdlib-backed: DEBUG is dropped unless the host configures logging
logger = structlog.wrap_logger(logging.getLogger(__name__))

# Century used when no reference date is given (validation only)
PLACEHOLDER_CENTURY = "19"


def resolve_full_year(
    year: str,
    separator: Optional[str],
    reference_date: Optional[date] = None,
) -> str:
    """
    Resolve the year group of a personnummer to four characters.

    A 4-digit year is returned unchanged. For a 2-digit year the century is
    taken from ``reference_date.year - (offset + year)``, where offset is 100
    for the "+" separator (100 years or older) and 0 otherwise. The century is
    the leading two characters of that difference.

    Without a reference date the century is fixed to "19". The resulting
    year is then not meaningful; it only gives the candidate the right shape
    for the checksum step.

    Args:
        year: Matched year group (2 or 4 digits)
        separator: "-", "+" or None (treated as "-")
        reference_date: Date the separator convention is relative to

    Returns:
        Full year string, e.g. "1981"

    Examples:
        >>> resolve_full_year("81", "-", date(2018, 1, 4))
        '1981'
        >>> resolve_full_year("81", "+", date(2018, 1, 4))
        '1881'
        >>> resolve_full_year("05", None, date(2018, 1, 4))
        '2005'
        >>> resolve_full_year("1981", "+", date(2018, 1, 4))
        '1981'
    """
    if len(year) == 4:
        return year

    if reference_date is None:
        return PLACEHOLDER_CENTURY + year

    sep = separator or "-"
    offset = 100 if sep == "+" else 0
    subtrahend = offset + int(year)
    century_base = reference_date.year - subtrahend

    # Literal arithmetic: a base outside 1000..9999 gives odd (even
    # non-digit) century characters, which assemble() rejects.
    return str(century_base)[:2] + year


def assemble(
    groups: ParsedPersonnummer,
    reference_date: Optional[date] = None,
) -> str:
    """
    Build the 12-digit candidate YYYYMMDDNNNN from matched groups.

    Raises:
        PersonnummerError: With reason BAD_ASSEMBLY if the candidate is not
            exactly 12 ASCII digits
    """
    full_year = resolve_full_year(groups.year, groups.separator, reference_date)
    candidate = f"{full_year}{groups.month}{groups.day}{groups.control}"

    if len(candidate) != 12 or not set(candidate) <= ASCII_DIGITS:
        raise PersonnummerError(Reason.BAD_ASSEMBLY)

    return candidate


def _check(pnr: str, reference_date: Optional[date] = None) -> str:
    """Run the full pipeline and return the canonical candidate."""
    groups = match(pnr)
    candidate = assemble(groups, reference_date)
    # Century digits are not covered by the check digit
    verify_checksum(candidate[-10:])
    return candidate


def validate(pnr: str) -> str:
    """
    Validate a personnummer and echo it back.

    Only structure and checksum are confirmed; the century is not resolved
    against any date.

    Args:
        pnr: Personnummer in one of the accepted layouts

    Returns:
        The input string, unchanged

    Raises:
        InvalidPersonnummerError: For any invalid input

    Examples:
        >>> validate("811218-9876")
        '811218-9876'
    """
    try:
        _check(pnr)
    except PersonnummerError as e:
        logger.debug("Personnummer rejected", operation="validate", reason=e.reason.name)
        raise InvalidPersonnummerError() from None

    return pnr


def normalize(reference_date: date, pnr: str) -> str:
    """
    Normalize a personnummer to its canonical 12-digit form.

    Args:
        reference_date: Date used to resolve the century of a 2-digit year
        pnr: Personnummer in one of the accepted layouts

    Returns:
        Canonical identifier YYYYMMDDNNNN

    Raises:
        InvalidPersonnummerError: For any invalid input
        TypeError: If reference_date is not a date

    Examples:
        >>> normalize(date(2018, 1, 4), "811218-9876")
        '198112189876'
        >>> normalize(date(2018, 1, 4), "811218+9876")
        '188112189876'
    """
    if not isinstance(reference_date, date):
        raise TypeError(
            f"reference_date must be a date, got {type(reference_date).__name__}"
        )

    try:
        return _check(pnr, reference_date)
    except PersonnummerError as e:
        logger.debug("Personnummer rejected", operation="normalize", reason=e.reason.name)
        raise InvalidPersonnummerError() from None


def is_valid(pnr: str) -> bool:
    """Return True if ``validate(pnr)`` succeeds."""
    try:
        validate(pnr)
    except InvalidPersonnummerError:
        return False
    return True
