"""
Luhn (modulo 10) checksum verification.

Swedish personal identity numbers carry a Luhn check digit over the ten
digits YYMMDDNNNN.
"""

from ..errors import PersonnummerError, Reason


ASCII_DIGITS = frozenset("0123456789")


def luhn_checksum(digits: str) -> bool:
    """
    Check a digit string with the Luhn algorithm.

    Algorithm:
    1. Starting from the rightmost (check) digit, double every second digit
    2. If a doubled value is greater than 9, subtract 9
    3. Sum all digits
    4. The sequence is valid if the sum is divisible by 10

    Args:
        digits: String of ASCII digits, check digit last

    Returns:
        True if the checksum is valid, False otherwise (including empty
        strings and strings with any non-digit character)

    Examples:
        >>> luhn_checksum("8112189876")
        True
        >>> luhn_checksum("8112189877")
        False
        >>> luhn_checksum("811218-9876")
        False
    """
    if not isinstance(digits, str) or not digits:
        return False

    if not set(digits) <= ASCII_DIGITS:
        return False

    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = int(ch)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d

    return total % 10 == 0


def verify_checksum(digits: str) -> None:
    """
    Raise ``PersonnummerError(CHECKSUM_MISMATCH)`` unless ``digits`` pass Luhn.
    """
    if not luhn_checksum(digits):
        raise PersonnummerError(Reason.CHECKSUM_MISMATCH)
