"""ICAO 9303 check digit and field format validation.

This module implements the check digit algorithm shared by all MRZ formats
together with the field-level format checks used by the parser.

References:
    - ICAO Doc 9303 Part 3 - Specifications Common to all MRTDs
"""

import re
from typing import Optional, Tuple

from .types import FILLER

MRZ_CHARSET_PATTERN = re.compile(r"^[A-Z0-9<]*$")
DATE_PATTERN = re.compile(r"^[0-9]{6}$")

WEIGHTS = (7, 3, 1)
VALID_SEX_MARKERS = ("M", "F", "X", FILLER)


def char_value(char: str) -> int:
    """Map one MRZ character to its check digit value.

    Digits map to themselves, letters A-Z to 10-35 and the filler to 0.

    Args:
        char: Single MRZ character

    Returns:
        Numeric value used in the weighted sum

    Raises:
        ValueError: If the character is not part of the MRZ character set

    Example:
        >>> char_value("7")
        7
        >>> char_value("L")
        21
        >>> char_value("<")
        0
    """
    if len(char) == 1 and "0" <= char <= "9":
        return ord(char) - ord("0")
    if len(char) == 1 and "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if char == FILLER:
        return 0
    raise ValueError(f"Invalid character in MRZ field: {char!r}")


def calculate_check_digit(value: str) -> int:
    """Calculate the ICAO 9303 check digit of a field.

    Each character value is multiplied by the repeating weights 7, 3, 1 and
    the check digit is the sum modulo 10.

    Args:
        value: Field characters (digits, uppercase letters, filler)

    Returns:
        Check digit (0-9)

    Raises:
        ValueError: If value contains characters outside the MRZ set

    Example:
        >>> calculate_check_digit("L898902C3")
        6
        >>> calculate_check_digit("740812")
        2
    """
    total = sum(
        char_value(char) * WEIGHTS[pos % 3] for pos, char in enumerate(value)
    )
    return total % 10


def validate_check_digit(
    value: str,
    check_char: str,
    allow_filler: bool = False,
) -> Tuple[bool, Optional[int]]:
    """Validate an embedded check character against its field.

    Args:
        value: Characters covered by the check digit
        check_char: Check character found in the MRZ
        allow_filler: Accept a filler check character when the whole field
            is filler (optional data fields may leave both empty)

    Returns:
        Tuple of (is_valid, expected_check_digit). expected_check_digit is
        None when the field contains characters outside the MRZ set.

    Example:
        >>> validate_check_digit("740812", "2")
        (True, 2)
        >>> validate_check_digit("740812", "3")
        (False, 2)
    """
    if not is_mrz_charset(value):
        return False, None

    expected = calculate_check_digit(value)

    if allow_filler and check_char == FILLER and set(value) <= {FILLER}:
        return True, expected

    return check_char == str(expected), expected


def is_mrz_charset(text: str) -> bool:
    """Check that text only holds uppercase letters, digits and fillers."""
    return bool(MRZ_CHARSET_PATTERN.match(text))


def validate_date(value: str) -> bool:
    """Validate a YYMMDD date field.

    Only the shape is checked (6 digits, month 01-12, day 01-31); the
    century is unknown at this point.

    Example:
        >>> validate_date("740812")
        True
        >>> validate_date("741312")
        False
        >>> validate_date("74O812")
        False
    """
    if not DATE_PATTERN.match(value):
        return False

    month = int(value[2:4])
    day = int(value[4:6])
    return 1 <= month <= 12 and 1 <= day <= 31


def validate_sex(value: str) -> bool:
    return value in VALID_SEX_MARKERS


def validate_document_code(code: str) -> bool:
    """Document codes start with a letter (P, I, A, C, V, ...)."""
    return bool(code) and "A" <= code[0] <= "Z"
