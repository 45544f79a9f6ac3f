"""Projection of parsed MRZ fields into a stable record.

Turns a ``ParseResult`` into an ``MRZRecord`` with a document type label,
ISO dates and filler-free values, or into a ``validation_failed``
diagnostic listing what did not validate.
"""

import logging
import re
from typing import Union

from .config_loader import DateConfig
from .types import FILLER, DiagnosticCode, MRZDiagnostic, MRZRecord, ParseResult

logger = logging.getLogger(__name__)

DOCUMENT_TYPE_LABELS = {
    "P": "Passport",
    "I": "ID Card",
    "A": "ID Card (Type A)",
    "C": "ID Card (Type C)",
    "V": "Visa",
    "D": "Driver's License",
}

_SIX_DIGITS = re.compile(r"^[0-9]{6}$")


def get_document_type(code: str) -> str:
    """Map a document code to a human-readable label.

    Example:
        >>> get_document_type("P<")
        'Passport'
        >>> get_document_type("XY")
        'Document (XY)'
        >>> get_document_type("")
        'Unknown'
    """
    if not code:
        return "Unknown"
    return DOCUMENT_TYPE_LABELS.get(code[0].upper(), f"Document ({code})")


def format_mrz_date(value: str, century_pivot: int = 30) -> str:
    """Convert a YYMMDD date to ISO yyyy-mm-dd.

    Two-digit years below ``century_pivot`` are placed in the 2000s, the
    rest in the 1900s. Month and day are copied as-is.

    Args:
        value: Date field from the MRZ
        century_pivot: First two-digit year placed in the 1900s

    Returns:
        ISO date string, or "" when value is not exactly 6 digits

    Example:
        >>> format_mrz_date("290101")
        '2029-01-01'
        >>> format_mrz_date("300101")
        '1930-01-01'
        >>> format_mrz_date("74O812")
        ''
    """
    if not value or not _SIX_DIGITS.match(value):
        return ""

    year, month, day = value[0:2], value[2:4], value[4:6]
    century = "20" if int(year) < century_pivot else "19"
    return f"{century}{year}-{month}-{day}"


def strip_filler(value: str) -> str:
    return value.replace(FILLER, "")


class ResultProjector:
    """Builds records or diagnostics from parse results.

    Args:
        config: Date configuration with the century pivot.
    """

    def __init__(self, config: DateConfig):
        self.config = config

    def project(self, parse_result: ParseResult) -> Union[MRZRecord, MRZDiagnostic]:
        """Project a parse result.

        Args:
            parse_result: Parsed and validated MRZ fields.

        Returns:
            MRZRecord if the parse result is valid, otherwise a
            ``validation_failed`` MRZDiagnostic.
        """
        if not parse_result.valid:
            details = [
                f"{check.field_name}: expected {check.expected}, got '{check.check_char}'"
                for check in parse_result.failed_checks()
            ]
            details.extend(parse_result.structural_errors)
            logger.debug(f"Validation failed for {parse_result.format.name}: {details}")
            return MRZDiagnostic.from_code(DiagnosticCode.VALIDATION_FAILED, details)

        fields = parse_result.fields

        return MRZRecord(
            document_type=get_document_type(fields.document_code),
            document_code=strip_filler(fields.document_code),
            document_number=strip_filler(fields.document_number),
            first_name=fields.given_names,
            last_name=fields.surname,
            nationality=strip_filler(fields.nationality),
            birth_date=format_mrz_date(fields.birth_date, self.config.century_pivot),
            sex=strip_filler(fields.sex),
            expiration_date=format_mrz_date(
                fields.expiration_date, self.config.century_pivot
            ),
            issuing_state=strip_filler(fields.issuing_state),
            valid=parse_result.valid,
            raw_mrz=list(parse_result.lines),
            format=parse_result.format,
        )
