"""Fixed-width MRZ field parsing and check digit validation.

This module slices normalized MRZ lines into fields for the three ICAO 9303
layouts and recomputes every embedded check digit:

1. **TD1** (3 x 30): document number check, birth date check, expiration
   date check, composite check over lines 1-2
2. **TD2** (2 x 36): document number, birth date, expiration date and
   composite checks on line 2
3. **TD3** (2 x 44): as TD2 plus the personal number check

A result is valid when every check digit matches and, with the opt-in
``strict_fields`` enabled, the document code, dates and sex marker are well
formed.

Example:
    >>> parser = MRZParser(ValidationConfig())
    >>> result = parser.parse([
    ...     "P<UT0ERIKSS0N<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<",
    ...     "L898902C36UT07408122F1204159ZE184226B<<<<<10",
    ... ])
    >>> result.format, result.valid
    (<MRZFormat.TD3: 'td3'>, True)
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .config_loader import ValidationConfig
from .types import FILLER, FieldCheck, MRZFormat, ParsedFields, ParseResult
from .validator import (
    is_mrz_charset,
    validate_check_digit,
    validate_date,
    validate_document_code,
    validate_sex,
)

logger = logging.getLogger(__name__)


def detect_format(lines: Sequence[str]) -> MRZFormat:
    """Find the MRZ format matching the line count and widths.

    Raises:
        ValueError: If no format has this line count and width
    """
    widths = {len(line) for line in lines}
    for mrz_format in MRZFormat:
        if len(lines) == mrz_format.line_count and widths == {mrz_format.line_width}:
            return mrz_format

    raise ValueError(
        f"No MRZ format with {len(lines)} line(s) of width {sorted(widths)}"
    )


def split_name(name_field: str) -> Tuple[str, str]:
    """Split an MRZ name field into (surname, given names).

    Example:
        >>> split_name("ERIKSSON<<ANNA<MARIA<<<<<<<")
        ('ERIKSSON', 'ANNA MARIA')
    """
    parts = name_field.split(FILLER * 2, 1)
    surname = parts[0].replace(FILLER, " ").strip()
    given_names = parts[1].replace(FILLER, " ").strip() if len(parts) > 1 else ""
    return surname, given_names


def resolve_long_document_number(
    number: str, check_char: str, optional: str
) -> Tuple[str, str, str]:
    """Resolve a document number longer than its 9-character field.

    When the check character is a filler and the optional data starts with
    data, the number continues in the optional data up to the first filler,
    and the last character of that extension is the real check digit.

    Returns:
        Tuple of (document_number, check_char, remaining_optional_data)

    Example:
        >>> resolve_long_document_number("D23145890", "<", "AB12<<<<<<<<<<<")
        ('D23145890AB1', '2', '<<<<<<<<<<<')
    """
    if check_char != FILLER or not optional or optional[0] == FILLER:
        return number, check_char, optional

    extension = optional.split(FILLER, 1)[0]
    remaining = optional[len(extension) :]
    return number + extension[:-1], extension[-1], remaining


class MRZParser:
    """Parses and validates normalized MRZ lines.

    Args:
        config: Validation configuration.
    """

    def __init__(self, config: ValidationConfig):
        self.config = config

    def parse(
        self, lines: Sequence[str], mrz_format: Optional[MRZFormat] = None
    ) -> ParseResult:
        """Parse lines of one MRZ block and validate all check digits.

        Args:
            lines: Normalized lines, all of the width of ``mrz_format``.
            mrz_format: Format to parse as. Detected from the lines if None.

        Returns:
            ParseResult with fields, checks and the aggregate validity.

        Raises:
            ValueError: If the line count or widths do not match the format.
        """
        lines = list(lines)
        if mrz_format is None:
            mrz_format = detect_format(lines)
        elif detect_format(lines) != mrz_format:
            raise ValueError(
                f"Lines do not match {mrz_format.name} "
                f"({mrz_format.line_count} x {mrz_format.line_width})"
            )

        if mrz_format == MRZFormat.TD1:
            fields, checks = self._parse_td1(lines)
        else:
            fields, checks = self._parse_two_line(lines, mrz_format)

        structural_errors = self._structural_errors(lines, fields)
        result = ParseResult(
            format=mrz_format,
            fields=fields,
            checks=checks,
            structural_errors=structural_errors,
            lines=lines,
        )

        if result.valid:
            logger.debug(f"{mrz_format.name} parse valid")
        else:
            failed = [check.field_name for check in result.failed_checks()]
            logger.debug(
                f"{mrz_format.name} parse invalid: failed_checks={failed}, "
                f"structural_errors={structural_errors}"
            )
        return result

    def _parse_td1(self, lines: List[str]) -> Tuple[ParsedFields, List[FieldCheck]]:
        line1, line2, line3 = lines

        number, number_check, optional = resolve_long_document_number(
            line1[5:14], line1[14], line1[15:30]
        )
        surname, given_names = split_name(line3)

        fields = ParsedFields(
            document_code=line1[0:2],
            issuing_state=line1[2:5],
            document_number=number,
            document_number_check=number_check,
            optional_data=optional,
            birth_date=line2[0:6],
            birth_date_check=line2[6],
            sex=line2[7],
            expiration_date=line2[8:14],
            expiration_date_check=line2[14],
            nationality=line2[15:18],
            optional_data_2=line2[18:29],
            composite_check=line2[29],
            surname=surname,
            given_names=given_names,
        )

        composite = line1[5:30] + line2[0:7] + line2[8:15] + line2[18:29]
        checks = [
            self._check("document_number", number, number_check),
            self._check("birth_date", fields.birth_date, fields.birth_date_check),
            self._check(
                "expiration_date", fields.expiration_date, fields.expiration_date_check
            ),
            self._check("composite", composite, fields.composite_check),
        ]
        return fields, checks

    def _parse_two_line(
        self, lines: List[str], mrz_format: MRZFormat
    ) -> Tuple[ParsedFields, List[FieldCheck]]:
        line1, line2 = lines
        width = mrz_format.line_width

        surname, given_names = split_name(line1[5:width])

        # TD3 carries a checked personal number in [28:42]; TD2 has
        # unchecked optional data in [28:35]
        optional_end = width - 2 if mrz_format == MRZFormat.TD3 else width - 1
        optional = line2[28:optional_end]
        number, number_check = line2[0:9], line2[9]
        if mrz_format == MRZFormat.TD2:
            number, number_check, optional = resolve_long_document_number(
                number, number_check, optional
            )

        fields = ParsedFields(
            document_code=line1[0:2],
            issuing_state=line1[2:5],
            surname=surname,
            given_names=given_names,
            document_number=number,
            document_number_check=number_check,
            nationality=line2[10:13],
            birth_date=line2[13:19],
            birth_date_check=line2[19],
            sex=line2[20],
            expiration_date=line2[21:27],
            expiration_date_check=line2[27],
            optional_data=optional,
            composite_check=line2[width - 1],
        )

        checks = [
            self._check("document_number", number, number_check),
            self._check("birth_date", fields.birth_date, fields.birth_date_check),
            self._check(
                "expiration_date", fields.expiration_date, fields.expiration_date_check
            ),
        ]
        if mrz_format == MRZFormat.TD3:
            fields.optional_data_check = line2[42]
            checks.append(
                self._check(
                    "optional_data",
                    optional,
                    fields.optional_data_check,
                    allow_filler=True,
                )
            )

        composite = line2[0:10] + line2[13:20] + line2[21 : width - 1]
        checks.append(self._check("composite", composite, fields.composite_check))
        return fields, checks

    def _check(
        self, field_name: str, value: str, check_char: str, allow_filler: bool = False
    ) -> FieldCheck:
        is_valid, expected = validate_check_digit(value, check_char, allow_filler)
        return FieldCheck(
            field_name=field_name,
            value=value,
            check_char=check_char,
            expected=expected,
            valid=is_valid,
        )

    def _structural_errors(self, lines: List[str], fields: ParsedFields) -> List[str]:
        if not self.config.strict_fields:
            return []

        errors = []
        for i, line in enumerate(lines, start=1):
            if not is_mrz_charset(line):
                errors.append(f"line {i} contains characters outside [A-Z0-9<]")
        if not validate_document_code(fields.document_code):
            errors.append(f"invalid document code '{fields.document_code}'")
        if not validate_date(fields.birth_date):
            errors.append(f"invalid birth date '{fields.birth_date}'")
        if not validate_date(fields.expiration_date):
            errors.append(f"invalid expiration date '{fields.expiration_date}'")
        if not validate_sex(fields.sex):
            errors.append(f"invalid sex '{fields.sex}'")
        return errors
