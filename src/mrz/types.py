"""Type definitions for MRZ module.

This module defines the core data structures used throughout the MRZ
pipeline, from candidate lines picked out of OCR text to the projected
record or the diagnostic explaining why no record could be produced.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

FILLER = "<"


class DecisionStatus(Enum):
    """Decision status for MRZ result."""

    PASS = "pass"
    REJECT = "reject"


class MRZFormat(Enum):
    """MRZ document layout per ICAO 9303."""

    TD1 = "td1"  # 3 lines x 30 characters (ID cards)
    TD2 = "td2"  # 2 lines x 36 characters (ID cards, visas)
    TD3 = "td3"  # 2 lines x 44 characters (passports)

    @property
    def line_count(self) -> int:
        return _FORMAT_DIMENSIONS[self][0]

    @property
    def line_width(self) -> int:
        return _FORMAT_DIMENSIONS[self][1]


_FORMAT_DIMENSIONS: Dict[MRZFormat, Tuple[int, int]] = {
    MRZFormat.TD1: (3, 30),
    MRZFormat.TD2: (2, 36),
    MRZFormat.TD3: (2, 44),
}


class DiagnosticCode(Enum):
    """Reason why no MRZ record could be produced."""

    NO_CANDIDATES = "no_candidates"
    INCOMPLETE = "incomplete"
    VALIDATION_FAILED = "validation_failed"
    PARSE_EXCEPTION = "parse_exception"


@dataclass(frozen=True)
class CandidateLine:
    """Line of OCR text judged likely to belong to an MRZ block.

    Attributes:
        text: Original line with surrounding whitespace stripped
        upper: Uppercased form of the line
    """

    text: str
    upper: str

    @property
    def cleaned(self) -> str:
        """Uppercased line with all whitespace removed."""
        return "".join(self.upper.split())


@dataclass(frozen=True)
class NormalizedLine:
    """Candidate line cleaned and fitted to an exact MRZ width.

    Attributes:
        text: Normalized line, exactly ``width`` characters long
        width: Target width (30, 36 or 44)
        original: Input text before normalization
        corrections: (position, old_char, new_char) for each OCR correction
        truncated: Whether characters were cut to reach the width
        padded: Whether filler characters were appended to reach the width
    """

    text: str
    width: int
    original: str
    corrections: Tuple[Tuple[int, str, str], ...] = ()
    truncated: bool = False
    padded: bool = False

    def __post_init__(self):
        if len(self.text) != self.width:
            raise ValueError(
                f"Normalized line must be {self.width} characters, got {len(self.text)}"
            )


@dataclass
class FieldCheck:
    """Outcome of recomputing one embedded check digit.

    Attributes:
        field_name: Name of the checked field (e.g. "document_number")
        value: Characters the check digit was computed over
        check_char: Check character found in the MRZ
        expected: Recomputed check digit, None if the value had invalid characters
        valid: Whether the embedded check character matches
    """

    field_name: str
    value: str
    check_char: str
    expected: Optional[int]
    valid: bool


@dataclass
class ParsedFields:
    """Raw MRZ field values extracted by fixed-width slicing.

    Values keep their filler characters except for the name fields, which
    are already split into surname and given names. Fields a format does
    not carry are empty strings.
    """

    document_code: str = ""
    issuing_state: str = ""
    document_number: str = ""
    surname: str = ""
    given_names: str = ""
    nationality: str = ""
    birth_date: str = ""
    sex: str = ""
    expiration_date: str = ""
    optional_data: str = ""
    optional_data_2: str = ""
    document_number_check: str = ""
    birth_date_check: str = ""
    expiration_date_check: str = ""
    optional_data_check: str = ""
    composite_check: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class ParseResult:
    """Parsed fields plus every check performed on them.

    Attributes:
        format: MRZ format the lines were parsed as
        fields: Sliced field values
        checks: Recomputed check digits (per field and composite)
        structural_errors: Field format violations (dates, sex, document code)
        lines: Normalized lines the fields were sliced from
    """

    format: MRZFormat
    fields: ParsedFields
    checks: List[FieldCheck]
    structural_errors: List[str] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """True if all check digits match and no structural error was found."""
        return all(check.valid for check in self.checks) and not self.structural_errors

    def failed_checks(self) -> List[FieldCheck]:
        return [check for check in self.checks if not check.valid]


@dataclass
class MRZRecord:
    """Stable, human-usable record projected from a valid MRZ.

    Attributes:
        document_type: Label derived from the document code (e.g. "Passport")
        document_code: Raw document code with fillers removed
        document_number: Document number with fillers removed
        first_name: Given names
        last_name: Surname
        nationality: Nationality code
        birth_date: Birth date as yyyy-mm-dd, empty if not a 6-digit date
        sex: Sex marker (M, F, X) or empty when unspecified
        expiration_date: Expiration date as yyyy-mm-dd, empty if not a 6-digit date
        issuing_state: Issuing state code
        valid: Overall validity flag
        raw_mrz: Normalized MRZ lines the record was parsed from
        format: MRZ format the record was parsed as
    """

    document_type: str
    document_code: str
    document_number: str
    first_name: str
    last_name: str
    nationality: str
    birth_date: str
    sex: str
    expiration_date: str
    issuing_state: str
    valid: bool
    raw_mrz: List[str]
    format: MRZFormat

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["format"] = self.format.value
        return data


# reason -> (code, stage, message)
DIAGNOSTIC_CATALOG: Dict[DiagnosticCode, Tuple[str, str, str]] = {
    DiagnosticCode.NO_CANDIDATES: (
        "MRZ-E001",
        "CLASSIFY",
        "No MRZ detected. Position the MRZ zone (bottom of ID/passport) in view.",
    ),
    DiagnosticCode.INCOMPLETE: (
        "MRZ-E002",
        "SELECT",
        "Incomplete MRZ detected. Need at least 2 lines.",
    ),
    DiagnosticCode.VALIDATION_FAILED: (
        "MRZ-E003",
        "VALIDATE",
        "MRZ detected but validation failed. Try adjusting the camera angle.",
    ),
    DiagnosticCode.PARSE_EXCEPTION: (
        "MRZ-E004",
        "PARSE",
        "Could not parse MRZ. Ensure the document is clearly visible.",
    ),
}


@dataclass
class MRZDiagnostic:
    """Structured explanation of why no valid MRZ record was produced.

    Attributes:
        reason: Diagnostic reason for programmatic checking
        code: Error code (e.g., "MRZ-E003")
        message: Human-readable explanation, suitable for display
        stage: Pipeline stage where the scan was rejected
        details: Extra context (failed checks, exception text)
    """

    reason: DiagnosticCode
    code: str
    message: str
    stage: str
    details: List[str] = field(default_factory=list)

    @classmethod
    def from_code(
        cls, reason: DiagnosticCode, details: Optional[List[str]] = None
    ) -> "MRZDiagnostic":
        """Build a diagnostic from the catalog entry for ``reason``."""
        code, stage, message = DIAGNOSTIC_CATALOG[reason]
        return cls(
            reason=reason,
            code=code,
            message=message,
            stage=stage,
            details=list(details or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["reason"] = self.reason.value
        return data


@dataclass
class SelectionResult:
    """Tagged outcome of format selection.

    Exactly one of ``parse_result`` and ``diagnostic`` is set.

    Attributes:
        parse_result: Result of the last parse attempt
        diagnostic: Diagnostic when no parse was attempted
        attempts: Formats tried, in order
    """

    parse_result: Optional[ParseResult] = None
    diagnostic: Optional[MRZDiagnostic] = None
    attempts: List[MRZFormat] = field(default_factory=list)

    def __post_init__(self):
        if (self.parse_result is None) == (self.diagnostic is None):
            raise ValueError("SelectionResult needs exactly one of parse_result or diagnostic")


@dataclass
class MRZResult:
    """Final pipeline result with decision and metadata.

    Attributes:
        decision: Final decision (PASS or REJECT)
        record: Projected record if PASS, None if REJECT
        diagnostic: Diagnostic if REJECT, None if PASS
        format: MRZ format of the last parse attempt, if any
        candidate_count: Number of candidate lines found in the text
        processing_time_ms: Total processing time in milliseconds
    """

    decision: DecisionStatus
    record: Optional[MRZRecord]
    diagnostic: Optional[MRZDiagnostic]
    format: Optional[MRZFormat] = None
    candidate_count: int = 0
    processing_time_ms: float = 0.0

    def __post_init__(self):
        if (self.record is None) == (self.diagnostic is None):
            raise ValueError("MRZResult needs exactly one of record or diagnostic")

    def is_pass(self) -> bool:
        """Check if decision is PASS.

        Returns:
            True if decision is PASS, False otherwise.
        """
        return self.decision == DecisionStatus.PASS

    def is_reject(self) -> bool:
        """Check if decision is REJECT.

        Returns:
            True if decision is REJECT, False otherwise.
        """
        return self.decision == DecisionStatus.REJECT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "decision": self.decision.value,
            "record": self.record.to_dict() if self.record else None,
            "diagnostic": self.diagnostic.to_dict() if self.diagnostic else None,
            "format": self.format.value if self.format else None,
            "candidate_count": self.candidate_count,
            "processing_time_ms": self.processing_time_ms,
        }
