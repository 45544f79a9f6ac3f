"""MRZ Extraction & Validation.

This module finds the Machine Readable Zone in OCR text of passports, ID
cards and visas, parses it per ICAO 9303 (TD1/TD2/TD3) and validates every
check digit.

Core Components:
    - types: Data structures (MRZRecord, MRZDiagnostic, MRZResult, etc.)
    - config_loader: Configuration loading with Pydantic validation
    - validator: ICAO 9303 check digit and field format validation
    - classifier: Candidate MRZ line selection
    - normalizer: OCR correction and fixed-width fitting
    - parser: Fixed-width field parsing
    - selector: Format selection with TD1 -> TD2 fallback
    - projector: Record and diagnostic projection
    - processor: Main pipeline

Example:
    >>> from src.mrz import MRZProcessor
    >>> processor = MRZProcessor()
    >>> result = processor.process(ocr_text)
    >>> if result.is_pass():
    ...     print(f"Passport: {result.record.document_number}")
"""

from .classifier import LineClassifier
from .config_loader import (
    ClassifierConfig,
    Config,
    CorrectionConfig,
    DateConfig,
    MRZModuleConfig,
    SelectorConfig,
    ValidationConfig,
    get_default_config,
    load_config,
)
from .normalizer import LineNormalizer, clean_line
from .parser import MRZParser, detect_format, split_name
from .processor import MRZProcessor, parse_mrz_from_text
from .projector import ResultProjector, format_mrz_date, get_document_type
from .selector import FormatSelector
from .types import (
    FILLER,
    CandidateLine,
    DecisionStatus,
    DiagnosticCode,
    FieldCheck,
    MRZDiagnostic,
    MRZFormat,
    MRZRecord,
    MRZResult,
    NormalizedLine,
    ParsedFields,
    ParseResult,
    SelectionResult,
)
from .validator import (
    calculate_check_digit,
    char_value,
    validate_check_digit,
    validate_date,
)

__all__ = [
    # Types
    "FILLER",
    "DecisionStatus",
    "DiagnosticCode",
    "MRZFormat",
    "CandidateLine",
    "NormalizedLine",
    "FieldCheck",
    "ParsedFields",
    "ParseResult",
    "SelectionResult",
    "MRZRecord",
    "MRZDiagnostic",
    "MRZResult",
    # Configuration
    "Config",
    "MRZModuleConfig",
    "ClassifierConfig",
    "CorrectionConfig",
    "SelectorConfig",
    "ValidationConfig",
    "DateConfig",
    "load_config",
    "get_default_config",
    # Validation
    "char_value",
    "calculate_check_digit",
    "validate_check_digit",
    "validate_date",
    # Pipeline
    "LineClassifier",
    "LineNormalizer",
    "clean_line",
    "MRZParser",
    "detect_format",
    "split_name",
    "FormatSelector",
    "ResultProjector",
    "format_mrz_date",
    "get_document_type",
    "MRZProcessor",
    "parse_mrz_from_text",
]
