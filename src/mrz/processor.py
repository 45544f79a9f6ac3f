"""Main MRZ processor turning OCR text into a validated record.

This module orchestrates the complete extraction and validation workflow:
    1. CLASSIFY: Pick candidate MRZ lines out of the OCR text
    2. SELECT: Choose TD1/TD2/TD3, normalize and parse (TD1 -> TD2 fallback)
    3. VALIDATE: Check digits, plus field formats when strict (inside the parser)
    4. PROJECT: Build the record, or the diagnostic explaining the rejection

Every failure, including unexpected exceptions, is returned as an
``MRZDiagnostic``; ``process`` never raises.

Example:
    >>> from src.mrz import MRZProcessor
    >>> processor = MRZProcessor()
    >>> result = processor.process(ocr_text)
    >>> if result.is_pass():
    ...     print(f"Document number: {result.record.document_number}")
"""

import logging
import time
from pathlib import Path
from typing import Optional

from .classifier import LineClassifier
from .config_loader import Config, get_default_config, load_config
from .normalizer import LineNormalizer
from .parser import MRZParser
from .projector import ResultProjector
from .selector import FormatSelector
from .types import (
    DecisionStatus,
    DiagnosticCode,
    MRZDiagnostic,
    MRZFormat,
    MRZRecord,
    MRZResult,
)

logger = logging.getLogger(__name__)


class MRZProcessor:
    """Stateless MRZ extraction pipeline.

    The processor only holds configuration and the components built from
    it, so one instance can be shared and called repeatedly.

    Args:
        config_path: Optional path to config YAML file. If None, uses default config.
        config: Already loaded configuration. Takes precedence over config_path.

    Attributes:
        config: Full configuration object
        classifier: Candidate line classifier
        normalizer: Line normalizer with OCR corrections
        parser: Field parser and check digit validator
        selector: Format selector with fallback
        projector: Record/diagnostic projector
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        config: Optional[Config] = None,
    ):
        if config is not None:
            self.config: Config = config
        elif config_path is None:
            self.config = get_default_config()
        else:
            self.config = load_config(config_path)

        mrz_config = self.config.mrz
        self.classifier = LineClassifier(config=mrz_config.classifier)
        self.normalizer = LineNormalizer(config=mrz_config.correction)
        self.parser = MRZParser(config=mrz_config.validation)
        self.selector = FormatSelector(
            normalizer=self.normalizer,
            parser=self.parser,
            config=mrz_config.selector,
        )
        self.projector = ResultProjector(config=mrz_config.dates)

    def process(self, text: str) -> MRZResult:
        """Extract and validate the MRZ contained in OCR text.

        Args:
            text: OCR transcript of a document image.

        Returns:
            MRZResult with either a record (PASS) or a diagnostic (REJECT).
        """
        start_time = time.perf_counter()
        candidate_count = 0
        mrz_format: Optional[MRZFormat] = None

        try:
            candidates = self.classifier.classify(text)
            candidate_count = len(candidates)

            if not candidates:
                return self._reject(
                    MRZDiagnostic.from_code(DiagnosticCode.NO_CANDIDATES),
                    start_time,
                    candidate_count,
                )

            selection = self.selector.select(candidates)
            if selection.diagnostic is not None:
                return self._reject(selection.diagnostic, start_time, candidate_count)

            parse_result = selection.parse_result
            mrz_format = parse_result.format
            projected = self.projector.project(parse_result)

            if isinstance(projected, MRZDiagnostic):
                return self._reject(projected, start_time, candidate_count, mrz_format)

            return self._accept(projected, start_time, candidate_count)

        except Exception as e:
            logger.exception(f"Unexpected error while parsing MRZ: {e}")
            return self._reject(
                MRZDiagnostic.from_code(
                    DiagnosticCode.PARSE_EXCEPTION,
                    details=[f"{type(e).__name__}: {e}"],
                ),
                start_time,
                candidate_count,
                mrz_format,
            )

    def _accept(
        self, record: MRZRecord, start_time: float, candidate_count: int
    ) -> MRZResult:
        processing_time_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"MRZ accepted: format={record.format.name}, "
            f"type={record.document_type}, time={processing_time_ms:.1f}ms"
        )
        return MRZResult(
            decision=DecisionStatus.PASS,
            record=record,
            diagnostic=None,
            format=record.format,
            candidate_count=candidate_count,
            processing_time_ms=processing_time_ms,
        )

    def _reject(
        self,
        diagnostic: MRZDiagnostic,
        start_time: float,
        candidate_count: int,
        mrz_format: Optional[MRZFormat] = None,
    ) -> MRZResult:
        processing_time_ms = (time.perf_counter() - start_time) * 1000
        logger.warning(
            f"MRZ rejected: {diagnostic.code} ({diagnostic.reason.value}), "
            f"candidates={candidate_count}, details={diagnostic.details}"
        )
        return MRZResult(
            decision=DecisionStatus.REJECT,
            record=None,
            diagnostic=diagnostic,
            format=mrz_format,
            candidate_count=candidate_count,
            processing_time_ms=processing_time_ms,
        )


def parse_mrz_from_text(text: str, config: Optional[Config] = None) -> MRZResult:
    """Run the MRZ pipeline once on OCR text.

    Args:
        text: OCR transcript of a document image.
        config: Optional configuration. Bundled defaults if None.

    Returns:
        MRZResult with either a record or a diagnostic.
    """
    return MRZProcessor(config=config).process(text)
