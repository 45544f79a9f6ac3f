"""MRZ format selection with TD1 -> TD2 fallback.

The document format cannot be known up front from noisy OCR text. Line
count and the raw length of the first line are the only early signals:

1. **3+ candidate lines**: try TD1 (3 x 30). If the result is not valid,
   retry the first 2 lines as TD2 (2 x 36); a spurious third line is a
   common classification error.
2. **2 candidate lines**: TD3 (2 x 44) if the first line is at least 44
   characters long once cleaned, TD2 otherwise.
3. **0-1 candidate lines**: incomplete, no parse is attempted.

The fallback is driven by the parse result's validity flag. The selector
always returns a ``SelectionResult`` holding either the last parse result
or a diagnostic.
"""

import logging
from typing import List, Sequence

from .config_loader import SelectorConfig
from .normalizer import LineNormalizer
from .parser import MRZParser
from .types import (
    CandidateLine,
    DiagnosticCode,
    MRZDiagnostic,
    MRZFormat,
    ParseResult,
    SelectionResult,
)

logger = logging.getLogger(__name__)


class FormatSelector:
    """Chooses the MRZ format for candidate lines and parses them.

    Args:
        normalizer: Normalizer fitting lines to the format width.
        parser: Parser validating the normalized lines.
        config: Selector configuration.
    """

    def __init__(
        self,
        normalizer: LineNormalizer,
        parser: MRZParser,
        config: SelectorConfig,
    ):
        self.normalizer = normalizer
        self.parser = parser
        self.config = config

    def select(self, candidates: Sequence[CandidateLine]) -> SelectionResult:
        """Pick a format for the candidate lines and parse them.

        Args:
            candidates: Candidate lines in scan order.

        Returns:
            SelectionResult with the parse result of the chosen format, or
            an ``incomplete`` diagnostic for fewer than 2 lines.
        """
        attempts: List[MRZFormat] = []

        if len(candidates) >= 3:
            result = self._attempt(candidates, MRZFormat.TD1, attempts)
            if result.valid or not self.config.enable_td2_fallback:
                return SelectionResult(parse_result=result, attempts=attempts)

            logger.info("TD1 attempt invalid, retrying first 2 lines as TD2")
            result = self._attempt(candidates, MRZFormat.TD2, attempts)
            return SelectionResult(parse_result=result, attempts=attempts)

        if len(candidates) == 2:
            first_length = len(candidates[0].cleaned)
            if first_length >= self.config.td3_min_length:
                mrz_format = MRZFormat.TD3
            else:
                mrz_format = MRZFormat.TD2
            logger.debug(
                f"Two candidate lines, first line length {first_length} -> {mrz_format.name}"
            )
            result = self._attempt(candidates, mrz_format, attempts)
            return SelectionResult(parse_result=result, attempts=attempts)

        logger.debug(f"Only {len(candidates)} candidate line(s), need at least 2")
        return SelectionResult(
            diagnostic=MRZDiagnostic.from_code(
                DiagnosticCode.INCOMPLETE,
                details=[f"found {len(candidates)} candidate line(s)"],
            ),
            attempts=attempts,
        )

    def _attempt(
        self,
        candidates: Sequence[CandidateLine],
        mrz_format: MRZFormat,
        attempts: List[MRZFormat],
    ) -> ParseResult:
        attempts.append(mrz_format)
        normalized = self.normalizer.normalize_many(
            candidates[: mrz_format.line_count], mrz_format.line_width
        )
        return self.parser.parse([line.text for line in normalized], mrz_format)
