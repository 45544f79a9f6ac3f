"""Candidate MRZ line classification.

OCR output of a document photo mixes the MRZ block with printed labels,
names, addresses and noise. The classifier keeps lines that look like MRZ
lines, in scan order:

1. **Filler lines**: any line containing the filler character ``<``
2. **Dense lines**: lines that, once whitespace is removed, consist only of
   uppercase letters, digits and fillers and are at least
   ``min_line_length`` characters long (an MRZ line whose fillers were
   misread)

Example:
    >>> classifier = LineClassifier(ClassifierConfig())
    >>> lines = classifier.classify("REPUBLIC OF UTOPIA\\nP<UTOERIKSSON<<ANNA")
    >>> [line.upper for line in lines]
    ['P<UTOERIKSSON<<ANNA']
"""

import logging
import re
from typing import List

from .config_loader import ClassifierConfig
from .types import FILLER, CandidateLine

logger = logging.getLogger(__name__)


class LineClassifier:
    """Selects candidate MRZ lines out of arbitrary OCR text.

    Args:
        config: Classifier configuration with the minimum dense line length.
    """

    def __init__(self, config: ClassifierConfig):
        self.config = config
        self.dense_pattern = re.compile(
            rf"^[A-Z0-9<]{{{config.min_line_length},}}$"
        )

    def classify(self, text: str) -> List[CandidateLine]:
        """Return candidate lines of ``text`` in scan order.

        Args:
            text: Raw OCR transcript (may be empty).

        Returns:
            Candidate lines; empty when no line looks like MRZ.
        """
        candidates: List[CandidateLine] = []

        for raw_line in text.split("\n"):
            stripped = raw_line.strip()
            upper = stripped.upper()

            if self.is_candidate(upper):
                candidates.append(CandidateLine(text=stripped, upper=upper))
            elif stripped:
                logger.debug(f"Skipping non-MRZ line: '{stripped}'")

        logger.debug(f"Classified {len(candidates)} candidate MRZ line(s)")
        return candidates

    def is_candidate(self, upper_line: str) -> bool:
        """Check if an uppercased line looks like part of an MRZ block."""
        if FILLER in upper_line:
            return True

        compact = "".join(upper_line.split())
        return bool(self.dense_pattern.match(compact))
