"""Normalization of candidate lines to fixed MRZ widths.

Each candidate line is turned into an MRZ line of an exact width:

1. Uppercase and strip all whitespace
2. Correct common OCR confusions (``O`` read instead of ``0`` by default)
3. Truncate to the target width, or right-pad with the filler ``<``

The correction is applied across the whole line, name fields included.
MRZ numeric fields are far more sensitive to a misread ``0`` than names are
to a lost letter ``O``.

Example:
    >>> normalizer = LineNormalizer(CorrectionConfig())
    >>> normalizer.normalize("L898902C3 6UTO", width=20).text
    'L898902C36UT0<<<<<<<'
"""

from typing import List, Sequence, Tuple, Union

from .config_loader import CorrectionConfig
from .types import FILLER, CandidateLine, NormalizedLine


def clean_line(text: str) -> str:
    """Uppercase text and remove all whitespace.

    Example:
        >>> clean_line("p<uto eriksson ")
        'P<UTOERIKSSON'
    """
    return "".join(text.split()).upper()


class LineNormalizer:
    """Fits candidate lines to an MRZ width with OCR corrections.

    Args:
        config: Correction configuration with the substitution rules.
    """

    def __init__(self, config: CorrectionConfig):
        self.config = config
        self.rules = config.rules

    def normalize(
        self, line: Union[CandidateLine, str], width: int
    ) -> NormalizedLine:
        """Normalize one line to exactly ``width`` characters.

        Args:
            line: Candidate line or raw text.
            width: Target MRZ width (30, 36 or 44).

        Returns:
            NormalizedLine whose text is exactly ``width`` characters long.

        Raises:
            ValueError: If width is not positive.
        """
        if width <= 0:
            raise ValueError(f"Width must be positive, got {width}")

        original = line.text if isinstance(line, CandidateLine) else line
        cleaned = clean_line(original)

        chars = list(cleaned)
        corrections: List[Tuple[int, str, str]] = []
        if self.config.enabled:
            for i, char in enumerate(chars):
                if char in self.rules:
                    new_char = self.rules[char]
                    corrections.append((i, char, new_char))
                    chars[i] = new_char
        corrected = "".join(chars)

        truncated = len(corrected) > width
        padded = len(corrected) < width
        text = corrected[:width].ljust(width, FILLER)

        return NormalizedLine(
            text=text,
            width=width,
            original=original,
            corrections=tuple(corrections),
            truncated=truncated,
            padded=padded,
        )

    def normalize_many(
        self, lines: Sequence[Union[CandidateLine, str]], width: int
    ) -> List[NormalizedLine]:
        return [self.normalize(line, width) for line in lines]
