"""Text-only card parsing from line order.

Used when no token positions are available, and as the fallback when the
spatial parser cannot localize a name.
"""

import re
import logging
from datetime import date
from typing import Dict, List, Optional, Tuple

from .base import BaseExtractionStrategy, split_lines
from ..ocr.models import ParseResult, RecognizedToken, ScannedData
from ..scoring.confidence import NameScore, score_name_candidate, combine_field_confidence
from ..validation.exclusions import ExclusionDictionary
from ..validation.names import is_valid_name
from ..validation.normalization import DateNormalizer, calculate_age

logger = logging.getLogger(__name__)

LABELED_NAME = re.compile(r'(?:NAME|SURNAME|GIVEN\s*NAMES?)[:\s]+([A-Z][A-Z\s]+)', re.IGNORECASE)
SINGLE_CAPS_WORD = re.compile(r'^[A-Z]{2,}$')
CAPS_LINE = re.compile(r'^[A-Z\s]+$')
TITLE_CASE_WORD = re.compile(r'^[A-Z][a-z]+$')

ID_PATTERNS: List[Tuple[str, re.Pattern]] = [
    ('labeled', re.compile(r'(?:ID\s*NO|LICEN[CS]E\s*NO|CARD\s*NO|NUMBER)[:\s]+([A-Z0-9\s\-]+)', re.IGNORECASE)),
    ('prefixed', re.compile(r'([A-Z]{2}\d{6,10})')),
    ('numeric', re.compile(r'(\d{8,10})')),
]


class TextLineParser(BaseExtractionStrategy):
    """Extracts name, date of birth and document number from card lines."""

    def __init__(self,
                 config: Optional[Dict] = None,
                 exclusions: Optional[ExclusionDictionary] = None,
                 date_normalizer: Optional[DateNormalizer] = None):
        """Initialize text parser.

        Args:
            config: Full extractor configuration
            exclusions: Phrases that are never names
            date_normalizer: Date parser/validator
        """
        super().__init__(config)
        if exclusions is None:
            exclusions = ExclusionDictionary.from_config(self.config.get('exclusions'))
        self.exclusions = exclusions
        self.date_normalizer = date_normalizer or DateNormalizer(self.config.get('dates'))
        self.adult_age = (self.config.get('dates') or {}).get('adult_age', 18)

    def get_mode(self) -> str:
        return 'text'

    def parse(self,
              text: str,
              tokens: Optional[List[RecognizedToken]] = None,
              now: Optional[date] = None) -> Optional[ScannedData]:
        """Parse card text; tokens are ignored.

        Returns:
            ScannedData when both a name and a date of birth were found, else None
        """
        lines = split_lines(text)
        if not lines:
            return None

        name = self.extract_name(lines)
        dob = self.extract_date_of_birth(lines, now)
        id_number = self.extract_id_number(lines)

        confidence = combine_field_confidence(name, dob, id_number)

        if not name or not dob:
            logger.info(f"Text parsing incomplete (name: {bool(name)}, date of birth: {bool(dob)})")
            return None

        return ScannedData(
            name=name.value,
            date_of_birth=dob.value,
            id_number=id_number.value or None,
            confidence=confidence,
            is_adult=calculate_age(dob.value, now) >= self.adult_age,
            mode=self.get_mode(),
            details={
                'name_source': name.source,
                'name_confidence': name.confidence,
                'date_source': dob.source,
                'id_source': id_number.source or None,
            },
        )

    def extract_date_of_birth(self, lines: List[str], now: Optional[date] = None) -> ParseResult:
        return self.date_normalizer.extract_date_of_birth(lines, now)

    def extract_id_number(self, lines: List[str]) -> ParseResult:
        """Extract the document number.

        Args:
            lines: Card lines

        Returns:
            ParseResult with whitespace removed, or an empty result
        """
        for line in lines:
            for source, pattern in ID_PATTERNS:
                match = pattern.search(line)
                if not match:
                    continue
                id_num = re.sub(r'\s+', '', match.group(1).strip())
                if 6 <= len(id_num) <= 15:
                    logger.debug(f"Document number ({source}): {id_num}")
                    return ParseResult(value=id_num, confidence=70, source=source)

        return ParseResult.empty()

    def extract_name(self, lines: List[str]) -> ParseResult:
        """Extract the card holder's name.

        Tries, in order: a labeled name, a name split over two lines, the best
        scoring all-caps line, then a Title Case line.

        Args:
            lines: Card lines in reading order

        Returns:
            ParseResult, empty if no candidate survived validation
        """
        logger.debug(f"Extracting name from {len(lines)} lines")

        for strategy in (self._labeled_name, self._multi_line_name,
                         self._contextual_name, self._title_case_name):
            result = strategy(lines)
            if result:
                logger.debug(f"Name found by {result.source}: {result.value}")
                return result

        logger.debug("No valid name found")
        return ParseResult.empty()

    def _acceptable(self, name: str) -> bool:
        return is_valid_name(name) and not self.exclusions.is_excluded(name)

    def _labeled_name(self, lines: List[str]) -> ParseResult:
        for line in lines:
            match = LABELED_NAME.search(line)
            if match:
                name = match.group(1).strip()
                if self._acceptable(name):
                    return ParseResult(value=name, confidence=90, source='labeled')
        return ParseResult.empty()

    def _multi_line_name(self, lines: List[str]) -> ParseResult:
        # e.g. "JANE" on one line and "CITIZEN" on the next
        for first, second in zip(lines, lines[1:]):
            if not (SINGLE_CAPS_WORD.match(first) and SINGLE_CAPS_WORD.match(second)):
                continue
            combined = f"{first} {second}"
            if (is_valid_name(combined)
                    and not self.exclusions.is_excluded(first)
                    and not self.exclusions.is_excluded(second)
                    and not self.exclusions.is_excluded(combined)):
                return ParseResult(value=combined, confidence=95, source='multi_line')
        return ParseResult.empty()

    def score_candidates(self, lines: List[str]) -> List[NameScore]:
        """Score every all-caps line that could be a name.

        Args:
            lines: Card lines in reading order

        Returns:
            NameScore per surviving candidate, in line order
        """
        candidates = []
        for i, line in enumerate(lines):
            if not CAPS_LINE.match(line) or not 4 <= len(line) <= 50:
                continue
            if len(line.split()) < 2 or not self._acceptable(line):
                continue
            score = score_name_candidate(lines, i)
            logger.debug(f"Candidate at line {i}: {score.to_dict()}")
            candidates.append(score)
        return candidates

    def _contextual_name(self, lines: List[str]) -> ParseResult:
        candidates = self.score_candidates(lines)
        if not candidates:
            return ParseResult.empty()

        # max() keeps the earliest line on ties
        best = max(candidates, key=lambda c: c.total)
        return ParseResult(value=best.value, confidence=best.confidence, source='contextual')

    def _title_case_name(self, lines: List[str]) -> ParseResult:
        for line in lines:
            words = [w for w in line.split() if TITLE_CASE_WORD.match(w)]
            if len(words) < 2:
                continue
            name = ' '.join(words)
            if self._acceptable(name):
                return ParseResult(value=name.upper(), confidence=70, source='title_case')
        return ParseResult.empty()
