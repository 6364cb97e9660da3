"""Name localization from token positions."""

import re
import logging
from datetime import date
from typing import Dict, List, Optional
import numpy as np

from .base import BaseExtractionStrategy, split_lines
from .text_parser import TextLineParser
from ..ocr.models import RecognizedToken, ScannedData, VisualLine
from ..validation.names import is_valid_name
from ..validation.normalization import calculate_age

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r'\d{1,2}[-/]\d{1,2}[-/]\d{4}')
ALPHA_WORD = re.compile(r'^[A-Z]+$', re.IGNORECASE)


class SpatialTokenParser(BaseExtractionStrategy):
    """Reads the name from the upper-left region of the card.

    Date of birth and document number always come from the text parser since
    their position varies between card layouts.
    """

    def __init__(self, config: Optional[Dict] = None, text_parser: Optional[TextLineParser] = None):
        """Initialize spatial parser.

        Args:
            config: Full extractor configuration
            text_parser: Parser providing the date and document number extractors
        """
        super().__init__(config)
        self.text_parser = text_parser or TextLineParser(self.config)

        spatial_config = self.config.get('spatial') or {}
        region = spatial_config.get('name_region') or {}
        self.region_max_x = region.get('max_x', 0.5)
        self.region_min_y = region.get('min_y', 0.15)
        self.region_max_y = region.get('max_y', 0.45)
        self.line_tolerance = spatial_config.get('line_tolerance', 10)
        self.max_name_words = spatial_config.get('max_name_words', 3)
        self.max_line_gap = spatial_config.get('max_line_gap', 20)
        self.confidence = spatial_config.get('confidence', 90)
        self.adult_age = self.text_parser.adult_age

    def get_mode(self) -> str:
        return 'spatial'

    def parse(self,
              text: str,
              tokens: List[RecognizedToken],
              now: Optional[date] = None) -> Optional[ScannedData]:
        """Extract fields using token positions.

        Returns:
            ScannedData, or None when the name cannot be localized or no date
            of birth is found
        """
        if not tokens:
            return None

        logger.debug(f"Spatial parsing of {len(tokens)} tokens")

        region_tokens = self.select_name_region(tokens)
        if not region_tokens:
            logger.info("No tokens in name region")
            return None

        lines = self.group_lines(region_tokens)
        logger.debug(f"Grouped into lines: {[(l.text, l.y) for l in lines]}")

        name_lines = self.trim_name_block(lines)
        all_lines = split_lines(text)
        name = self.assemble_name(name_lines, all_lines)
        if not name:
            logger.info("Spatial name assembly failed")
            return None

        dob = self.text_parser.extract_date_of_birth(all_lines, now)
        if not dob:
            logger.info("Spatial name found but no date of birth")
            return None
        id_number = self.text_parser.extract_id_number(all_lines)

        return ScannedData(
            name=name,
            date_of_birth=dob.value,
            id_number=id_number.value or None,
            confidence=float(self.confidence),
            is_adult=calculate_age(dob.value, now) >= self.adult_age,
            mode=self.get_mode(),
            details={
                'name_lines': [l.text for l in name_lines],
                'date_source': dob.source,
                'id_source': id_number.source or None,
            },
        )

    def select_name_region(self, tokens: List[RecognizedToken]) -> List[RecognizedToken]:
        """Keep tokens in the upper-left region below the header band.

        The largest token coordinates stand in for the image size.

        Args:
            tokens: All tokens

        Returns:
            Tokens inside the name region, in input order
        """
        coords = np.array([[t.x, t.y] for t in tokens], dtype=float)
        max_x, max_y = coords.max(axis=0)
        if max_x <= 0 or max_y <= 0:
            logger.debug(f"Degenerate token extent {max_x} x {max_y}")
            return []

        norm_x = coords[:, 0] / max_x
        norm_y = coords[:, 1] / max_y
        in_region = (norm_x < self.region_max_x) & (norm_y > self.region_min_y) & (norm_y < self.region_max_y)

        selected = [t for t, keep in zip(tokens, in_region) if keep]
        for t in selected:
            logger.debug(f"Name region token: {t.text} at ({t.x}, {t.y})")
        return selected

    def group_lines(self, tokens: List[RecognizedToken]) -> List[VisualLine]:
        """Group tokens into visual lines by vertical proximity.

        Args:
            tokens: Tokens to group

        Returns:
            VisualLines top to bottom, words left to right
        """
        if not tokens:
            return []

        ordered = sorted(tokens, key=lambda t: (t.y, t.x))
        groups: List[List[RecognizedToken]] = [[ordered[0]]]

        for token in ordered[1:]:
            line_y = groups[-1][0].y
            if abs(token.y - line_y) >= self.line_tolerance:
                groups.append([token])
            else:
                groups[-1].append(token)

        return [
            VisualLine(
                text=' '.join(t.text for t in sorted(group, key=lambda t: t.x)),
                y=group[0].y,
            )
            for group in groups
        ]

    def trim_name_block(self, lines: List[VisualLine]) -> List[VisualLine]:
        """Drop address-like lines and stop at the first large vertical gap."""
        candidates = []
        for line in lines:
            if len(line.words) > self.max_name_words:
                logger.debug(f"Rejected line (too many words): {line.text}")
                continue
            candidates.append(line)

        block = []
        for i, line in enumerate(candidates):
            block.append(line)
            if i + 1 < len(candidates) and candidates[i + 1].y - line.y > self.max_line_gap:
                logger.debug(f"Gap of {candidates[i + 1].y - line.y}px after '{line.text}'")
                break
        return block

    def assemble_name(self, name_lines: List[VisualLine], all_lines: List[str]) -> Optional[str]:
        """Build and validate the name from the retained lines.

        Args:
            name_lines: Lines of the name block
            all_lines: Full-text lines in reading order

        Returns:
            Upper-cased name, or None if rejected
        """
        if not name_lines:
            return None

        first_words = name_lines[0].words
        name_text = ''

        if len(first_words) >= 2:
            name_text = name_lines[0].text
            if self._date_follows(name_text, all_lines):
                logger.debug(f"Rejected '{name_text}': next line holds a date")
                return None
        elif len(first_words) == 1 and len(name_lines) >= 2:
            if 1 <= len(name_lines[1].words) <= 2:
                name_text = f"{name_lines[0].text} {name_lines[1].text}"

        if not name_text:
            return None

        if self.text_parser.exclusions.is_excluded(name_text):
            return None

        words = [w for w in name_text.split() if len(w) >= 2 and ALPHA_WORD.match(w)]
        if len(words) < 2:
            return None

        name = ' '.join(words).upper()
        if not is_valid_name(name):
            return None

        return name

    @staticmethod
    def _date_follows(name_text: str, all_lines: List[str]) -> bool:
        # Label/value pairs such as "LICENCE EXPIRY" followed by a date
        for i, line in enumerate(all_lines):
            if name_text in line:
                return i + 1 < len(all_lines) and bool(DATE_PATTERN.search(all_lines[i + 1]))
        return False
