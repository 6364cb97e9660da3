"""Date normalization, birth-date plausibility and age calculation."""

import re
import logging
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple, Union
from dateutil.relativedelta import relativedelta

from ..ocr.models import ParseResult

logger = logging.getLogger(__name__)

DMY = r'\d{1,2}[/\-.]\d{1,2}[/\-.]\d{4}'
YMD = r'\d{4}[/\-.]\d{1,2}[/\-.]\d{1,2}'

# Evaluated in this order; first plausible match wins
DOB_PATTERNS: List[Tuple[str, re.Pattern]] = [
    ('labeled', re.compile(rf'(?:DOB|DATE\s*OF\s*BIRTH|BORN)[:\s]+({DMY}|{YMD})', re.IGNORECASE)),
    ('bare_dmy', re.compile(rf'({DMY})')),
    ('iso', re.compile(rf'({YMD})')),
]

_DMY_PARTS = re.compile(r'^(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})$')
_YMD_PARTS = re.compile(r'^(\d{4})[/\-.](\d{1,2})[/\-.](\d{1,2})$')

DateLike = Union[str, date]


def to_date(value: DateLike) -> date:
    """Coerce a ``YYYY-MM-DD`` string, datetime or date to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, '%Y-%m-%d').date()


def calculate_age(dob: DateLike, now: Optional[DateLike] = None) -> int:
    """Calculate whole-years age.

    Args:
        dob: Date of birth (``YYYY-MM-DD`` or date)
        now: Reference day, defaults to today

    Returns:
        Age in years
    """
    born = to_date(dob)
    today = to_date(now) if now is not None else date.today()

    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


class DateNormalizer:
    """Parses card dates into ``YYYY-MM-DD`` and gates birth dates."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize date normalizer.

        Args:
            config: Date configuration (``minimum_age``, ``max_age_years``)
        """
        config = config or {}
        self.minimum_age = config.get('minimum_age', 18)
        self.max_age_years = config.get('max_age_years', 120)

    @staticmethod
    def normalize(date_str: str) -> Optional[str]:
        """Normalize a date substring to ``YYYY-MM-DD``.

        ``D/M/YYYY`` is always read day-first. Separators may be ``/``, ``-`` or ``.``.

        Args:
            date_str: Raw date substring

        Returns:
            Canonical date string, or None if it is not a real calendar date
        """
        if not date_str:
            return None

        clean_date = date_str.strip()

        dmy_match = _DMY_PARTS.match(clean_date)
        if dmy_match:
            d, m, y = dmy_match.groups()
        else:
            ymd_match = _YMD_PARTS.match(clean_date)
            if not ymd_match:
                return None
            y, m, d = ymd_match.groups()

        try:
            return date(int(y), int(m), int(d)).isoformat()
        except ValueError:
            logger.debug(f"Rejected impossible date: {date_str}")
            return None

    def is_plausible_birth_date(self, normalized: str, now: Optional[DateLike] = None) -> bool:
        """Check a normalized date can be the birth date of an adult card holder.

        Args:
            normalized: ``YYYY-MM-DD`` date
            now: Reference day, defaults to today

        Returns:
            False for unparsable, future, too old or under-age dates
        """
        try:
            born = to_date(normalized)
        except (TypeError, ValueError):
            return False

        today = to_date(now) if now is not None else date.today()

        if born > today:
            return False
        if born < today - relativedelta(years=self.max_age_years):
            return False
        if born > today - relativedelta(years=self.minimum_age):
            logger.debug(f"Rejected birth date under minimum age {self.minimum_age}: {normalized}")
            return False

        return True

    def extract_date_of_birth(self, lines: List[str], now: Optional[DateLike] = None) -> ParseResult:
        """Find the date of birth among card lines.

        Args:
            lines: Non-empty trimmed text lines
            now: Reference day

        Returns:
            ParseResult with the canonical date, or an empty result
        """
        for source, pattern in DOB_PATTERNS:
            for line in lines:
                for match in pattern.finditer(line):
                    normalized = self.normalize(match.group(1))
                    if normalized and self.is_plausible_birth_date(normalized, now):
                        logger.debug(f"Date of birth ({source}): {normalized}")
                        return ParseResult(value=normalized, confidence=90, source=source)

        return ParseResult.empty()
