"""Confidence scoring for name candidates and assembled results."""

import re
from typing import Dict, List, Tuple
from dataclasses import dataclass, field

from ..ocr.models import ParseResult

HEADER_KEYWORDS = re.compile(r'DRIVER|LICENCE|LICENSE|VICTORIA', re.IGNORECASE)
DATA_KEYWORDS = re.compile(r'DATE|BIRTH|ADDRESS|EXPIRY|\d{2}[-/]\d{2}[-/]\d{4}', re.IGNORECASE)

BASE_SCORE = 100

# rule name -> score adjustment
NAME_RULES: Dict[str, int] = {
    'header_above': 30,
    'early_line': -40,
    'two_words': 20,
    'three_words': 10,
    'data_below': 20,
    'typical_position': 15,
}

# Overall confidence contributed by each field of a text-only result
FIELD_WEIGHTS: Dict[str, int] = {
    'name': 40,
    'date_of_birth': 40,
    'id_number': 20,
}


@dataclass
class NameScore:
    """Itemized contextual score for one all-caps name candidate."""
    value: str
    line_index: int
    base: int = BASE_SCORE
    adjustments: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.base + sum(delta for _, delta in self.adjustments)

    @property
    def confidence(self) -> float:
        """Map the score onto the 0-85 confidence band of contextual matches."""
        return min(85, 50 + self.total / 4)

    def contribution(self, rule: str) -> int:
        """Adjustment applied by a rule, 0 if it did not fire."""
        return sum(delta for name, delta in self.adjustments if name == rule)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'value': self.value,
            'line_index': self.line_index,
            'base': self.base,
            'adjustments': dict(self.adjustments),
            'total': self.total,
        }


def score_name_candidate(lines: List[str], index: int) -> NameScore:
    """Score the line at ``index`` as a name using its neighbours.

    Args:
        lines: All card lines in reading order
        index: Position of the candidate line

    Returns:
        NameScore with one adjustment per rule that fired
    """
    value = lines[index].strip()
    score = NameScore(value=value, line_index=index)
    word_count = len(value.split())

    if any(HEADER_KEYWORDS.search(line) for line in lines[:index]):
        score.adjustments.append(('header_above', NAME_RULES['header_above']))

    if index < 2:
        score.adjustments.append(('early_line', NAME_RULES['early_line']))

    if word_count == 2:
        score.adjustments.append(('two_words', NAME_RULES['two_words']))
    elif word_count == 3:
        score.adjustments.append(('three_words', NAME_RULES['three_words']))

    if any(DATA_KEYWORDS.search(line) for line in lines[index + 1:]):
        score.adjustments.append(('data_below', NAME_RULES['data_below']))

    if 2 <= index <= 5:
        score.adjustments.append(('typical_position', NAME_RULES['typical_position']))

    return score


def combine_field_confidence(name: ParseResult, dob: ParseResult, id_number: ParseResult) -> float:
    """Overall confidence of a text-only result, capped at 100."""
    found = {
        'name': bool(name),
        'date_of_birth': bool(dob),
        'id_number': bool(id_number),
    }
    total = sum(FIELD_WEIGHTS[key] for key, present in found.items() if present)
    return float(min(total, 100))
