"""Scoring and decision module."""

from .confidence import NameScore, score_name_candidate, combine_field_confidence
from .decision import DecisionEngine, DecisionResult, Decision

__all__ = [
    'NameScore',
    'score_name_candidate',
    'combine_field_confidence',
    'DecisionEngine',
    'DecisionResult',
    'Decision'
]
