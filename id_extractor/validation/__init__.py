"""Validation module."""

from .normalization import DateNormalizer, calculate_age, DOB_PATTERNS
from .names import is_valid_name
from .exclusions import ExclusionDictionary, DEFAULT_EXCLUSIONS

__all__ = [
    'DateNormalizer', 'calculate_age', 'DOB_PATTERNS',
    'is_valid_name',
    'ExclusionDictionary', 'DEFAULT_EXCLUSIONS'
]
