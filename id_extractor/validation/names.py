"""Structural checks for personal-name candidates."""

import re
import logging

logger = logging.getLogger(__name__)

_LETTERS_AND_SPACES = re.compile(r'^[A-Za-z\s]+$')
_VOWEL = re.compile(r'[AEIOU]', re.IGNORECASE)


def is_valid_name(name: str) -> bool:
    """Check if a string looks like a personal name.

    Args:
        name: Candidate string

    Returns:
        True if it has 2-50 characters, only letters and spaces, at least two
        words of two or more letters, and at least one vowel
    """
    trimmed = (name or '').strip()

    if len(trimmed) < 2 or len(trimmed) > 50:
        return False

    if not _LETTERS_AND_SPACES.match(trimmed):
        return False

    words = trimmed.split()
    if len(words) < 2:
        return False

    if any(len(w) < 2 for w in words):
        return False

    # Acronyms and condition codes rarely carry vowels
    if not _VOWEL.search(trimmed):
        logger.debug(f"Rejected (no vowels): {trimmed}")
        return False

    return True
