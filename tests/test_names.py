"""Tests for name validation and the exclusion dictionary."""

import pytest
from id_extractor.validation import is_valid_name, ExclusionDictionary, DEFAULT_EXCLUSIONS


@pytest.mark.parametrize('name', ['JANE CITIZEN', 'Jane Citizen', 'MARY ANNE SMITH', '  JO LEE  '])
def test_valid_names(name):
    """Test structurally plausible names."""
    assert is_valid_name(name) is True


@pytest.mark.parametrize('name', [
    'JANE',            # single word
    'J CITIZEN',       # one-letter word
    'BCD FGH',         # no vowels
    'JANE2 CITIZEN',   # digits
    'JANE-CITIZEN',    # punctuation
    '',
    'ABE ' * 13,       # longer than 50 characters
])
def test_invalid_names(name):
    """Test rejected candidates."""
    assert is_valid_name(name) is False


def test_default_exclusions():
    """Test exact and substring matches are case-insensitive."""
    exclusions = ExclusionDictionary()

    assert exclusions.is_excluded('DRIVER LICENCE') is True
    assert exclusions.is_excluded('  driver licence ') is True
    assert exclusions.is_excluded('VICTORIA DRIVER LICENCE') is True
    assert exclusions.is_excluded('JANE CITIZEN') is False
    assert 'DATE OF BIRTH' in exclusions
    assert len(exclusions) == len(set(DEFAULT_EXCLUSIONS))


def test_substring_semantics():
    """Test short phrases also exclude names that contain them."""
    exclusions = ExclusionDictionary()
    assert exclusions.match('CARLA SMITH') == 'CAR'


def test_custom_phrases():
    """Test an injected dictionary replaces the defaults."""
    exclusions = ExclusionDictionary(['Learner Permit'])

    assert exclusions.is_excluded('LEARNER PERMIT') is True
    assert exclusions.is_excluded('DRIVER LICENCE') is False


def test_empty_dictionary_excludes_nothing():
    """Test an empty dictionary."""
    exclusions = ExclusionDictionary([])
    assert exclusions.is_excluded('DRIVER LICENCE') is False
    assert exclusions.is_excluded('') is False


def test_from_config():
    """Test the config section can extend or replace the list."""
    extended = ExclusionDictionary.from_config({'extra': ['PROBATIONARY']})
    assert extended.is_excluded('PROBATIONARY') is True
    assert extended.is_excluded('DRIVER LICENCE') is True

    replaced = ExclusionDictionary.from_config({'phrases': ['PROBATIONARY']})
    assert replaced.is_excluded('DRIVER LICENCE') is False

    assert len(ExclusionDictionary.from_config(None)) == len(ExclusionDictionary())

    emptied = ExclusionDictionary.from_config({'phrases': []})
    assert len(emptied) == 0
    assert emptied.is_excluded('DRIVER LICENCE') is False
