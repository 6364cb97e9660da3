"""Tests for text-only card parsing."""

import pytest
from id_extractor.documents import TextLineParser
from id_extractor.scoring import score_name_candidate
from id_extractor.validation import ExclusionDictionary


@pytest.fixture
def parser():
    return TextLineParser()


def test_labeled_name(parser, reference_date):
    """Test a NAME: label with a date of birth."""
    text = "DRIVER LICENCE\nNAME: JANE CITIZEN\nDOB: 15-05-1990"
    result = parser.parse(text, now=reference_date)

    assert result.name == 'JANE CITIZEN'
    assert result.date_of_birth == '1990-05-15'
    assert result.id_number is None
    assert result.confidence == 80
    assert result.is_adult is True
    assert result.mode == 'text'
    assert result.details['name_source'] == 'labeled'


def test_two_line_name(parser, reference_date):
    """Test given name and surname on consecutive lines."""
    text = "VICTORIA\nJANE\nCITIZEN\nDATE OF BIRTH 15/05/1990"
    result = parser.parse(text, now=reference_date)

    assert result.name == 'JANE CITIZEN'
    assert result.date_of_birth == '1990-05-15'
    assert result.details['name_source'] == 'multi_line'


def test_two_line_name_skips_excluded_word(parser):
    """Test a jurisdiction word is never paired with a given name."""
    name = parser.extract_name(['VICTORIA', 'JANE', 'CITIZEN'])
    assert name.value == 'JANE CITIZEN'
    assert name.confidence == 95


def test_contextual_name(parser, reference_date):
    """Test an unlabeled all-caps line below the header."""
    lines = [
        "VICTORIA",
        "DRIVER LICENCE",
        "JANE CITIZEN",
        "123 MAIN STREET",
        "DATE OF BIRTH",
        "15/05/1990",
    ]
    result = parser.parse("\n".join(lines), now=reference_date)

    assert result.name == 'JANE CITIZEN'
    assert result.details['name_source'] == 'contextual'
    assert result.details['name_confidence'] == 85


def test_score_breakdown():
    """Test each scoring rule contributes its own adjustment."""
    lines = ["VICTORIA", "DRIVER LICENCE", "JANE CITIZEN", "DATE OF BIRTH", "15/05/1990"]
    score = score_name_candidate(lines, 2)

    assert score.base == 100
    assert score.contribution('header_above') == 30
    assert score.contribution('two_words') == 20
    assert score.contribution('data_below') == 20
    assert score.contribution('typical_position') == 15
    assert score.contribution('early_line') == 0
    assert score.total == 185
    assert score.confidence == 85


def test_score_early_line_penalty():
    """Test the first lines are treated as likely headers."""
    score = score_name_candidate(["MARY ANNE SMITH", "DOB 15/05/1990"], 0)

    assert score.contribution('early_line') == -40
    assert score.contribution('three_words') == 10
    assert score.contribution('header_above') == 0
    assert score.total == 90
    assert score.confidence == pytest.approx(72.5)


def test_highest_score_wins(parser):
    """Test the best placed candidate is chosen over an earlier one."""
    lines = ["JOHN SMITH", "DRIVER LICENCE", "X", "JANE CITIZEN", "DATE OF BIRTH"]
    scores = parser.score_candidates(lines)

    assert [s.value for s in scores] == ["JOHN SMITH", "JANE CITIZEN"]
    assert parser.extract_name(lines).value == "JANE CITIZEN"


def test_title_case_name(parser, reference_date):
    """Test the Title Case fallback upper-cases the name."""
    result = parser.parse("Jane Citizen\nBorn: 15.05.1990", now=reference_date)

    assert result.name == 'JANE CITIZEN'
    assert result.details['name_source'] == 'title_case'
    assert result.details['name_confidence'] == 70


def test_excluded_line_never_a_name(parser):
    """Test structurally valid label lines are rejected."""
    assert not parser.extract_name(["DRIVER LICENCE"])
    assert not parser.extract_name(["VICTORIA AUSTRALIA", "DRIVER LICENCE"])


def test_injected_exclusions(reference_date):
    """Test a custom dictionary changes which lines are rejected."""
    parser = TextLineParser(exclusions=ExclusionDictionary(['CITIZEN']))
    assert not parser.extract_name(["NAME: JANE CITIZEN"])


def test_requires_name_and_date(parser, reference_date):
    """Test incomplete cards produce no result."""
    assert parser.parse("NAME: JANE CITIZEN", now=reference_date) is None
    assert parser.parse("DOB: 15/05/1990", now=reference_date) is None
    assert parser.parse("", now=reference_date) is None


def test_full_confidence_with_id(parser, reference_date):
    """Test all three fields give the maximum confidence."""
    text = "NAME: JANE CITIZEN\nDOB: 15/05/1990\nLICENCE NO: 012 345 678"
    result = parser.parse(text, now=reference_date)

    assert result.id_number == '012345678'
    assert result.confidence == 100


@pytest.mark.parametrize('line, expected, source', [
    ('LICENCE NO: 012 345 678', '012345678', 'labeled'),
    ('CARD NO AB-1234', 'AB-1234', 'labeled'),
    ('REF AB1234567', 'AB1234567', 'prefixed'),
    ('123456789', '123456789', 'numeric'),
])
def test_id_number_patterns(parser, line, expected, source):
    """Test document number patterns."""
    result = parser.extract_id_number([line])
    assert result.value == expected
    assert result.source == source


def test_id_number_too_short(parser):
    """Test short labeled values are ignored."""
    assert not parser.extract_id_number(['ID NO: 123'])
