"""Pytest configuration."""

import pytest
from datetime import date

from id_extractor import IDCardExtractor, RecognizedToken


@pytest.fixture
def reference_date():
    """Fixed 'today' so age-dependent assertions never drift."""
    return date(2024, 5, 15)


@pytest.fixture
def extractor(reference_date):
    """Extractor with default configuration and a fixed reference day."""
    return IDCardExtractor(now=reference_date)


@pytest.fixture
def licence_text():
    """Full text of a Victorian licence as returned by the vision service."""
    return "\n".join([
        "VICTORIA DRIVER LICENCE",
        "JANE CITIZEN",
        "12 MAIN STREET SUNSHINE VIC",
        "DATE OF BIRTH",
        "15/05/1990",
        "LICENCE NO 012345678",
    ])


@pytest.fixture
def licence_tokens():
    """Word tokens for licence_text; extent is 800 x 550 px."""
    words = [
        ("VICTORIA", 50, 20), ("DRIVER", 400, 20), ("LICENCE", 500, 20),
        ("JANE", 50, 150), ("CITIZEN", 130, 152),
        ("12", 50, 200), ("MAIN", 80, 200), ("STREET", 150, 200),
        ("SUNSHINE", 250, 200), ("VIC", 350, 200),
        ("DATE", 600, 300), ("OF", 660, 300), ("BIRTH", 700, 300),
        ("15/05/1990", 600, 330),
        ("LICENCE", 600, 550), ("NO", 700, 550), ("012345678", 800, 550),
    ]
    return [RecognizedToken(text=t, x=x, y=y) for t, x, y in words]
