"""
Pytest configuration and fixtures.
"""

import pytest

from flashcards.models import FlashCard


@pytest.fixture
def sample_cards():
    """Two-card deck used across tests."""
    return [FlashCard("Hello", "Bonjour"), FlashCard("Goodbye", "Au revoir")]


@pytest.fixture
def make_deck():
    """Build a deck of n numbered cards."""
    def _make(n):
        return [FlashCard(f"front {i}", f"back {i}") for i in range(n)]
    return _make


@pytest.fixture
def input_file(tmp_path):
    """Write a small valid card list and return its path."""
    path = tmp_path / "cards.txt"
    path.write_text("Hello|Bonjour\nGoodbye|Au revoir\n", encoding="utf-8")
    return path


@pytest.fixture
def output_pdf_path(tmp_path):
    """Create a temporary PDF output path for testing."""
    return tmp_path / "cards.pdf"
