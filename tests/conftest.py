"""Pytest configuration shared by unit and integration tests"""

import sys
from pathlib import Path

import pytest

# Add project root to path for ptstemmer imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture(scope="session")
def corpus_path() -> Path:
    """Validation corpus of "word stem" pairs"""
    return FIXTURES_DIR / "ptstems.txt"
