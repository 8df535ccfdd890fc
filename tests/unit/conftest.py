"""Unit test configuration"""

import pytest

from ptstemmer.stemming.porter import PortugueseStemmer


@pytest.fixture(scope="session")
def stemmer():
    """One stemmer for the whole session (read-only after construction)"""
    return PortugueseStemmer()
