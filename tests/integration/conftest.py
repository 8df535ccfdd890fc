"""Integration test configuration - API client for the FastAPI app"""

import os
import tempfile
from pathlib import Path

import pytest

# Set env vars BEFORE importing ptstemmer.main
# main.py configures logging at module level (on import)
os.environ.setdefault("LOG_FILE", str(Path(tempfile.mkdtemp(prefix="ptstemmer-logs-")) / "ptstemmer.log"))
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(scope="session")
def client():
    """
    TestClient running the app lifespan once for the whole session.
    """
    from fastapi.testclient import TestClient
    from ptstemmer.main import app

    with TestClient(app) as test_client:
        yield test_client
