"""
Shared test fixtures — test client for the estimator API.
"""

import pytest
from fastapi.testclient import TestClient

from estimator.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
