import pytest
from fastapi.testclient import TestClient

from recipebook.main import app


@pytest.fixture
def client():
    """Test client for the units API."""
    with TestClient(app) as c:
        yield c
