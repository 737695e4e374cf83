from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client that runs the app lifespan around each test."""
    with TestClient(app) as test_client:
        yield test_client
