# backend/tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from pathbot.main import app


@pytest.fixture(scope="session")
def test_client():
    """
    A TestClient wrapped around the real app for the whole test session.
    Entering the context runs the lifespan, the same as a real server start.
    """
    with TestClient(app) as client:
        yield client
