"""Shared test fixtures for the greet service test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from main import app

# Decoded JSON values that are not objects.
ALL_BUT_OBJECT = [0, 1, -3.5, "", "Agata", True, False, None, [], ["Agata"], [{"name": "Agata"}]]

# Decoded JSON values that are not strings.
ALL_BUT_STRING = [0, 42, 3.14, True, False, None, [], ["Miso"], {}, {"name": "Miso"}]

NAMES = ["Agata", "Angelo", "Miso"]


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client with lifespan events run and dependency overrides reset."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
