"""
Fixtures for API tests: the real app wired to an in-memory store.
"""
import pytest
from fastapi.testclient import TestClient

from bloglist.di.container import DIContainer, set_container


@pytest.fixture
def client(seeded_store):
    """Create test client whose container is backed by the seeded in-memory store."""
    from bloglist.main import app

    set_container(DIContainer(store=seeded_store))
    try:
        with TestClient(app) as c:
            yield c
    finally:
        set_container(None)
