"""Fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from assess.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Test container with mocked persistence and email."""
    return build_test_container(fastapi=True)


@pytest.fixture
def client(container):
    """Create test client.

    Entered as a context manager so resolve() can reach the app's event loop.
    """
    with TestClient(create_app(container)) as test_client:
        yield test_client


@pytest.fixture
def resolve(client, container):
    """Resolve an APP-scoped dependency on the client's event loop."""

    def _resolve(dependency_type):
        return client.portal.call(container.get, dependency_type)

    return _resolve
