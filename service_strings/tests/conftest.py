"""
Shared fixtures for Strings service tests.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_strings.app.adapters.identity_client import IdentityClient
from service_strings.app.caching.response_cache import LastResponseCache
from service_strings.app.main import StringsService
from shared.test_helpers import FakeRedis, create_test_users


@pytest.fixture
def fake_redis():
    """In-memory Redis double."""
    return FakeRedis()


@pytest.fixture
def cache(fake_redis):
    """LastResponseCache backed by the in-memory double."""
    return LastResponseCache("redis://localhost:6379/0", client=fake_redis)


@pytest.fixture
def identity_client():
    """Identity client that accepts every user unless told otherwise."""
    client = MagicMock(spec=IdentityClient)
    client.is_valid_user = AsyncMock(return_value=True)
    return client


@pytest.fixture
def service(identity_client, cache):
    """StringsService wired to test doubles."""
    return StringsService(identity_client=identity_client, cache=cache)


@pytest.fixture
def client(service):
    """Create test client."""
    return TestClient(service.app)


@pytest.fixture
def auth():
    """Basic auth credentials."""
    return create_test_users()["john.doe"].auth
