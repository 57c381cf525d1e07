"""Pytest configuration.

Provides:
1. Custom markers (unit, integration, api)
2. Automatic asyncio marking of coroutine tests
3. A fresh fakeredis-backed cache, session manager and fakes per test
"""

import asyncio
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from fakeredis import aioredis as fake_aioredis

from horizons.application.services import VerificationSessionManager
from horizons.infrastructure.cache import RedisAdapter
from horizons.infrastructure.security import TokenCodec
from tests.utils.fakes import FakeAuthProvider, FakeProfileRepository, RecordingEmailService


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests against fakeredis / mocked HTTP"
    )
    config.addinivalue_line("markers", "api: HTTP tests through FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)


@pytest_asyncio.fixture
async def fake_redis():
    """In-memory Redis (bytes responses, like the production pool)."""
    client = fake_aioredis.FakeRedis(decode_responses=False)
    yield client
    await client.flushall()
    await client.aclose()


@pytest.fixture
def cache(fake_redis):
    return RedisAdapter(redis_client=fake_redis)


@pytest.fixture
def codec():
    return TokenCodec()


@pytest.fixture
def logger():
    """LoggerProtocol double; bind() returns itself."""
    mock_logger = MagicMock()
    mock_logger.bind.return_value = mock_logger
    return mock_logger


@pytest.fixture
def sessions(cache, codec, logger):
    return VerificationSessionManager(cache=cache, codec=codec, logger=logger)


@pytest.fixture
def auth_provider():
    return FakeAuthProvider()


@pytest.fixture
def profiles():
    return FakeProfileRepository()


@pytest.fixture
def email_service():
    return RecordingEmailService()
