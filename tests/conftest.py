"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from user_directory.infrastructure.config.settings import Settings
from user_directory.interfaces.rest.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the process environment and any .env file."""
    return Settings(_env_file=None, port=0, log_level="DEBUG")


@pytest.fixture
def app(settings):
    """Fresh application per test."""
    return create_app(settings)


@pytest.fixture
async def client(app) -> AsyncClient:
    """Get test HTTP client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
