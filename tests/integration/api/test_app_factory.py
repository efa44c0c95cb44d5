"""
Application factory tests

Covers dependency wiring, the codec-backed default response class and
exception handlers.
"""

import pytest
from httpx import AsyncClient, ASGITransport

from user_directory.domain.entities.user import User
from user_directory.infrastructure.dependencies import initialize_dependencies
from user_directory.infrastructure.persistence.repositories.memory_user_repository import (
    InMemoryUserRepository,
)
from user_directory.infrastructure.serialization import CodecJSONResponse, JsonCodec, default_codec
from user_directory.interfaces.rest.main import create_app


def test_create_app_attaches_codec(app):
    response_class = app.router.default_response_class

    assert issubclass(response_class, CodecJSONResponse)
    assert response_class.codec is default_codec
    assert app.state.user_service is not None


def test_codec_response_renders_optional_fields():
    response = CodecJSONResponse(content={"user": None, "manager": User(id=0, name="Steve Rogers")})

    assert response.body == b'{"user":null,"manager":{"id":0,"name":"Steve Rogers"}}'


def test_codec_response_renders_absent_optional():
    response = CodecJSONResponse(content=None)

    assert response.body == b"null"


@pytest.mark.asyncio
async def test_custom_repository(app, client: AsyncClient):
    initialize_dependencies(app, user_repo=InMemoryUserRepository([User(id=9, name="Peter Parker")]))

    assert (await client.get("/users")).json() == ["Peter Parker"]
    assert (await client.get("/users/0")).text == "Not Found"


@pytest.mark.asyncio
async def test_unhandled_exception_returns_500(settings):
    app = create_app(settings)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Internal Server Error",
        "message": "An unexpected error occurred",
        "detail": None,
    }


@pytest.mark.asyncio
async def test_lifespan_cleans_up(app):
    async with app.router.lifespan_context(app):
        assert app.state.user_service is not None

    assert app.state.user_service is None


@pytest.mark.asyncio
async def test_configured_codec_renders_responses(settings):
    """Test that JSON responses go through the codec given to create_app."""
    app = create_app(settings, codec=JsonCodec(indent=2))

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/users/1")

    assert response.status_code == 200
    assert response.content == b'{\n  "id": 1,\n  "name": "Tony Stark"\n}'


def test_with_codec_does_not_touch_base_class():
    codec = JsonCodec(indent=2)

    bound = CodecJSONResponse.with_codec(codec)

    assert bound.codec is codec
    assert CodecJSONResponse.codec is default_codec
    assert bound(content={"a": 1}).body == b'{\n  "a": 1\n}'
