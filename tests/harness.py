"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is already running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.interface.api.app import create_app
from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_post(unit_env):
            post_service = await unit_env.get(PostService)
            post = await post_service.create_post(author_id, "Hello", None)
            assert post.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding a TestClient over a fresh container.

    The client runs the app lifespan, so the container is closed when
    the test finishes.
    """

    @pytest.fixture
    def _client():
        app = create_app(build_test_container(unmock=unmock or set()))
        with TestClient(app) as client:
            yield client

    return _client


def create_container_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures yielding the app-scoped container itself.

    Each ``async with container() as scope`` block opens its own request
    scope, and with real persistence its own session and transaction, so
    a test can run several transactions side by side.

    With real persistence the test is skipped when PostgreSQL can't be
    reached.
    """

    @pytest_asyncio.fixture
    async def _container():
        container = build_test_container(unmock=unmock or set())

        if "persistence" in (unmock or set()):
            engine = await container.get(AsyncEngine)
            try:
                async with engine.connect():
                    pass
            except (OSError, SQLAlchemyError) as e:
                await container.close()
                pytest.skip(f"PostgreSQL is not reachable: {e}")

        yield container

        await container.close()

    return _container
