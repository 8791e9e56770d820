"""Integration tests for PostgresPostRepository ordering."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.service import UserService
from forum.domain.value import PostId
from forum.persistence.tables import users_table
from tests.harness import create_container_fixture

# Integration test fixture
container = create_container_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def author(container):
    async with container() as scope:
        user_service = await scope.get(UserService)
        user = await user_service.sign_up(f"author-{uuid4().hex[:12]}", "password1")

    yield user

    async with container() as scope:
        session = await scope.get(AsyncSession)
        await session.execute(delete(users_table).where(users_table.c.id == user.id))


class TestPostOrderingIntegration:
    """Newest-first listing with equal creation times."""

    @pytest.mark.asyncio
    async def test_equal_timestamps_list_later_insert_first(self, container, author):
        created_at = datetime.now(timezone.utc)
        titles = ["first", "second", "third"]

        async with container() as scope:
            post_repo = await scope.get(PostRepository)
            for title in titles:
                await post_repo.save(
                    Post(
                        id=PostId(uuid4()),
                        title=title,
                        author_id=author.id,
                        created_at=created_at,
                        updated_at=created_at,
                    )
                )

        async with container() as scope:
            post_repo = await scope.get(PostRepository)
            posts = await post_repo.find_by_author(author.id)

        assert [p.title for p in posts] == list(reversed(titles))
