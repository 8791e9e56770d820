"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from forum.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from forum.domain.repository import CommentRepository, VoteRepository
from forum.domain.service import CommentService, PostService, VoteService
from forum.domain.value import PostId, UserId, VotableType, VoteType
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR = UserId(uuid4())
OTHER = UserId(uuid4())


class TestCreatePost:
    """Tests for create_post."""

    @pytest.mark.asyncio
    async def test_create_trims_title(self, unit_env):
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(AUTHOR, "  Hello  ", "World")

        assert post.title == "Hello"
        assert post.content == "World"
        assert post.author_id == AUTHOR

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", [None, "", "   "])
    async def test_blank_title_rejected(self, unit_env, title):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError, match="title is required"):
            await post_service.create_post(AUTHOR, title, None)

    @pytest.mark.asyncio
    async def test_overlong_title_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError):
            await post_service.create_post(AUTHOR, "x" * 301, None)

    @pytest.mark.asyncio
    async def test_content_is_optional(self, unit_env):
        post_service = await unit_env.get(PostService)

        post = await post_service.create_post(AUTHOR, "Title only", None)

        assert post.content is None


class TestListPosts:
    """Tests for listing."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        post_service = await unit_env.get(PostService)
        first = await post_service.create_post(AUTHOR, "First", None)
        second = await post_service.create_post(AUTHOR, "Second", None)

        posts = await post_service.list_posts()

        assert [p.id for p in posts] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_by_author(self, unit_env):
        post_service = await unit_env.get(PostService)
        mine = await post_service.create_post(AUTHOR, "Mine", None)
        await post_service.create_post(OTHER, "Theirs", None)

        posts = await post_service.list_posts_by_author(AUTHOR)

        assert [p.id for p in posts] == [mine.id]


class TestUpdatePost:
    """Tests for update_post."""

    @pytest.mark.asyncio
    async def test_owner_updates_title_only(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(AUTHOR, "Hello", "World")

        updated = await post_service.update_post(post.id, AUTHOR, title="Hi")

        assert updated.title == "Hi"
        assert updated.content == "World"
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_non_owner_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(AUTHOR, "Hello", "World")

        with pytest.raises(NotAuthorizedError):
            await post_service.update_post(post.id, OTHER, title="Hijacked")

        assert (await post_service.get_post(post.id)).title == "Hello"

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.update_post(PostId(uuid4()), AUTHOR, title="x")


class TestDeletePost:
    """Tests for delete_post."""

    @pytest.mark.asyncio
    async def test_delete_removes_comments_and_votes(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_service = await unit_env.get(CommentService)
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)

        post = await post_service.create_post(AUTHOR, "Hello", None)
        comment = await comment_service.create_comment(post.id, OTHER, "Nice")
        await vote_service.toggle_post_vote(post.id, OTHER, VoteType.UP)
        await vote_service.toggle_comment_vote(post.id, comment.id, AUTHOR, VoteType.UP)

        # Act
        await post_service.delete_post(post.id, AUTHOR)

        # Assert
        with pytest.raises(NotFoundError):
            await post_service.get_post(post.id)
        assert await comment_repo.find_by_id(comment.id) is None
        assert (await vote_repo.find_ledger(VotableType.POST, post.id)).score == 0
        assert (
            await vote_repo.find_ledger(VotableType.COMMENT, comment.id)
        ).upvote_count == 0

    @pytest.mark.asyncio
    async def test_non_owner_rejected(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(AUTHOR, "Hello", None)

        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post.id, OTHER)

        assert (await post_service.get_post(post.id)).id == post.id
