"""Read models for posts and comments.

Vote counts and the score are computed from the vote ledgers at read
time. The score stored on the posts table is never read back here.
"""

from datetime import datetime
from typing import Iterable, Sequence
from uuid import UUID

from pydantic import BaseModel

from forum.domain.model import Comment, Post, User, VoteLedger
from forum.domain.service import CommentService, UserService, VoteService
from forum.domain.value import UserIcon, UserId, VotableType


class AuthorInfo(BaseModel):
    """Author of a post or comment."""

    id: str
    username: str | None  # None if the user record is gone
    icon: UserIcon | None = None


class CommentInfo(BaseModel):
    """Comment with derived vote counts."""

    id: str
    post_id: str
    content: str
    author: AuthorInfo
    upvotes: int
    downvotes: int
    score: int
    created_at: datetime
    updated_at: datetime


class PostInfo(BaseModel):
    """Post with its comments (oldest first) and derived vote counts."""

    id: str
    title: str
    content: str | None
    author: AuthorInfo
    comments: list[CommentInfo]
    upvotes: int
    downvotes: int
    score: int
    created_at: datetime
    updated_at: datetime


def author_info(author_id: UserId, users: dict[UserId, User]) -> AuthorInfo:
    user = users.get(author_id)
    if user is None:
        return AuthorInfo(id=str(author_id), username=None)
    return AuthorInfo(id=str(user.id), username=user.username.root, icon=user.icon)


def comment_info(
    comment: Comment, users: dict[UserId, User], ledger: VoteLedger
) -> CommentInfo:
    return CommentInfo(
        id=str(comment.id),
        post_id=str(comment.post_id),
        content=comment.content,
        author=author_info(comment.author_id, users),
        upvotes=ledger.upvote_count,
        downvotes=ledger.downvote_count,
        score=ledger.score,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


class PostViewBuilder:
    """Assembles ``PostInfo`` views with batched lookups.

    One query each for comments, authors and ledgers regardless of how
    many posts are rendered.
    """

    def __init__(
        self,
        user_service: UserService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        self.user_service = user_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def build(self, posts: Sequence[Post]) -> list[PostInfo]:
        if not posts:
            return []

        comments_by_post = await self.comment_service.list_comments_for_posts(
            [post.id for post in posts]
        )
        all_comments = [c for comments in comments_by_post.values() for c in comments]

        users = await self.user_service.get_by_ids(
            list(_author_ids(posts, all_comments))
        )
        post_ledgers = await self.vote_service.get_ledgers(
            VotableType.POST, [post.id for post in posts]
        )
        comment_ledgers = await self.vote_service.get_ledgers(
            VotableType.COMMENT, [c.id for c in all_comments]
        )

        views = []
        for post in posts:
            ledger = post_ledgers.get(post.id) or _empty(VotableType.POST, post.id)
            comments = [
                comment_info(
                    c,
                    users,
                    comment_ledgers.get(c.id) or _empty(VotableType.COMMENT, c.id),
                )
                for c in comments_by_post.get(post.id, [])
            ]
            views.append(
                PostInfo(
                    id=str(post.id),
                    title=post.title,
                    content=post.content,
                    author=author_info(post.author_id, users),
                    comments=comments,
                    upvotes=ledger.upvote_count,
                    downvotes=ledger.downvote_count,
                    score=ledger.score,
                    created_at=post.created_at,
                    updated_at=post.updated_at,
                )
            )
        return views

    async def build_one(self, post: Post) -> PostInfo:
        return (await self.build([post]))[0]

    async def build_comment(self, comment: Comment) -> CommentInfo:
        users = await self.user_service.get_by_ids([comment.author_id])
        ledgers = await self.vote_service.get_ledgers(VotableType.COMMENT, [comment.id])
        ledger = ledgers.get(comment.id) or _empty(VotableType.COMMENT, comment.id)
        return comment_info(comment, users, ledger)


def _author_ids(posts: Iterable[Post], comments: Iterable[Comment]) -> set[UserId]:
    ids = {post.author_id for post in posts}
    ids.update(c.author_id for c in comments)
    return ids


def _empty(votable_type: VotableType, votable_id: UUID) -> VoteLedger:
    return VoteLedger(votable_type=votable_type, votable_id=votable_id)
