"""PostgreSQL implementation of Comment repository."""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, PostId
from forum.persistence.mappers import comment_to_dict, row_to_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in insertion order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.seq)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> Dict[PostId, List[Comment]]:
        """Find comments for several posts in one query."""
        by_post: Dict[PostId, List[Comment]] = {post_id: [] for post_id in post_ids}
        if not post_ids:
            return by_post

        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id.in_(list(post_ids)))
            .order_by(comments_table.c.seq)
        )
        result = await self.session.execute(stmt)
        for row in result.mappings().all():
            comment = row_to_comment(dict(row))
            by_post.setdefault(comment.post_id, []).append(comment)
        return by_post

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment. ``seq`` is assigned by the database."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, post_id: PostId, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Update one comment row, matched by both post and comment ID."""
        stmt = (
            update(comments_table)
            .where(
                and_(
                    comments_table.c.id == comment_id,
                    comments_table.c.post_id == post_id,
                )
            )
            .values(content=content, updated_at=datetime.now(timezone.utc))
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_comment(dict(row)) if row else None

    async def delete(self, post_id: PostId, comment_id: CommentId) -> bool:
        """Delete one comment row, matched by both post and comment ID."""
        stmt = delete(comments_table).where(
            and_(
                comments_table.c.id == comment_id,
                comments_table.c.post_id == post_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
