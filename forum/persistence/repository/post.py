"""PostgreSQL implementation of Post repository."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, UserId
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_all(self) -> List[Post]:
        """Find every post, newest first."""
        stmt = select(posts_table).order_by(
            posts_table.c.created_at.desc(), posts_table.c.seq.desc()
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(posts_table.c.created_at.desc(), posts_table.c.seq.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def save(self, post: Post) -> Post:
        """Insert a new post. ``seq`` is assigned by the database."""
        stmt = insert(posts_table).values(**post_to_dict(post))
        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def update_content(
        self, post_id: PostId, title: str, content: Optional[str]
    ) -> Optional[Post]:
        """Update title and content of one post row."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(title=title, content=content, updated_at=datetime.now(timezone.utc))
            .returning(*posts_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_post(dict(row)) if row else None

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post. Comments go with it via ON DELETE CASCADE."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
