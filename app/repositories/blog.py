"""Blog repository for database operations."""

from uuid import UUID

from sqlalchemy import ColumnElement, select

from app.models.blog import BlogDB
from app.models.user import UserDB
from app.monitoring import get_logger
from app.repositories.base import BaseRepository
from app.repositories.query_builder import BlogQuery, is_published

logger = get_logger(__name__)

type BlogWithAuthor = tuple[BlogDB, UserDB]


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Reads that feed API responses return each blog paired with its author
    row, fetched in the same statement.
    """

    model = BlogDB

    async def find_page(self, query: BlogQuery) -> tuple[list[BlogWithAuthor], int]:
        """
        Fetch one page of blogs for a listing query.

        Args:
            query: Filter, order and page to apply

        Returns:
            tuple[list[BlogWithAuthor], int]: The page and the total match count
        """
        criteria = query.criteria()
        total = await self.count(*criteria)
        # Past the last match: nothing to fetch
        if query.offset >= total:
            return [], total

        statement = (
            select(BlogDB, UserDB)
            .join(UserDB, UserDB.id == BlogDB.author_id)
            .where(*criteria)
            .order_by(*query.ordering())
            .offset(query.offset)
            .limit(query.limit)
        )
        result = await self.session.execute(statement)
        rows = [(blog, author) for blog, author in result.all()]
        logger.debug("Fetched blog page", page=query.page, rows=len(rows), total=total)
        return rows, total

    async def get_with_author(
        self,
        blog_id: UUID,
        *criteria: ColumnElement[bool],
    ) -> BlogWithAuthor | None:
        """
        Get a blog and its author by blog ID.

        Args:
            blog_id: Blog UUID
            *criteria: Extra conditions the blog must meet

        Returns:
            BlogWithAuthor | None: The pair if found, None otherwise
        """
        statement = (
            select(BlogDB, UserDB)
            .join(UserDB, UserDB.id == BlogDB.author_id)
            .where(BlogDB.id == blog_id, *criteria)
        )
        result = await self.session.execute(statement)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def get_published(self, blog_id: UUID) -> BlogWithAuthor | None:
        """Get a blog and its author only if the blog is published."""
        return await self.get_with_author(blog_id, is_published())

    async def increment_read_count(self, blog: BlogDB) -> BlogDB:
        """
        Add one read to a blog.

        Read-then-store without locking, so concurrent reads may undercount.

        Args:
            blog: Persistent blog

        Returns:
            BlogDB: The refreshed blog
        """
        return await self.update(blog, {"read_count": blog.read_count + 1})
