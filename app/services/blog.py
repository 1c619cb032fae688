"""Blog service: creation, listings, reads and owner-only changes."""

from typing import Any
from uuid import UUID

from structlog.stdlib import BoundLogger

from app.errors.auth import ForbiddenError
from app.errors.database import BlogNotFoundError
from app.models import BlogDB, BlogState, UserDB, tags_to_text
from app.monitoring import get_logger
from app.repositories import BlogQuery, BlogRepository
from app.repositories.query_builder import parse_state
from app.schemas.blog import BlogCreate, BlogPage, BlogResponse, BlogUpdate
from app.utils.helpers import utc_now
from app.utils.reading_time import calculate_reading_time

NOT_AUTHORIZED_TO_UPDATE = "You are not authorized to update this blog"
NOT_AUTHORIZED_TO_DELETE = "You are not authorized to delete this blog"


class BlogService:
    """
    Service enforcing blog ownership and visibility rules.

    Derived fields (``reading_time``, ``tags_text``, ``updated_at``) are set
    here on every create and update rather than by model hooks.
    """

    def __init__(
        self,
        blog_repo: BlogRepository,
        logger: BoundLogger | None = None,
    ) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Blog repository for database operations
            logger: Logger for blog events; defaults to this module's logger
        """
        self.blog_repo = blog_repo
        self.logger = logger or get_logger(__name__)

    async def create_blog(self, author: UserDB, data: BlogCreate) -> BlogResponse:
        """
        Create a draft blog owned by ``author``.

        Args:
            author: Authenticated caller
            data: Validated blog payload

        Returns:
            BlogResponse: The stored blog

        Raises:
            DuplicateEntryError: If the title is already used
        """
        now = utc_now()
        blog = await self.blog_repo.insert(
            BlogDB(
                author_id=author.id,
                title=data.title,
                description=data.description,
                body=data.body,
                state=BlogState.DRAFT.value,
                read_count=0,
                reading_time=calculate_reading_time(data.body),
                tags=list(data.tags),
                tags_text=tags_to_text(data.tags),
                created_at=now,
                updated_at=now,
            ),
        )

        self.logger.info("Blog created", blog_id=str(blog.id), author_id=str(author.id))
        return BlogResponse.from_record(blog, author)

    async def _list(self, query: BlogQuery) -> BlogPage:
        rows, total = await self.blog_repo.find_page(query)
        return BlogPage(
            blogs=[BlogResponse.from_record(blog, author) for blog, author in rows],
            pagination=query.pagination(total),
        )

    async def list_published_blogs(self, query: BlogQuery) -> BlogPage:
        """
        One page of the public listing.

        Args:
            query: Query from ``build_public_query``

        Returns:
            BlogPage: Published blogs and page metadata
        """
        page = await self._list(query)
        self.logger.info(
            "Get all published blogs",
            page=query.page,
            limit=query.limit,
            search=query.search,
            total=page.pagination.total_blogs,
        )
        return page

    async def get_published_blog(self, blog_id: UUID) -> BlogResponse:
        """
        Read a published blog and count the read.

        Drafts are reported exactly like missing blogs.

        Args:
            blog_id: Blog UUID

        Returns:
            BlogResponse: The blog with its incremented ``read_count``

        Raises:
            BlogNotFoundError: If no published blog has this id
        """
        found = await self.blog_repo.get_published(blog_id)
        if found is None:
            raise BlogNotFoundError
        blog, author = found

        blog = await self.blog_repo.increment_read_count(blog)
        self.logger.info("Blog viewed", blog_id=str(blog.id), read_count=blog.read_count)
        return BlogResponse.from_record(blog, author)

    async def list_own_blogs(self, owner: UserDB, query: BlogQuery) -> BlogPage:
        """
        One page of the caller's own blogs, newest first.

        Args:
            owner: Authenticated caller
            query: Query from ``build_owner_query`` for ``owner``

        Returns:
            BlogPage: The caller's blogs and page metadata
        """
        page = await self._list(query)
        self.logger.info(
            "Get user blogs",
            user_id=str(owner.id),
            page=query.page,
            state=query.state.value if query.state else None,
        )
        return page

    async def _get_owned(self, owner: UserDB, blog_id: UUID, denied: str) -> tuple[BlogDB, UserDB]:
        found = await self.blog_repo.get_with_author(blog_id)
        if found is None:
            raise BlogNotFoundError
        blog, author = found
        if blog.author_id != owner.id:
            self.logger.info("Ownership check failed", blog_id=str(blog_id), user_id=str(owner.id))
            raise ForbiddenError(denied)
        return blog, author

    async def update_blog(self, owner: UserDB, blog_id: UUID, data: BlogUpdate) -> BlogResponse:
        """
        Apply a partial update to one of the caller's blogs.

        Existence is checked before ownership. Empty titles and bodies are
        ignored, a provided description (even empty or null) overwrites,
        and unknown states are ignored.

        Args:
            owner: Authenticated caller
            blog_id: Blog UUID
            data: Fields to change

        Returns:
            BlogResponse: The updated blog

        Raises:
            BlogNotFoundError: If the blog does not exist
            ForbiddenError: If the caller is not the author
            DuplicateEntryError: If the new title is already used
        """
        blog, author = await self._get_owned(owner, blog_id, NOT_AUTHORIZED_TO_UPDATE)

        provided = data.model_fields_set
        changes: dict[str, Any] = {}
        if data.title:
            changes["title"] = data.title
        if "description" in provided:
            changes["description"] = data.description
        if data.body:
            changes["body"] = data.body
            changes["reading_time"] = calculate_reading_time(data.body)
        if data.tags is not None:
            changes["tags"] = list(data.tags)
            changes["tags_text"] = tags_to_text(data.tags)
        if (state := parse_state(data.state)) is not None:
            changes["state"] = state.value
        changes["updated_at"] = utc_now()

        blog = await self.blog_repo.update(blog, changes)
        self.logger.info("Blog updated", blog_id=str(blog.id), fields=sorted(changes))
        return BlogResponse.from_record(blog, author)

    async def delete_blog(self, owner: UserDB, blog_id: UUID) -> None:
        """
        Delete one of the caller's blogs.

        Args:
            owner: Authenticated caller
            blog_id: Blog UUID

        Raises:
            BlogNotFoundError: If the blog does not exist
            ForbiddenError: If the caller is not the author
        """
        blog, _ = await self._get_owned(owner, blog_id, NOT_AUTHORIZED_TO_DELETE)
        await self.blog_repo.delete(blog)
        self.logger.info("Blog deleted", blog_id=str(blog_id), user_id=str(owner.id))
