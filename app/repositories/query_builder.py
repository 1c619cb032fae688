"""
Blog listing queries.

Listing requests arrive as loosely-typed query parameters. The builders here
coerce them into a `BlogQuery`, a small immutable description of filter,
sort and page, which the repository turns into SQL through the named
predicates below.
"""

from dataclasses import dataclass
from math import ceil
from typing import Literal, cast, get_args
from uuid import UUID

from sqlalchemy import ColumnElement, UnaryExpression, or_

from app.configs import settings
from app.models.blog import TAGS_SEPARATOR, BlogDB, BlogState
from app.schemas.blog import Pagination

type SortField = Literal["read_count", "reading_time", "timestamp"]

DEFAULT_PAGE = 1
DEFAULT_SORT: SortField = "timestamp"
SORT_FIELDS: tuple[str, ...] = get_args(SortField.__value__)
LIKE_ESCAPE = "\\"


# --- Predicates ---


def in_state(state: BlogState) -> ColumnElement[bool]:
    return BlogDB.state == state.value


def is_published() -> ColumnElement[bool]:
    return in_state(BlogState.PUBLISHED)


def is_draft() -> ColumnElement[bool]:
    return in_state(BlogState.DRAFT)


def authored_by(author_id: UUID) -> ColumnElement[bool]:
    return BlogDB.author_id == author_id


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``term`` matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def matches_search(term: str) -> ColumnElement[bool]:
    """
    Case-insensitive substring match on the title or any single tag.

    Args:
        term: Search text, non-empty and used as given.

    Returns:
        ColumnElement[bool]: The match condition.
    """
    pattern = f"%{escape_like(term.lower())}%"
    title_match = BlogDB.title.ilike(pattern, escape=LIKE_ESCAPE)
    # A term holding the separator could straddle two tags
    if TAGS_SEPARATOR in term:
        return title_match
    return or_(title_match, BlogDB.tags_text.ilike(pattern, escape=LIKE_ESCAPE))


# --- Parameter coercion ---


def parse_positive_int(value: object, default: int) -> int:
    """
    Read a positive integer, falling back to ``default``.

    Args:
        value: Raw value, usually a query-string.
        default: Value used when ``value`` is missing, unparseable or not positive.

    Returns:
        int: A positive integer.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            return default
    else:
        return default
    return number if number > 0 else default


def parse_limit(value: object) -> int:
    """Coerce a page size and cap it at the configured maximum."""
    limit = parse_positive_int(value, settings.DEFAULT_PAGE_LIMIT)
    return min(limit, settings.MAX_PAGE_LIMIT)


def parse_state(value: object) -> BlogState | None:
    """Return the state for exactly ``draft`` or ``published``, else ``None``."""
    if isinstance(value, str) and value in {state.value for state in BlogState}:
        return BlogState(value)
    return None


def parse_sort_field(value: object) -> SortField:
    if isinstance(value, str) and value in SORT_FIELDS:
        return cast("SortField", value)
    return DEFAULT_SORT


# --- Queries ---


@dataclass(frozen=True, slots=True)
class BlogQuery:
    """Filter, order and page of a blog listing."""

    page: int = DEFAULT_PAGE
    limit: int = 20
    order_by: SortField = DEFAULT_SORT
    ascending: bool = False
    state: BlogState | None = None
    author_id: UUID | None = None
    search: str = ""

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def criteria(self) -> list[ColumnElement[bool]]:
        """Compose the predicates this query filters on."""
        criteria: list[ColumnElement[bool]] = []
        if self.state is not None:
            criteria.append(in_state(self.state))
        if self.author_id is not None:
            criteria.append(authored_by(self.author_id))
        if self.search:
            criteria.append(matches_search(self.search))
        return criteria

    def ordering(self) -> tuple[UnaryExpression, UnaryExpression]:
        """Sort key plus ``id`` in the same direction, so paging is deterministic."""
        column = {
            "read_count": BlogDB.read_count,
            "reading_time": BlogDB.reading_time,
            "timestamp": BlogDB.created_at,
        }[self.order_by]
        if self.ascending:
            return column.asc(), BlogDB.id.asc()
        return column.desc(), BlogDB.id.desc()

    def pagination(self, total: int) -> Pagination:
        """Page metadata for ``total`` matching blogs."""
        return Pagination(
            current_page=self.page,
            total_pages=ceil(total / self.limit),
            total_blogs=total,
            limit=self.limit,
        )


def build_public_query(
    page: object = None,
    limit: object = None,
    search: object = None,
    order_by: object = None,
    order: object = None,
) -> BlogQuery:
    """
    Build the query behind the public listing.

    Always restricted to published blogs. Invalid inputs fall back to their
    defaults instead of being rejected.

    Args:
        page: 1-based page number, default 1.
        limit: Page size, default 20, capped at ``MAX_PAGE_LIMIT``.
        search: Free text matched against title and tags, unstripped;
            only an empty string means no filter.
        order_by: ``read_count``, ``reading_time`` or ``timestamp``.
        order: ``asc`` for ascending; anything else sorts descending.

    Returns:
        BlogQuery: The normalized query.
    """
    return BlogQuery(
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_limit(limit),
        order_by=parse_sort_field(order_by),
        ascending=order == "asc",
        state=BlogState.PUBLISHED,
        search=search if isinstance(search, str) else "",
    )


def build_owner_query(
    author_id: UUID,
    page: object = None,
    limit: object = None,
    state: object = None,
) -> BlogQuery:
    """
    Build the query behind an author's own listing.

    Args:
        author_id: The requesting author.
        page: 1-based page number, default 1.
        limit: Page size, default 20, capped at ``MAX_PAGE_LIMIT``.
        state: Optional ``draft`` or ``published`` filter; other values are ignored.

    Returns:
        BlogQuery: Newest-first query over the author's blogs.
    """
    return BlogQuery(
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_limit(limit),
        order_by="timestamp",
        ascending=False,
        state=parse_state(state),
        author_id=author_id,
    )
