# tests/repositories/test_query_builder.py
"""Tests for app/repositories/query_builder.py module."""

from uuid import uuid4

import pytest
from sqlalchemy.dialects import sqlite

from app.models import BlogState
from app.repositories.query_builder import (
    BlogQuery,
    build_owner_query,
    build_public_query,
    authored_by,
    escape_like,
    is_draft,
    is_published,
    matches_search,
    parse_limit,
    parse_positive_int,
    parse_sort_field,
    parse_state,
)


def compiled(clause: object) -> str:
    return str(clause.compile(dialect=sqlite.dialect()))  # type: ignore[attr-defined]


class TestParsePositiveInt:
    """Tests for parse_positive_int."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("3", 3), (" 7 ", 7), (5, 5), ("0", 1), ("-2", 1), ("abc", 1), ("2.5", 1), (None, 1)],
    )
    def test_coercion(self, value: object, expected: int) -> None:
        assert parse_positive_int(value, 1) == expected

    def test_bool_is_not_a_number(self) -> None:
        assert parse_positive_int(True, 4) == 4  # noqa: FBT003


class TestParseLimit:
    """Tests for parse_limit."""

    def test_default(self) -> None:
        assert parse_limit(None) == 20

    def test_capped_at_maximum(self) -> None:
        assert parse_limit("1000") == 100

    def test_invalid_falls_back(self) -> None:
        assert parse_limit("zero") == 20


class TestParseState:
    """Tests for parse_state."""

    def test_known_states(self) -> None:
        assert parse_state("draft") is BlogState.DRAFT
        assert parse_state("published") is BlogState.PUBLISHED

    @pytest.mark.parametrize("value", ["archived", "Published", "", None, 1])
    def test_anything_else_is_none(self, value: object) -> None:
        assert parse_state(value) is None


class TestParseSortField:
    """Tests for parse_sort_field."""

    @pytest.mark.parametrize("value", ["read_count", "reading_time", "timestamp"])
    def test_allowed_fields(self, value: str) -> None:
        assert parse_sort_field(value) == value

    @pytest.mark.parametrize("value", ["title", "created_at", None])
    def test_unknown_falls_back_to_timestamp(self, value: object) -> None:
        assert parse_sort_field(value) == "timestamp"


class TestEscapeLike:
    """Tests for escape_like."""

    def test_wildcards_escaped(self) -> None:
        assert escape_like("50%_off") == "50\\%\\_off"

    def test_escape_character_escaped_first(self) -> None:
        assert escape_like("a\\b") == "a\\\\b"

    def test_plain_text_unchanged(self) -> None:
        assert escape_like("python") == "python"


class TestMatchesSearch:
    """Tests for matches_search."""

    def test_matches_title_or_tags(self) -> None:
        sql = compiled(matches_search("python"))
        assert "blogs.title" in sql
        assert "blogs.tags_text" in sql
        assert "ESCAPE" in sql

    def test_separator_in_term_only_matches_title(self) -> None:
        sql = compiled(matches_search("a\nb"))
        assert "blogs.tags_text" not in sql


class TestBuildPublicQuery:
    """Tests for build_public_query."""

    def test_defaults(self) -> None:
        query = build_public_query()
        assert query == BlogQuery(
            page=1,
            limit=20,
            order_by="timestamp",
            ascending=False,
            state=BlogState.PUBLISHED,
            search="",
        )

    def test_always_published(self) -> None:
        query = build_public_query(page="2", limit="5", search="  Rust ")
        assert query.state is BlogState.PUBLISHED
        assert query.author_id is None
        assert query.search == "  Rust "
        assert query.offset == 5

    def test_order_only_ascending_for_asc(self) -> None:
        assert build_public_query(order="asc").ascending is True
        assert build_public_query(order="ASC").ascending is False
        assert build_public_query(order="desc").ascending is False

    def test_invalid_values_fall_back(self) -> None:
        query = build_public_query(page="x", limit="-1", order_by="title", order="sideways")
        assert (query.page, query.limit, query.order_by, query.ascending) == (
            1,
            20,
            "timestamp",
            False,
        )


class TestBuildOwnerQuery:
    """Tests for build_owner_query."""

    def test_scoped_to_author_newest_first(self) -> None:
        author_id = uuid4()
        query = build_owner_query(author_id)
        assert query.author_id == author_id
        assert query.order_by == "timestamp"
        assert query.ascending is False
        assert query.state is None

    def test_state_filter(self) -> None:
        assert build_owner_query(uuid4(), state="draft").state is BlogState.DRAFT

    def test_unknown_state_ignored(self) -> None:
        assert build_owner_query(uuid4(), state="archived").state is None


class TestBlogQuery:
    """Tests for BlogQuery."""

    def test_criteria_count(self) -> None:
        assert BlogQuery().criteria() == []
        query = BlogQuery(state=BlogState.DRAFT, author_id=uuid4(), search="x")
        assert len(query.criteria()) == 3

    def test_whitespace_search_still_filters(self) -> None:
        assert len(BlogQuery(search=" ").criteria()) == 1
        assert build_public_query(search=" ").search == " "

    def test_ordering_includes_id_tiebreak(self) -> None:
        primary, tiebreak = BlogQuery(order_by="read_count", ascending=True).ordering()
        assert compiled(primary) == "blogs.read_count ASC"
        assert compiled(tiebreak) == "blogs.id ASC"

    def test_timestamp_sorts_on_created_at(self) -> None:
        primary, tiebreak = BlogQuery().ordering()
        assert compiled(primary) == "blogs.created_at DESC"
        assert compiled(tiebreak) == "blogs.id DESC"

    @pytest.mark.parametrize(
        ("total", "limit", "pages"),
        [(0, 20, 0), (1, 20, 1), (12, 5, 3), (20, 20, 1), (21, 20, 2)],
    )
    def test_pagination(self, total: int, limit: int, pages: int) -> None:
        pagination = BlogQuery(page=2, limit=limit).pagination(total)
        assert pagination.total_pages == pages
        assert pagination.total_blogs == total
        assert pagination.current_page == 2
        assert pagination.limit == limit


class TestPredicates:
    """Tests for the named predicates."""

    def test_state_predicates(self) -> None:
        assert compiled(is_published()) == "blogs.state = ?"
        assert is_published().right.value == "published"
        assert is_draft().right.value == "draft"

    def test_authored_by(self) -> None:
        author_id = uuid4()
        assert authored_by(author_id).right.value == author_id
