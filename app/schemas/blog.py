"""
Blog schemas.

Request models strip their text fields; response models expose camelCase
keys and embed the author summary.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.configs import DESCRIPTION_MAX_LENGTH, MAX_TAGS, TAG_MAX_LENGTH, TITLE_MAX_LENGTH
from app.models import BlogDB, UserDB
from app.schemas.user import AuthorResponse
from app.utils.helpers import as_utc


def clean_tags(tags: list[str]) -> list[str]:
    """
    Strip tags and drop empty ones, keeping their order.

    Raises:
        ValueError: If a tag is longer than the allowed length.
    """
    cleaned = [tag.strip() for tag in tags]
    if any(len(tag) > TAG_MAX_LENGTH for tag in cleaned):
        mssg = f"Tags must be at most {TAG_MAX_LENGTH} characters"
        raise ValueError(mssg)
    return [tag for tag in cleaned if tag]


class BlogCreate(BaseModel):
    """Blog creation payload. A supplied ``state`` is ignored: new blogs are drafts."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Blog title (unique)",
        examples=["Notes on the Analytical Engine"],
    )
    description: str | None = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Short description",
    )
    body: str = Field(
        ...,
        min_length=1,
        description="Blog body",
        examples=["The engine weaves algebraic patterns just as the loom weaves flowers."],
    )
    tags: list[str] = Field(
        default_factory=list,
        max_length=MAX_TAGS,
        description="Blog tags",
        examples=[["history", "computing"]],
    )

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return clean_tags(v)


class BlogUpdate(BaseModel):
    """
    Partial blog update.

    Only fields present in the request are applied; ``model_fields_set``
    tells an explicit ``null`` description apart from an absent one.
    ``state`` stays a plain string since unknown values are ignored rather
    than rejected.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str | None = Field(default=None, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    body: str | None = None
    tags: list[str] | None = Field(default=None, max_length=MAX_TAGS)
    state: str | None = Field(default=None, examples=["published"])

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return clean_tags(v)


class BlogResponse(BaseModel):
    """Blog as returned by the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Notes on the Analytical Engine",
                "description": "A short tour",
                "body": "The engine weaves algebraic patterns...",
                "author": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "firstName": "Ada",
                    "lastName": "Lovelace",
                    "email": "ada@example.com",
                },
                "state": "published",
                "readCount": 3,
                "readingTime": 1,
                "tags": ["history", "computing"],
                "timestamp": "2025-01-01T10:00:00Z",
                "updatedAt": "2025-01-02T10:00:00Z",
            },
        },
    )

    id: UUID
    title: str
    description: str | None = None
    body: str
    author: AuthorResponse
    state: str
    read_count: int = Field(alias="readCount")
    reading_time: int = Field(alias="readingTime")
    tags: list[str]
    timestamp: datetime
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_record(cls, blog: BlogDB, author: UserDB) -> "BlogResponse":
        """Build a response from a blog row and its author row."""
        return cls(
            id=blog.id,
            title=blog.title,
            description=blog.description,
            body=blog.body,
            author=AuthorResponse.model_validate(author),
            state=blog.state,
            read_count=blog.read_count,
            reading_time=blog.reading_time,
            tags=list(blog.tags),
            timestamp=as_utc(blog.created_at),
            updated_at=as_utc(blog.updated_at),
        )


class Pagination(BaseModel):
    """Page metadata for blog listings."""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(alias="currentPage")
    total_pages: int = Field(alias="totalPages")
    total_blogs: int = Field(alias="totalBlogs")
    limit: int


class BlogPage(BaseModel):
    """One page of blogs plus its metadata."""

    blogs: list[BlogResponse]
    pagination: Pagination


class BlogData(BaseModel):
    """Payload wrapping a single blog."""

    blog: BlogResponse
