"""Blog database model using SQLModel."""

from datetime import datetime
from enum import StrEnum
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Index, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String

from app.utils.helpers import utc_now


class BlogState(StrEnum):
    """Publication state of a blog."""

    DRAFT = "draft"
    PUBLISHED = "published"


TAGS_SEPARATOR = "\n"


def tags_to_text(tags: list[str]) -> str:
    """
    Flatten tags into the lower-cased, newline-delimited search column.

    Tags never contain the separator after stripping, so a substring match
    against this column cannot span two tags.
    """
    return TAGS_SEPARATOR.join(tag.lower() for tag in tags)


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Each blog belongs to exactly one author, fixed at creation.
    ``reading_time`` is derived from ``body`` and ``tags_text`` mirrors
    ``tags``; the blog service keeps both in sync.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    __table_args__ = (Index("ix_blogs_state_created", "state", "created_at"),)

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    # Foreign key to User
    author_id: UUID = Field(
        sa_column=Column(
            "author_id",
            ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Author ID (foreign key to users.id)",
    )

    title: str = Field(
        sa_column=Column(String(200), unique=True, nullable=False),
        description="Blog title (unique)",
    )
    description: str | None = Field(
        default=None,
        sa_column=Column(String(500)),
        description="Short description",
    )
    body: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog body",
    )

    state: str = Field(
        default=BlogState.DRAFT.value,
        sa_column=Column(String(20), nullable=False, index=True),
        description="Blog state (draft, published)",
    )
    read_count: int = Field(
        default=0,
        nullable=False,
        description="Number of successful public reads",
    )
    reading_time: int = Field(
        default=0,
        nullable=False,
        description="Estimated reading time in minutes",
    )

    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False),
        description="Blog tags for categorization",
    )
    tags_text: str = Field(
        default="",
        sa_column=Column(Text, nullable=False, server_default=""),
        description="Lower-cased, newline-delimited tags for substring search",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "author_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Notes on the Analytical Engine",
                "description": "A short tour",
                "body": "The engine weaves algebraic patterns...",
                "state": "draft",
                "read_count": 0,
                "reading_time": 1,
                "tags": ["history", "computing"],
            },
        },
    )
