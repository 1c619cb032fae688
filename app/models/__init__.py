"""Database models for the application."""

from app.models.blog import BlogDB, BlogState, tags_to_text
from app.models.user import UserDB

__all__ = ["BlogDB", "BlogState", "UserDB", "tags_to_text"]
