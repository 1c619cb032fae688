"""Repository layer for database operations."""

from app.repositories.base import BaseRepository
from app.repositories.blog import BlogRepository, BlogWithAuthor
from app.repositories.query_builder import BlogQuery, build_owner_query, build_public_query
from app.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "BlogQuery",
    "BlogRepository",
    "BlogWithAuthor",
    "UserRepository",
    "build_owner_query",
    "build_public_query",
]
