"""User repository for database operations."""

from app.models.user import UserDB
from app.repositories.base import BaseRepository
from app.schemas.user import normalize_email


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Passwords are hashed by the auth service before a user reaches this
    layer; the repository only stores what it is given.
    """

    model = UserDB

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email.

        Args:
            email: Email to search for, normalized before the lookup

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.find_one(UserDB.email == normalize_email(email))

    async def email_exists(self, email: str) -> bool:
        """Check whether an account already uses ``email``."""
        return await self.count(UserDB.email == normalize_email(email)) > 0
