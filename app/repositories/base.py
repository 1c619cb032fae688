"""Base repository for database operations."""

from re import compile as re_compile
from typing import Any
from uuid import UUID

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.database import DatabaseError, DuplicateEntryError

# SQLite, then PostgreSQL (detail line and constraint name)
DUPLICATE_FIELD_PATTERNS = (
    re_compile(r"UNIQUE constraint failed: \w+\.(\w+)"),
    re_compile(r"Key \((\w+)\)="),
    re_compile(r'unique constraint "[a-z]+_(\w+?)_key"'),
)


def duplicate_field(error_msg: str) -> str | None:
    """
    Extract the offending column from a unique-violation message.

    Args:
        error_msg: Driver error text.

    Returns:
        str | None: Column name, or None if the message names none.
    """
    for pattern in DUPLICATE_FIELD_PATTERNS:
        if found := pattern.search(error_msg):
            return found.group(1)
    return None


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common persistence operations.

    This class provides a generic implementation of database operations
    that can be extended by specific entity repositories. Filters are
    SQLAlchemy boolean expressions so callers compose them freely.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        return await self.find_one(id_column == record_id)

    async def find_one(self, *criteria: ColumnElement[bool]) -> ModelT | None:
        """
        Get the first record matching all criteria.

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        statement = select(self.model).where(*criteria).limit(1)
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        """
        Count records matching all criteria.

        Returns:
            int: Number of matching records
        """
        statement = select(func.count()).select_from(self.model).where(*criteria)
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def insert(self, record: ModelT) -> ModelT:
        """
        Insert a new record.

        Args:
            record: Unsaved model instance

        Returns:
            ModelT: The stored record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
        """
        return await self._add_and_refresh(record)

    async def update(self, record: ModelT, changes: dict[str, Any]) -> ModelT:
        """
        Apply ``changes`` to a loaded record and save it.

        Args:
            record: Persistent model instance
            changes: Attribute values to set

        Returns:
            ModelT: The refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
        """
        for key, value in changes.items():
            setattr(record, key, value)
        return await self._add_and_refresh(record)

    async def delete(self, record: ModelT) -> None:
        """
        Delete a loaded record.

        Args:
            record: Persistent model instance
        """
        await self.session.delete(record)
        await self.session.flush()

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            lowered = error_msg.lower()
            if "unique" in lowered or "duplicate" in lowered:
                field = duplicate_field(error_msg) or "Value"
                raise DuplicateEntryError(detail=f"{field} already exists") from e
            raise DatabaseError(detail="Database integrity error") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseError(detail="Failed to save record") from e
        return record
