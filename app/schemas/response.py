from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):  # noqa: UP046
    """Success envelope shared by every endpoint."""

    success: bool = True
    message: str | None = None
    data: DataT | None = None


class MessageResponse(BaseModel):
    """Success envelope without a payload."""

    success: bool = True
    message: str
