"""Response envelope schemas shared by all routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Successful response: ``{"success": true, "data": ...}``."""

    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Failed response: ``{"success": false, "error": "..."}``."""

    success: bool = False
    error: str


class DeletedInfo(BaseModel):
    id: str
    deleted: bool


class CountInfo(BaseModel):
    count: int = Field(description="Number of records currently indexed.")
