"""
Common API schemas.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class BaseResponse(BaseModel):
    """Base response envelope."""

    success: bool = True
    message: str = ""


class ApiResponse(BaseResponse, Generic[T]):
    """Success envelope carrying a typed payload."""

    data: Optional[T] = None


class ErrorResponse(BaseResponse):
    """Error envelope; error detail is only filled in development."""

    success: bool = False
    error: Optional[str] = None


class PaginationSchema(BaseModel):
    """Pagination metadata."""

    current_page: int
    total_pages: int
    total: int
    has_next: bool
    has_prev: bool


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: datetime
    updated_at: datetime
