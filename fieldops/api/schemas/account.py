"""
Account-related API schemas.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from fieldops.domain.value_objects.role import Role

from .common import PaginationSchema, TimestampMixin


class RegisterRequest(BaseModel):
    """Account registration request schema."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: Role = Role.CUSTOMER
    phone: str = Field("", max_length=50)

    # Field worker only; ignored for other roles
    skills: List[str] = Field(default_factory=list)
    experience: str = ""
    license_number: str = Field("", max_length=100)


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class ProfileUpdateRequest(BaseModel):
    """Self-service profile update.

    email and role are accepted here only so that an attempt to change them
    is rejected with a clear message instead of being silently dropped.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = None
    skills: Optional[List[str]] = None
    experience: Optional[str] = None
    license_number: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = None
    role: Optional[str] = None


class PasswordChangeRequest(BaseModel):
    """Password change request schema."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)


class AccountStatusRequest(BaseModel):
    """Admin activate/deactivate request schema."""

    is_active: bool


class AccountResponse(TimestampMixin):
    """Account response schema; never carries the password hash."""

    id: UUID
    name: str
    email: str
    role: Role
    is_active: bool
    is_approved: bool
    phone: str
    address: str
    skills: List[str]
    experience: str
    license_number: str
    rating: float
    total_tasks_completed: int

    model_config = ConfigDict(from_attributes=True)


class AccountData(BaseModel):
    user: AccountResponse


class LoginData(BaseModel):
    token: str
    user: AccountResponse


class FieldWorkerListData(BaseModel):
    workers: List[AccountResponse]
    count: int


class PagedAccountsData(BaseModel):
    users: List[AccountResponse]
    pagination: PaginationSchema
