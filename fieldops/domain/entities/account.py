"""
Account domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, List, Optional
from uuid import UUID, uuid4

from fieldops.domain.exceptions.conflict_error import AlreadyApprovedError
from fieldops.domain.exceptions.validation_error import (
    ImmutableFieldError,
    RequiredFieldError,
    ValidationError,
)
from fieldops.domain.value_objects.role import Role

COMMON_PROFILE_FIELDS: FrozenSet[str] = frozenset({"name", "phone", "address"})
FIELD_WORKER_PROFILE_FIELDS: FrozenSet[str] = frozenset(
    {"skills", "experience", "license_number"}
)
IDENTITY_FIELDS: FrozenSet[str] = frozenset({"email", "role"})


@dataclass
class Account:
    """Account domain entity for customers, field workers and admins."""

    name: str
    email: str
    password_hash: str
    role: Role = Role.CUSTOMER
    id: UUID = field(default_factory=uuid4)
    is_active: bool = True
    is_approved: bool = True
    phone: str = ""
    address: str = ""
    skills: List[str] = field(default_factory=list)
    experience: str = ""
    license_number: str = ""
    rating: float = 0.0
    total_tasks_completed: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Normalize identity fields and set timestamps."""
        if not self.name or not self.name.strip():
            raise RequiredFieldError("name")
        if not self.email or not self.email.strip():
            raise RequiredFieldError("email")

        self.name = self.name.strip()
        self.email = self.email.strip().lower()
        self.role = Role(self.role)

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    @classmethod
    def register(
        cls,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.CUSTOMER,
        phone: str = "",
        skills: Optional[List[str]] = None,
        experience: str = "",
        license_number: str = "",
    ) -> "Account":
        """Build a freshly registered account.

        Field workers start unapproved and are the only role that keeps
        skills, experience and license number.
        """
        role = Role(role)
        account = cls(
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            phone=(phone or "").strip(),
            is_approved=not role.requires_approval(),
        )
        if role == Role.FIELD_WORKER:
            account.skills = list(skills or [])
            account.experience = experience or ""
            account.license_number = license_number or ""
        return account

    @property
    def is_field_worker(self) -> bool:
        return self.role == Role.FIELD_WORKER

    def allowed_profile_fields(self) -> FrozenSet[str]:
        """Fields this account may change through self-service."""
        if self.is_field_worker:
            return COMMON_PROFILE_FIELDS | FIELD_WORKER_PROFILE_FIELDS
        return COMMON_PROFILE_FIELDS

    def apply_profile_update(self, changes: Dict[str, Any]) -> None:
        """Apply a self-service profile update restricted to the allow-list."""
        if not changes:
            raise ValidationError("No update data provided")

        rejected = set(changes) - self.allowed_profile_fields()
        if rejected:
            raise ImmutableFieldError(rejected)

        for name, value in changes.items():
            if value is None:
                raise RequiredFieldError(name)
        if "name" in changes and not changes["name"].strip():
            raise RequiredFieldError("name")

        for name, value in changes.items():
            if isinstance(value, str):
                value = value.strip()
            setattr(self, name, value)

        self.updated_at = datetime.now(timezone.utc)

    def change_password_hash(self, password_hash: str) -> None:
        self.password_hash = password_hash
        self.updated_at = datetime.now(timezone.utc)

    def is_assignable(self) -> bool:
        """Check if account can receive tasks."""
        return self.is_field_worker and self.is_active and self.is_approved

    def can_login(self) -> bool:
        return self.is_active and (self.is_approved or not self.is_field_worker)

    def approve(self) -> None:
        """Approve a pending field worker."""
        if not self.is_field_worker:
            raise ValidationError("User is not a field worker")
        if self.is_approved:
            raise AlreadyApprovedError(self.id)

        self.is_approved = True
        self.updated_at = datetime.now(timezone.utc)

    def reject(self) -> None:
        """Reject a field worker by deactivating the account (soft delete)."""
        if not self.is_field_worker:
            raise ValidationError("User is not a field worker")

        self.is_active = False
        self.updated_at = datetime.now(timezone.utc)

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self.updated_at = datetime.now(timezone.utc)

    def record_reputation(self, rating: float, total_tasks_completed: int) -> None:
        """Store recomputed reputation figures."""
        self.rating = rating
        self.total_tasks_completed = total_tasks_completed
        self.updated_at = datetime.now(timezone.utc)
