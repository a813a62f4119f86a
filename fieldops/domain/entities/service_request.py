"""
Service request domain entity.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, FrozenSet, Optional
from uuid import UUID, uuid4

from fieldops.domain.exceptions.conflict_error import RequestNotOpenError
from fieldops.domain.exceptions.validation_error import (
    RequiredFieldError,
    ValidationError,
)
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.task_status import TaskStatus
from fieldops.domain.value_objects.urgency import Urgency

EDITABLE_FIELDS: FrozenSet[str] = frozenset(
    {"title", "description", "location", "urgency", "budget", "preferred_date"}
)
REQUIRED_TEXT_FIELDS = ("title", "description", "location", "category")
NULLABLE_FIELDS: FrozenSet[str] = frozenset({"preferred_date"})


@dataclass
class ServiceRequest:
    """Customer-facing record of requested work."""

    user_id: UUID
    title: str
    description: str
    location: str
    category: str
    urgency: Urgency = Urgency.MEDIUM
    status: RequestStatus = RequestStatus.OPEN
    budget: float = 0.0
    preferred_date: Optional[date] = None
    assigned_field_worker_id: Optional[UUID] = None
    customer_rating: Optional[int] = None
    customer_feedback: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate required fields and set timestamps."""
        for name in REQUIRED_TEXT_FIELDS:
            value = getattr(self, name)
            if not value or not value.strip():
                raise RequiredFieldError(name)
            setattr(self, name, value.strip())

        self.urgency = Urgency(self.urgency)
        self.status = RequestStatus(self.status)

        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = datetime.now(timezone.utc)

    def is_open(self) -> bool:
        return self.status == RequestStatus.OPEN

    def is_owned_by(self, account_id: UUID) -> bool:
        return self.user_id == account_id

    def is_assigned_to(self, account_id: UUID) -> bool:
        return self.assigned_field_worker_id == account_id

    def apply_update(self, changes: Dict[str, Any]) -> None:
        """Apply an owner/admin edit; status and assignment are never editable."""
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Field(s) cannot be updated: {', '.join(sorted(unknown))}"
            )

        missing = [
            name
            for name, value in changes.items()
            if value is None and name not in NULLABLE_FIELDS
        ]
        if missing:
            raise RequiredFieldError(missing[0])

        for name, value in changes.items():
            if name in ("title", "description", "location"):
                if not value or not value.strip():
                    raise RequiredFieldError(name)
                value = value.strip()
            elif name == "urgency":
                value = Urgency(value)
            setattr(self, name, value)

        self.updated_at = datetime.now(timezone.utc)

    def mark_assigned(self, field_worker_id: UUID) -> None:
        """Bind the request to a field worker."""
        if not self.is_open():
            raise RequestNotOpenError(self.id, self.status.value)

        self.status = RequestStatus.ASSIGNED
        self.assigned_field_worker_id = field_worker_id
        self.updated_at = datetime.now(timezone.utc)

    def mirror_task_status(self, task_status: TaskStatus) -> None:
        """Copy the bound task's status onto this request."""
        self.status = RequestStatus.from_task_status(task_status)
        if not self.status.requires_worker():
            self.assigned_field_worker_id = None
        self.updated_at = datetime.now(timezone.utc)

    def record_rating(self, rating: int, feedback: str) -> None:
        self.customer_rating = rating
        self.customer_feedback = feedback
        self.updated_at = datetime.now(timezone.utc)
