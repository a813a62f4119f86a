"""
Task entity binding a service request to a field worker.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from fieldops.config.logging import get_logger
from fieldops.domain.exceptions.conflict_error import (
    AlreadyRatedError,
    InvalidTransitionError,
    TaskNotCompletedError,
)
from fieldops.domain.exceptions.validation_error import InvalidRatingError
from fieldops.domain.value_objects.task_status import TaskStatus

logger = get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def validate_rating(rating: object) -> int:
    """Return rating as int if it is a whole number in 1..5."""
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRatingError(rating)
    if rating < MIN_RATING or rating > MAX_RATING:
        raise InvalidRatingError(rating)
    return rating


@dataclass
class Task:
    """Task domain entity."""

    service_request_id: UUID
    field_worker_id: UUID
    assigned_by: UUID
    id: UUID = field(default_factory=uuid4)
    status: TaskStatus = TaskStatus.ASSIGNED
    assigned_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    completion_notes: str = ""
    completion_photos: List[str] = field(default_factory=list)
    customer_rating: Optional[int] = None
    customer_feedback: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Initialize timestamps."""
        self.status = TaskStatus(self.status)
        now = datetime.now(timezone.utc)
        if not self.assigned_at:
            self.assigned_at = now
        if not self.created_at:
            self.created_at = now
        if not self.updated_at:
            self.updated_at = now

    @property
    def is_rated(self) -> bool:
        return self.customer_rating is not None

    def belongs_to(self, field_worker_id: UUID) -> bool:
        return self.field_worker_id == field_worker_id

    def change_status(
        self,
        target: TaskStatus,
        completion_notes: Optional[str] = None,
        completion_photos: Optional[List[str]] = None,
    ) -> None:
        """Move the task to target status.

        started_at is stamped on the first assigned -> in-progress move and
        completed_at on the first move to completed; re-entering a status
        never moves either timestamp.
        """
        target = TaskStatus(target)
        if not self.status.can_transition_to(target):
            raise InvalidTransitionError(self.status.value, target.value)

        now = datetime.now(timezone.utc)
        previous = self.status

        if (
            target == TaskStatus.IN_PROGRESS
            and previous == TaskStatus.ASSIGNED
            and self.started_at is None
        ):
            self.started_at = now

        if target == TaskStatus.COMPLETED:
            if self.completed_at is None:
                self.completed_at = now
            if completion_notes is not None:
                self.completion_notes = completion_notes
            if completion_photos is not None:
                self.completion_photos = list(completion_photos)

        self.status = target
        self.updated_at = now

        logger.debug(
            "Task status changed",
            task_id=str(self.id),
            previous=previous.value,
            current=target.value,
        )

    def rate(self, rating: int, feedback: Optional[str] = None) -> None:
        """Record the one-time customer rating."""
        rating = validate_rating(rating)
        if self.status != TaskStatus.COMPLETED:
            raise TaskNotCompletedError(self.id)
        if self.is_rated:
            raise AlreadyRatedError(self.id)

        self.customer_rating = rating
        self.customer_feedback = feedback or ""
        self.updated_at = datetime.now(timezone.utc)
