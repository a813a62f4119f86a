"""
Service request status value object.
"""

from enum import Enum

from .task_status import TaskStatus


class RequestStatus(str, Enum):
    """Customer-facing service request status enumeration."""

    OPEN = "open"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def from_task_status(cls, status: TaskStatus) -> "RequestStatus":
        """Mirror a task status onto the request."""
        return cls(status.value)

    def requires_worker(self) -> bool:
        """Check if a request in this status must carry an assigned worker."""
        return self in [
            RequestStatus.ASSIGNED,
            RequestStatus.IN_PROGRESS,
            RequestStatus.COMPLETED,
        ]
