"""
Task status value object and its transition table.
"""

from enum import Enum
from typing import Dict, FrozenSet


class TaskStatus(str, Enum):
    """Task lifecycle status enumeration."""

    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def is_terminal(self) -> bool:
        """Check if status is final (no outgoing transitions)."""
        return self in [TaskStatus.COMPLETED, TaskStatus.CANCELLED]

    def is_active(self) -> bool:
        """Check if the task is still being worked on."""
        return self in [TaskStatus.ASSIGNED, TaskStatus.IN_PROGRESS]

    def can_transition_to(self, target: "TaskStatus") -> bool:
        """Check if moving to target is allowed.

        Re-entering the current status is always allowed and treated as a
        no-op on timestamps.
        """
        if target == self:
            return True
        return target in _TRANSITIONS[self]


_TRANSITIONS: Dict[TaskStatus, FrozenSet[TaskStatus]] = {
    TaskStatus.ASSIGNED: frozenset({TaskStatus.IN_PROGRESS, TaskStatus.CANCELLED}),
    TaskStatus.IN_PROGRESS: frozenset({TaskStatus.COMPLETED, TaskStatus.CANCELLED}),
    TaskStatus.COMPLETED: frozenset(),
    TaskStatus.CANCELLED: frozenset(),
}
