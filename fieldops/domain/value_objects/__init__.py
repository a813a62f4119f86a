"""
Domain value objects package.
"""

from .request_status import RequestStatus
from .role import Role
from .task_status import TaskStatus
from .urgency import Urgency

__all__ = [
    "RequestStatus",
    "Role",
    "TaskStatus",
    "Urgency",
]
