"""
Domain package.
"""

from .entities import *
from .exceptions import *
from .value_objects import *

__all__ = [
    # Entities
    "Account",
    "ServiceRequest",
    "Task",
    # Exceptions
    "AuthenticationError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
    # Value Objects
    "RequestStatus",
    "Role",
    "TaskStatus",
    "Urgency",
]
