"""
Domain exceptions package.
"""

from .auth_error import AuthenticationError, ForbiddenError, PendingApprovalError
from .conflict_error import (
    AlreadyApprovedError,
    AlreadyAssignedError,
    AlreadyRatedError,
    ConflictError,
    DuplicateEmailError,
    InvalidTransitionError,
    RequestNotOpenError,
    TaskNotCompletedError,
    WorkerNotAssignableError,
)
from .not_found_error import (
    AccountNotFoundError,
    NotFoundError,
    RequestNotFoundError,
    TaskNotFoundError,
)
from .validation_error import (
    ImmutableFieldError,
    InvalidRatingError,
    InvalidStatusError,
    RequiredFieldError,
    ValidationError,
)

__all__ = [
    # Authentication / authorization
    "AuthenticationError",
    "ForbiddenError",
    "PendingApprovalError",
    # Conflicts
    "AlreadyApprovedError",
    "AlreadyAssignedError",
    "AlreadyRatedError",
    "ConflictError",
    "DuplicateEmailError",
    "InvalidTransitionError",
    "RequestNotOpenError",
    "TaskNotCompletedError",
    "WorkerNotAssignableError",
    # Not found
    "AccountNotFoundError",
    "NotFoundError",
    "RequestNotFoundError",
    "TaskNotFoundError",
    # Validation
    "ImmutableFieldError",
    "InvalidRatingError",
    "InvalidStatusError",
    "RequiredFieldError",
    "ValidationError",
]
