"""
Lookup-related domain exceptions.
"""

from uuid import UUID


class NotFoundError(Exception):
    """Base exception for missing records."""

    pass


class AccountNotFoundError(NotFoundError):
    """Raised when an account does not exist."""

    def __init__(self, account_id: UUID, label: str = "User"):
        self.account_id = account_id
        super().__init__(f"{label} {account_id} not found")


class RequestNotFoundError(NotFoundError):
    """Raised when a service request does not exist."""

    def __init__(self, request_id: UUID):
        self.request_id = request_id
        super().__init__(f"Service request {request_id} not found")


class TaskNotFoundError(NotFoundError):
    """Raised when a task does not exist."""

    def __init__(self, task_id: UUID):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")
