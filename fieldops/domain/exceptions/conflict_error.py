"""
State-conflict domain exceptions.
"""

from uuid import UUID


class ConflictError(Exception):
    """Base exception for operations that clash with current state."""

    pass


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists with this email")


class AlreadyApprovedError(ConflictError):
    """Raised when approving a field worker twice."""

    def __init__(self, account_id: UUID):
        self.account_id = account_id
        super().__init__("Field worker is already approved")


class RequestNotOpenError(ConflictError):
    """Raised when assigning a request that is no longer open."""

    def __init__(self, request_id: UUID, status: str):
        self.request_id = request_id
        self.status = status
        super().__init__(
            f"Service request {request_id} is not open (current status: {status})"
        )


class AlreadyAssignedError(ConflictError):
    """Raised when a task already exists for a service request."""

    def __init__(self, request_id: UUID):
        self.request_id = request_id
        super().__init__(
            "This service request is already assigned to a field worker"
        )


class WorkerNotAssignableError(ConflictError):
    """Raised when the chosen field worker cannot receive tasks."""

    def __init__(self, worker_id: UUID, reason: str):
        self.worker_id = worker_id
        self.reason = reason
        super().__init__(f"Field worker {worker_id} cannot be assigned: {reason}")


class InvalidTransitionError(ConflictError):
    """Raised when a task status change is not allowed from its current status."""

    def __init__(self, current_status: str, target_status: str):
        self.current_status = current_status
        self.target_status = target_status
        super().__init__(
            f"Cannot move task from '{current_status}' to '{target_status}'"
        )


class TaskNotCompletedError(ConflictError):
    """Raised when rating a task that is not completed."""

    def __init__(self, task_id: UUID):
        self.task_id = task_id
        super().__init__("Cannot rate a task that is not completed")


class AlreadyRatedError(ConflictError):
    """Raised when rating a task a second time."""

    def __init__(self, task_id: UUID):
        self.task_id = task_id
        super().__init__("This task has already been rated")
