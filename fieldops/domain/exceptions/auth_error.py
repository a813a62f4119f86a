"""
Authentication and authorization domain exceptions.
"""


class AuthenticationError(Exception):
    """Raised when the caller cannot be identified."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class PendingApprovalError(AuthenticationError):
    """Raised when an unapproved field worker tries to log in."""

    def __init__(self):
        super().__init__(
            "Your account is pending admin approval. You cannot login until approved."
        )


class ForbiddenError(Exception):
    """Raised when the caller lacks the role or ownership for an operation."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
