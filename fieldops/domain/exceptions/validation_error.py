"""
Validation-related domain exceptions.
"""

from typing import Iterable


class ValidationError(Exception):
    """Base exception for validation errors."""

    pass


class RequiredFieldError(ValidationError):
    """Raised when required field is missing."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Required field '{field_name}' is missing")


class ImmutableFieldError(ValidationError):
    """Raised when a self-service update touches a field it may not change."""

    def __init__(self, field_names: Iterable[str]):
        self.field_names = sorted(field_names)
        super().__init__(
            f"Field(s) cannot be changed: {', '.join(self.field_names)}"
        )


class InvalidStatusError(ValidationError):
    """Raised when a status value is outside the allowed set."""

    def __init__(self, status: str, allowed: Iterable[str]):
        self.status = status
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid status '{status}', expected one of: {', '.join(self.allowed)}"
        )


class InvalidRatingError(ValidationError):
    """Raised when a rating is outside 1..5."""

    def __init__(self, rating: object):
        self.rating = rating
        super().__init__("Rating must be between 1 and 5")
