"""
Account role value object.
"""

from enum import Enum


class Role(str, Enum):
    """Closed set of account roles."""

    CUSTOMER = "customer"
    FIELD_WORKER = "field_worker"
    ADMIN = "admin"

    def requires_approval(self) -> bool:
        """Check if accounts with this role start unapproved."""
        return self == Role.FIELD_WORKER

    def is_admin(self) -> bool:
        return self == Role.ADMIN
