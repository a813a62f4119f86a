"""
Application services package.
"""

from .authorization import (
    AuthorizationGate,
    ensure_can_act_on_task,
    ensure_can_edit_request,
    ensure_can_view_request,
    require_role,
)
from .reputation import Reputation, aggregate_reputation, average_rating, rating_distribution

__all__ = [
    "AuthorizationGate",
    "ensure_can_act_on_task",
    "ensure_can_edit_request",
    "ensure_can_view_request",
    "require_role",
    "Reputation",
    "aggregate_reputation",
    "average_rating",
    "rating_distribution",
]
