"""
Domain entities package.
"""

from .account import Account
from .service_request import ServiceRequest
from .task import Task

__all__ = [
    "Account",
    "ServiceRequest",
    "Task",
]
