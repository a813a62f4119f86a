"""
Database models package.
"""

from .account import AccountModel
from .base import Base, BaseModel
from .service_request import ServiceRequestModel
from .task import TaskModel

__all__ = [
    "Base",
    "BaseModel",
    "AccountModel",
    "ServiceRequestModel",
    "TaskModel",
]
