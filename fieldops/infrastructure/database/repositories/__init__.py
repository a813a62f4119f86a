"""
Database repositories package.
"""

from .account_repository import AccountRepository
from .service_request_repository import ServiceRequestRepository
from .task_repository import TaskRepository
from .transaction_repository import TransactionService

__all__ = [
    "AccountRepository",
    "ServiceRequestRepository",
    "TaskRepository",
    "TransactionService",
]
