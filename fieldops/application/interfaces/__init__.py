"""
Application interfaces package.
"""

from .repositories import (
    AccountRepositoryInterface,
    ServiceRequestRepositoryInterface,
    TaskRepositoryInterface,
)
from .services import (
    PasswordHasherInterface,
    TokenServiceInterface,
    TransactionServiceInterface,
)

__all__ = [
    "AccountRepositoryInterface",
    "ServiceRequestRepositoryInterface",
    "TaskRepositoryInterface",
    "PasswordHasherInterface",
    "TokenServiceInterface",
    "TransactionServiceInterface",
]
