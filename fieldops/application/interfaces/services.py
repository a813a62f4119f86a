"""
Service interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar
from uuid import UUID

T = TypeVar("T")


class PasswordHasherInterface(ABC):
    """One-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password."""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext candidate against a stored hash."""
        pass


class TokenServiceInterface(ABC):
    """Signed session token issue/verify."""

    @abstractmethod
    def issue(self, subject: UUID) -> str:
        """Issue a signed token for an account id."""
        pass

    @abstractmethod
    def verify(self, token: str) -> UUID:
        """Return the account id in a token or raise AuthenticationError."""
        pass


class TransactionServiceInterface(ABC):
    """Unit-of-work boundary."""

    @abstractmethod
    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run operation and commit, or roll back and re-raise."""
        pass
