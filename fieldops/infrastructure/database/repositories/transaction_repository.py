"""
Transaction service: one unit of work per request session.
"""

from typing import Awaitable, Callable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.application.interfaces.services import TransactionServiceInterface
from fieldops.config.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class TransactionService(TransactionServiceInterface):
    """Commits or rolls back every write made through the bound session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute_in_transaction(self, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Execute an operation within a transaction.

        Args:
            operation: Async function doing the repository writes

        Returns:
            Result of the operation

        Raises:
            Exception: Whatever the operation raised, after rolling back
        """
        try:
            result = await operation()
            await self.session.commit()
            logger.debug("Transaction committed")
            return result

        except Exception as e:
            await self.session.rollback()
            logger.info(
                "Transaction rolled back", error_type=type(e).__name__, error=str(e)
            )
            raise
