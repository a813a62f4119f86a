"""Self-service profile use cases."""

from typing import Any, Dict
from uuid import UUID

from fieldops.application.interfaces.repositories import AccountRepositoryInterface
from fieldops.application.interfaces.services import (
    PasswordHasherInterface,
    TransactionServiceInterface,
)
from fieldops.config.logging import get_logger
from fieldops.config.settings import settings
from fieldops.domain.entities.account import Account
from fieldops.domain.exceptions.not_found_error import AccountNotFoundError
from fieldops.domain.exceptions.validation_error import ValidationError

logger = get_logger(__name__)


class UpdateProfileUseCase:
    """Apply an allow-listed profile update to the caller's own account."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.account_repo = account_repo
        self.transaction_service = transaction_service

    async def execute(self, account_id: UUID, changes: Dict[str, Any]) -> Account:
        account = await self.account_repo.get_by_id(account_id)
        if not account:
            raise AccountNotFoundError(account_id)

        account.apply_profile_update(changes)

        async def _save() -> Account:
            return await self.account_repo.update(account)

        updated = await self.transaction_service.execute_in_transaction(_save)
        logger.info(
            "Profile updated", account_id=str(account_id), fields=sorted(changes)
        )
        return updated


class ChangePasswordUseCase:
    """Replace the caller's password after verifying the current one."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        password_hasher: PasswordHasherInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.account_repo = account_repo
        self.password_hasher = password_hasher
        self.transaction_service = transaction_service

    async def execute(
        self, account_id: UUID, current_password: str, new_password: str
    ) -> None:
        account = await self.account_repo.get_by_id(account_id)
        if not account:
            raise AccountNotFoundError(account_id)

        if not self.password_hasher.verify(current_password, account.password_hash):
            raise ValidationError("Current password is incorrect")
        if len(new_password or "") < settings.PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"New password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
            )

        account.change_password_hash(self.password_hasher.hash(new_password))

        async def _save() -> Account:
            return await self.account_repo.update(account)

        await self.transaction_service.execute_in_transaction(_save)
        logger.info("Password changed", account_id=str(account_id))
