"""Account lookup and admin account management use cases."""

import math
from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from fieldops.application.interfaces.repositories import AccountRepositoryInterface
from fieldops.application.interfaces.services import TransactionServiceInterface
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.exceptions.not_found_error import AccountNotFoundError
from fieldops.domain.exceptions.validation_error import ValidationError
from fieldops.domain.value_objects.role import Role

logger = get_logger(__name__)


@dataclass
class Page:
    """One page of results with pagination metadata."""

    items: List[Account]
    current_page: int
    total_pages: int
    total: int

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1


class GetAccountUseCase:
    """Look up a single account."""

    def __init__(self, account_repo: AccountRepositoryInterface):
        self.account_repo = account_repo

    async def execute(self, account_id: UUID) -> Account:
        account = await self.account_repo.get_by_id(account_id)
        if not account:
            raise AccountNotFoundError(account_id)
        return account


class ListAccountsUseCase:
    """Paginated account listing for administrators."""

    def __init__(self, account_repo: AccountRepositoryInterface):
        self.account_repo = account_repo

    async def execute(
        self,
        role: Optional[Role] = None,
        is_active: Optional[bool] = None,
        is_approved: Optional[bool] = None,
        page: int = 1,
        limit: int = 20,
    ) -> Page:
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive")

        accounts = await self.account_repo.find(
            role=role, is_active=is_active, is_approved=is_approved
        )
        total = len(accounts)
        start = (page - 1) * limit

        return Page(
            items=accounts[start : start + limit],
            current_page=page,
            total_pages=math.ceil(total / limit),
            total=total,
        )


class SetAccountActiveUseCase:
    """Activate or soft-deactivate any account."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.account_repo = account_repo
        self.transaction_service = transaction_service

    async def execute(self, admin_id: UUID, account_id: UUID, active: bool) -> Account:
        if admin_id == account_id and not active:
            raise ValidationError("You cannot deactivate your own account")

        account = await self.account_repo.get_by_id(account_id)
        if not account:
            raise AccountNotFoundError(account_id)

        account.set_active(active)

        async def _save() -> Account:
            return await self.account_repo.update(account)

        updated = await self.transaction_service.execute_in_transaction(_save)
        logger.info(
            "Account status changed",
            account_id=str(account_id),
            is_active=active,
            changed_by=str(admin_id),
        )
        return updated
