"""Field worker review use cases: listing, approval and rejection."""

from typing import List, Optional
from uuid import UUID

from fieldops.application.interfaces.repositories import AccountRepositoryInterface
from fieldops.application.interfaces.services import TransactionServiceInterface
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.exceptions.not_found_error import AccountNotFoundError
from fieldops.domain.exceptions.validation_error import InvalidStatusError
from fieldops.domain.value_objects.role import Role
from fieldops.infrastructure.monitoring.metrics import record_approval

logger = get_logger(__name__)

APPROVAL_FILTERS = {"pending": False, "approved": True}


class ListFieldWorkersUseCase:
    """List field workers, optionally only pending or approved ones."""

    def __init__(self, account_repo: AccountRepositoryInterface):
        self.account_repo = account_repo

    async def execute(self, approval: Optional[str] = None) -> List[Account]:
        if approval is None:
            return await self.account_repo.find(role=Role.FIELD_WORKER)

        if approval not in APPROVAL_FILTERS:
            raise InvalidStatusError(approval, APPROVAL_FILTERS)

        # Rejected workers are deactivated and never show up as pending
        return await self.account_repo.find(
            role=Role.FIELD_WORKER,
            is_active=True,
            is_approved=APPROVAL_FILTERS[approval],
        )


class _FieldWorkerDecisionUseCase:
    """Shared lookup and persistence for approve/reject."""

    decision = ""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.account_repo = account_repo
        self.transaction_service = transaction_service

    async def execute(self, worker_id: UUID) -> Account:
        worker = await self.account_repo.get_by_id(worker_id)
        if not worker:
            raise AccountNotFoundError(worker_id, label="Field worker")

        self._apply(worker)

        async def _save() -> Account:
            return await self.account_repo.update(worker)

        updated = await self.transaction_service.execute_in_transaction(_save)
        record_approval(self.decision)
        logger.info(
            "Field worker reviewed", worker_id=str(worker_id), decision=self.decision
        )
        return updated

    def _apply(self, worker: Account) -> None:
        raise NotImplementedError


class ApproveFieldWorkerUseCase(_FieldWorkerDecisionUseCase):
    """Unlock login and assignability for a pending field worker."""

    decision = "approved"

    def _apply(self, worker: Account) -> None:
        worker.approve()


class RejectFieldWorkerUseCase(_FieldWorkerDecisionUseCase):
    """Soft-deactivate a field worker."""

    decision = "rejected"

    def _apply(self, worker: Account) -> None:
        worker.reject()
