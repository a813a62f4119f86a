"""Assign task use case."""

from dataclasses import dataclass
from uuid import UUID

from fieldops.application.interfaces.repositories import (
    AccountRepositoryInterface,
    ServiceRequestRepositoryInterface,
    TaskRepositoryInterface,
)
from fieldops.application.interfaces.services import TransactionServiceInterface
from fieldops.application.services.authorization import require_role
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task
from fieldops.domain.exceptions.conflict_error import (
    AlreadyAssignedError,
    RequestNotOpenError,
    WorkerNotAssignableError,
)
from fieldops.domain.exceptions.not_found_error import (
    AccountNotFoundError,
    RequestNotFoundError,
)
from fieldops.domain.value_objects.role import Role
from fieldops.infrastructure.monitoring.metrics import record_task_assignment

logger = get_logger(__name__)


@dataclass
class AssignTaskResult:
    """Result of an assignment: the new task and the updated request."""

    task: Task
    service_request: ServiceRequest


class AssignTaskUseCase:
    """Use case for binding an open service request to a field worker."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        service_request_repo: ServiceRequestRepositoryInterface,
        task_repo: TaskRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.account_repo = account_repo
        self.service_request_repo = service_request_repo
        self.task_repo = task_repo
        self.transaction_service = transaction_service

    async def execute(
        self, caller: Account, request_id: UUID, field_worker_id: UUID
    ) -> AssignTaskResult:
        """Create the task and mark the request assigned in one transaction."""
        require_role(caller, {Role.ADMIN})

        logger.info(
            "Assigning service request",
            request_id=str(request_id),
            field_worker_id=str(field_worker_id),
            assigned_by=str(caller.id),
        )

        # 1. Request must exist and still be open
        service_request = await self.service_request_repo.get_by_id(request_id)
        if not service_request:
            raise RequestNotFoundError(request_id)
        if not service_request.is_open():
            raise RequestNotOpenError(request_id, service_request.status.value)

        # 2. At most one task per request; the unique index backs this up
        existing = await self.task_repo.get_by_service_request_id(request_id)
        if existing:
            raise AlreadyAssignedError(request_id)

        # 3. Worker must be an active, approved field worker
        worker = await self.account_repo.get_by_id(field_worker_id)
        if not worker:
            raise AccountNotFoundError(field_worker_id, label="Field worker")
        self._ensure_assignable(worker)

        task = Task(
            service_request_id=request_id,
            field_worker_id=field_worker_id,
            assigned_by=caller.id,
        )
        service_request.mark_assigned(field_worker_id)

        async def _assign() -> AssignTaskResult:
            created = await self.task_repo.create(task)
            updated = await self.service_request_repo.update(service_request)
            return AssignTaskResult(task=created, service_request=updated)

        result = await self.transaction_service.execute_in_transaction(_assign)
        record_task_assignment()

        logger.info(
            "Service request assigned",
            task_id=str(result.task.id),
            request_id=str(request_id),
            field_worker_id=str(field_worker_id),
        )
        return result

    def _ensure_assignable(self, worker: Account) -> None:
        if not worker.is_field_worker:
            raise WorkerNotAssignableError(worker.id, "account is not a field worker")
        if not worker.is_active:
            raise WorkerNotAssignableError(worker.id, "account is deactivated")
        if not worker.is_approved:
            raise WorkerNotAssignableError(worker.id, "account is pending approval")
