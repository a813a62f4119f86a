"""Update task status use case."""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from fieldops.application.interfaces.repositories import (
    ServiceRequestRepositoryInterface,
    TaskRepositoryInterface,
)
from fieldops.application.interfaces.services import TransactionServiceInterface
from fieldops.application.services.authorization import ensure_can_act_on_task
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task
from fieldops.domain.exceptions.not_found_error import (
    RequestNotFoundError,
    TaskNotFoundError,
)
from fieldops.domain.exceptions.validation_error import InvalidStatusError
from fieldops.domain.value_objects.task_status import TaskStatus
from fieldops.infrastructure.monitoring.metrics import record_task_transition

logger = get_logger(__name__)


@dataclass
class UpdateTaskStatusRequest:
    """Request for changing a task's status."""

    task_id: UUID
    status: str
    completion_notes: Optional[str] = None
    completion_photos: Optional[List[str]] = None


@dataclass
class UpdateTaskStatusResult:
    """Result of a status change."""

    task: Task
    service_request: ServiceRequest


def parse_task_status(value: str) -> TaskStatus:
    """Parse a raw status value, rejecting anything outside the task status set."""
    try:
        return TaskStatus(value)
    except ValueError:
        raise InvalidStatusError(value, [status.value for status in TaskStatus])


class UpdateTaskStatusUseCase:
    """Advance a task through its lifecycle and mirror it onto the request."""

    def __init__(
        self,
        service_request_repo: ServiceRequestRepositoryInterface,
        task_repo: TaskRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.service_request_repo = service_request_repo
        self.task_repo = task_repo
        self.transaction_service = transaction_service

    async def execute(
        self, caller: Account, request: UpdateTaskStatusRequest
    ) -> UpdateTaskStatusResult:
        target = parse_task_status(request.status)

        task = await self.task_repo.get_by_id(request.task_id)
        if not task:
            raise TaskNotFoundError(request.task_id)

        ensure_can_act_on_task(caller, task)

        service_request = await self.service_request_repo.get_by_id(
            task.service_request_id
        )
        if not service_request:
            raise RequestNotFoundError(task.service_request_id)

        previous = task.status
        task.change_status(
            target,
            completion_notes=request.completion_notes,
            completion_photos=request.completion_photos,
        )
        service_request.mirror_task_status(task.status)

        async def _save() -> UpdateTaskStatusResult:
            updated_task = await self.task_repo.update(task)
            updated_request = await self.service_request_repo.update(service_request)
            return UpdateTaskStatusResult(
                task=updated_task, service_request=updated_request
            )

        result = await self.transaction_service.execute_in_transaction(_save)
        record_task_transition(previous.value, target.value)

        logger.info(
            "Task status updated",
            task_id=str(task.id),
            previous=previous.value,
            current=target.value,
            updated_by=str(caller.id),
        )
        return result
