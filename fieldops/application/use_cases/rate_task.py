"""Rating use cases: rate a completed task and read ratings back."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
from uuid import UUID

from fieldops.application.interfaces.repositories import (
    AccountRepositoryInterface,
    ServiceRequestRepositoryInterface,
    TaskRepositoryInterface,
)
from fieldops.application.interfaces.services import TransactionServiceInterface
from fieldops.application.services.authorization import require_role
from fieldops.application.services.reputation import (
    aggregate_reputation,
    average_rating,
    rating_distribution,
)
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task, validate_rating
from fieldops.domain.exceptions.auth_error import ForbiddenError
from fieldops.domain.exceptions.not_found_error import (
    AccountNotFoundError,
    RequestNotFoundError,
    TaskNotFoundError,
)
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.role import Role
from fieldops.domain.value_objects.task_status import TaskStatus
from fieldops.infrastructure.monitoring.metrics import record_rating

logger = get_logger(__name__)


@dataclass
class RateTaskResult:
    """Result of rating a task."""

    task: Task
    field_worker: Account


@dataclass
class RatableTask:
    """A completed, unrated task with the request details shown to the customer."""

    task: Task
    service_request_title: str
    service_request_description: str


@dataclass
class FieldWorkerRatings:
    """Recent ratings of a field worker with summary statistics."""

    ratings: List[Task]
    total_ratings: int
    average_rating: float
    rating_distribution: Dict[int, int] = field(default_factory=dict)


class RateTaskUseCase:
    """Record the one-time customer rating and refresh worker reputation."""

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
        self,
        caller: Account,
        task_id: UUID,
        rating: int,
        feedback: Optional[str] = None,
    ) -> RateTaskResult:
        require_role(caller, {Role.CUSTOMER})
        rating = validate_rating(rating)

        task = await self.task_repo.get_by_id(task_id)
        if not task:
            raise TaskNotFoundError(task_id)

        service_request = await self.service_request_repo.get_by_id(
            task.service_request_id
        )
        if not service_request:
            raise RequestNotFoundError(task.service_request_id)
        if not service_request.is_owned_by(caller.id):
            raise ForbiddenError("You can only rate tasks for your own service requests")

        task.rate(rating, feedback)
        service_request.record_rating(task.customer_rating, task.customer_feedback)

        async def _rate() -> RateTaskResult:
            updated_task = await self.task_repo.update(task)
            await self.service_request_repo.update(service_request)
            worker = await self._refresh_reputation(task.field_worker_id)
            return RateTaskResult(task=updated_task, field_worker=worker)

        result = await self.transaction_service.execute_in_transaction(_rate)
        record_rating(rating)

        logger.info(
            "Task rated",
            task_id=str(task_id),
            rating=rating,
            field_worker_id=str(task.field_worker_id),
            worker_rating=result.field_worker.rating,
        )
        return result

    async def _refresh_reputation(self, field_worker_id: UUID) -> Account:
        """Recompute the worker's aggregate from all of their tasks."""
        worker = await self.account_repo.get_by_id(field_worker_id)
        if not worker:
            raise AccountNotFoundError(field_worker_id, label="Field worker")

        tasks = await self.task_repo.find(field_worker_id=field_worker_id)
        reputation = aggregate_reputation(tasks)
        worker.record_reputation(reputation.rating, reputation.total_tasks_completed)

        return await self.account_repo.update(worker)


class ListRatableTasksUseCase:
    """Completed, unrated tasks on the caller's own requests."""

    def __init__(
        self,
        service_request_repo: ServiceRequestRepositoryInterface,
        task_repo: TaskRepositoryInterface,
    ):
        self.service_request_repo = service_request_repo
        self.task_repo = task_repo

    async def execute(self, caller: Account) -> List[RatableTask]:
        require_role(caller, {Role.CUSTOMER})

        completed: List[ServiceRequest] = await self.service_request_repo.find(
            user_id=caller.id, status=RequestStatus.COMPLETED
        )

        ratable = []
        for service_request in completed:
            task = await self.task_repo.get_by_service_request_id(service_request.id)
            if task and task.status == TaskStatus.COMPLETED and not task.is_rated:
                ratable.append(
                    RatableTask(
                        task=task,
                        service_request_title=service_request.title,
                        service_request_description=service_request.description,
                    )
                )
        return ratable


class GetFieldWorkerRatingsUseCase:
    """Most recent ratings of a field worker with statistics."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        task_repo: TaskRepositoryInterface,
    ):
        self.account_repo = account_repo
        self.task_repo = task_repo

    async def execute(self, field_worker_id: UUID, limit: int = 10) -> FieldWorkerRatings:
        worker = await self.account_repo.get_by_id(field_worker_id)
        if not worker or not worker.is_field_worker:
            raise AccountNotFoundError(field_worker_id, label="Field worker")

        rated = await self.task_repo.find_rated_by_field_worker(field_worker_id, limit)
        ratings = [task.customer_rating for task in rated]

        return FieldWorkerRatings(
            ratings=rated,
            total_ratings=len(ratings),
            average_rating=average_rating(ratings),
            rating_distribution=rating_distribution(ratings),
        )
