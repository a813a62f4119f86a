"""Role-dispatched dashboard use case."""

from collections import Counter
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Dict, Iterable, List, Type, Union

from fieldops.application.interfaces.repositories import (
    AccountRepositoryInterface,
    ServiceRequestRepositoryInterface,
    TaskRepositoryInterface,
)
from fieldops.application.services.authorization import require_role
from fieldops.application.services.reputation import average_rating
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.role import Role
from fieldops.domain.value_objects.task_status import TaskStatus

RECENT_REQUESTS = 5
RECENT_TASKS = 5
ADMIN_RECENT = 10
PENDING_APPROVALS = 5


def count_by_status(items: Iterable, statuses: Type[Enum]) -> Dict[str, int]:
    """Count items per status, with every status present."""
    counts = Counter(item.status.value for item in items)
    return {status.value: counts.get(status.value, 0) for status in statuses}


def percentage(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    value = Decimal(part * 100) / Decimal(whole)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass
class CustomerDashboard:
    total_requests: int
    requests_by_status: Dict[str, int]
    pending_ratings: int
    recent_requests: List[ServiceRequest] = field(default_factory=list)


@dataclass
class FieldWorkerDashboard:
    total_tasks: int
    tasks_by_status: Dict[str, int]
    completion_rate: int
    average_rating: float
    total_ratings: int
    recent_tasks: List[Task] = field(default_factory=list)


@dataclass
class AdminDashboard:
    total_users: int
    total_customers: int
    total_field_workers: int
    pending_field_workers: int
    approved_field_workers: int
    active_users: int
    total_service_requests: int
    requests_by_status: Dict[str, int]
    total_tasks: int
    tasks_by_status: Dict[str, int]
    average_worker_rating: float
    completion_rate: int
    recent_service_requests: List[ServiceRequest] = field(default_factory=list)
    recent_tasks: List[Task] = field(default_factory=list)
    pending_approvals: List[Account] = field(default_factory=list)


Dashboard = Union[CustomerDashboard, FieldWorkerDashboard, AdminDashboard]


class DashboardUseCase:
    """Build the aggregate statistics view for the caller's role."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        service_request_repo: ServiceRequestRepositoryInterface,
        task_repo: TaskRepositoryInterface,
    ):
        self.account_repo = account_repo
        self.service_request_repo = service_request_repo
        self.task_repo = task_repo
        self._builders = {
            Role.CUSTOMER: self.customer,
            Role.FIELD_WORKER: self.field_worker,
            Role.ADMIN: self.admin,
        }

    async def execute(self, caller: Account) -> Dashboard:
        return await self._builders[caller.role](caller)

    async def customer(self, caller: Account) -> CustomerDashboard:
        require_role(caller, {Role.CUSTOMER})
        requests = await self.service_request_repo.find(user_id=caller.id)

        return CustomerDashboard(
            total_requests=len(requests),
            requests_by_status=count_by_status(requests, RequestStatus),
            pending_ratings=sum(
                1
                for request in requests
                if request.status == RequestStatus.COMPLETED
                and request.customer_rating is None
            ),
            recent_requests=requests[:RECENT_REQUESTS],
        )

    async def field_worker(self, caller: Account) -> FieldWorkerDashboard:
        require_role(caller, {Role.FIELD_WORKER})
        tasks = await self.task_repo.find(field_worker_id=caller.id)
        by_status = count_by_status(tasks, TaskStatus)

        return FieldWorkerDashboard(
            total_tasks=len(tasks),
            tasks_by_status=by_status,
            completion_rate=percentage(by_status[TaskStatus.COMPLETED.value], len(tasks)),
            average_rating=caller.rating,
            total_ratings=sum(1 for task in tasks if task.is_rated),
            recent_tasks=tasks[:RECENT_TASKS],
        )

    async def admin(self, caller: Account) -> AdminDashboard:
        require_role(caller, {Role.ADMIN})
        accounts = await self.account_repo.find()
        requests = await self.service_request_repo.find()
        tasks = await self.task_repo.find()

        workers = [account for account in accounts if account.is_field_worker]
        pending = [w for w in workers if w.is_active and not w.is_approved]
        requests_by_status = count_by_status(requests, RequestStatus)

        return AdminDashboard(
            total_users=len(accounts),
            total_customers=sum(1 for a in accounts if a.role == Role.CUSTOMER),
            total_field_workers=len(workers),
            pending_field_workers=len(pending),
            approved_field_workers=sum(1 for w in workers if w.is_approved),
            active_users=sum(1 for a in accounts if a.is_active),
            total_service_requests=len(requests),
            requests_by_status=requests_by_status,
            total_tasks=len(tasks),
            tasks_by_status=count_by_status(tasks, TaskStatus),
            average_worker_rating=average_rating(
                worker.rating for worker in workers if worker.rating > 0
            ),
            completion_rate=percentage(
                requests_by_status[RequestStatus.COMPLETED.value], len(requests)
            ),
            recent_service_requests=requests[:ADMIN_RECENT],
            recent_tasks=tasks[:ADMIN_RECENT],
            pending_approvals=pending[:PENDING_APPROVALS],
        )
