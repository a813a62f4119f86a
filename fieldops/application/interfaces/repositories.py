"""
Repository interfaces for dependency inversion.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.role import Role
from fieldops.domain.value_objects.task_status import TaskStatus
from fieldops.domain.value_objects.urgency import Urgency


class AccountRepositoryInterface(ABC):
    """Account repository interface."""

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Persist a new account. Raises DuplicateEmailError on email clash."""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email, case-insensitively."""
        pass

    @abstractmethod
    async def find(
        self,
        role: Optional[Role] = None,
        is_active: Optional[bool] = None,
        is_approved: Optional[bool] = None,
    ) -> List[Account]:
        """Find accounts matching all given filters, newest first."""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update account."""
        pass


class ServiceRequestRepositoryInterface(ABC):
    """Service request repository interface."""

    @abstractmethod
    async def create(self, service_request: ServiceRequest) -> ServiceRequest:
        """Persist a new service request."""
        pass

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[ServiceRequest]:
        """Get service request by ID."""
        pass

    @abstractmethod
    async def find(
        self,
        user_id: Optional[UUID] = None,
        assigned_field_worker_id: Optional[UUID] = None,
        status: Optional[RequestStatus] = None,
        urgency: Optional[Urgency] = None,
        category: Optional[str] = None,
    ) -> List[ServiceRequest]:
        """Find service requests matching all given filters, newest first."""
        pass

    @abstractmethod
    async def update(self, service_request: ServiceRequest) -> ServiceRequest:
        """Update service request."""
        pass


class TaskRepositoryInterface(ABC):
    """Task repository interface."""

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Persist a new task. Raises AlreadyAssignedError if the request has one."""
        pass

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID."""
        pass

    @abstractmethod
    async def get_by_service_request_id(self, request_id: UUID) -> Optional[Task]:
        """Get the task bound to a service request, if any."""
        pass

    @abstractmethod
    async def find(
        self,
        field_worker_id: Optional[UUID] = None,
        status: Optional[TaskStatus] = None,
    ) -> List[Task]:
        """Find tasks matching all given filters, most recently assigned first."""
        pass

    @abstractmethod
    async def find_rated_by_field_worker(
        self, field_worker_id: UUID, limit: int = 10
    ) -> List[Task]:
        """Find the most recently completed rated tasks of a field worker."""
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """Update task."""
        pass
