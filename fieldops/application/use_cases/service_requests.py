"""Service request ledger use cases."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional
from uuid import UUID

from fieldops.application.interfaces.repositories import (
    ServiceRequestRepositoryInterface,
)
from fieldops.application.interfaces.services import TransactionServiceInterface
from fieldops.application.services.authorization import (
    ensure_can_edit_request,
    ensure_can_view_request,
    require_role,
)
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.exceptions.not_found_error import RequestNotFoundError
from fieldops.domain.exceptions.validation_error import ValidationError
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.role import Role
from fieldops.domain.value_objects.urgency import Urgency
from fieldops.infrastructure.monitoring.metrics import record_service_request_creation

logger = get_logger(__name__)


@dataclass
class CreateServiceRequestRequest:
    """Request for creating a service request."""

    title: str
    description: str
    location: str
    category: str
    urgency: Urgency = Urgency.MEDIUM
    budget: float = 0.0
    preferred_date: Optional[date] = None


class CreateServiceRequestUseCase:
    """Customers open new service requests."""

    def __init__(
        self,
        service_request_repo: ServiceRequestRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.service_request_repo = service_request_repo
        self.transaction_service = transaction_service

    async def execute(
        self, caller: Account, request: CreateServiceRequestRequest
    ) -> ServiceRequest:
        require_role(caller, {Role.CUSTOMER})
        if request.budget is not None and request.budget < 0:
            raise ValidationError("Budget cannot be negative")

        service_request = ServiceRequest(
            user_id=caller.id,
            title=request.title,
            description=request.description,
            location=request.location,
            category=request.category,
            urgency=request.urgency,
            budget=request.budget or 0.0,
            preferred_date=request.preferred_date,
        )

        async def _create() -> ServiceRequest:
            return await self.service_request_repo.create(service_request)

        created = await self.transaction_service.execute_in_transaction(_create)
        record_service_request_creation(created.urgency.value)

        logger.info(
            "Service request created",
            request_id=str(created.id),
            user_id=str(caller.id),
            urgency=created.urgency.value,
        )
        return created


class ListServiceRequestsUseCase:
    """List the requests visible to the caller, newest first."""

    def __init__(self, service_request_repo: ServiceRequestRepositoryInterface):
        self.service_request_repo = service_request_repo

    async def execute(
        self,
        caller: Account,
        status: Optional[RequestStatus] = None,
        urgency: Optional[Urgency] = None,
        category: Optional[str] = None,
    ) -> List[ServiceRequest]:
        scopes = {
            Role.CUSTOMER: {"user_id": caller.id},
            Role.FIELD_WORKER: {"assigned_field_worker_id": caller.id},
            Role.ADMIN: {"urgency": urgency, "category": category},
        }
        return await self.service_request_repo.find(status=status, **scopes[caller.role])


class GetServiceRequestUseCase:
    """Fetch a single request subject to ownership."""

    def __init__(self, service_request_repo: ServiceRequestRepositoryInterface):
        self.service_request_repo = service_request_repo

    async def execute(self, caller: Account, request_id: UUID) -> ServiceRequest:
        service_request = await self.service_request_repo.get_by_id(request_id)
        if not service_request:
            raise RequestNotFoundError(request_id)

        ensure_can_view_request(caller, service_request)
        return service_request


class UpdateServiceRequestUseCase:
    """Owner or admin edit of the descriptive fields of a request."""

    def __init__(
        self,
        service_request_repo: ServiceRequestRepositoryInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.service_request_repo = service_request_repo
        self.transaction_service = transaction_service

    async def execute(
        self, caller: Account, request_id: UUID, changes: Dict[str, Any]
    ) -> ServiceRequest:
        if not changes:
            raise ValidationError("No update data provided")

        service_request = await self.service_request_repo.get_by_id(request_id)
        if not service_request:
            raise RequestNotFoundError(request_id)

        ensure_can_edit_request(caller, service_request)
        if changes.get("budget") is not None and changes["budget"] < 0:
            raise ValidationError("Budget cannot be negative")

        service_request.apply_update(changes)

        async def _save() -> ServiceRequest:
            return await self.service_request_repo.update(service_request)

        updated = await self.transaction_service.execute_in_transaction(_save)
        logger.info(
            "Service request updated",
            request_id=str(request_id),
            fields=sorted(changes),
            updated_by=str(caller.id),
        )
        return updated
