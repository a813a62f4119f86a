"""Service request repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.application.interfaces.repositories import (
    ServiceRequestRepositoryInterface,
)
from fieldops.config.logging import get_logger
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.exceptions.not_found_error import RequestNotFoundError
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.urgency import Urgency
from fieldops.infrastructure.database.models.service_request import (
    ServiceRequestModel,
)

logger = get_logger(__name__)


class ServiceRequestRepository(ServiceRequestRepositoryInterface):
    """Service request repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, service_request: ServiceRequest) -> ServiceRequest:
        """Create a new service request."""
        model = ServiceRequestModel(id=service_request.id)
        self._copy_to_model(service_request, model)
        model.created_at = service_request.created_at

        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def get_by_id(self, request_id: UUID) -> Optional[ServiceRequest]:
        """Get service request by ID."""
        stmt = select(ServiceRequestModel).where(ServiceRequestModel.id == request_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def find(
        self,
        user_id: Optional[UUID] = None,
        assigned_field_worker_id: Optional[UUID] = None,
        status: Optional[RequestStatus] = None,
        urgency: Optional[Urgency] = None,
        category: Optional[str] = None,
    ) -> List[ServiceRequest]:
        """Find service requests matching all given filters, newest first."""
        stmt = select(ServiceRequestModel)
        if user_id is not None:
            stmt = stmt.where(ServiceRequestModel.user_id == user_id)
        if assigned_field_worker_id is not None:
            stmt = stmt.where(
                ServiceRequestModel.assigned_field_worker_id == assigned_field_worker_id
            )
        if status is not None:
            stmt = stmt.where(ServiceRequestModel.status == RequestStatus(status).value)
        if urgency is not None:
            stmt = stmt.where(ServiceRequestModel.urgency == Urgency(urgency).value)
        if category:
            stmt = stmt.where(ServiceRequestModel.category == category)
        stmt = stmt.order_by(ServiceRequestModel.created_at.desc())

        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def update(self, service_request: ServiceRequest) -> ServiceRequest:
        """Update an existing service request."""
        stmt = select(ServiceRequestModel).where(
            ServiceRequestModel.id == service_request.id
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise RequestNotFoundError(service_request.id)

        self._copy_to_model(service_request, model)

        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    def _copy_to_model(
        self, service_request: ServiceRequest, model: ServiceRequestModel
    ) -> None:
        model.user_id = service_request.user_id
        model.title = service_request.title
        model.description = service_request.description
        model.location = service_request.location
        model.category = service_request.category
        model.urgency = service_request.urgency.value
        model.status = service_request.status.value
        model.budget = service_request.budget
        model.preferred_date = service_request.preferred_date
        model.assigned_field_worker_id = service_request.assigned_field_worker_id
        model.customer_rating = service_request.customer_rating
        model.customer_feedback = service_request.customer_feedback
        model.updated_at = service_request.updated_at

    def _model_to_entity(self, model: ServiceRequestModel) -> ServiceRequest:
        """Convert SQLAlchemy model to domain entity."""
        return ServiceRequest(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            description=model.description,
            location=model.location,
            category=model.category,
            urgency=Urgency(model.urgency),
            status=RequestStatus(model.status),
            budget=model.budget or 0.0,
            preferred_date=model.preferred_date,
            assigned_field_worker_id=model.assigned_field_worker_id,
            customer_rating=model.customer_rating,
            customer_feedback=model.customer_feedback or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
