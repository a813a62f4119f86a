"""
Service request API schemas.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.urgency import Urgency

from .common import TimestampMixin


class ServiceRequestCreateRequest(BaseModel):
    """Service request creation schema."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1, max_length=100)
    urgency: Urgency = Urgency.MEDIUM
    budget: float = Field(0.0, ge=0)
    preferred_date: Optional[date] = None


class ServiceRequestUpdateRequest(BaseModel):
    """Editable fields of a service request; status and assignment are not among them."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = None
    urgency: Optional[Urgency] = None
    budget: Optional[float] = Field(None, ge=0)
    preferred_date: Optional[date] = None


class ServiceRequestResponse(TimestampMixin):
    """Service request response schema."""

    id: UUID
    user_id: UUID
    title: str
    description: str
    location: str
    category: str
    urgency: Urgency
    status: RequestStatus
    budget: float
    preferred_date: Optional[date]
    assigned_field_worker_id: Optional[UUID]
    customer_rating: Optional[int]
    customer_feedback: str

    model_config = ConfigDict(from_attributes=True)


class ServiceRequestData(BaseModel):
    service_request: ServiceRequestResponse


class ServiceRequestListData(BaseModel):
    service_requests: List[ServiceRequestResponse]
    count: int
