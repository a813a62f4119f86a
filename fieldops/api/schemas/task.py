"""
Task API schemas.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fieldops.domain.value_objects.task_status import TaskStatus

from .common import TimestampMixin
from .service_request import ServiceRequestResponse


class AssignTaskRequest(BaseModel):
    """Task assignment request schema."""

    service_request_id: UUID
    field_worker_id: UUID


class TaskStatusUpdateRequest(BaseModel):
    """Task status change request schema.

    status is kept as a plain string so that unknown values are reported
    with the list of valid statuses.
    """

    status: str = Field(..., min_length=1)
    completion_notes: Optional[str] = None
    completion_photos: Optional[List[str]] = None


class TaskResponse(TimestampMixin):
    """Task response schema."""

    id: UUID
    service_request_id: UUID
    field_worker_id: UUID
    assigned_by: UUID
    status: TaskStatus
    assigned_at: datetime
    started_at: Optional[datetime]
    completed_at: Optional[datetime]
    completion_notes: str
    completion_photos: List[str]
    customer_rating: Optional[int]
    customer_feedback: str

    model_config = ConfigDict(from_attributes=True)


class TaskData(BaseModel):
    task: TaskResponse


class TaskListData(BaseModel):
    tasks: List[TaskResponse]
    count: int


class TaskWithRequestData(BaseModel):
    task: TaskResponse
    service_request: ServiceRequestResponse
