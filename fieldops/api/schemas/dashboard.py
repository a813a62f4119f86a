"""
Dashboard API schemas.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from .account import AccountResponse
from .service_request import ServiceRequestResponse
from .task import TaskResponse


class CustomerDashboardResponse(BaseModel):
    role: str = "customer"
    total_requests: int
    requests_by_status: Dict[str, int]
    pending_ratings: int
    recent_requests: List[ServiceRequestResponse]

    model_config = ConfigDict(from_attributes=True)


class FieldWorkerDashboardResponse(BaseModel):
    role: str = "field_worker"
    total_tasks: int
    tasks_by_status: Dict[str, int]
    completion_rate: int
    average_rating: float
    total_ratings: int
    recent_tasks: List[TaskResponse]

    model_config = ConfigDict(from_attributes=True)


class AdminDashboardResponse(BaseModel):
    role: str = "admin"
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
    recent_service_requests: List[ServiceRequestResponse]
    recent_tasks: List[TaskResponse]
    pending_approvals: List[AccountResponse]

    model_config = ConfigDict(from_attributes=True)
