"""
Use cases package.

This package contains the business logic use cases that orchestrate
the application services and repositories.
"""

from .assign_task import AssignTaskResult, AssignTaskUseCase
from .dashboard import DashboardUseCase
from .login import LoginResult, LoginUseCase
from .manage_accounts import (
    GetAccountUseCase,
    ListAccountsUseCase,
    Page,
    SetAccountActiveUseCase,
)
from .manage_profile import ChangePasswordUseCase, UpdateProfileUseCase
from .query_tasks import GetTaskUseCase, ListTasksUseCase
from .rate_task import (
    GetFieldWorkerRatingsUseCase,
    ListRatableTasksUseCase,
    RateTaskUseCase,
)
from .register_account import RegisterAccountRequest, RegisterAccountUseCase
from .review_field_workers import (
    ApproveFieldWorkerUseCase,
    ListFieldWorkersUseCase,
    RejectFieldWorkerUseCase,
)
from .service_requests import (
    CreateServiceRequestRequest,
    CreateServiceRequestUseCase,
    GetServiceRequestUseCase,
    ListServiceRequestsUseCase,
    UpdateServiceRequestUseCase,
)
from .update_task_status import UpdateTaskStatusRequest, UpdateTaskStatusUseCase

__all__ = [
    "ApproveFieldWorkerUseCase",
    "AssignTaskResult",
    "AssignTaskUseCase",
    "ChangePasswordUseCase",
    "CreateServiceRequestRequest",
    "CreateServiceRequestUseCase",
    "DashboardUseCase",
    "GetAccountUseCase",
    "GetFieldWorkerRatingsUseCase",
    "GetServiceRequestUseCase",
    "GetTaskUseCase",
    "ListAccountsUseCase",
    "ListFieldWorkersUseCase",
    "ListRatableTasksUseCase",
    "ListServiceRequestsUseCase",
    "ListTasksUseCase",
    "LoginResult",
    "LoginUseCase",
    "Page",
    "RateTaskUseCase",
    "RegisterAccountRequest",
    "RegisterAccountUseCase",
    "RejectFieldWorkerUseCase",
    "SetAccountActiveUseCase",
    "UpdateProfileUseCase",
    "UpdateServiceRequestUseCase",
    "UpdateTaskStatusRequest",
    "UpdateTaskStatusUseCase",
]
