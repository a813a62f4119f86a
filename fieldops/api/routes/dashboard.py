"""Role-dispatched dashboard endpoints."""

from typing import Union

from fastapi import APIRouter

from fieldops.api.dependencies import (
    AccountRepositoryDep,
    AdminDep,
    CurrentAccountDep,
    CustomerDep,
    FieldWorkerDep,
    ServiceRequestRepositoryDep,
    TaskRepositoryDep,
)
from fieldops.api.schemas.common import ApiResponse
from fieldops.api.schemas.dashboard import (
    AdminDashboardResponse,
    CustomerDashboardResponse,
    FieldWorkerDashboardResponse,
)
from fieldops.application.use_cases.dashboard import DashboardUseCase
from fieldops.domain.value_objects.role import Role

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

RESPONSE_SCHEMAS = {
    Role.CUSTOMER: CustomerDashboardResponse,
    Role.FIELD_WORKER: FieldWorkerDashboardResponse,
    Role.ADMIN: AdminDashboardResponse,
}

AnyDashboard = Union[
    CustomerDashboardResponse, FieldWorkerDashboardResponse, AdminDashboardResponse
]


def _use_case(accounts, requests, tasks) -> DashboardUseCase:
    return DashboardUseCase(
        account_repo=accounts, service_request_repo=requests, task_repo=tasks
    )


@router.get("", response_model=ApiResponse[AnyDashboard])
async def dashboard(
    caller: CurrentAccountDep,
    account_repository: AccountRepositoryDep,
    service_request_repository: ServiceRequestRepositoryDep,
    task_repository: TaskRepositoryDep,
):
    """Dashboard for whichever role the caller holds."""
    use_case = _use_case(account_repository, service_request_repository, task_repository)
    data = await use_case.execute(caller)
    return ApiResponse[AnyDashboard](
        message="Dashboard data retrieved successfully",
        data=RESPONSE_SCHEMAS[caller.role].model_validate(data),
    )


@router.get("/customer", response_model=ApiResponse[CustomerDashboardResponse])
async def customer_dashboard(
    customer: CustomerDep,
    account_repository: AccountRepositoryDep,
    service_request_repository: ServiceRequestRepositoryDep,
    task_repository: TaskRepositoryDep,
):
    use_case = _use_case(account_repository, service_request_repository, task_repository)
    data = await use_case.customer(customer)
    return ApiResponse[CustomerDashboardResponse](
        message="Customer dashboard data retrieved successfully",
        data=CustomerDashboardResponse.model_validate(data),
    )


@router.get("/field-worker", response_model=ApiResponse[FieldWorkerDashboardResponse])
async def field_worker_dashboard(
    worker: FieldWorkerDep,
    account_repository: AccountRepositoryDep,
    service_request_repository: ServiceRequestRepositoryDep,
    task_repository: TaskRepositoryDep,
):
    use_case = _use_case(account_repository, service_request_repository, task_repository)
    data = await use_case.field_worker(worker)
    return ApiResponse[FieldWorkerDashboardResponse](
        message="Field worker dashboard data retrieved successfully",
        data=FieldWorkerDashboardResponse.model_validate(data),
    )


@router.get("/admin", response_model=ApiResponse[AdminDashboardResponse])
async def admin_dashboard(
    admin: AdminDep,
    account_repository: AccountRepositoryDep,
    service_request_repository: ServiceRequestRepositoryDep,
    task_repository: TaskRepositoryDep,
):
    use_case = _use_case(account_repository, service_request_repository, task_repository)
    data = await use_case.admin(admin)
    return ApiResponse[AdminDashboardResponse](
        message="Admin dashboard data retrieved successfully",
        data=AdminDashboardResponse.model_validate(data),
    )
