"""Task assignment and lifecycle endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, status

from fieldops.api.dependencies import (
    AccountRepositoryDep,
    AdminDep,
    CurrentAccountDep,
    ServiceRequestRepositoryDep,
    TaskRepositoryDep,
    TransactionServiceDep,
)
from fieldops.api.schemas.common import ApiResponse
from fieldops.api.schemas.service_request import ServiceRequestResponse
from fieldops.api.schemas.task import (
    AssignTaskRequest,
    TaskData,
    TaskListData,
    TaskResponse,
    TaskStatusUpdateRequest,
    TaskWithRequestData,
)
from fieldops.application.use_cases.assign_task import AssignTaskUseCase
from fieldops.application.use_cases.query_tasks import GetTaskUseCase, ListTasksUseCase
from fieldops.application.use_cases.update_task_status import (
    UpdateTaskStatusRequest,
    UpdateTaskStatusUseCase,
)
from fieldops.domain.value_objects.task_status import TaskStatus

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post(
    "/assign",
    response_model=ApiResponse[TaskWithRequestData],
    status_code=status.HTTP_201_CREATED,
)
async def assign_task(
    payload: AssignTaskRequest,
    admin: AdminDep,
    account_repository: AccountRepositoryDep,
    service_request_repository: ServiceRequestRepositoryDep,
    task_repository: TaskRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Assign an open service request to a field worker (admins only)."""
    use_case = AssignTaskUseCase(
        account_repo=account_repository,
        service_request_repo=service_request_repository,
        task_repo=task_repository,
        transaction_service=transaction_service,
    )
    result = await use_case.execute(
        admin, payload.service_request_id, payload.field_worker_id
    )
    return ApiResponse[TaskWithRequestData](
        message="Service request assigned to field worker successfully",
        data=TaskWithRequestData(
            task=TaskResponse.model_validate(result.task),
            service_request=ServiceRequestResponse.model_validate(result.service_request),
        ),
    )


@router.get("", response_model=ApiResponse[TaskListData])
async def list_tasks(
    caller: CurrentAccountDep,
    task_repository: TaskRepositoryDep,
    status: Optional[TaskStatus] = None,
):
    tasks = await ListTasksUseCase(task_repository).execute(caller, status)
    return ApiResponse[TaskListData](
        message="Tasks retrieved successfully",
        data=TaskListData(
            tasks=[TaskResponse.model_validate(task) for task in tasks],
            count=len(tasks),
        ),
    )


@router.get("/{task_id}", response_model=ApiResponse[TaskData])
async def get_task(
    task_id: UUID,
    caller: CurrentAccountDep,
    task_repository: TaskRepositoryDep,
):
    task = await GetTaskUseCase(task_repository).execute(caller, task_id)
    return ApiResponse[TaskData](
        message="Task retrieved successfully",
        data=TaskData(task=TaskResponse.model_validate(task)),
    )


@router.put("/{task_id}/status", response_model=ApiResponse[TaskWithRequestData])
async def update_task_status(
    task_id: UUID,
    payload: TaskStatusUpdateRequest,
    caller: CurrentAccountDep,
    service_request_repository: ServiceRequestRepositoryDep,
    task_repository: TaskRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Move a task through its lifecycle (own task, or any task for admins)."""
    use_case = UpdateTaskStatusUseCase(
        service_request_repo=service_request_repository,
        task_repo=task_repository,
        transaction_service=transaction_service,
    )
    result = await use_case.execute(
        caller,
        UpdateTaskStatusRequest(
            task_id=task_id,
            status=payload.status,
            completion_notes=payload.completion_notes,
            completion_photos=payload.completion_photos,
        ),
    )
    return ApiResponse[TaskWithRequestData](
        message=f"Task status updated to {result.task.status.value}",
        data=TaskWithRequestData(
            task=TaskResponse.model_validate(result.task),
            service_request=ServiceRequestResponse.model_validate(result.service_request),
        ),
    )
