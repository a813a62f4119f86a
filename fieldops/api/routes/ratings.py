"""Rating endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query

from fieldops.api.dependencies import (
    AccountRepositoryDep,
    CurrentAccountDep,
    CustomerDep,
    ServiceRequestRepositoryDep,
    TaskRepositoryDep,
    TransactionServiceDep,
)
from fieldops.api.schemas.account import AccountResponse
from fieldops.api.schemas.common import ApiResponse
from fieldops.api.schemas.rating import (
    FieldWorkerRatingsData,
    RatableTaskListData,
    RatableTaskResponse,
    RateTaskData,
    RateTaskRequest,
    RatingStatistics,
)
from fieldops.api.schemas.task import TaskResponse
from fieldops.application.use_cases.rate_task import (
    GetFieldWorkerRatingsUseCase,
    ListRatableTasksUseCase,
    RateTaskUseCase,
)

router = APIRouter(prefix="/ratings", tags=["ratings"])


@router.post("/tasks/{task_id}/rate", response_model=ApiResponse[RateTaskData])
async def rate_task(
    task_id: UUID,
    payload: RateTaskRequest,
    caller: CurrentAccountDep,
    account_repository: AccountRepositoryDep,
    service_request_repository: ServiceRequestRepositoryDep,
    task_repository: TaskRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Rate a completed task once (owning customer only)."""
    use_case = RateTaskUseCase(
        account_repo=account_repository,
        service_request_repo=service_request_repository,
        task_repo=task_repository,
        transaction_service=transaction_service,
    )
    result = await use_case.execute(caller, task_id, payload.rating, payload.feedback)
    return ApiResponse[RateTaskData](
        message="Rating submitted successfully",
        data=RateTaskData(
            task=TaskResponse.model_validate(result.task),
            field_worker=AccountResponse.model_validate(result.field_worker),
        ),
    )


@router.get("/field-workers/{worker_id}", response_model=ApiResponse[FieldWorkerRatingsData])
async def field_worker_ratings(
    worker_id: UUID,
    caller: CurrentAccountDep,
    account_repository: AccountRepositoryDep,
    task_repository: TaskRepositoryDep,
    limit: int = Query(10, ge=1, le=100),
):
    result = await GetFieldWorkerRatingsUseCase(
        account_repository, task_repository
    ).execute(worker_id, limit)
    return ApiResponse[FieldWorkerRatingsData](
        message="Field worker ratings retrieved successfully",
        data=FieldWorkerRatingsData(
            ratings=[TaskResponse.model_validate(task) for task in result.ratings],
            statistics=RatingStatistics(
                total_ratings=result.total_ratings,
                average_rating=result.average_rating,
                rating_distribution=result.rating_distribution,
            ),
        ),
    )


@router.get("/ratable-tasks", response_model=ApiResponse[RatableTaskListData])
async def ratable_tasks(
    customer: CustomerDep,
    service_request_repository: ServiceRequestRepositoryDep,
    task_repository: TaskRepositoryDep,
):
    """Completed tasks on the caller's requests that still await a rating."""
    tasks = await ListRatableTasksUseCase(
        service_request_repository, task_repository
    ).execute(customer)
    return ApiResponse[RatableTaskListData](
        message="Ratable tasks retrieved successfully",
        data=RatableTaskListData(
            tasks=[RatableTaskResponse.model_validate(item) for item in tasks],
            count=len(tasks),
        ),
    )
