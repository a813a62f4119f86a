"""Field worker review endpoints (admin)."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query

from fieldops.api.dependencies import (
    AccountRepositoryDep,
    AdminDep,
    TransactionServiceDep,
)
from fieldops.api.schemas.account import (
    AccountData,
    AccountResponse,
    FieldWorkerListData,
)
from fieldops.api.schemas.common import ApiResponse
from fieldops.application.use_cases.review_field_workers import (
    ApproveFieldWorkerUseCase,
    ListFieldWorkersUseCase,
    RejectFieldWorkerUseCase,
)

router = APIRouter(prefix="/field-workers", tags=["field-workers"])


@router.get("", response_model=ApiResponse[FieldWorkerListData])
async def list_field_workers(
    admin: AdminDep,
    account_repository: AccountRepositoryDep,
    approval: Optional[str] = Query(None, alias="status"),
):
    """List field workers, optionally ?status=pending|approved."""
    workers = await ListFieldWorkersUseCase(account_repository).execute(approval)
    return ApiResponse[FieldWorkerListData](
        message="Field workers retrieved successfully",
        data=FieldWorkerListData(
            workers=[AccountResponse.model_validate(worker) for worker in workers],
            count=len(workers),
        ),
    )


@router.put("/{worker_id}/approve", response_model=ApiResponse[AccountData])
async def approve_field_worker(
    worker_id: UUID,
    admin: AdminDep,
    account_repository: AccountRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    use_case = ApproveFieldWorkerUseCase(account_repository, transaction_service)
    worker = await use_case.execute(worker_id)
    return ApiResponse[AccountData](
        message="Field worker approved successfully",
        data=AccountData(user=AccountResponse.model_validate(worker)),
    )


@router.put("/{worker_id}/reject", response_model=ApiResponse[AccountData])
async def reject_field_worker(
    worker_id: UUID,
    admin: AdminDep,
    account_repository: AccountRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    use_case = RejectFieldWorkerUseCase(account_repository, transaction_service)
    worker = await use_case.execute(worker_id)
    return ApiResponse[AccountData](
        message="Field worker rejected and deactivated",
        data=AccountData(user=AccountResponse.model_validate(worker)),
    )
