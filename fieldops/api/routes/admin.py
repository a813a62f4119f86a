"""Admin account management endpoints."""

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
    AccountStatusRequest,
    PagedAccountsData,
)
from fieldops.api.schemas.common import ApiResponse, PaginationSchema
from fieldops.application.use_cases.manage_accounts import (
    ListAccountsUseCase,
    SetAccountActiveUseCase,
)
from fieldops.domain.value_objects.role import Role

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/users", response_model=ApiResponse[PagedAccountsData])
async def list_users(
    admin: AdminDep,
    account_repository: AccountRepositoryDep,
    role: Optional[Role] = None,
    is_active: Optional[bool] = None,
    is_approved: Optional[bool] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
):
    """Paginated account listing with optional filters."""
    result = await ListAccountsUseCase(account_repository).execute(
        role=role,
        is_active=is_active,
        is_approved=is_approved,
        page=page,
        limit=limit,
    )
    return ApiResponse[PagedAccountsData](
        message="Users retrieved successfully",
        data=PagedAccountsData(
            users=[AccountResponse.model_validate(account) for account in result.items],
            pagination=PaginationSchema(
                current_page=result.current_page,
                total_pages=result.total_pages,
                total=result.total,
                has_next=result.has_next,
                has_prev=result.has_prev,
            ),
        ),
    )


@router.put("/users/{account_id}/status", response_model=ApiResponse[AccountData])
async def set_user_status(
    account_id: UUID,
    payload: AccountStatusRequest,
    admin: AdminDep,
    account_repository: AccountRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Activate or deactivate an account."""
    use_case = SetAccountActiveUseCase(account_repository, transaction_service)
    account = await use_case.execute(admin.id, account_id, payload.is_active)

    state = "activated" if account.is_active else "deactivated"
    return ApiResponse[AccountData](
        message=f"User {state} successfully",
        data=AccountData(user=AccountResponse.model_validate(account)),
    )
