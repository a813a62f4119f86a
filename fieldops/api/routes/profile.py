"""Self-service profile endpoints."""

from fastapi import APIRouter

from fieldops.api.dependencies import (
    AccountRepositoryDep,
    CurrentAccountDep,
    PasswordHasherDep,
    TransactionServiceDep,
)
from fieldops.api.schemas.account import (
    AccountData,
    AccountResponse,
    PasswordChangeRequest,
    ProfileUpdateRequest,
)
from fieldops.api.schemas.common import ApiResponse, BaseResponse
from fieldops.application.use_cases.manage_profile import (
    ChangePasswordUseCase,
    UpdateProfileUseCase,
)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ApiResponse[AccountData])
async def get_profile(caller: CurrentAccountDep):
    return ApiResponse[AccountData](
        message="Profile retrieved successfully",
        data=AccountData(user=AccountResponse.model_validate(caller)),
    )


@router.put("", response_model=ApiResponse[AccountData])
async def update_profile(
    payload: ProfileUpdateRequest,
    caller: CurrentAccountDep,
    account_repository: AccountRepositoryDep,
    transaction_service: TransactionServiceDep,
):
    """Update the caller's own allow-listed profile fields."""
    use_case = UpdateProfileUseCase(
        account_repo=account_repository, transaction_service=transaction_service
    )
    account = await use_case.execute(caller.id, payload.model_dump(exclude_unset=True))

    return ApiResponse[AccountData](
        message="Profile updated successfully",
        data=AccountData(user=AccountResponse.model_validate(account)),
    )


@router.put("/password", response_model=BaseResponse)
async def change_password(
    payload: PasswordChangeRequest,
    caller: CurrentAccountDep,
    account_repository: AccountRepositoryDep,
    password_hasher: PasswordHasherDep,
    transaction_service: TransactionServiceDep,
):
    use_case = ChangePasswordUseCase(
        account_repo=account_repository,
        password_hasher=password_hasher,
        transaction_service=transaction_service,
    )
    await use_case.execute(caller.id, payload.current_password, payload.new_password)
    return BaseResponse(message="Password changed successfully")
