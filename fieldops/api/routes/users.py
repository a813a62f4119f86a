"""Account registration and lookup endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from fieldops.api.dependencies import (
    AccountRepositoryDep,
    CurrentAccountDep,
    PasswordHasherDep,
    TransactionServiceDep,
)
from fieldops.api.schemas.account import AccountData, AccountResponse, RegisterRequest
from fieldops.api.schemas.common import ApiResponse
from fieldops.application.use_cases.manage_accounts import GetAccountUseCase
from fieldops.application.use_cases.register_account import (
    RegisterAccountRequest,
    RegisterAccountUseCase,
)
from fieldops.domain.value_objects.role import Role

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=ApiResponse[AccountData],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    payload: RegisterRequest,
    account_repository: AccountRepositoryDep,
    password_hasher: PasswordHasherDep,
    transaction_service: TransactionServiceDep,
):
    """Register a customer, field worker or admin account."""
    use_case = RegisterAccountUseCase(
        account_repo=account_repository,
        password_hasher=password_hasher,
        transaction_service=transaction_service,
    )
    account = await use_case.execute(
        RegisterAccountRequest(
            name=payload.name,
            email=payload.email,
            password=payload.password,
            role=payload.role,
            phone=payload.phone,
            skills=payload.skills,
            experience=payload.experience,
            license_number=payload.license_number,
        )
    )

    message = "User registered successfully"
    if account.role == Role.FIELD_WORKER:
        message = (
            "Field worker registered successfully. "
            "Please wait for admin approval before you can receive tasks."
        )

    return ApiResponse[AccountData](
        message=message, data=AccountData(user=AccountResponse.model_validate(account))
    )


@router.get("/{account_id}", response_model=ApiResponse[AccountData])
async def get_user(
    account_id: UUID,
    caller: CurrentAccountDep,
    account_repository: AccountRepositoryDep,
):
    """Get any account by id."""
    account = await GetAccountUseCase(account_repository).execute(account_id)
    return ApiResponse[AccountData](
        message="User retrieved successfully",
        data=AccountData(user=AccountResponse.model_validate(account)),
    )
