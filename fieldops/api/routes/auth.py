"""Authentication endpoints."""

from fastapi import APIRouter

from fieldops.api.dependencies import (
    AccountRepositoryDep,
    CurrentAccountDep,
    PasswordHasherDep,
    TokenServiceDep,
)
from fieldops.api.schemas.account import AccountData, AccountResponse, LoginData, LoginRequest
from fieldops.api.schemas.common import ApiResponse, BaseResponse
from fieldops.application.use_cases.login import LoginUseCase
from fieldops.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=ApiResponse[LoginData])
async def login(
    credentials: LoginRequest,
    account_repository: AccountRepositoryDep,
    password_hasher: PasswordHasherDep,
    token_service: TokenServiceDep,
):
    """Exchange email and password for a bearer token."""
    use_case = LoginUseCase(
        account_repo=account_repository,
        password_hasher=password_hasher,
        token_service=token_service,
    )
    result = await use_case.execute(credentials.email, credentials.password)

    return ApiResponse[LoginData](
        message="Login successful",
        data=LoginData(
            token=result.token, user=AccountResponse.model_validate(result.account)
        ),
    )


@router.get("/me", response_model=ApiResponse[AccountData])
async def me(caller: CurrentAccountDep):
    """Return the authenticated account."""
    return ApiResponse[AccountData](
        message="User profile retrieved successfully",
        data=AccountData(user=AccountResponse.model_validate(caller)),
    )


@router.post("/logout", response_model=BaseResponse)
async def logout(caller: CurrentAccountDep):
    """Tokens are stateless; the client discards its copy."""
    logger.info("Logout", account_id=str(caller.id))
    return BaseResponse(message="Logout successful. Please remove the token from client storage.")
