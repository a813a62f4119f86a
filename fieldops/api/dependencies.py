"""
FastAPI dependency injection container.
"""

from typing import Annotated, AsyncGenerator, Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.application.services.authorization import AuthorizationGate, require_role
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.value_objects.role import Role
from fieldops.infrastructure.database.repositories.account_repository import (
    AccountRepository,
)
from fieldops.infrastructure.database.repositories.service_request_repository import (
    ServiceRequestRepository,
)
from fieldops.infrastructure.database.repositories.task_repository import (
    TaskRepository,
)
from fieldops.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from fieldops.infrastructure.security.password_hasher import PasswordHasher
from fieldops.infrastructure.security.token_service import TokenService

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_password_hasher = PasswordHasher()


# Database Dependencies
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request from the app's session factory."""
    async with request.app.state.session_factory() as session:
        yield session


async def get_account_repository(
    db: AsyncSession = Depends(get_db_session),
) -> AccountRepository:
    """Get account repository instance."""
    return AccountRepository(db)


async def get_service_request_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ServiceRequestRepository:
    """Get service request repository instance."""
    return ServiceRequestRepository(db)


async def get_task_repository(
    db: AsyncSession = Depends(get_db_session),
) -> TaskRepository:
    """Get task repository instance."""
    return TaskRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service bound to the request session."""
    return TransactionService(db)


# Credential Dependencies
async def get_password_hasher() -> PasswordHasher:
    return _password_hasher


async def get_token_service() -> TokenService:
    return TokenService()


async def get_authorization_gate(
    account_repo: AccountRepository = Depends(get_account_repository),
    token_service: TokenService = Depends(get_token_service),
) -> AuthorizationGate:
    return AuthorizationGate(account_repo, token_service)


async def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    gate: AuthorizationGate = Depends(get_authorization_gate),
) -> Account:
    """Resolve the caller from the Authorization: Bearer header."""
    token = credentials.credentials if credentials else None
    return await gate.authenticate(token)


def allow_roles(*roles: Role) -> Callable[..., Account]:
    """Build a dependency that admits only callers holding one of roles."""

    async def dependency(
        caller: Account = Depends(get_current_account),
    ) -> Account:
        require_role(caller, roles)
        return caller

    return dependency


# Type aliases for cleaner dependency injection
DbSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
AccountRepositoryDep = Annotated[AccountRepository, Depends(get_account_repository)]
ServiceRequestRepositoryDep = Annotated[
    ServiceRequestRepository, Depends(get_service_request_repository)
]
TaskRepositoryDep = Annotated[TaskRepository, Depends(get_task_repository)]
TransactionServiceDep = Annotated[TransactionService, Depends(get_transaction_service)]
PasswordHasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
CurrentAccountDep = Annotated[Account, Depends(get_current_account)]
CustomerDep = Annotated[Account, Depends(allow_roles(Role.CUSTOMER))]
FieldWorkerDep = Annotated[Account, Depends(allow_roles(Role.FIELD_WORKER))]
AdminDep = Annotated[Account, Depends(allow_roles(Role.ADMIN))]
