"""Login use case."""

from dataclasses import dataclass

from fieldops.application.interfaces.repositories import AccountRepositoryInterface
from fieldops.application.interfaces.services import (
    PasswordHasherInterface,
    TokenServiceInterface,
)
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.exceptions.auth_error import (
    AuthenticationError,
    PendingApprovalError,
)
from fieldops.infrastructure.monitoring.metrics import record_login

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


@dataclass
class LoginResult:
    """Result of a successful login."""

    token: str
    account: Account


class LoginUseCase:
    """Use case for exchanging credentials for a session token."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        password_hasher: PasswordHasherInterface,
        token_service: TokenServiceInterface,
    ):
        self.account_repo = account_repo
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, email: str, password: str) -> LoginResult:
        account = await self.account_repo.get_by_email(email)

        # Same message for unknown email and wrong password
        if not account or not self.password_hasher.verify(
            password, account.password_hash
        ):
            record_login("invalid_credentials")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not account.is_active:
            record_login("deactivated")
            raise AuthenticationError("Account is deactivated")

        if not account.can_login():
            record_login("pending_approval")
            raise PendingApprovalError()

        token = self.token_service.issue(account.id)
        record_login("success")
        logger.info("Login successful", account_id=str(account.id), role=account.role.value)

        return LoginResult(token=token, account=account)
