"""
Authorization gate: caller resolution, role checks and ownership checks.
"""

from typing import Iterable

from fieldops.application.interfaces.repositories import AccountRepositoryInterface
from fieldops.application.interfaces.services import TokenServiceInterface
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task
from fieldops.domain.exceptions.auth_error import AuthenticationError, ForbiddenError
from fieldops.domain.value_objects.role import Role

logger = get_logger(__name__)


class AuthorizationGate:
    """Stateless check run before every protected operation."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        token_service: TokenServiceInterface,
    ):
        self.account_repo = account_repo
        self.token_service = token_service

    async def authenticate(self, token: str) -> Account:
        """Resolve the caller behind a bearer token.

        The account is always re-fetched so that a deactivated account is
        rejected even while its token is still valid.
        """
        if not token:
            raise AuthenticationError("Access denied. No token provided.")

        account_id = self.token_service.verify(token)
        account = await self.account_repo.get_by_id(account_id)

        if not account:
            raise AuthenticationError("Invalid token. User not found.")
        if not account.is_active:
            logger.info("Rejected token of deactivated account", account_id=str(account_id))
            raise AuthenticationError("Account is deactivated.")

        return account


def require_role(caller: Account, allowed: Iterable[Role]) -> None:
    """Fail with ForbiddenError unless the caller holds one of the allowed roles."""
    allowed = set(allowed)
    if caller.role not in allowed:
        raise ForbiddenError(
            "Access denied. Required role: "
            + " or ".join(sorted(role.value for role in allowed))
        )


def ensure_can_view_request(caller: Account, request: ServiceRequest) -> None:
    """Customers see their own requests, field workers those assigned to them."""
    checks = {
        Role.CUSTOMER: request.is_owned_by,
        Role.FIELD_WORKER: request.is_assigned_to,
        Role.ADMIN: lambda _: True,
    }
    if not checks[caller.role](caller.id):
        raise ForbiddenError()


def ensure_can_edit_request(caller: Account, request: ServiceRequest) -> None:
    """Only the owning customer or an admin may edit a request."""
    if caller.role.is_admin():
        return
    if caller.role != Role.CUSTOMER or not request.is_owned_by(caller.id):
        raise ForbiddenError()


def ensure_can_act_on_task(caller: Account, task: Task) -> None:
    """Field workers act only on their own tasks; admins on any."""
    if caller.role.is_admin():
        return
    if caller.role != Role.FIELD_WORKER or not task.belongs_to(caller.id):
        raise ForbiddenError()
