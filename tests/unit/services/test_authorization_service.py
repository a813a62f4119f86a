"""
Unit tests for the authorization gate.
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from fieldops.application.interfaces.services import TokenServiceInterface
from fieldops.application.services.authorization import (
    AuthorizationGate,
    ensure_can_act_on_task,
    ensure_can_edit_request,
    ensure_can_view_request,
    require_role,
)
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task
from fieldops.domain.exceptions import AuthenticationError, ForbiddenError
from fieldops.domain.value_objects.role import Role


def account(role: Role, **overrides) -> Account:
    return Account(
        name=f"{role.value} user",
        email=f"{role.value}-{uuid4().hex[:6]}@example.com",
        password_hash="h",
        role=role,
        **overrides,
    )


@pytest.fixture
def customer():
    return account(Role.CUSTOMER)


@pytest.fixture
def worker():
    return account(Role.FIELD_WORKER)


@pytest.fixture
def admin():
    return account(Role.ADMIN)


@pytest.fixture
def service_request(customer, worker):
    request = ServiceRequest(
        user_id=customer.id,
        title="Broken boiler",
        description="No hot water",
        location="3 Mill Lane",
        category="heating",
    )
    request.mark_assigned(worker.id)
    return request


class TestAuthorizationGate:
    """Test caller resolution from bearer tokens."""

    @pytest.fixture
    def token_service(self):
        return MagicMock(spec=TokenServiceInterface)

    @pytest.fixture
    def gate(self, mock_account_repository, token_service):
        return AuthorizationGate(mock_account_repository, token_service)

    @pytest.mark.asyncio
    async def test_missing_token(self, gate):
        with pytest.raises(AuthenticationError):
            await gate.authenticate(None)

    @pytest.mark.asyncio
    async def test_invalid_token_propagates(self, gate, token_service):
        token_service.verify.side_effect = AuthenticationError("Invalid token.")
        with pytest.raises(AuthenticationError):
            await gate.authenticate("garbage")

    @pytest.mark.asyncio
    async def test_resolves_active_account(
        self, gate, token_service, mock_account_repository, customer
    ):
        token_service.verify.return_value = customer.id
        mock_account_repository.get_by_id.return_value = customer

        assert await gate.authenticate("token") is customer
        mock_account_repository.get_by_id.assert_called_once_with(customer.id)

    @pytest.mark.asyncio
    async def test_deleted_account_rejected(self, gate, token_service):
        token_service.verify.return_value = uuid4()
        with pytest.raises(AuthenticationError):
            await gate.authenticate("token")

    @pytest.mark.asyncio
    async def test_deactivated_account_rejected_with_valid_token(
        self, gate, token_service, mock_account_repository
    ):
        inactive = account(Role.CUSTOMER, is_active=False)
        token_service.verify.return_value = inactive.id
        mock_account_repository.get_by_id.return_value = inactive

        with pytest.raises(AuthenticationError):
            await gate.authenticate("token")


class TestRoleAndOwnership:
    """Test role and ownership checks."""

    def test_require_role(self, customer, admin):
        require_role(admin, {Role.ADMIN})
        with pytest.raises(ForbiddenError):
            require_role(customer, {Role.ADMIN, Role.FIELD_WORKER})

    def test_view_request(self, service_request, customer, worker, admin):
        ensure_can_view_request(customer, service_request)
        ensure_can_view_request(worker, service_request)
        ensure_can_view_request(admin, service_request)

        with pytest.raises(ForbiddenError):
            ensure_can_view_request(account(Role.CUSTOMER), service_request)
        with pytest.raises(ForbiddenError):
            ensure_can_view_request(account(Role.FIELD_WORKER), service_request)

    def test_edit_request(self, service_request, customer, worker, admin):
        ensure_can_edit_request(customer, service_request)
        ensure_can_edit_request(admin, service_request)
        with pytest.raises(ForbiddenError):
            ensure_can_edit_request(worker, service_request)

    def test_act_on_task(self, worker, admin, customer):
        task = Task(service_request_id=uuid4(), field_worker_id=worker.id, assigned_by=admin.id)

        ensure_can_act_on_task(worker, task)
        ensure_can_act_on_task(admin, task)
        with pytest.raises(ForbiddenError):
            ensure_can_act_on_task(account(Role.FIELD_WORKER), task)
        with pytest.raises(ForbiddenError):
            ensure_can_act_on_task(customer, task)
