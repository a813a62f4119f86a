"""
Unit tests for AssignTaskUseCase.
"""

from uuid import uuid4

import pytest

from fieldops.application.use_cases.assign_task import AssignTaskUseCase
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task
from fieldops.domain.exceptions.auth_error import ForbiddenError
from fieldops.domain.exceptions.conflict_error import (
    AlreadyAssignedError,
    RequestNotOpenError,
    WorkerNotAssignableError,
)
from fieldops.domain.exceptions.not_found_error import (
    AccountNotFoundError,
    RequestNotFoundError,
)
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.role import Role
from fieldops.domain.value_objects.task_status import TaskStatus


class TestAssignTaskUseCase:
    """Test cases for AssignTaskUseCase."""

    @pytest.fixture
    def admin(self):
        return Account(name="Ada Admin", email="ada@example.com", password_hash="h", role=Role.ADMIN)

    @pytest.fixture
    def worker(self):
        return Account(
            name="Walt Worker",
            email="walt@example.com",
            password_hash="h",
            role=Role.FIELD_WORKER,
            is_approved=True,
        )

    @pytest.fixture
    def open_request(self):
        return ServiceRequest(
            user_id=uuid4(),
            title="Leaking tap",
            description="Kitchen tap drips",
            location="12 High St",
            category="plumbing",
        )

    @pytest.fixture
    def use_case(
        self,
        mock_account_repository,
        mock_service_request_repository,
        mock_task_repository,
        mock_transaction_service,
    ):
        return AssignTaskUseCase(
            account_repo=mock_account_repository,
            service_request_repo=mock_service_request_repository,
            task_repo=mock_task_repository,
            transaction_service=mock_transaction_service,
        )

    @pytest.fixture
    def wired(self, mock_account_repository, mock_service_request_repository, open_request, worker):
        mock_service_request_repository.get_by_id.return_value = open_request
        mock_account_repository.get_by_id.return_value = worker

    @pytest.mark.asyncio
    async def test_assign_success(
        self,
        use_case,
        wired,
        admin,
        worker,
        open_request,
        mock_task_repository,
        mock_service_request_repository,
        mock_transaction_service,
    ):
        result = await use_case.execute(admin, open_request.id, worker.id)

        assert result.task.status == TaskStatus.ASSIGNED
        assert result.task.field_worker_id == worker.id
        assert result.task.assigned_by == admin.id
        assert result.task.assigned_at is not None
        assert result.service_request.status == RequestStatus.ASSIGNED
        assert result.service_request.assigned_field_worker_id == worker.id

        mock_task_repository.create.assert_called_once()
        mock_service_request_repository.update.assert_called_once_with(open_request)
        mock_transaction_service.execute_in_transaction.assert_called_once()

    @pytest.mark.asyncio
    async def test_only_admin_can_assign(self, use_case, wired, worker, open_request):
        with pytest.raises(ForbiddenError):
            await use_case.execute(worker, open_request.id, worker.id)

    @pytest.mark.asyncio
    async def test_request_not_found(self, use_case, admin, worker):
        with pytest.raises(RequestNotFoundError):
            await use_case.execute(admin, uuid4(), worker.id)

    @pytest.mark.asyncio
    async def test_request_not_open(self, use_case, wired, admin, worker, open_request):
        open_request.status = RequestStatus.CANCELLED

        with pytest.raises(RequestNotOpenError):
            await use_case.execute(admin, open_request.id, worker.id)

    @pytest.mark.asyncio
    async def test_request_already_has_task(
        self, use_case, wired, admin, worker, open_request, mock_task_repository
    ):
        mock_task_repository.get_by_service_request_id.return_value = Task(
            service_request_id=open_request.id,
            field_worker_id=uuid4(),
            assigned_by=admin.id,
        )

        with pytest.raises(AlreadyAssignedError):
            await use_case.execute(admin, open_request.id, worker.id)
        mock_task_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_worker_not_found(
        self, use_case, wired, admin, open_request, mock_account_repository
    ):
        mock_account_repository.get_by_id.return_value = None

        with pytest.raises(AccountNotFoundError):
            await use_case.execute(admin, open_request.id, uuid4())

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"is_approved": False},
            {"is_active": False},
            {"role": Role.CUSTOMER},
        ],
    )
    async def test_worker_not_assignable(
        self,
        use_case,
        wired,
        admin,
        open_request,
        mock_account_repository,
        mock_task_repository,
        overrides,
    ):
        defaults = dict(
            name="Candidate",
            email="candidate@example.com",
            password_hash="h",
            role=Role.FIELD_WORKER,
            is_approved=True,
        )
        defaults.update(overrides)
        mock_account_repository.get_by_id.return_value = Account(**defaults)

        with pytest.raises(WorkerNotAssignableError):
            await use_case.execute(admin, open_request.id, uuid4())
        mock_task_repository.create.assert_not_called()
        assert open_request.status == RequestStatus.OPEN
