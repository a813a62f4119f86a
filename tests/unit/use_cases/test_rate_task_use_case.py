"""
Unit tests for the rating use cases.
"""

from uuid import uuid4

import pytest

from fieldops.application.use_cases.rate_task import (
    GetFieldWorkerRatingsUseCase,
    ListRatableTasksUseCase,
    RateTaskUseCase,
)
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.service_request import ServiceRequest
from fieldops.domain.entities.task import Task
from fieldops.domain.exceptions.auth_error import ForbiddenError
from fieldops.domain.exceptions.conflict_error import (
    AlreadyRatedError,
    TaskNotCompletedError,
)
from fieldops.domain.exceptions.not_found_error import AccountNotFoundError
from fieldops.domain.exceptions.validation_error import InvalidRatingError
from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.role import Role
from fieldops.domain.value_objects.task_status import TaskStatus


@pytest.fixture
def customer():
    return Account(name="Carla", email="carla@example.com", password_hash="h")


@pytest.fixture
def worker():
    return Account(
        name="Walt", email="walt@example.com", password_hash="h", role=Role.FIELD_WORKER
    )


@pytest.fixture
def service_request(customer, worker):
    request = ServiceRequest(
        user_id=customer.id,
        title="Gutter repair",
        description="Gutter hanging loose",
        location="5 Elm Close",
        category="roofing",
    )
    request.mark_assigned(worker.id)
    request.mirror_task_status(TaskStatus.COMPLETED)
    return request


@pytest.fixture
def completed_task(service_request, worker):
    return Task(
        service_request_id=service_request.id,
        field_worker_id=worker.id,
        assigned_by=uuid4(),
        status=TaskStatus.COMPLETED,
    )


class TestRateTaskUseCase:
    """Test cases for RateTaskUseCase."""

    @pytest.fixture
    def use_case(
        self,
        mock_account_repository,
        mock_service_request_repository,
        mock_task_repository,
        mock_transaction_service,
        worker,
        service_request,
        completed_task,
    ):
        mock_account_repository.get_by_id.return_value = worker
        mock_service_request_repository.get_by_id.return_value = service_request
        mock_task_repository.get_by_id.return_value = completed_task
        return RateTaskUseCase(
            account_repo=mock_account_repository,
            service_request_repo=mock_service_request_repository,
            task_repo=mock_task_repository,
            transaction_service=mock_transaction_service,
        )

    @pytest.mark.asyncio
    async def test_rating_refreshes_worker_reputation(
        self,
        use_case,
        customer,
        worker,
        completed_task,
        service_request,
        mock_task_repository,
        mock_account_repository,
    ):
        earlier = Task(
            service_request_id=uuid4(),
            field_worker_id=worker.id,
            assigned_by=uuid4(),
            status=TaskStatus.COMPLETED,
            customer_rating=4,
        )
        mock_task_repository.find.return_value = [completed_task, earlier]

        result = await use_case.execute(customer, completed_task.id, 5, "Spotless")

        assert result.task.customer_rating == 5
        assert result.task.customer_feedback == "Spotless"
        assert service_request.customer_rating == 5
        assert result.field_worker.rating == 4.5
        assert result.field_worker.total_tasks_completed == 2
        mock_task_repository.find.assert_called_once_with(field_worker_id=worker.id)
        mock_account_repository.update.assert_called_once_with(worker)

    @pytest.mark.asyncio
    async def test_second_rating_conflicts(self, use_case, customer, completed_task):
        completed_task.customer_rating = 3

        with pytest.raises(AlreadyRatedError):
            await use_case.execute(customer, completed_task.id, 5)

    @pytest.mark.asyncio
    async def test_unfinished_task(self, use_case, customer, completed_task):
        completed_task.status = TaskStatus.IN_PROGRESS

        with pytest.raises(TaskNotCompletedError):
            await use_case.execute(customer, completed_task.id, 4)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 6, 4.5])
    async def test_invalid_rating(self, use_case, customer, completed_task, rating):
        with pytest.raises(InvalidRatingError):
            await use_case.execute(customer, completed_task.id, rating)

    @pytest.mark.asyncio
    async def test_other_customer_forbidden(self, use_case, completed_task):
        stranger = Account(name="Stan", email="stan@example.com", password_hash="h")

        with pytest.raises(ForbiddenError):
            await use_case.execute(stranger, completed_task.id, 5)

    @pytest.mark.asyncio
    async def test_only_customers_rate(self, use_case, worker, completed_task):
        with pytest.raises(ForbiddenError):
            await use_case.execute(worker, completed_task.id, 5)


class TestListRatableTasksUseCase:
    @pytest.mark.asyncio
    async def test_only_completed_unrated(
        self,
        mock_service_request_repository,
        mock_task_repository,
        customer,
        service_request,
        completed_task,
    ):
        mock_service_request_repository.find.return_value = [service_request]
        mock_task_repository.get_by_service_request_id.return_value = completed_task
        use_case = ListRatableTasksUseCase(mock_service_request_repository, mock_task_repository)

        ratable = await use_case.execute(customer)

        assert [item.task for item in ratable] == [completed_task]
        assert ratable[0].service_request_title == "Gutter repair"
        mock_service_request_repository.find.assert_called_once_with(
            user_id=customer.id, status=RequestStatus.COMPLETED
        )

        completed_task.customer_rating = 5
        assert await use_case.execute(customer) == []


class TestGetFieldWorkerRatingsUseCase:
    @pytest.mark.asyncio
    async def test_statistics(self, mock_account_repository, mock_task_repository, worker):
        mock_account_repository.get_by_id.return_value = worker
        mock_task_repository.find_rated_by_field_worker.return_value = [
            Task(
                service_request_id=uuid4(),
                field_worker_id=worker.id,
                assigned_by=uuid4(),
                status=TaskStatus.COMPLETED,
                customer_rating=rating,
            )
            for rating in (5, 4, 4)
        ]
        use_case = GetFieldWorkerRatingsUseCase(mock_account_repository, mock_task_repository)

        result = await use_case.execute(worker.id, limit=3)

        assert result.total_ratings == 3
        assert result.average_rating == 4.3
        assert result.rating_distribution == {5: 1, 4: 2, 3: 0, 2: 0, 1: 0}
        mock_task_repository.find_rated_by_field_worker.assert_called_once_with(worker.id, 3)

    @pytest.mark.asyncio
    async def test_non_worker_not_found(
        self, mock_account_repository, mock_task_repository, customer
    ):
        mock_account_repository.get_by_id.return_value = customer
        use_case = GetFieldWorkerRatingsUseCase(mock_account_repository, mock_task_repository)

        with pytest.raises(AccountNotFoundError):
            await use_case.execute(customer.id)
