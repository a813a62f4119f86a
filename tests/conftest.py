"""
Pytest configuration and fixtures.
"""

from typing import AsyncGenerator, Iterator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.api.app import create_app
from fieldops.application.interfaces.repositories import (
    AccountRepositoryInterface,
    ServiceRequestRepositoryInterface,
    TaskRepositoryInterface,
)
from fieldops.application.interfaces.services import TransactionServiceInterface
from fieldops.config.database import (
    create_engine,
    get_async_session_factory,
    init_models,
)

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def mock_account_repository():
    """Mock account repository."""
    mock_repo = AsyncMock(spec=AccountRepositoryInterface)
    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.get_by_email = AsyncMock(return_value=None)
    mock_repo.find = AsyncMock(return_value=[])
    mock_repo.create = AsyncMock(side_effect=lambda account: account)
    mock_repo.update = AsyncMock(side_effect=lambda account: account)
    return mock_repo


@pytest.fixture
def mock_service_request_repository():
    """Mock service request repository."""
    mock_repo = AsyncMock(spec=ServiceRequestRepositoryInterface)
    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.find = AsyncMock(return_value=[])
    mock_repo.create = AsyncMock(side_effect=lambda request: request)
    mock_repo.update = AsyncMock(side_effect=lambda request: request)
    return mock_repo


@pytest.fixture
def mock_task_repository():
    """Mock task repository."""
    mock_repo = AsyncMock(spec=TaskRepositoryInterface)
    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.get_by_service_request_id = AsyncMock(return_value=None)
    mock_repo.find = AsyncMock(return_value=[])
    mock_repo.find_rated_by_field_worker = AsyncMock(return_value=[])
    mock_repo.create = AsyncMock(side_effect=lambda task: task)
    mock_repo.update = AsyncMock(side_effect=lambda task: task)
    return mock_repo


@pytest.fixture
def mock_transaction_service():
    """Transaction service mock that runs the operation it is given."""

    async def run(operation):
        return await operation()

    mock_service = AsyncMock(spec=TransactionServiceInterface)
    mock_service.execute_in_transaction = AsyncMock(side_effect=run)
    return mock_service


@pytest.fixture
def test_engine():
    """Fresh in-memory database per test."""
    return create_engine(TEST_DATABASE_URL)


@pytest.fixture
def client(test_engine) -> Iterator[TestClient]:
    """HTTP client against an app whose tables are created on startup."""
    with TestClient(create_app(engine=test_engine)) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Session on a freshly created schema."""
    await init_models(test_engine)
    session_factory = get_async_session_factory(test_engine)

    async with session_factory() as session:
        yield session
        await session.rollback()

    await test_engine.dispose()
