"""Task repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.application.interfaces.repositories import TaskRepositoryInterface
from fieldops.config.logging import get_logger
from fieldops.domain.entities.task import Task
from fieldops.domain.exceptions.conflict_error import AlreadyAssignedError
from fieldops.domain.exceptions.not_found_error import TaskNotFoundError
from fieldops.domain.value_objects.task_status import TaskStatus
from fieldops.infrastructure.database.models.task import TaskModel

logger = get_logger(__name__)


class TaskRepository(TaskRepositoryInterface):
    """Task repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, task: Task) -> Task:
        """Create a new task."""
        task_model = TaskModel(
            id=task.id,
            service_request_id=task.service_request_id,
            field_worker_id=task.field_worker_id,
            assigned_by=task.assigned_by,
            status=task.status.value,
            assigned_at=task.assigned_at,
            started_at=task.started_at,
            completed_at=task.completed_at,
            completion_notes=task.completion_notes,
            completion_photos=list(task.completion_photos),
            customer_rating=task.customer_rating,
            customer_feedback=task.customer_feedback,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

        self.db.add(task_model)
        try:
            await self.db.flush()
        except IntegrityError as e:
            # Unique index on service_request_id lost a concurrent race
            logger.warning(
                "Task already exists for service request",
                service_request_id=str(task.service_request_id),
            )
            raise AlreadyAssignedError(task.service_request_id) from e
        await self.db.refresh(task_model)

        return self._model_to_entity(task_model)

    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task by ID."""
        stmt = select(TaskModel).where(TaskModel.id == task_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def get_by_service_request_id(self, request_id: UUID) -> Optional[Task]:
        """Get the task bound to a service request, if any."""
        stmt = select(TaskModel).where(TaskModel.service_request_id == request_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def find(
        self,
        field_worker_id: Optional[UUID] = None,
        status: Optional[TaskStatus] = None,
    ) -> List[Task]:
        """Find tasks matching all given filters, most recently assigned first."""
        stmt = select(TaskModel)
        if field_worker_id is not None:
            stmt = stmt.where(TaskModel.field_worker_id == field_worker_id)
        if status is not None:
            stmt = stmt.where(TaskModel.status == TaskStatus(status).value)
        stmt = stmt.order_by(TaskModel.assigned_at.desc())

        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def find_rated_by_field_worker(
        self, field_worker_id: UUID, limit: int = 10
    ) -> List[Task]:
        """Find the most recently completed rated tasks of a field worker."""
        stmt = (
            select(TaskModel)
            .where(
                TaskModel.field_worker_id == field_worker_id,
                TaskModel.status == TaskStatus.COMPLETED.value,
                TaskModel.customer_rating.is_not(None),
            )
            .order_by(TaskModel.completed_at.desc())
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def update(self, task: Task) -> Task:
        """Update an existing task."""
        stmt = select(TaskModel).where(TaskModel.id == task.id)
        result = await self.db.execute(stmt)
        task_model = result.scalar_one_or_none()

        if not task_model:
            raise TaskNotFoundError(task.id)

        task_model.status = task.status.value
        task_model.started_at = task.started_at
        task_model.completed_at = task.completed_at
        task_model.completion_notes = task.completion_notes
        task_model.completion_photos = list(task.completion_photos)
        task_model.customer_rating = task.customer_rating
        task_model.customer_feedback = task.customer_feedback
        task_model.updated_at = task.updated_at

        await self.db.flush()
        await self.db.refresh(task_model)

        return self._model_to_entity(task_model)

    def _model_to_entity(self, model: TaskModel) -> Task:
        """Convert SQLAlchemy model to domain entity."""
        return Task(
            id=model.id,
            service_request_id=model.service_request_id,
            field_worker_id=model.field_worker_id,
            assigned_by=model.assigned_by,
            status=TaskStatus(model.status),
            assigned_at=model.assigned_at,
            started_at=model.started_at,
            completed_at=model.completed_at,
            completion_notes=model.completion_notes or "",
            completion_photos=list(model.completion_photos or []),
            customer_rating=model.customer_rating,
            customer_feedback=model.customer_feedback or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
