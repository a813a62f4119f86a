"""Task listing and lookup use cases."""

from typing import List, Optional
from uuid import UUID

from fieldops.application.interfaces.repositories import TaskRepositoryInterface
from fieldops.application.services.authorization import (
    ensure_can_act_on_task,
    require_role,
)
from fieldops.domain.entities.account import Account
from fieldops.domain.entities.task import Task
from fieldops.domain.exceptions.not_found_error import TaskNotFoundError
from fieldops.domain.value_objects.role import Role
from fieldops.domain.value_objects.task_status import TaskStatus


class ListTasksUseCase:
    """Admins see every task, field workers their own."""

    def __init__(self, task_repo: TaskRepositoryInterface):
        self.task_repo = task_repo

    async def execute(
        self, caller: Account, status: Optional[TaskStatus] = None
    ) -> List[Task]:
        require_role(caller, {Role.ADMIN, Role.FIELD_WORKER})

        if caller.role.is_admin():
            return await self.task_repo.find(status=status)
        return await self.task_repo.find(field_worker_id=caller.id, status=status)


class GetTaskUseCase:
    """Fetch a single task subject to ownership."""

    def __init__(self, task_repo: TaskRepositoryInterface):
        self.task_repo = task_repo

    async def execute(self, caller: Account, task_id: UUID) -> Task:
        task = await self.task_repo.get_by_id(task_id)
        if not task:
            raise TaskNotFoundError(task_id)

        ensure_can_act_on_task(caller, task)
        return task
