"""
Unit tests for value objects.
"""

import pytest

from fieldops.domain.value_objects.request_status import RequestStatus
from fieldops.domain.value_objects.role import Role
from fieldops.domain.value_objects.task_status import TaskStatus
from fieldops.domain.value_objects.urgency import Urgency


class TestRole:
    """Test Role value object."""

    def test_enum_values(self):
        assert [role.value for role in Role] == ["customer", "field_worker", "admin"]

    def test_only_field_workers_require_approval(self):
        assert Role.FIELD_WORKER.requires_approval() is True
        assert Role.CUSTOMER.requires_approval() is False
        assert Role.ADMIN.requires_approval() is False

    def test_is_admin(self):
        assert Role.ADMIN.is_admin() is True
        assert Role.CUSTOMER.is_admin() is False

    def test_unknown_role_rejected(self):
        with pytest.raises(ValueError):
            Role("superuser")


class TestUrgency:
    """Test Urgency value object."""

    def test_enum_values(self):
        assert [u.value for u in Urgency] == ["low", "medium", "high", "critical"]


class TestTaskStatus:
    """Test TaskStatus value object and its transition table."""

    def test_enum_values(self):
        expected_values = ["assigned", "in-progress", "completed", "cancelled"]
        assert [status.value for status in TaskStatus] == expected_values

    def test_is_terminal(self):
        assert TaskStatus.COMPLETED.is_terminal() is True
        assert TaskStatus.CANCELLED.is_terminal() is True
        assert TaskStatus.ASSIGNED.is_terminal() is False
        assert TaskStatus.IN_PROGRESS.is_terminal() is False

    def test_is_active(self):
        assert TaskStatus.ASSIGNED.is_active() is True
        assert TaskStatus.IN_PROGRESS.is_active() is True
        assert TaskStatus.COMPLETED.is_active() is False

    @pytest.mark.parametrize(
        "current,target",
        [
            (TaskStatus.ASSIGNED, TaskStatus.IN_PROGRESS),
            (TaskStatus.ASSIGNED, TaskStatus.CANCELLED),
            (TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED),
            (TaskStatus.IN_PROGRESS, TaskStatus.CANCELLED),
        ],
    )
    def test_allowed_transitions(self, current, target):
        assert current.can_transition_to(target) is True

    @pytest.mark.parametrize(
        "current,target",
        [
            (TaskStatus.ASSIGNED, TaskStatus.COMPLETED),
            (TaskStatus.IN_PROGRESS, TaskStatus.ASSIGNED),
            (TaskStatus.COMPLETED, TaskStatus.IN_PROGRESS),
            (TaskStatus.COMPLETED, TaskStatus.CANCELLED),
            (TaskStatus.CANCELLED, TaskStatus.ASSIGNED),
            (TaskStatus.CANCELLED, TaskStatus.IN_PROGRESS),
        ],
    )
    def test_disallowed_transitions(self, current, target):
        assert current.can_transition_to(target) is False

    def test_reentering_same_status_is_allowed(self):
        for status in TaskStatus:
            assert status.can_transition_to(status) is True


class TestRequestStatus:
    """Test RequestStatus value object."""

    def test_mirrors_every_task_status(self):
        for status in TaskStatus:
            assert RequestStatus.from_task_status(status).value == status.value

    def test_requires_worker(self):
        assert RequestStatus.OPEN.requires_worker() is False
        assert RequestStatus.ASSIGNED.requires_worker() is True
        assert RequestStatus.IN_PROGRESS.requires_worker() is True
        assert RequestStatus.COMPLETED.requires_worker() is True
        assert RequestStatus.CANCELLED.requires_worker() is False
