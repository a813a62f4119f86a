"""
Unit tests for reputation aggregation.
"""

from uuid import uuid4

import pytest

from fieldops.application.services.reputation import (
    Reputation,
    aggregate_reputation,
    average_rating,
    rating_distribution,
    round_rating,
)
from fieldops.domain.entities.task import Task
from fieldops.domain.value_objects.task_status import TaskStatus


def task(status=TaskStatus.COMPLETED, rating=None) -> Task:
    return Task(
        service_request_id=uuid4(),
        field_worker_id=uuid4(),
        assigned_by=uuid4(),
        status=status,
        customer_rating=rating,
    )


class TestRounding:
    @pytest.mark.parametrize(
        "value,expected",
        [(4.25, 4.3), (4.35, 4.4), (4.05, 4.1), (3.333, 3.3), (5.0, 5.0)],
    )
    def test_half_up_to_one_decimal(self, value, expected):
        assert round_rating(value) == expected

    def test_average_of_nothing_is_zero(self):
        assert average_rating([]) == 0.0

    def test_average(self):
        assert average_rating([5, 4, 4]) == 4.3


class TestAggregateReputation:
    def test_full_reaggregation(self):
        tasks = [
            task(rating=5),
            task(rating=4),
            task(),  # completed, unrated
            task(status=TaskStatus.IN_PROGRESS),
            task(status=TaskStatus.CANCELLED),
        ]
        assert aggregate_reputation(tasks) == Reputation(rating=4.5, total_tasks_completed=3)

    def test_no_tasks(self):
        assert aggregate_reputation([]) == Reputation(rating=0.0, total_tasks_completed=0)


def test_rating_distribution_has_every_star():
    assert rating_distribution([5, 5, 3]) == {5: 2, 4: 0, 3: 1, 2: 0, 1: 0}
