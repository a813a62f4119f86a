"""
Field worker reputation aggregation.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List

from fieldops.domain.entities.task import MAX_RATING, MIN_RATING, Task
from fieldops.domain.value_objects.task_status import TaskStatus


@dataclass
class Reputation:
    """Aggregate rating figures for a field worker."""

    rating: float
    total_tasks_completed: int


def round_rating(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def average_rating(ratings: Iterable[int]) -> float:
    ratings = list(ratings)
    if not ratings:
        return 0.0
    return round_rating(sum(ratings) / len(ratings))


def rating_distribution(ratings: Iterable[int]) -> Dict[int, int]:
    """Count ratings per star value, highest first."""
    distribution = {star: 0 for star in range(MAX_RATING, MIN_RATING - 1, -1)}
    for rating in ratings:
        distribution[rating] += 1
    return distribution


def completed_ratings(tasks: Iterable[Task]) -> List[int]:
    return [
        task.customer_rating
        for task in tasks
        if task.status == TaskStatus.COMPLETED and task.customer_rating is not None
    ]


def aggregate_reputation(tasks: Iterable[Task]) -> Reputation:
    """Fully re-aggregate a worker's reputation from all of their tasks.

    The average covers completed and rated tasks only; the completed count
    includes unrated ones.
    """
    completed = [task for task in tasks if task.status == TaskStatus.COMPLETED]
    return Reputation(
        rating=average_rating(completed_ratings(completed)),
        total_tasks_completed=len(completed),
    )
