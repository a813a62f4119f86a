"""
Rating API schemas.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .account import AccountResponse
from .task import TaskResponse


class RateTaskRequest(BaseModel):
    """Customer rating request schema; range is checked by the domain.

    rating is strict: "5" and 5.0 are rejected, not coerced.
    """

    rating: StrictInt
    feedback: Optional[str] = Field(None, max_length=2000)


class RateTaskData(BaseModel):
    task: TaskResponse
    field_worker: AccountResponse


class RatableTaskResponse(BaseModel):
    """Completed, unrated task with the details of its request."""

    task: TaskResponse
    service_request_title: str
    service_request_description: str

    model_config = ConfigDict(from_attributes=True)


class RatableTaskListData(BaseModel):
    tasks: List[RatableTaskResponse]
    count: int


class RatingStatistics(BaseModel):
    total_ratings: int
    average_rating: float
    rating_distribution: Dict[int, int]


class FieldWorkerRatingsData(BaseModel):
    ratings: List[TaskResponse]
    statistics: RatingStatistics
