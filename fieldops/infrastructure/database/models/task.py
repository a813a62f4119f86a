"""
Task SQLAlchemy model.
"""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from .base import BaseModel


class TaskModel(BaseModel):
    """Task database model."""

    __tablename__ = "tasks"

    # Unique: a service request is bound to at most one task
    service_request_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("service_requests.id"),
        nullable=False,
        unique=True,
        index=True,
    )
    field_worker_id = Column(
        Uuid(as_uuid=True), ForeignKey("accounts.id"), nullable=False, index=True
    )
    assigned_by = Column(Uuid(as_uuid=True), ForeignKey("accounts.id"), nullable=False)
    status = Column(String(20), nullable=False, default="assigned", index=True)

    assigned_at = Column(DateTime(timezone=True), nullable=False)
    started_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    completion_notes = Column(Text, nullable=False, default="")
    completion_photos = Column(JSON, nullable=False, default=list)

    customer_rating = Column(Integer, nullable=True)
    customer_feedback = Column(Text, nullable=False, default="")

    service_request = relationship("ServiceRequestModel", back_populates="task")
    field_worker = relationship(
        "AccountModel", back_populates="tasks", foreign_keys=[field_worker_id]
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, status={self.status})>"
