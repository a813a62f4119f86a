"""
Service request SQLAlchemy model.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import relationship

from .base import BaseModel


class ServiceRequestModel(BaseModel):
    """Service request database model."""

    __tablename__ = "service_requests"

    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("accounts.id"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    urgency = Column(String(20), nullable=False, default="medium", index=True)
    status = Column(String(20), nullable=False, default="open", index=True)
    budget = Column(Float, nullable=False, default=0.0)
    preferred_date = Column(Date, nullable=True)
    assigned_field_worker_id = Column(
        Uuid(as_uuid=True), ForeignKey("accounts.id"), nullable=True, index=True
    )

    # Mirrored from the bound task once rated
    customer_rating = Column(Integer, nullable=True)
    customer_feedback = Column(Text, nullable=False, default="")

    customer = relationship(
        "AccountModel", back_populates="service_requests", foreign_keys=[user_id]
    )
    task = relationship("TaskModel", back_populates="service_request", uselist=False)

    def __repr__(self) -> str:
        return f"<ServiceRequest(id={self.id}, title={self.title[:50]}, status={self.status})>"
