"""
Account SQLAlchemy model.
"""

from sqlalchemy import JSON, Boolean, Column, Float, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel


class AccountModel(BaseModel):
    """Account database model shared by every role."""

    __tablename__ = "accounts"

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="customer", index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_approved = Column(Boolean, nullable=False, default=True)

    # Contact
    phone = Column(String(50), nullable=False, default="")
    address = Column(Text, nullable=False, default="")

    # Field worker profile
    skills = Column(JSON, nullable=False, default=list)
    experience = Column(Text, nullable=False, default="")
    license_number = Column(String(100), nullable=False, default="")

    # Reputation
    rating = Column(Float, nullable=False, default=0.0)
    total_tasks_completed = Column(Integer, nullable=False, default=0)

    service_requests = relationship(
        "ServiceRequestModel",
        back_populates="customer",
        foreign_keys="ServiceRequestModel.user_id",
    )
    tasks = relationship(
        "TaskModel", back_populates="field_worker", foreign_keys="TaskModel.field_worker_id"
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email}, role={self.role})>"
