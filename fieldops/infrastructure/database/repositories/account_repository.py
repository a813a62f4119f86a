"""Account repository implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fieldops.application.interfaces.repositories import AccountRepositoryInterface
from fieldops.config.logging import get_logger
from fieldops.domain.entities.account import Account
from fieldops.domain.exceptions.conflict_error import DuplicateEmailError
from fieldops.domain.exceptions.not_found_error import AccountNotFoundError
from fieldops.domain.value_objects.role import Role
from fieldops.infrastructure.database.models.account import AccountModel

logger = get_logger(__name__)


class AccountRepository(AccountRepositoryInterface):
    """Account repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, account: Account) -> Account:
        """Create a new account."""
        account_model = AccountModel(
            id=account.id,
            name=account.name,
            email=account.email.lower(),
            password_hash=account.password_hash,
            role=account.role.value,
            is_active=account.is_active,
            is_approved=account.is_approved,
            phone=account.phone,
            address=account.address,
            skills=list(account.skills),
            experience=account.experience,
            license_number=account.license_number,
            rating=account.rating,
            total_tasks_completed=account.total_tasks_completed,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

        self.db.add(account_model)
        try:
            # Flush only; the surrounding transaction decides when to commit
            await self.db.flush()
        except IntegrityError as e:
            logger.warning("Duplicate email on account create", email=account.email)
            raise DuplicateEmailError(account.email) from e
        await self.db.refresh(account_model)

        return self._model_to_entity(account_model)

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID."""
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email, case-insensitively."""
        stmt = select(AccountModel).where(
            func.lower(AccountModel.email) == email.strip().lower()
        )
        result = await self.db.execute(stmt)
        model = result.scalar_one_or_none()

        return self._model_to_entity(model) if model else None

    async def find(
        self,
        role: Optional[Role] = None,
        is_active: Optional[bool] = None,
        is_approved: Optional[bool] = None,
    ) -> List[Account]:
        """Find accounts matching all given filters, newest first."""
        stmt = select(AccountModel)
        if role is not None:
            stmt = stmt.where(AccountModel.role == Role(role).value)
        if is_active is not None:
            stmt = stmt.where(AccountModel.is_active == is_active)
        if is_approved is not None:
            stmt = stmt.where(AccountModel.is_approved == is_approved)
        stmt = stmt.order_by(AccountModel.created_at.desc())

        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def update(self, account: Account) -> Account:
        """Update an existing account."""
        stmt = select(AccountModel).where(AccountModel.id == account.id)
        result = await self.db.execute(stmt)
        account_model = result.scalar_one_or_none()

        if not account_model:
            raise AccountNotFoundError(account.id)

        account_model.name = account.name
        account_model.password_hash = account.password_hash
        account_model.is_active = account.is_active
        account_model.is_approved = account.is_approved
        account_model.phone = account.phone
        account_model.address = account.address
        account_model.skills = list(account.skills)
        account_model.experience = account.experience
        account_model.license_number = account.license_number
        account_model.rating = account.rating
        account_model.total_tasks_completed = account.total_tasks_completed
        account_model.updated_at = account.updated_at

        await self.db.flush()
        await self.db.refresh(account_model)

        return self._model_to_entity(account_model)

    def _model_to_entity(self, model: AccountModel) -> Account:
        """Convert SQLAlchemy model to domain entity."""
        return Account(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            role=Role(model.role),
            is_active=model.is_active,
            is_approved=model.is_approved,
            phone=model.phone or "",
            address=model.address or "",
            skills=list(model.skills or []),
            experience=model.experience or "",
            license_number=model.license_number or "",
            rating=model.rating or 0.0,
            total_tasks_completed=model.total_tasks_completed or 0,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
