"""Register account use case."""

from dataclasses import dataclass, field
from typing import List, Optional

from fieldops.application.interfaces.repositories import AccountRepositoryInterface
from fieldops.application.interfaces.services import (
    PasswordHasherInterface,
    TransactionServiceInterface,
)
from fieldops.config.logging import get_logger
from fieldops.config.settings import settings
from fieldops.domain.entities.account import Account
from fieldops.domain.exceptions.conflict_error import DuplicateEmailError
from fieldops.domain.exceptions.validation_error import ValidationError
from fieldops.domain.value_objects.role import Role
from fieldops.infrastructure.monitoring.metrics import record_registration

logger = get_logger(__name__)


@dataclass
class RegisterAccountRequest:
    """Request for registering an account."""

    name: str
    email: str
    password: str
    role: Role = Role.CUSTOMER
    phone: str = ""
    skills: List[str] = field(default_factory=list)
    experience: str = ""
    license_number: str = ""


class RegisterAccountUseCase:
    """Use case for registering customers, field workers and admins."""

    def __init__(
        self,
        account_repo: AccountRepositoryInterface,
        password_hasher: PasswordHasherInterface,
        transaction_service: TransactionServiceInterface,
    ):
        self.account_repo = account_repo
        self.password_hasher = password_hasher
        self.transaction_service = transaction_service

    async def execute(self, request: RegisterAccountRequest) -> Account:
        """Register an account; only the password hash is ever stored."""
        if len(request.password or "") < settings.PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"
            )

        email = request.email.strip().lower()
        existing: Optional[Account] = await self.account_repo.get_by_email(email)
        if existing:
            raise DuplicateEmailError(email)

        account = Account.register(
            name=request.name,
            email=email,
            password_hash=self.password_hasher.hash(request.password),
            role=request.role,
            phone=request.phone,
            skills=request.skills,
            experience=request.experience,
            license_number=request.license_number,
        )

        async def _create() -> Account:
            return await self.account_repo.create(account)

        created = await self.transaction_service.execute_in_transaction(_create)
        record_registration(created.role.value)

        logger.info(
            "Account registered",
            account_id=str(created.id),
            role=created.role.value,
            is_approved=created.is_approved,
        )
        return created
