"""Signed session tokens backed by python-jose."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from fieldops.application.interfaces.services import TokenServiceInterface
from fieldops.config.logging import get_logger
from fieldops.config.settings import settings
from fieldops.domain.exceptions.auth_error import AuthenticationError

logger = get_logger(__name__)


class TokenService(TokenServiceInterface):
    """Issues and verifies HS256 JWTs carrying {sub, iat, exp}."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expires_in: Optional[timedelta] = None,
    ):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.expires_in = expires_in or timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)

    def issue(self, subject: UUID) -> str:
        issued_at = datetime.now(timezone.utc)
        claims = {
            "sub": str(subject),
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> UUID:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise AuthenticationError("Token expired.") from exc
        except JWTError as exc:
            logger.debug("Rejected malformed token", error=str(exc))
            raise AuthenticationError("Invalid token.") from exc

        subject = payload.get("sub")
        if not subject:
            raise AuthenticationError("Invalid token.")
        try:
            return UUID(subject)
        except (TypeError, ValueError) as exc:
            raise AuthenticationError("Invalid token.") from exc
