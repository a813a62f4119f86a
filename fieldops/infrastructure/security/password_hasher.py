"""Password hashing backed by passlib."""

from passlib.context import CryptContext

from fieldops.application.interfaces.services import PasswordHasherInterface


class PasswordHasher(PasswordHasherInterface):
    """One-way salted password hashing."""

    def __init__(self, schemes=None):
        self.context = CryptContext(schemes=schemes or ["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return self.context.verify(password, password_hash)
        except ValueError:
            # Stored value is not a recognised hash
            return False
