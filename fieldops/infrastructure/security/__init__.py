"""
Credential primitives: password hashing and session tokens.
"""

from .password_hasher import PasswordHasher
from .token_service import TokenService

__all__ = ["PasswordHasher", "TokenService"]
