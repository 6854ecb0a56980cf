from .password_hasher import PasswordHasher
from .token_service import TokenClaims, TokenService

__all__ = ["PasswordHasher", "TokenClaims", "TokenService"]
