from .entity import User
from .factory import CreateUserParams, UserFactory
from .query import UserQuery
from .repository import UserRepository
from .service import PasswordHasher, TokenClaims, TokenService
from .value_object import Email, UserId

__all__ = [
    "User",
    "UserId",
    "Email",
    "UserQuery",
    "UserRepository",
    "UserFactory",
    "CreateUserParams",
    "PasswordHasher",
    "TokenService",
    "TokenClaims",
]
