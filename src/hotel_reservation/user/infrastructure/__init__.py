from .bcrypt_password_hasher import BcryptPasswordHasher
from .dynamodb_user_repository import DynamoDBUserRepository, build_user_filter
from .jwt_token_service import JoseTokenService

__all__ = [
    "BcryptPasswordHasher",
    "DynamoDBUserRepository",
    "JoseTokenService",
    "build_user_filter",
]
