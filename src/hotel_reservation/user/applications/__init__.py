from .authenticate_user import AuthenticateUserService, AuthResult
from .manage_user import ManageUserService
from .query_users import QueryUsersService
from .register_user import RegisterUserService

__all__ = [
    "AuthenticateUserService",
    "AuthResult",
    "ManageUserService",
    "QueryUsersService",
    "RegisterUserService",
]
