from .user_factory import CreateUserParams, UserFactory

__all__ = ["CreateUserParams", "UserFactory"]
