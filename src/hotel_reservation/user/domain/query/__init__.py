from .user_query import UserQuery

__all__ = ["UserQuery"]
