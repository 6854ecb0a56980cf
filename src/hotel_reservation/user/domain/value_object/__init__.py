from .email import Email
from .user_id import UserId

__all__ = ["Email", "UserId"]
