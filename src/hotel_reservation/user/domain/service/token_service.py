from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from hotel_reservation.user.domain.entity import User


@dataclass(frozen=True)
class TokenClaims:
    """検証済みトークンから取り出した情報"""

    user_id: str
    email: str
    expires_at: datetime


class TokenService(ABC):
    """アクセストークンの発行・検証"""

    @abstractmethod
    def issue(self, user: User) -> str:
        """有効期限付きのトークンを発行する"""
        raise NotImplementedError

    @abstractmethod
    def validate(self, token: str) -> TokenClaims:
        """トークンを検証する（不正・期限切れは UnauthorizedException）"""
        raise NotImplementedError
