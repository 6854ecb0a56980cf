from dataclasses import dataclass

from hotel_reservation.shared.domain import InvalidCredentialsException
from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.repository import UserRepository
from hotel_reservation.user.domain.service import PasswordHasher, TokenService
from hotel_reservation.user.domain.value_object import Email


@dataclass(frozen=True)
class AuthResult:
    user: User
    token: str


class AuthenticateUserService:
    """ログインのユースケース"""

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._repository = repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    def authenticate(self, email: str, password: str) -> AuthResult:
        """メールアドレスとパスワードを照合してトークンを発行する"""
        if not Email.is_valid(email):
            raise InvalidCredentialsException()

        user = self._repository.find_by_email(Email(email))
        if user is None:
            raise InvalidCredentialsException()
        if not self._password_hasher.verify(password, user.encrypted_password):
            raise InvalidCredentialsException()

        return AuthResult(user=user, token=self._token_service.issue(user))
