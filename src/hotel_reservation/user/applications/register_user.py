from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.factory import CreateUserParams, UserFactory
from hotel_reservation.user.domain.repository import UserRepository


class RegisterUserService:
    """ユーザー登録のユースケース"""

    def __init__(self, repository: UserRepository, factory: UserFactory) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, params: CreateUserParams, is_admin: bool = False) -> User:
        """ユーザーを登録する"""
        user = self._factory.create(params, is_admin=is_admin)
        self._repository.save(user)
        return user
