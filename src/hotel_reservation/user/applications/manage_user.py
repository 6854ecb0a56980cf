from hotel_reservation.shared.domain import (
    Actor,
    ForbiddenException,
    ResourceNotFoundException,
)
from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.repository import UserRepository
from hotel_reservation.user.domain.value_object import UserId


class ManageUserService:
    """ユーザー更新・削除のユースケース

    本人または管理者のみ実行できる。
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def update(
        self,
        user_id: UserId,
        actor: Actor,
        first_name: str | None = None,
        last_name: str | None = None,
    ) -> User:
        """氏名を更新する"""
        user = self._authorized_user(user_id, actor)
        user.rename(first_name=first_name, last_name=last_name)
        self._repository.update(user)
        return user

    def delete(self, user_id: UserId, actor: Actor) -> None:
        """ユーザーを削除する"""
        user = self._authorized_user(user_id, actor)
        self._repository.delete(user)

    def _authorized_user(self, user_id: UserId, actor: Actor) -> User:
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException(f"User not found: {user_id}")
        if not actor.can_access(user.id):
            raise ForbiddenException()
        return user
