from abc import abstractmethod

from hotel_reservation.shared.domain import Page, Pagination, Repository
from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.query import UserQuery
from hotel_reservation.user.domain.value_object import Email, UserId


class UserRepository(Repository[User, UserId, UserQuery]):
    """ユーザーレポジトリのインターフェース"""

    @abstractmethod
    def save(self, user: User) -> None:
        """ユーザーを登録する（メールアドレス重複時は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: Email) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def find(self, query: UserQuery, pagination: Pagination) -> Page[User]:
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User) -> None:
        """氏名を更新する（対象が無ければ ResourceNotFoundException）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, user: User) -> None:
        """ユーザーを削除する（対象が無ければ ResourceNotFoundException）"""
        raise NotImplementedError
