from hotel_reservation.shared.domain import Page, Pagination, ResourceNotFoundException
from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.query import UserQuery
from hotel_reservation.user.domain.repository import UserRepository
from hotel_reservation.user.domain.value_object import UserId


class QueryUsersService:
    """ユーザー参照のユースケース"""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def get(self, user_id: UserId) -> User:
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException(f"User not found: {user_id}")
        return user

    def list(self, query: UserQuery, pagination: Pagination) -> Page[User]:
        return self._repository.find(query, pagination)
