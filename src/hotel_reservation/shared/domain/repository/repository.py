from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from hotel_reservation.shared.domain.query import Page, Pagination

T = TypeVar("T")
ID = TypeVar("ID")
Q = TypeVar("Q")


class Repository(ABC, Generic[T, ID, Q]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - find は検索結果が空の場合 ResourceNotFoundException を送出する
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError

    @abstractmethod
    def find(self, query: Q, pagination: Pagination) -> Page[T]:
        """条件とページングを指定して集約を検索する"""
        raise NotImplementedError
