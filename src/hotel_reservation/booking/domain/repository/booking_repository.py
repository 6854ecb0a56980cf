from abc import abstractmethod

from hotel_reservation.booking.domain.entity import Booking
from hotel_reservation.booking.domain.query import BookingQuery
from hotel_reservation.booking.domain.value_object import BookingId
from hotel_reservation.hotel.domain.value_object import RoomId
from hotel_reservation.shared.domain import Page, Pagination, Repository


class BookingRepository(Repository[Booking, BookingId, BookingQuery]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking, expected_room_version: int = 0) -> None:
        """予約を保存する

        部屋の予約バージョンが expected_room_version から変わっていれば
        OptimisticLockException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def room_version(self, room_id: RoomId) -> int:
        """部屋の予約バージョンを取得する（未作成なら 0）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def find(self, query: BookingQuery, pagination: Pagination) -> Page[Booking]:
        raise NotImplementedError

    @abstractmethod
    def find_all(self, query: BookingQuery) -> list[Booking]:
        """条件に合う予約をページングせずにすべて取得する

        一件も無ければ ResourceNotFoundException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, booking: Booking) -> None:
        """キャンセル状態を更新する（予約が無ければ ResourceNotFoundException）"""
        raise NotImplementedError
