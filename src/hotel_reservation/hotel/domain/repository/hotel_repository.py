from abc import abstractmethod

from hotel_reservation.hotel.domain.entity import Hotel
from hotel_reservation.hotel.domain.query import HotelQuery
from hotel_reservation.hotel.domain.value_object import HotelId, RoomId
from hotel_reservation.shared.domain import Page, Pagination, Repository


class HotelRepository(Repository[Hotel, HotelId, HotelQuery]):
    """ホテルレポジトリのインターフェース"""

    @abstractmethod
    def save(self, hotel: Hotel) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        raise NotImplementedError

    @abstractmethod
    def find(self, query: HotelQuery, pagination: Pagination) -> Page[Hotel]:
        raise NotImplementedError

    @abstractmethod
    def append_room(self, hotel_id: HotelId, room_id: RoomId) -> None:
        """ホテルの部屋一覧に部屋IDを追加する（ホテルが無ければ ResourceNotFoundException）"""
        raise NotImplementedError
