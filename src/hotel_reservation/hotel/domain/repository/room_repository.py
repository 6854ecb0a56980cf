from abc import abstractmethod

from hotel_reservation.hotel.domain.entity import Room
from hotel_reservation.hotel.domain.query import RoomQuery
from hotel_reservation.hotel.domain.value_object import RoomId
from hotel_reservation.shared.domain import Page, Pagination, Repository


class RoomRepository(Repository[Room, RoomId, RoomQuery]):
    """部屋レポジトリのインターフェース"""

    @abstractmethod
    def save(self, room: Room) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_id: RoomId) -> Room | None:
        raise NotImplementedError

    @abstractmethod
    def find(self, query: RoomQuery, pagination: Pagination) -> Page[Room]:
        raise NotImplementedError
