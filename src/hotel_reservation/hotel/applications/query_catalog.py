from hotel_reservation.hotel.domain.entity import Hotel, Room
from hotel_reservation.hotel.domain.query import HotelQuery, RoomQuery
from hotel_reservation.hotel.domain.repository import HotelRepository, RoomRepository
from hotel_reservation.hotel.domain.value_object import HotelId
from hotel_reservation.shared.domain import Page, Pagination, ResourceNotFoundException


class QueryCatalogService:
    """ホテル・部屋の参照ユースケース"""

    def __init__(
        self, hotel_repository: HotelRepository, room_repository: RoomRepository
    ) -> None:
        self._hotel_repository = hotel_repository
        self._room_repository = room_repository

    def get_hotel(self, hotel_id: HotelId) -> Hotel:
        hotel = self._hotel_repository.find_by_id(hotel_id)
        if hotel is None:
            raise ResourceNotFoundException(f"Hotel not found: {hotel_id}")
        return hotel

    def list_hotels(self, query: HotelQuery, pagination: Pagination) -> Page[Hotel]:
        return self._hotel_repository.find(query, pagination)

    def list_rooms(self, query: RoomQuery, pagination: Pagination) -> Page[Room]:
        return self._room_repository.find(query, pagination)

    def list_hotel_rooms(self, hotel_id: HotelId, pagination: Pagination) -> Page[Room]:
        """ホテルに属する部屋を一覧する"""
        return self._room_repository.find(RoomQuery(hotel_id=str(hotel_id)), pagination)
