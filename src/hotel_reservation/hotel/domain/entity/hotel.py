from hotel_reservation.hotel.domain.value_object import HotelId, Rating, RoomId
from hotel_reservation.shared.domain import Entity


class Hotel(Entity[HotelId]):
    """ホテルエンティティ

    rooms は部屋の追加順に並び、追加のみ可能。
    """

    def __init__(
        self,
        id: HotelId,
        name: str,
        location: str,
        rating: Rating,
        rooms: list[RoomId] | None = None,
    ) -> None:
        super().__init__(id)
        if not name.strip():
            raise ValueError("Hotel name cannot be empty")
        if not location.strip():
            raise ValueError("Hotel location cannot be empty")
        self._name = name
        self._location = location
        self._rating = rating
        self._rooms = list(rooms or [])

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return self._location

    @property
    def rating(self) -> Rating:
        return self._rating

    @property
    def rooms(self) -> tuple[RoomId, ...]:
        return tuple(self._rooms)

    def add_room(self, room_id: RoomId) -> None:
        """部屋を追加する"""
        if room_id not in self._rooms:
            self._rooms.append(room_id)
