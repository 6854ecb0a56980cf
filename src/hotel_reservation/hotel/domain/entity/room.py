from hotel_reservation.hotel.domain.enum import RoomSize
from hotel_reservation.hotel.domain.value_object import HotelId, RoomId, RoomPrice
from hotel_reservation.shared.domain import Entity


class Room(Entity[RoomId]):
    """部屋エンティティ（所属ホテルは作成後に変更できない）"""

    def __init__(
        self,
        id: RoomId,
        hotel_id: HotelId,
        size: RoomSize,
        seaside: bool,
        price: RoomPrice,
    ) -> None:
        super().__init__(id)
        self._hotel_id = hotel_id
        self._size = size
        self._seaside = seaside
        self._price = price

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def size(self) -> RoomSize:
        return self._size

    @property
    def seaside(self) -> bool:
        return self._seaside

    @property
    def price(self) -> RoomPrice:
        return self._price
