from hotel_reservation.hotel.domain.entity import Room
from hotel_reservation.hotel.domain.factory import HotelFactory, RoomDetails
from hotel_reservation.hotel.domain.repository import HotelRepository, RoomRepository
from hotel_reservation.hotel.domain.value_object import HotelId
from hotel_reservation.shared.domain import ResourceNotFoundException


class AddRoomService:
    """部屋登録のユースケース

    部屋を保存したうえで、所属ホテルの部屋一覧に部屋IDを追加する。
    """

    def __init__(
        self,
        hotel_repository: HotelRepository,
        room_repository: RoomRepository,
        factory: HotelFactory,
    ) -> None:
        self._hotel_repository = hotel_repository
        self._room_repository = room_repository
        self._factory = factory

    def add(self, hotel_id: HotelId, details: RoomDetails) -> Room:
        hotel = self._hotel_repository.find_by_id(hotel_id)
        if hotel is None:
            raise ResourceNotFoundException(f"Hotel not found: {hotel_id}")

        room = self._factory.create_room(hotel.id, details)
        self._room_repository.save(room)
        self._hotel_repository.append_room(hotel.id, room.id)
        hotel.add_room(room.id)
        return room
