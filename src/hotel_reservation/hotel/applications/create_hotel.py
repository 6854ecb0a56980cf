from hotel_reservation.hotel.domain.entity import Hotel
from hotel_reservation.hotel.domain.factory import HotelDetails, HotelFactory
from hotel_reservation.hotel.domain.repository import HotelRepository


class CreateHotelService:
    """ホテル登録のユースケース"""

    def __init__(self, repository: HotelRepository, factory: HotelFactory) -> None:
        self._repository = repository
        self._factory = factory

    def create(self, details: HotelDetails) -> Hotel:
        hotel = self._factory.create_hotel(details)
        self._repository.save(hotel)
        return hotel
