from .hotel_id import HotelId
from .rating import Rating
from .room_id import RoomId
from .room_price import RoomPrice

__all__ = ["HotelId", "Rating", "RoomId", "RoomPrice"]
