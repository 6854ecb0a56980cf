from .hotel_query import HotelQuery
from .room_query import RoomQuery

__all__ = ["HotelQuery", "RoomQuery"]
