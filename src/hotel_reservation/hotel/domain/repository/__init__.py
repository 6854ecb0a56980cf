from .hotel_repository import HotelRepository
from .room_repository import RoomRepository

__all__ = ["HotelRepository", "RoomRepository"]
