from .entity import Hotel, Room
from .enum import RoomSize
from .factory import HotelDetails, HotelFactory, RoomDetails
from .query import HotelQuery, RoomQuery
from .repository import HotelRepository, RoomRepository
from .value_object import HotelId, Rating, RoomId, RoomPrice

__all__ = [
    "Hotel",
    "Room",
    "RoomSize",
    "HotelId",
    "RoomId",
    "Rating",
    "RoomPrice",
    "HotelQuery",
    "RoomQuery",
    "HotelRepository",
    "RoomRepository",
    "HotelFactory",
    "HotelDetails",
    "RoomDetails",
]
