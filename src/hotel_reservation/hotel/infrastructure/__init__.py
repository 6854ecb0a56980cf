from .dynamodb_hotel_repository import DynamoDBHotelRepository, build_hotel_filter
from .dynamodb_room_repository import DynamoDBRoomRepository, build_room_filter

__all__ = [
    "DynamoDBHotelRepository",
    "DynamoDBRoomRepository",
    "build_hotel_filter",
    "build_room_filter",
]
