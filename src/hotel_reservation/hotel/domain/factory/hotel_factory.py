from decimal import Decimal
from typing import TypedDict

from hotel_reservation.hotel.domain.entity import Hotel, Room
from hotel_reservation.hotel.domain.enum import RoomSize
from hotel_reservation.hotel.domain.value_object import (
    HotelId,
    Rating,
    RoomId,
    RoomPrice,
)
from hotel_reservation.shared.domain import BusinessRuleViolationException


class HotelDetails(TypedDict):
    """ホテルの入力データ"""

    name: str
    location: str
    rating: int


class RoomDetails(TypedDict):
    """部屋の入力データ"""

    size: str
    seaside: bool
    price: Decimal


class HotelFactory:
    """ホテル・部屋を生成する Factory"""

    def create_hotel(self, details: HotelDetails) -> Hotel:
        """部屋を持たない新規ホテルを生成する"""
        try:
            return Hotel(
                id=HotelId.generate(),
                name=details["name"],
                location=details["location"],
                rating=Rating(details["rating"]),
            )
        except ValueError as e:
            raise BusinessRuleViolationException(str(e)) from e

    def create_room(self, hotel_id: HotelId, details: RoomDetails) -> Room:
        """ホテルに属する新規の部屋を生成する"""
        try:
            return Room(
                id=RoomId.generate(),
                hotel_id=hotel_id,
                size=RoomSize(details["size"]),
                seaside=details["seaside"],
                price=RoomPrice(details["price"]),
            )
        except ValueError as e:
            raise BusinessRuleViolationException(str(e)) from e
