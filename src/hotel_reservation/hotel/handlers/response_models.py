from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from hotel_reservation.hotel.domain.entity import Hotel, Room
from hotel_reservation.shared.domain import Page


class HotelData(BaseModel):
    """ホテルデータのレスポンスモデル"""

    hotel_id: str
    name: str
    location: str
    rating: int
    rooms: list[str]


class RoomData(BaseModel):
    """部屋データのレスポンスモデル"""

    room_id: str
    hotel_id: str
    size: str
    seaside: bool
    price: Decimal


class HotelResponse(BaseModel):
    status: str = "success"
    data: HotelData


class RoomResponse(BaseModel):
    status: str = "success"
    data: RoomData


class HotelListResponse(BaseModel):
    """ホテル一覧レスポンスモデル"""

    status: str = "success"
    data: list[HotelData]
    total: int
    page: int
    limit: int


class RoomListResponse(BaseModel):
    """部屋一覧レスポンスモデル"""

    status: str = "success"
    data: list[RoomData]
    total: int
    page: int
    limit: int


def to_hotel_data(hotel: Hotel) -> HotelData:
    return HotelData(
        hotel_id=str(hotel.id),
        name=hotel.name,
        location=hotel.location,
        rating=int(hotel.rating),
        rooms=[str(room_id) for room_id in hotel.rooms],
    )


def to_room_data(room: Room) -> RoomData:
    return RoomData(
        room_id=str(room.id),
        hotel_id=str(room.hotel_id),
        size=room.size.value,
        seaside=room.seaside,
        price=room.price.amount,
    )


def to_hotel_response(hotel: Hotel) -> dict:
    return HotelResponse(data=to_hotel_data(hotel)).model_dump(mode="json")


def to_room_response(room: Room) -> dict:
    return RoomResponse(data=to_room_data(room)).model_dump(mode="json")


def to_hotel_list_response(page: Page[Hotel]) -> dict:
    return HotelListResponse(
        data=[to_hotel_data(hotel) for hotel in page],
        total=page.total,
        page=page.page,
        limit=page.limit,
    ).model_dump(mode="json")


def to_room_list_response(page: Page[Room]) -> dict:
    return RoomListResponse(
        data=[to_room_data(room) for room in page],
        total=page.total,
        page=page.page,
        limit=page.limit,
    ).model_dump(mode="json")
