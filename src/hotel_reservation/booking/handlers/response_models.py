from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from hotel_reservation.booking.domain.entity import Booking
from hotel_reservation.shared.domain import Page


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    user_id: str
    room_id: str
    num_persons: int
    from_date: datetime
    till_date: datetime
    canceled: bool


class BookingResponse(BaseModel):
    status: str = "success"
    data: BookingData


class BookingListResponse(BaseModel):
    """予約一覧レスポンスモデル"""

    status: str = "success"
    data: list[BookingData]
    total: int
    page: int
    limit: int


def to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=str(booking.id),
        user_id=str(booking.user_id),
        room_id=str(booking.room_id),
        num_persons=booking.num_persons,
        from_date=booking.period.from_date,
        till_date=booking.period.till_date,
        canceled=booking.canceled,
    )


def to_booking_response(booking: Booking) -> dict:
    return BookingResponse(data=to_booking_data(booking)).model_dump(mode="json")


def to_booking_list_response(page: Page[Booking]) -> dict:
    return BookingListResponse(
        data=[to_booking_data(booking) for booking in page],
        total=page.total,
        page=page.page,
        limit=page.limit,
    ).model_dump(mode="json")
