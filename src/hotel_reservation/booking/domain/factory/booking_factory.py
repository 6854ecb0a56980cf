from collections.abc import Callable
from datetime import datetime, timezone
from typing import TypedDict

from hotel_reservation.booking.domain.entity import Booking
from hotel_reservation.booking.domain.value_object import BookingId, BookingPeriod
from hotel_reservation.hotel.domain.value_object import RoomId
from hotel_reservation.shared.domain import BusinessRuleViolationException
from hotel_reservation.user.domain.value_object import UserId


class BookRoomParams(TypedDict):
    """部屋予約の入力データ"""

    from_date: datetime
    till_date: datetime
    num_persons: int


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BookingFactory:
    """予約を生成する Factory"""

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock

    def validate(self, params: BookRoomParams) -> str | None:
        """予約パラメータを検証し、最初に見つかったエラーを返す"""
        if params["from_date"] > params["till_date"]:
            return "from date cannot be after till date"
        if self._clock() > params["from_date"]:
            return "cannot book a room in the past"
        return None

    def create(self, user_id: UserId, room_id: RoomId, params: BookRoomParams) -> Booking:
        """未キャンセルの新規予約を生成する"""
        error = self.validate(params)
        if error:
            raise BusinessRuleViolationException(error)

        try:
            return Booking(
                id=BookingId.generate(),
                user_id=user_id,
                room_id=room_id,
                num_persons=params["num_persons"],
                period=BookingPeriod(params["from_date"], params["till_date"]),
            )
        except ValueError as e:
            raise BusinessRuleViolationException(str(e)) from e
