from hotel_reservation.booking.domain.query import BookingQuery
from hotel_reservation.booking.domain.repository import BookingRepository
from hotel_reservation.booking.domain.value_object import BookingPeriod
from hotel_reservation.hotel.domain.value_object import RoomId
from hotel_reservation.shared.domain import ResourceNotFoundException


class RoomAvailabilityChecker:
    """部屋の空き状況を判定するドメインサービス

    部屋の存在確認は行わない。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def is_available(self, room_id: RoomId, period: BookingPeriod) -> bool:
        """期間内に有効な予約が無ければ True"""
        query = BookingQuery(
            room_id=str(room_id),
            canceled=False,
            from_date=period.from_date,
            till_date=period.till_date,
        )
        try:
            bookings = self._repository.find_all(query)
        except ResourceNotFoundException:
            return True

        return not any(
            booking.is_active and booking.period.overlaps(period)
            for booking in bookings
        )
