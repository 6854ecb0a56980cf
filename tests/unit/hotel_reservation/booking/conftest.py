from datetime import datetime, timezone

import pytest

from hotel_reservation.booking.domain import (
    Booking,
    BookingFactory,
    BookingId,
    BookingQuery,
    BookingRepository,
)
from hotel_reservation.hotel.domain import RoomId
from hotel_reservation.shared.domain import (
    OptimisticLockException,
    Page,
    Pagination,
    ResourceNotFoundException,
)


class InMemoryBookingRepository(BookingRepository):
    """テスト用のインメモリ予約リポジトリ（DynamoDB と同じ検索条件の意味を持つ）"""

    def __init__(self) -> None:
        self.bookings: dict[BookingId, Booking] = {}
        self.versions: dict[RoomId, int] = {}
        self.before_save = None

    def save(self, booking: Booking, expected_room_version: int = 0) -> None:
        if self.before_save is not None:
            hook, self.before_save = self.before_save, None
            hook()
        if self.versions.get(booking.room_id, 0) != expected_room_version:
            raise OptimisticLockException("version mismatch")
        self.bookings[booking.id] = booking
        self.versions[booking.room_id] = expected_room_version + 1

    def room_version(self, room_id: RoomId) -> int:
        return self.versions.get(room_id, 0)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        return self.bookings.get(booking_id)

    def find(self, query: BookingQuery, pagination: Pagination) -> Page[Booking]:
        items = self._matching(query)
        page_items = pagination.slice(items)
        if not page_items:
            raise ResourceNotFoundException("No booking found")
        return Page(page_items, len(items), pagination.page, pagination.limit)

    def find_all(self, query: BookingQuery) -> list[Booking]:
        items = self._matching(query)
        if not items:
            raise ResourceNotFoundException("No booking found")
        return items

    def update(self, booking: Booking) -> None:
        if booking.id not in self.bookings:
            raise ResourceNotFoundException(f"Booking not found: {booking.id}")
        self.bookings[booking.id] = booking

    def _matching(self, query: BookingQuery) -> list[Booking]:
        def matches(b: Booking) -> bool:
            if query.room_id is not None and str(b.room_id) != query.room_id:
                return False
            if query.user_id is not None and str(b.user_id) != query.user_id:
                return False
            if query.canceled is not None and b.canceled != query.canceled:
                return False
            if query.from_date is not None and query.till_date is not None:
                return (
                    b.period.from_date <= query.till_date
                    and b.period.till_date >= query.from_date
                )
            if query.from_date is not None:
                return b.period.from_date >= query.from_date
            if query.till_date is not None:
                return b.period.till_date <= query.till_date
            return True

        return [b for b in self.bookings.values() if matches(b)]


@pytest.fixture
def booking_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def booking_factory():
    """基準日より前の時刻を現在時刻とする BookingFactory"""
    return BookingFactory(clock=lambda: datetime(2029, 12, 1, tzinfo=timezone.utc))
