from datetime import datetime, timedelta, timezone

import pytest

from hotel_reservation.booking.domain import BookingFactory, BookingPeriod
from hotel_reservation.hotel.domain import RoomId
from hotel_reservation.shared.domain import BusinessRuleViolationException
from hotel_reservation.user.domain import UserId


class TestBookingPeriod:
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ((1, 8), (3, 5), True),
            ((1, 8), (5, 12), True),
            ((1, 8), (8, 15), True),
            ((8, 15), (1, 8), True),
            ((1, 8), (9, 15), False),
            ((9, 15), (1, 8), False),
        ],
    )
    def test_overlap_is_symmetric(self, day, a, b, expected):
        first = BookingPeriod(day(a[0]), day(a[1]))
        second = BookingPeriod(day(b[0]), day(b[1]))

        assert first.overlaps(second) is expected
        assert second.overlaps(first) is expected

    def test_touching_periods_overlap(self, day):
        existing = BookingPeriod(day(1), day(8))

        assert BookingPeriod(day(8), day(15)).overlaps(existing)
        assert BookingPeriod(day(-5), day(1)).overlaps(existing)

    def test_from_must_be_before_till(self, day):
        with pytest.raises(ValueError):
            BookingPeriod(day(3), day(3))

    def test_naive_datetime_is_rejected(self):
        with pytest.raises(ValueError):
            BookingPeriod(datetime(2030, 1, 1), datetime(2030, 1, 2))


class TestBooking:
    def test_new_booking_is_active(self, create_booking):
        assert create_booking().is_active

    def test_cancel_is_terminal_and_idempotent(self, create_booking):
        booking = create_booking()

        booking.cancel()
        booking.cancel()

        assert booking.canceled is True
        assert not booking.is_active

    def test_num_persons_must_be_positive(self, create_booking):
        with pytest.raises(ValueError):
            create_booking(num_persons=0)


class TestBookingFactory:
    def test_create(self, booking_factory, day):
        booking = booking_factory.create(
            UserId(value="user-1"),
            RoomId(value="room-1"),
            {"from_date": day(1), "till_date": day(8), "num_persons": 2},
        )

        assert booking.canceled is False
        assert booking.period == BookingPeriod(day(1), day(8))
        assert booking.user_id == UserId(value="user-1")

    def test_from_after_till(self, booking_factory, day):
        with pytest.raises(BusinessRuleViolationException, match="after till date"):
            booking_factory.create(
                UserId(value="user-1"),
                RoomId(value="room-1"),
                {"from_date": day(8), "till_date": day(1), "num_persons": 2},
            )

    def test_from_in_the_past(self, day):
        factory = BookingFactory(clock=lambda: day(2))

        with pytest.raises(BusinessRuleViolationException, match="in the past"):
            factory.create(
                UserId(value="user-1"),
                RoomId(value="room-1"),
                {"from_date": day(1), "till_date": day(8), "num_persons": 2},
            )

    def test_validate_returns_single_error(self):
        now = datetime(2030, 1, 10, tzinfo=timezone.utc)
        factory = BookingFactory(clock=lambda: now)

        error = factory.validate(
            {
                "from_date": now - timedelta(days=1),
                "till_date": now - timedelta(days=3),
                "num_persons": 1,
            }
        )

        assert error == "from date cannot be after till date"

    def test_equal_dates_are_rejected(self, booking_factory, day):
        with pytest.raises(BusinessRuleViolationException):
            booking_factory.create(
                UserId(value="user-1"),
                RoomId(value="room-1"),
                {"from_date": day(1), "till_date": day(1), "num_persons": 2},
            )

    def test_zero_persons_is_rejected(self, booking_factory, day):
        with pytest.raises(BusinessRuleViolationException):
            booking_factory.create(
                UserId(value="user-1"),
                RoomId(value="room-1"),
                {"from_date": day(1), "till_date": day(8), "num_persons": 0},
            )
