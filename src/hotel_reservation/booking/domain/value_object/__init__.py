from .booking_id import BookingId
from .booking_period import BookingPeriod

__all__ = ["BookingId", "BookingPeriod"]
