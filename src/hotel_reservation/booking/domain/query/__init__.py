from .booking_query import BookingQuery

__all__ = ["BookingQuery"]
