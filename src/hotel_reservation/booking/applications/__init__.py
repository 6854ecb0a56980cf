from .book_room import BookRoomService
from .manage_booking import CancelBookingService, GetBookingService, ListBookingsService

__all__ = [
    "BookRoomService",
    "CancelBookingService",
    "GetBookingService",
    "ListBookingsService",
]
