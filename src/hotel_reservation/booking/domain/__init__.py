from .entity import Booking
from .factory import BookingFactory, BookRoomParams
from .query import BookingQuery
from .repository import BookingRepository
from .service import RoomAvailabilityChecker
from .value_object import BookingId, BookingPeriod

__all__ = [
    "Booking",
    "BookingId",
    "BookingPeriod",
    "BookingQuery",
    "BookingRepository",
    "BookingFactory",
    "BookRoomParams",
    "RoomAvailabilityChecker",
]
