from .booking_factory import BookingFactory, BookRoomParams

__all__ = ["BookingFactory", "BookRoomParams"]
