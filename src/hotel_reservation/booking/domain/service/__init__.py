from .room_availability_checker import RoomAvailabilityChecker

__all__ = ["RoomAvailabilityChecker"]
