from .hotel import Hotel
from .room import Room

__all__ = ["Hotel", "Room"]
