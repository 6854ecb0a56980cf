from .room_size import RoomSize

__all__ = ["RoomSize"]
