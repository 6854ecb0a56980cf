from enum import Enum


class RoomSize(str, Enum):
    """部屋の広さ"""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
