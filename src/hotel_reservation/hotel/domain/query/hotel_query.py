from dataclasses import dataclass


@dataclass(frozen=True)
class HotelQuery:
    """ホテル検索条件（None は未指定）"""

    rating: int | None = None
    name: str | None = None
    location: str | None = None
