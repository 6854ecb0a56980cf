from dataclasses import dataclass
from decimal import Decimal

from hotel_reservation.hotel.domain.enum import RoomSize


@dataclass(frozen=True)
class RoomQuery:
    """部屋検索条件（None は未指定。価格 0 は有効な条件として扱う）"""

    size: RoomSize | None = None
    seaside: bool | None = None
    from_price: Decimal | None = None
    to_price: Decimal | None = None
    hotel_id: str | None = None

    def __post_init__(self) -> None:
        if (
            self.from_price is not None
            and self.to_price is not None
            and self.from_price > self.to_price
        ):
            raise ValueError("from_price cannot be greater than to_price")
