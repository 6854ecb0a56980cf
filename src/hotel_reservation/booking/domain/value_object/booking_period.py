from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BookingPeriod:
    """予約期間

    from_date < till_date を満たすタイムゾーン付きの日時の組。
    """

    from_date: datetime
    till_date: datetime

    def __post_init__(self) -> None:
        if self.from_date.tzinfo is None or self.till_date.tzinfo is None:
            raise ValueError("Booking dates must be timezone-aware")
        if self.from_date >= self.till_date:
            raise ValueError("from date must be before till date")

    def overlaps(self, other: BookingPeriod) -> bool:
        """期間が重なるかを判定する

        両端を含めて比較するため、境界の一瞬だけ接する期間も重なりとみなす。
        """
        return (
            self.from_date <= other.till_date and self.till_date >= other.from_date
        )
