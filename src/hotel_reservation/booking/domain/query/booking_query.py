from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BookingQuery:
    """予約検索条件（None は未指定）

    from_date のみ: 開始日時が from_date 以降
    till_date のみ: 終了日時が till_date 以前
    両方: 期間 [from_date, till_date] と重なる予約
    """

    user_id: str | None = None
    room_id: str | None = None
    num_persons: int | None = None
    from_date: datetime | None = None
    till_date: datetime | None = None
    canceled: bool | None = None
