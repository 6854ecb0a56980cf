from pydantic import AwareDatetime, BaseModel, Field


class BookRoomRequest(BaseModel):
    """部屋予約リクエストモデル

    日付の前後関係や過去日の判定は BookingFactory で行う。
    """

    from_date: AwareDatetime
    till_date: AwareDatetime
    num_persons: int = Field(..., ge=1)


class ListBookingsQuery(BaseModel):
    """予約一覧のクエリパラメータ"""

    user_id: str | None = None
    room_id: str | None = None
    num_persons: int | None = Field(default=None, ge=1)
    from_date: AwareDatetime | None = None
    till_date: AwareDatetime | None = None
    canceled: bool | None = None
    page: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=0)
