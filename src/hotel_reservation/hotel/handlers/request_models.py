from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from hotel_reservation.hotel.domain.enum import RoomSize


class CreateHotelRequest(BaseModel):
    """ホテル登録リクエストモデル"""

    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)

    @field_validator("name", "location")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class CreateRoomRequest(BaseModel):
    """部屋登録リクエストモデル"""

    size: RoomSize
    seaside: bool = False
    price: Decimal = Field(..., ge=0)


class ListHotelsQuery(BaseModel):
    """ホテル一覧のクエリパラメータ"""

    rating: int | None = Field(default=None, ge=1, le=5)
    name: str | None = None
    location: str | None = None
    page: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=0)


class ListRoomsQuery(BaseModel):
    """部屋一覧のクエリパラメータ（価格 0 も有効な条件）"""

    size: RoomSize | None = None
    seaside: bool | None = None
    from_price: Decimal | None = Field(default=None, ge=0)
    to_price: Decimal | None = Field(default=None, ge=0)
    page: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_price_range(self) -> "ListRoomsQuery":
        if (
            self.from_price is not None
            and self.to_price is not None
            and self.from_price > self.to_price
        ):
            raise ValueError("from_price cannot be greater than to_price")
        return self


class PageQuery(BaseModel):
    """ページング指定のみのクエリパラメータ"""

    page: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=0)
