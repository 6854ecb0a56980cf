from hotel_reservation.booking.domain.value_object import BookingId, BookingPeriod
from hotel_reservation.hotel.domain.value_object import RoomId
from hotel_reservation.shared.domain import Entity
from hotel_reservation.user.domain.value_object import UserId


class Booking(Entity[BookingId]):
    """予約エンティティ

    状態は Active -> Canceled の一方向のみ。期間と部屋は作成後に変更できない。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        room_id: RoomId,
        num_persons: int,
        period: BookingPeriod,
        canceled: bool = False,
    ) -> None:
        super().__init__(id)
        if num_persons < 1:
            raise ValueError("Number of persons must be at least 1")
        self._user_id = user_id
        self._room_id = room_id
        self._num_persons = num_persons
        self._period = period
        self._canceled = canceled

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def room_id(self) -> RoomId:
        return self._room_id

    @property
    def num_persons(self) -> int:
        return self._num_persons

    @property
    def period(self) -> BookingPeriod:
        return self._period

    @property
    def canceled(self) -> bool:
        return self._canceled

    @property
    def is_active(self) -> bool:
        return not self._canceled

    def cancel(self) -> None:
        """予約をキャンセルする（キャンセル済みでもエラーにしない）"""
        self._canceled = True
