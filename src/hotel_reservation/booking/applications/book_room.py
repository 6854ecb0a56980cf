from hotel_reservation.booking.domain.entity import Booking
from hotel_reservation.booking.domain.factory import BookingFactory, BookRoomParams
from hotel_reservation.booking.domain.repository import BookingRepository
from hotel_reservation.booking.domain.service import RoomAvailabilityChecker
from hotel_reservation.hotel.domain.value_object import RoomId
from hotel_reservation.shared.domain import (
    Actor,
    OptimisticLockException,
    RoomAlreadyBookedException,
)
from hotel_reservation.shared.utils.logger import get_logger
from hotel_reservation.user.domain.value_object import UserId

logger = get_logger("booking")


class BookRoomService:
    """部屋予約のユースケース

    空き確認から保存までを部屋ごとの予約バージョンで保護し、
    その間に別の予約が入った場合は最初からやり直す。
    """

    def __init__(
        self,
        repository: BookingRepository,
        factory: BookingFactory,
        max_attempts: int = 3,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._checker = RoomAvailabilityChecker(repository)
        self._max_attempts = max_attempts

    def book(self, actor: Actor, room_id: RoomId, params: BookRoomParams) -> Booking:
        booking = self._factory.create(UserId(value=actor.user_id), room_id, params)

        for attempt in range(1, self._max_attempts + 1):
            version = self._repository.room_version(room_id)
            if not self._checker.is_available(room_id, booking.period):
                logger.info("Room is already booked", extra={"room_id": str(room_id)})
                raise RoomAlreadyBookedException(str(room_id))
            try:
                self._repository.save(booking, expected_room_version=version)
                return booking
            except OptimisticLockException:
                logger.warning(
                    "Concurrent booking detected, retrying",
                    extra={"room_id": str(room_id), "attempt": attempt},
                )

        raise OptimisticLockException(
            f"Room {room_id} is being booked concurrently, please retry"
        )
