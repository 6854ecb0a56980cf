from hotel_reservation.booking.domain.entity import Booking
from hotel_reservation.booking.domain.query import BookingQuery
from hotel_reservation.booking.domain.repository import BookingRepository
from hotel_reservation.booking.domain.value_object import BookingId
from hotel_reservation.shared.domain import (
    Actor,
    ForbiddenException,
    Page,
    Pagination,
    ResourceNotFoundException,
)


def _authorized_booking(
    repository: BookingRepository, booking_id: BookingId, actor: Actor
) -> Booking:
    """予約を取得し、本人または管理者であることを確認する"""
    booking = repository.find_by_id(booking_id)
    if booking is None:
        raise ResourceNotFoundException(f"Booking not found: {booking_id}")
    if not actor.can_access(booking.user_id):
        raise ForbiddenException()
    return booking


class GetBookingService:
    """予約取得のユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def get(self, booking_id: BookingId, actor: Actor) -> Booking:
        return _authorized_booking(self._repository, booking_id, actor)


class CancelBookingService:
    """予約キャンセルのユースケース

    キャンセル済みの予約を再度キャンセルしても同じ更新をかけ直すだけでエラーにしない。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def cancel(self, booking_id: BookingId, actor: Actor) -> Booking:
        booking = _authorized_booking(self._repository, booking_id, actor)
        booking.cancel()
        self._repository.update(booking)
        return booking


class ListBookingsService:
    """予約一覧のユースケース（権限確認はハンドラーで行う）"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def list(self, query: BookingQuery, pagination: Pagination) -> Page[Booking]:
        return self._repository.find(query, pagination)
