from dataclasses import dataclass

from hotel_reservation.shared.domain import EntityId


@dataclass(frozen=True)
class BookingId(EntityId):
    """予約ID"""
