from dataclasses import dataclass

from hotel_reservation.shared.domain import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """ユーザーID"""
