from datetime import datetime, timezone
from decimal import Decimal

from boto3.dynamodb.conditions import Attr, ConditionBase
from botocore.exceptions import ClientError

from hotel_reservation.hotel.domain.entity import Room
from hotel_reservation.hotel.domain.enum import RoomSize
from hotel_reservation.hotel.domain.query import RoomQuery
from hotel_reservation.hotel.domain.repository import RoomRepository
from hotel_reservation.hotel.domain.value_object import HotelId, RoomId, RoomPrice
from hotel_reservation.shared.domain import (
    DuplicateResourceException,
    Page,
    Pagination,
)
from hotel_reservation.shared.infrastructure import (
    DynamoDBRepository,
    all_of,
    is_conditional_check_failed,
    ordering_key,
)

COLLECTION = "ROOMS"


def build_room_filter(query: RoomQuery) -> ConditionBase | None:
    """RoomQuery を DynamoDB の FilterExpression に変換する

    価格は下限のみなら「以上」、上限のみなら「以下」、両方なら閉区間。
    """
    conditions = []
    if query.size is not None:
        conditions.append(Attr("size").eq(query.size.value))
    if query.seaside is not None:
        conditions.append(Attr("seaside").eq(query.seaside))
    if query.from_price is not None and query.to_price is not None:
        conditions.append(Attr("price").between(query.from_price, query.to_price))
    elif query.from_price is not None:
        conditions.append(Attr("price").gte(query.from_price))
    elif query.to_price is not None:
        conditions.append(Attr("price").lte(query.to_price))
    if query.hotel_id is not None:
        conditions.append(Attr("hotel_id").eq(query.hotel_id))
    return all_of(conditions)


class DynamoDBRoomRepository(DynamoDBRepository, RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装

    部屋アイテムは予約と同じパーティション（ROOM#{room_id}）に置く。
    """

    entity_label = "Room"

    def save(self, room: Room) -> None:
        """部屋をDBに保存する"""
        item = {
            "PK": f"ROOM#{room.id}",
            "SK": "ROOM",
            "entity_type": "ROOM",
            "room_id": str(room.id),
            "hotel_id": str(room.hotel_id),
            "size": room.size.value,
            "seaside": room.seaside,
            "price": room.price.amount,
            "GSI1PK": COLLECTION,
            "GSI1SK": ordering_key(datetime.now(timezone.utc), room.id),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if is_conditional_check_failed(e):
                raise DuplicateResourceException(f"Room already exists: {room.id}") from e
            raise

    def find_by_id(self, room_id: RoomId) -> Room | None:
        """部屋IDで検索"""
        item = self._get_item(f"ROOM#{room_id}", "ROOM")
        if not item:
            return None
        return self._to_entity(item)

    def find(self, query: RoomQuery, pagination: Pagination) -> Page[Room]:
        return self._find_collection_page(
            COLLECTION, build_room_filter(query), pagination, self._to_entity
        )

    def _to_entity(self, item: dict) -> Room:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Room(
            id=RoomId(value=item["room_id"]),
            hotel_id=HotelId(value=item["hotel_id"]),
            size=RoomSize(item["size"]),
            seaside=bool(item["seaside"]),
            price=RoomPrice(Decimal(str(item["price"]))),
        )
