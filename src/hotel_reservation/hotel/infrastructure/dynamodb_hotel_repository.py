from datetime import datetime, timezone

from boto3.dynamodb.conditions import Attr, ConditionBase
from botocore.exceptions import ClientError

from hotel_reservation.hotel.domain.entity import Hotel
from hotel_reservation.hotel.domain.query import HotelQuery
from hotel_reservation.hotel.domain.repository import HotelRepository
from hotel_reservation.hotel.domain.value_object import HotelId, Rating, RoomId
from hotel_reservation.shared.domain import (
    DuplicateResourceException,
    Page,
    Pagination,
    ResourceNotFoundException,
)
from hotel_reservation.shared.infrastructure import (
    DynamoDBRepository,
    all_of,
    is_conditional_check_failed,
    ordering_key,
)

COLLECTION = "HOTELS"


def build_hotel_filter(query: HotelQuery) -> ConditionBase | None:
    """HotelQuery を DynamoDB の FilterExpression に変換する"""
    conditions = []
    if query.rating is not None:
        conditions.append(Attr("rating").eq(query.rating))
    if query.name is not None:
        conditions.append(Attr("name").eq(query.name))
    if query.location is not None:
        conditions.append(Attr("location").eq(query.location))
    return all_of(conditions)


class DynamoDBHotelRepository(DynamoDBRepository, HotelRepository):
    """DynamoDBを使用したHotelRepository の具象実装"""

    entity_label = "Hotel"

    def save(self, hotel: Hotel) -> None:
        """ホテルをDBに保存する"""
        item = {
            "PK": f"HOTEL#{hotel.id}",
            "SK": "HOTEL",
            "entity_type": "HOTEL",
            "hotel_id": str(hotel.id),
            "name": hotel.name,
            "location": hotel.location,
            "rating": int(hotel.rating),
            "rooms": [str(room_id) for room_id in hotel.rooms],
            "GSI1PK": COLLECTION,
            "GSI1SK": ordering_key(datetime.now(timezone.utc), hotel.id),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if is_conditional_check_failed(e):
                raise DuplicateResourceException(
                    f"Hotel already exists: {hotel.id}"
                ) from e
            raise

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索"""
        item = self._get_item(f"HOTEL#{hotel_id}", "HOTEL")
        if not item:
            return None
        return self._to_entity(item)

    def find(self, query: HotelQuery, pagination: Pagination) -> Page[Hotel]:
        return self._find_collection_page(
            COLLECTION, build_hotel_filter(query), pagination, self._to_entity
        )

    def append_room(self, hotel_id: HotelId, room_id: RoomId) -> None:
        """ホテルの部屋一覧の末尾に部屋IDを追加する"""
        try:
            self.table.update_item(
                Key={"PK": f"HOTEL#{hotel_id}", "SK": "HOTEL"},
                UpdateExpression=(
                    "SET #rooms = list_append(if_not_exists(#rooms, :empty), :room_ids)"
                ),
                ExpressionAttributeNames={"#rooms": "rooms"},
                ExpressionAttributeValues={":empty": [], ":room_ids": [str(room_id)]},
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if is_conditional_check_failed(e):
                raise ResourceNotFoundException(f"Hotel not found: {hotel_id}") from e
            raise

    def _to_entity(self, item: dict) -> Hotel:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Hotel(
            id=HotelId(value=item["hotel_id"]),
            name=item["name"],
            location=item["location"],
            rating=Rating(int(item["rating"])),
            rooms=[RoomId(value=room_id) for room_id in item.get("rooms", [])],
        )
