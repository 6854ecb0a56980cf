from datetime import datetime, timezone

from boto3.dynamodb.conditions import Attr, ConditionBase, Key
from botocore.exceptions import ClientError

from hotel_reservation.booking.domain.entity import Booking
from hotel_reservation.booking.domain.query import BookingQuery
from hotel_reservation.booking.domain.repository import BookingRepository
from hotel_reservation.booking.domain.value_object import BookingId, BookingPeriod
from hotel_reservation.hotel.domain.value_object import RoomId
from hotel_reservation.shared.domain import (
    OptimisticLockException,
    Page,
    Pagination,
    ResourceNotFoundException,
)
from hotel_reservation.shared.infrastructure import (
    GSI1,
    DynamoDBRepository,
    all_of,
    from_iso,
    is_conditional_check_failed,
    ordering_key,
    to_iso,
)
from hotel_reservation.user.domain.value_object import UserId

COLLECTION = "BOOKINGS"
VERSION_SK = "BOOKING_VERSION"
REF_SK = "BOOKING_REF"


def build_booking_filter(query: BookingQuery) -> ConditionBase | None:
    """BookingQuery を DynamoDB の FilterExpression に変換する

    日時は UTC の ISO 8601 文字列で保存しているため文字列比較で大小を判定できる。
    """
    conditions = []
    if query.user_id is not None:
        conditions.append(Attr("user_id").eq(query.user_id))
    if query.room_id is not None:
        conditions.append(Attr("room_id").eq(query.room_id))
    if query.num_persons is not None:
        conditions.append(Attr("num_persons").eq(query.num_persons))
    if query.canceled is not None:
        conditions.append(Attr("canceled").eq(query.canceled))

    if query.from_date is not None and query.till_date is not None:
        conditions.append(Attr("from_date").lte(to_iso(query.till_date)))
        conditions.append(Attr("till_date").gte(to_iso(query.from_date)))
    elif query.from_date is not None:
        conditions.append(Attr("from_date").gte(to_iso(query.from_date)))
    elif query.till_date is not None:
        conditions.append(Attr("till_date").lte(to_iso(query.till_date)))
    return all_of(conditions)


class DynamoDBBookingRepository(DynamoDBRepository, BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    予約は部屋のパーティション（ROOM#{room_id}）に置き、
    空き確認は強整合性読み込みでそのパーティションだけを参照する。
    """

    entity_label = "Booking"

    def save(self, booking: Booking, expected_room_version: int = 0) -> None:
        """予約と参照アイテムの登録、部屋の予約バージョン更新を 1 トランザクションで行う"""
        room_pk = f"ROOM#{booking.room_id}"
        item = {
            "PK": {"S": room_pk},
            "SK": {"S": f"BOOKING#{booking.id}"},
            "entity_type": {"S": "BOOKING"},
            "booking_id": {"S": str(booking.id)},
            "user_id": {"S": str(booking.user_id)},
            "room_id": {"S": str(booking.room_id)},
            "num_persons": {"N": str(booking.num_persons)},
            "from_date": {"S": to_iso(booking.period.from_date)},
            "till_date": {"S": to_iso(booking.period.till_date)},
            "canceled": {"BOOL": booking.canceled},
            "GSI1PK": {"S": COLLECTION},
            "GSI1SK": {"S": ordering_key(datetime.now(timezone.utc), booking.id)},
        }

        if expected_room_version == 0:
            version_condition = "attribute_not_exists(PK)"
            version_values = {":next": {"N": "1"}}
        else:
            version_condition = "#version = :expected"
            version_values = {
                ":expected": {"N": str(expected_room_version)},
                ":next": {"N": str(expected_room_version + 1)},
            }

        try:
            self.table.meta.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": item,
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": {
                                "PK": {"S": f"BOOKING#{booking.id}"},
                                "SK": {"S": REF_SK},
                                "entity_type": {"S": REF_SK},
                                "room_id": {"S": str(booking.room_id)},
                            },
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                    {
                        "Update": {
                            "TableName": self.table_name,
                            "Key": {"PK": {"S": room_pk}, "SK": {"S": VERSION_SK}},
                            "UpdateExpression": "SET #version = :next",
                            "ExpressionAttributeNames": {"#version": "version"},
                            "ConditionExpression": version_condition,
                            "ExpressionAttributeValues": version_values,
                        }
                    },
                ]
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "TransactionCanceledException":
                raise OptimisticLockException(
                    f"Room {booking.room_id} was booked concurrently"
                ) from e
            raise

    def room_version(self, room_id: RoomId) -> int:
        item = self._get_item(f"ROOM#{room_id}", VERSION_SK)
        if not item:
            return 0
        return int(item["version"])

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索

        BOOKING#{id} の参照アイテムから部屋を引き、どちらも強整合性読み込みで取得する。
        """
        ref = self._get_item(f"BOOKING#{booking_id}", REF_SK)
        if not ref:
            return None
        item = self._get_item(f"ROOM#{ref['room_id']}", f"BOOKING#{booking_id}")
        if not item:
            return None
        return self._to_entity(item)

    def find(self, query: BookingQuery, pagination: Pagination) -> Page[Booking]:
        return self._find_collection_page(
            COLLECTION, build_booking_filter(query), pagination, self._to_entity
        )

    def find_all(self, query: BookingQuery) -> list[Booking]:
        """条件に合う予約を全ページたどって取得する"""
        if query.room_id is not None:
            items = self._query_all(
                KeyConditionExpression=Key("PK").eq(f"ROOM#{query.room_id}")
                & Key("SK").begins_with("BOOKING#"),
                FilterExpression=build_booking_filter(query),
                ConsistentRead=True,
            )
        else:
            items = self._query_all(
                IndexName=GSI1,
                KeyConditionExpression=Key("GSI1PK").eq(COLLECTION),
                FilterExpression=build_booking_filter(query),
            )
        if not items:
            raise ResourceNotFoundException("No booking found")
        return [self._to_entity(item) for item in items]

    def update(self, booking: Booking) -> None:
        """キャンセル状態を更新する"""
        try:
            self.table.update_item(
                Key={"PK": f"ROOM#{booking.room_id}", "SK": f"BOOKING#{booking.id}"},
                UpdateExpression="SET canceled = :canceled",
                ExpressionAttributeValues={":canceled": booking.canceled},
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if is_conditional_check_failed(e):
                raise ResourceNotFoundException(
                    f"Booking not found: {booking.id}"
                ) from e
            raise

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            room_id=RoomId(value=item["room_id"]),
            num_persons=int(item["num_persons"]),
            period=BookingPeriod(
                from_date=from_iso(item["from_date"]),
                till_date=from_iso(item["till_date"]),
            ),
            canceled=bool(item.get("canceled", False)),
        )
