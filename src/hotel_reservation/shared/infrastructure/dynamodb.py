import os
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from functools import reduce
from typing import Any, TypeVar

import boto3
from boto3.dynamodb.conditions import ConditionBase, Key
from botocore.exceptions import ClientError

from hotel_reservation.shared.domain import Page, Pagination, ResourceNotFoundException

T = TypeVar("T")

GSI1 = "GSI1"


def to_iso(value: datetime) -> str:
    """UTC・マイクロ秒精度の ISO 8601 文字列に変換する（辞書順 = 時系列順）"""
    if value.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_iso(value: str) -> datetime:
    return datetime.fromisoformat(value)


def ordering_key(created_at: datetime, id: object) -> str:
    """一覧の並び順（挿入順）を決めるソートキー"""
    return f"{to_iso(created_at)}#{id}"


def all_of(conditions: Iterable[ConditionBase]) -> ConditionBase | None:
    """条件を AND で結合する（条件が無ければ None）"""
    conditions = list(conditions)
    if not conditions:
        return None
    return reduce(lambda left, right: left & right, conditions)


def is_conditional_check_failed(e: ClientError) -> bool:
    return e.response["Error"]["Code"] == "ConditionalCheckFailedException"


def is_transaction_condition_failed(e: ClientError) -> bool:
    """トランザクションが条件式の不成立で取り消されたか"""
    if e.response["Error"]["Code"] != "TransactionCanceledException":
        return False
    reasons = e.response.get("CancellationReasons", [])
    return any(r.get("Code") == "ConditionalCheckFailed" for r in reasons)


class DynamoDBRepository:
    """単一テーブル設計の DynamoDB リポジトリ共通処理"""

    entity_label = "Resource"

    def __init__(self, table_name: str | None = None, table: Any = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table

    def _query_all(self, **kwargs: Any) -> list[dict]:
        """LastEvaluatedKey をたどって全ページ分のアイテムを取得する"""
        params = {k: v for k, v in kwargs.items() if v is not None}
        items: list[dict] = []
        while True:
            response = self.table.query(**params)
            items.extend(response.get("Items", []))
            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                return items
            params["ExclusiveStartKey"] = last_evaluated_key

    def _find_collection_page(
        self,
        collection: str,
        filter_expression: ConditionBase | None,
        pagination: Pagination,
        to_entity: Callable[[dict], T],
    ) -> Page[T]:
        """GSI1 のコレクション（挿入順）から条件に合う 1 ページ分を取得する"""
        items = self._query_all(
            IndexName=GSI1,
            KeyConditionExpression=Key("GSI1PK").eq(collection),
            FilterExpression=filter_expression,
        )
        page_items = pagination.slice(items)
        if not page_items:
            raise ResourceNotFoundException(f"No {self.entity_label.lower()} found")
        return Page(
            items=[to_entity(item) for item in page_items],
            total=len(items),
            page=pagination.page,
            limit=pagination.limit,
        )

    def _get_item(self, pk: str, sk: str) -> dict | None:
        response = self.table.get_item(Key={"PK": pk, "SK": sk}, ConsistentRead=True)
        return response.get("Item")
