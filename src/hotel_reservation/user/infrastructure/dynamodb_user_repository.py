from datetime import datetime, timezone

from boto3.dynamodb.conditions import Attr, ConditionBase
from botocore.exceptions import ClientError

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
    is_transaction_condition_failed,
    ordering_key,
)
from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.query import UserQuery
from hotel_reservation.user.domain.repository import UserRepository
from hotel_reservation.user.domain.value_object import Email, UserId

COLLECTION = "USERS"


def build_user_filter(query: UserQuery) -> ConditionBase | None:
    """UserQuery を DynamoDB の FilterExpression に変換する"""
    conditions = []
    if query.first_name is not None:
        conditions.append(Attr("first_name").eq(query.first_name))
    if query.last_name is not None:
        conditions.append(Attr("last_name").eq(query.last_name))
    if query.email is not None:
        conditions.append(Attr("email").eq(query.email))
    if query.is_admin is not None:
        conditions.append(Attr("is_admin").eq(query.is_admin))
    return all_of(conditions)


class DynamoDBUserRepository(DynamoDBRepository, UserRepository):
    """DynamoDBを使用したUserRepository の具象実装

    メールアドレスの一意性は EMAIL#{email} のマーカーアイテムで保証する。
    """

    entity_label = "User"

    def save(self, user: User) -> None:
        """ユーザーとメールアドレスのマーカーを 1 トランザクションで保存する"""
        created_at = datetime.now(timezone.utc)
        try:
            self.table.meta.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": {
                                "PK": {"S": self._email_pk(user.email)},
                                "SK": {"S": "EMAIL"},
                                "entity_type": {"S": "EMAIL"},
                                "user_id": {"S": str(user.id)},
                            },
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": {
                                "PK": {"S": f"USER#{user.id}"},
                                "SK": {"S": "USER"},
                                "entity_type": {"S": "USER"},
                                "user_id": {"S": str(user.id)},
                                "first_name": {"S": user.first_name},
                                "last_name": {"S": user.last_name},
                                "email": {"S": str(user.email)},
                                "encrypted_password": {"S": user.encrypted_password},
                                "is_admin": {"BOOL": user.is_admin},
                                "GSI1PK": {"S": COLLECTION},
                                "GSI1SK": {"S": ordering_key(created_at, user.id)},
                            },
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    },
                ]
            )
        except ClientError as e:
            if is_transaction_condition_failed(e):
                raise DuplicateResourceException(
                    f"Email already registered: {user.email}"
                ) from e
            raise

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索"""
        item = self._get_item(f"USER#{user_id}", "USER")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_email(self, email: Email) -> User | None:
        """メールアドレスで検索"""
        marker = self._get_item(self._email_pk(email), "EMAIL")
        if not marker:
            return None
        return self.find_by_id(UserId(value=marker["user_id"]))

    def find(self, query: UserQuery, pagination: Pagination) -> Page[User]:
        return self._find_collection_page(
            COLLECTION, build_user_filter(query), pagination, self._to_entity
        )

    def update(self, user: User) -> None:
        """氏名を更新する"""
        try:
            self.table.update_item(
                Key={"PK": f"USER#{user.id}", "SK": "USER"},
                UpdateExpression="SET first_name = :first_name, last_name = :last_name",
                ExpressionAttributeValues={
                    ":first_name": user.first_name,
                    ":last_name": user.last_name,
                },
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if is_conditional_check_failed(e):
                raise ResourceNotFoundException(f"User not found: {user.id}") from e
            raise

    def delete(self, user: User) -> None:
        """ユーザーとメールアドレスのマーカーを 1 トランザクションで削除する"""
        try:
            self.table.meta.client.transact_write_items(
                TransactItems=[
                    {
                        "Delete": {
                            "TableName": self.table_name,
                            "Key": {
                                "PK": {"S": f"USER#{user.id}"},
                                "SK": {"S": "USER"},
                            },
                            "ConditionExpression": "attribute_exists(PK)",
                        }
                    },
                    {
                        "Delete": {
                            "TableName": self.table_name,
                            "Key": {
                                "PK": {"S": self._email_pk(user.email)},
                                "SK": {"S": "EMAIL"},
                            },
                        }
                    },
                ]
            )
        except ClientError as e:
            if is_transaction_condition_failed(e):
                raise ResourceNotFoundException(f"User not found: {user.id}") from e
            raise

    @staticmethod
    def _email_pk(email: Email) -> str:
        return f"EMAIL#{str(email).lower()}"

    def _to_entity(self, item: dict) -> User:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return User(
            id=UserId(value=item["user_id"]),
            first_name=item["first_name"],
            last_name=item["last_name"],
            email=Email(item["email"]),
            encrypted_password=item["encrypted_password"],
            is_admin=bool(item.get("is_admin", False)),
        )
