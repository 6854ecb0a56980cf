from unittest.mock import MagicMock

import pytest
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from hotel_reservation.shared.domain import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from hotel_reservation.user.domain import Email, UserQuery
from hotel_reservation.user.infrastructure import (
    DynamoDBUserRepository,
    build_user_filter,
)


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "Operation")


def _transaction_canceled(*reason_codes: str) -> ClientError:
    return ClientError(
        {
            "Error": {"Code": "TransactionCanceledException", "Message": "canceled"},
            "CancellationReasons": [{"Code": code} for code in reason_codes],
        },
        "TransactWriteItems",
    )


@pytest.fixture
def mock_table():
    return MagicMock()


@pytest.fixture
def repository(mock_table):
    return DynamoDBUserRepository(table_name="test-table", table=mock_table)


class TestBuildUserFilter:
    def test_empty_query_matches_everything(self):
        assert build_user_filter(UserQuery()) is None

    def test_false_is_a_real_filter(self):
        assert build_user_filter(UserQuery(is_admin=False)) == Attr("is_admin").eq(
            False
        )

    def test_combines_fields(self):
        condition = build_user_filter(UserQuery(first_name="Kyrie", last_name="Irving"))

        assert condition == Attr("first_name").eq("Kyrie") & Attr("last_name").eq(
            "Irving"
        )


class TestDynamoDBUserRepository:
    def test_save_writes_marker_and_user_in_one_transaction(
        self, repository, mock_table, create_user
    ):
        repository.save(create_user(email="Kyrie@Example.org"))

        transact = mock_table.meta.client.transact_write_items
        transact.assert_called_once()
        marker, user_item = (
            item["Put"] for item in transact.call_args.kwargs["TransactItems"]
        )
        assert marker["Item"]["PK"] == {"S": "EMAIL#kyrie@example.org"}
        assert marker["ConditionExpression"] == "attribute_not_exists(PK)"
        assert user_item["Item"]["PK"] == {"S": "USER#user-1"}
        assert user_item["Item"]["GSI1PK"] == {"S": "USERS"}
        assert user_item["Item"]["encrypted_password"] == {"S": "digest"}
        assert user_item["Item"]["is_admin"] == {"BOOL": False}
        mock_table.put_item.assert_not_called()

    def test_save_duplicate_email(self, repository, mock_table, create_user):
        mock_table.meta.client.transact_write_items.side_effect = (
            _transaction_canceled("ConditionalCheckFailed", "None")
        )

        with pytest.raises(DuplicateResourceException):
            repository.save(create_user())

    def test_save_failure_leaves_no_marker_behind(
        self, repository, mock_table, create_user
    ):
        mock_table.meta.client.transact_write_items.side_effect = _client_error(
            "InternalServerError"
        )

        with pytest.raises(ClientError):
            repository.save(create_user())

        mock_table.put_item.assert_not_called()
        mock_table.delete_item.assert_not_called()

    def test_save_conflicting_transaction_propagates(
        self, repository, mock_table, create_user
    ):
        mock_table.meta.client.transact_write_items.side_effect = (
            _transaction_canceled("None", "TransactionConflict")
        )

        with pytest.raises(ClientError):
            repository.save(create_user())

    def test_find_by_email_follows_marker(self, repository, mock_table):
        mock_table.get_item.side_effect = [
            {"Item": {"user_id": "user-1"}},
            {
                "Item": {
                    "user_id": "user-1",
                    "first_name": "Kyrie",
                    "last_name": "Irving",
                    "email": "kyrie@example.org",
                    "encrypted_password": "digest",
                    "is_admin": True,
                }
            },
        ]

        user = repository.find_by_email(Email("kyrie@example.org"))

        assert str(user.id) == "user-1"
        assert user.is_admin is True

    def test_find_by_email_missing(self, repository, mock_table):
        mock_table.get_item.return_value = {}

        assert repository.find_by_email(Email("nobody@example.org")) is None

    def test_update_missing_user(self, repository, mock_table, create_user):
        mock_table.update_item.side_effect = _client_error(
            "ConditionalCheckFailedException"
        )

        with pytest.raises(ResourceNotFoundException):
            repository.update(create_user())

    def test_delete_removes_user_and_marker_in_one_transaction(
        self, repository, mock_table, create_user
    ):
        repository.delete(create_user())

        transact = mock_table.meta.client.transact_write_items
        user_item, marker = (
            item["Delete"] for item in transact.call_args.kwargs["TransactItems"]
        )
        assert user_item["Key"] == {"PK": {"S": "USER#user-1"}, "SK": {"S": "USER"}}
        assert user_item["ConditionExpression"] == "attribute_exists(PK)"
        assert marker["Key"] == {
            "PK": {"S": "EMAIL#kyrie@example.org"},
            "SK": {"S": "EMAIL"},
        }
        mock_table.delete_item.assert_not_called()

    def test_delete_missing_user(self, repository, mock_table, create_user):
        mock_table.meta.client.transact_write_items.side_effect = (
            _transaction_canceled("ConditionalCheckFailed", "None")
        )

        with pytest.raises(ResourceNotFoundException):
            repository.delete(create_user())

    def test_storage_errors_propagate(self, repository, mock_table, create_user):
        mock_table.update_item.side_effect = _client_error(
            "ProvisionedThroughputExceededException"
        )

        with pytest.raises(ClientError):
            repository.update(create_user())
