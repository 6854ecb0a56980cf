import json
from unittest.mock import patch

from hotel_reservation.shared.domain import (
    DuplicateResourceException,
    Page,
    Pagination,
    ResourceNotFoundException,
)
from hotel_reservation.user.applications import AuthResult
from hotel_reservation.user.handlers import (
    authenticate,
    delete_user,
    get_user,
    list_users,
    register,
    update_user,
)


class TestRegisterHandler:
    def test_register_returns_201_without_password(
        self, api_event, lambda_context, create_user
    ):
        with patch.object(register, "service") as mock_service:
            mock_service.register.return_value = create_user()
            response = register.lambda_handler(
                api_event(
                    body={
                        "first_name": "Kyrie",
                        "last_name": "Irving",
                        "email": "kyrie@example.org",
                        "password": "uncle_drew11",
                    },
                    user_id=None,
                ),
                lambda_context,
            )

        assert response["statusCode"] == 201
        data = json.loads(response["body"])["data"]
        assert data["user_id"] == "user-1"
        assert "encrypted_password" not in data
        assert "password" not in data

    def test_register_reports_every_validation_error(self, api_event, lambda_context):
        response = register.lambda_handler(
            api_event(
                body={"first_name": "K", "last_name": "I", "email": "x", "password": "1"},
                user_id=None,
            ),
            lambda_context,
        )

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert set(body["details"]) == {"first_name", "last_name", "email", "password"}

    def test_register_rejects_password_over_72_bytes(self, api_event, lambda_context):
        response = register.lambda_handler(
            api_event(
                body={
                    "first_name": "Kyrie",
                    "last_name": "Irving",
                    "email": "kyrie@example.org",
                    "password": "パスワード" * 6,
                },
                user_id=None,
            ),
            lambda_context,
        )

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert set(body["details"]) == {"password"}

    def test_duplicate_email_returns_409(self, api_event, lambda_context):
        with patch.object(register, "service") as mock_service:
            mock_service.register.side_effect = DuplicateResourceException("dup")
            response = register.lambda_handler(
                api_event(
                    body={
                        "first_name": "Kyrie",
                        "last_name": "Irving",
                        "email": "kyrie@example.org",
                        "password": "uncle_drew11",
                    },
                    user_id=None,
                ),
                lambda_context,
            )

        assert response["statusCode"] == 409


class TestAuthenticateHandler:
    def test_returns_token(self, api_event, lambda_context, create_user):
        with patch.object(authenticate, "service") as mock_service:
            mock_service.authenticate.return_value = AuthResult(
                user=create_user(), token="token"
            )
            response = authenticate.lambda_handler(
                api_event(
                    body={"email": "kyrie@example.org", "password": "pw"}, user_id=None
                ),
                lambda_context,
            )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"]["token"] == "token"

    def test_missing_fields_returns_400(self, api_event, lambda_context):
        response = authenticate.lambda_handler(
            api_event(body={"email": "kyrie@example.org"}, user_id=None),
            lambda_context,
        )

        assert response["statusCode"] == 400


class TestUserQueryHandlers:
    def test_get_user_not_found(self, api_event, lambda_context):
        with patch.object(get_user, "service") as mock_service:
            mock_service.get.side_effect = ResourceNotFoundException("missing")
            response = get_user.lambda_handler(
                api_event(path_parameters={"user_id": "missing"}), lambda_context
            )

        assert response["statusCode"] == 404

    def test_list_users_resolves_pagination(
        self, api_event, lambda_context, create_user
    ):
        with patch.object(list_users, "service") as mock_service:
            mock_service.list.return_value = Page(
                items=[create_user()], total=1, page=1, limit=10
            )
            response = list_users.lambda_handler(
                api_event(query={"is_admin": "false", "page": "0"}), lambda_context
            )

        assert response["statusCode"] == 200
        query, pagination = mock_service.list.call_args[0]
        assert query.is_admin is False
        assert pagination == Pagination(page=1, limit=10)
        assert json.loads(response["body"])["total"] == 1


class TestManageUserHandlers:
    def test_update_without_authorizer_context_is_401(self, api_event, lambda_context):
        response = update_user.lambda_handler(
            api_event(
                body={"first_name": "Kevin"},
                path_parameters={"user_id": "user-1"},
                user_id=None,
            ),
            lambda_context,
        )

        assert response["statusCode"] == 401

    def test_delete_returns_deleted_id(self, api_event, lambda_context):
        with patch.object(delete_user, "service") as mock_service:
            response = delete_user.lambda_handler(
                api_event(path_parameters={"user_id": "user-1"}), lambda_context
            )

        assert response["statusCode"] == 200
        mock_service.delete.assert_called_once()
        assert json.loads(response["body"])["deleted"] == "user-1"
