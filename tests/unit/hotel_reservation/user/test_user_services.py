from unittest.mock import MagicMock

import pytest

from hotel_reservation.shared.domain import (
    Actor,
    ForbiddenException,
    InvalidCredentialsException,
    ResourceNotFoundException,
)
from hotel_reservation.user.applications import (
    AuthenticateUserService,
    ManageUserService,
    QueryUsersService,
    RegisterUserService,
)
from hotel_reservation.user.domain import UserFactory, UserId


class TestRegisterUserService:
    def test_register_creates_and_saves_user(self, mock_repository):
        hasher = MagicMock()
        hasher.hash.return_value = "digest"
        service = RegisterUserService(
            repository=mock_repository, factory=UserFactory(hasher)
        )

        user = service.register(
            {
                "first_name": "Kyrie",
                "last_name": "Irving",
                "email": "kyrie@example.org",
                "password": "uncle_drew11",
            }
        )

        mock_repository.save.assert_called_once_with(user)
        assert user.encrypted_password == "digest"


class TestAuthenticateUserService:
    @pytest.fixture
    def hasher(self):
        return MagicMock()

    @pytest.fixture
    def token_service(self):
        token_service = MagicMock()
        token_service.issue.return_value = "token"
        return token_service

    @pytest.fixture
    def service(self, mock_repository, hasher, token_service):
        return AuthenticateUserService(mock_repository, hasher, token_service)

    def test_returns_user_and_token(
        self, service, mock_repository, hasher, create_user
    ):
        user = create_user()
        mock_repository.find_by_email.return_value = user
        hasher.verify.return_value = True

        result = service.authenticate("kyrie@example.org", "uncle_drew11")

        assert result.user == user
        assert result.token == "token"
        hasher.verify.assert_called_once_with("uncle_drew11", "digest")

    def test_unknown_email(self, service, mock_repository):
        mock_repository.find_by_email.return_value = None

        with pytest.raises(InvalidCredentialsException):
            service.authenticate("nobody@example.org", "password")

    def test_wrong_password(self, service, mock_repository, hasher, create_user):
        mock_repository.find_by_email.return_value = create_user()
        hasher.verify.return_value = False

        with pytest.raises(InvalidCredentialsException):
            service.authenticate("kyrie@example.org", "wrong-password")

    def test_malformed_email(self, service, mock_repository):
        with pytest.raises(InvalidCredentialsException):
            service.authenticate("not-an-email", "password")

        mock_repository.find_by_email.assert_not_called()


class TestQueryUsersService:
    def test_get_missing_user(self, mock_repository):
        mock_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException):
            QueryUsersService(mock_repository).get(UserId(value="missing"))


class TestManageUserService:
    def test_owner_can_update_names(self, mock_repository, create_user):
        user = create_user(user_id="user-1")
        mock_repository.find_by_id.return_value = user

        updated = ManageUserService(mock_repository).update(
            user.id, Actor(user_id="user-1"), first_name="Kevin"
        )

        assert updated.first_name == "Kevin"
        mock_repository.update.assert_called_once_with(user)

    def test_other_user_cannot_update(self, mock_repository, create_user):
        mock_repository.find_by_id.return_value = create_user(user_id="user-1")

        with pytest.raises(ForbiddenException):
            ManageUserService(mock_repository).update(
                UserId(value="user-1"), Actor(user_id="user-2"), first_name="Kevin"
            )

        mock_repository.update.assert_not_called()

    def test_admin_can_delete_any_user(self, mock_repository, create_user):
        user = create_user(user_id="user-1")
        mock_repository.find_by_id.return_value = user

        ManageUserService(mock_repository).delete(
            user.id, Actor(user_id="admin", is_admin=True)
        )

        mock_repository.delete.assert_called_once_with(user)

    def test_delete_missing_user(self, mock_repository):
        mock_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException):
            ManageUserService(mock_repository).delete(
                UserId(value="missing"), Actor(user_id="admin", is_admin=True)
            )
