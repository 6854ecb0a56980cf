from unittest.mock import MagicMock

import pytest

from hotel_reservation.shared.domain import ValidationException
from hotel_reservation.user.domain import CreateUserParams, User, UserFactory


@pytest.fixture
def password_hasher():
    hasher = MagicMock()
    hasher.hash.return_value = "hashed-password"
    return hasher


def _params(**overrides) -> CreateUserParams:
    params: CreateUserParams = {
        "first_name": "Kyrie",
        "last_name": "Irving",
        "email": "kyrie@example.org",
        "password": "uncle_drew11",
    }
    params.update(overrides)
    return params


class TestUserFactoryValidate:
    def test_valid_params_have_no_errors(self):
        assert UserFactory.validate(_params()) == {}

    def test_collects_every_violation(self):
        errors = UserFactory.validate(
            _params(first_name="K", last_name="I", email="not-an-email", password="short")
        )

        assert set(errors) == {"first_name", "last_name", "email", "password"}

    @pytest.mark.parametrize(
        "field,value",
        [("first_name", "Ky"), ("last_name", "Ir"), ("password", "1234567")],
    )
    def test_minimum_lengths_are_inclusive(self, field, value):
        assert UserFactory.validate(_params(**{field: value})) == {}

    @pytest.mark.parametrize(
        "email", ["user@example", "user example@example.org", "@example.org"]
    )
    def test_invalid_email(self, email):
        assert "email" in UserFactory.validate(_params(email=email))

    def test_multibyte_password_over_72_bytes(self):
        # 30 文字だが UTF-8 では 90 バイト
        errors = UserFactory.validate(_params(password="パスワード" * 6))

        assert errors == {"password": "password should be at most 72 bytes in UTF-8"}

    def test_password_of_exactly_72_bytes(self):
        assert UserFactory.validate(_params(password="パスワード" * 4 + "パスワー")) == {}


class TestUserFactoryCreate:
    def test_create_hashes_password(self, password_hasher):
        user = UserFactory(password_hasher).create(_params())

        assert isinstance(user, User)
        assert user.encrypted_password == "hashed-password"
        assert user.is_admin is False
        password_hasher.hash.assert_called_once_with("uncle_drew11")

    def test_create_admin(self, password_hasher):
        user = UserFactory(password_hasher).create(_params(), is_admin=True)

        assert user.is_admin is True

    def test_create_raises_with_errors(self, password_hasher):
        with pytest.raises(ValidationException) as exc_info:
            UserFactory(password_hasher).create(_params(first_name="", password=""))

        assert set(exc_info.value.errors) == {"first_name", "password"}
        password_hasher.hash.assert_not_called()
