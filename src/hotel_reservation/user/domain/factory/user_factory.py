from typing import TypedDict

from hotel_reservation.shared.domain import ValidationException
from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.service import PasswordHasher
from hotel_reservation.user.domain.value_object import Email, UserId

MIN_FIRST_NAME_LEN = 2
MIN_LAST_NAME_LEN = 2
MIN_PASSWORD_LEN = 7
# bcrypt が扱えるのは UTF-8 で 72 バイトまで
MAX_PASSWORD_BYTES = 72


class CreateUserParams(TypedDict):
    """ユーザー登録の入力データ"""

    first_name: str
    last_name: str
    email: str
    password: str


class UserFactory:
    """ユーザーを生成する Factory"""

    def __init__(self, password_hasher: PasswordHasher) -> None:
        self._password_hasher = password_hasher

    @staticmethod
    def validate(params: CreateUserParams) -> dict[str, str]:
        """入力値を検証し、違反をフィールドごとにすべて返す"""
        errors: dict[str, str] = {}

        if len(params["first_name"]) < MIN_FIRST_NAME_LEN:
            errors["first_name"] = (
                f"first_name length should be at least {MIN_FIRST_NAME_LEN} characters"
            )
        if len(params["last_name"]) < MIN_LAST_NAME_LEN:
            errors["last_name"] = (
                f"last_name length should be at least {MIN_LAST_NAME_LEN} characters"
            )
        if len(params["password"]) < MIN_PASSWORD_LEN:
            errors["password"] = (
                f"password length should be at least {MIN_PASSWORD_LEN} characters"
            )
        elif len(params["password"].encode("utf-8")) > MAX_PASSWORD_BYTES:
            errors["password"] = (
                f"password should be at most {MAX_PASSWORD_BYTES} bytes in UTF-8"
            )
        if not Email.is_valid(params["email"]):
            errors["email"] = "email is not valid"

        return errors

    def create(self, params: CreateUserParams, is_admin: bool = False) -> User:
        """新規ユーザーを生成する（パスワードはハッシュ化して保持する）"""
        errors = self.validate(params)
        if errors:
            raise ValidationException(errors)

        return User(
            id=UserId.generate(),
            first_name=params["first_name"],
            last_name=params["last_name"],
            email=Email(params["email"]),
            encrypted_password=self._password_hasher.hash(params["password"]),
            is_admin=is_admin,
        )
