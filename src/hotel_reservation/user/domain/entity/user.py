from hotel_reservation.shared.domain import Entity
from hotel_reservation.user.domain.value_object import Email, UserId


class User(Entity[UserId]):
    """ユーザーエンティティ

    encrypted_password はレスポンスへ出力しないこと。
    """

    def __init__(
        self,
        id: UserId,
        first_name: str,
        last_name: str,
        email: Email,
        encrypted_password: str,
        is_admin: bool = False,
    ) -> None:
        super().__init__(id)
        self._first_name = first_name
        self._last_name = last_name
        self._email = email
        self._encrypted_password = encrypted_password
        self._is_admin = is_admin

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def email(self) -> Email:
        return self._email

    @property
    def encrypted_password(self) -> str:
        return self._encrypted_password

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    def rename(self, first_name: str | None = None, last_name: str | None = None) -> None:
        """氏名を更新する（空の値は無視する）"""
        if first_name:
            self._first_name = first_name
        if last_name:
            self._last_name = last_name
