from dataclasses import dataclass


@dataclass(frozen=True)
class UserQuery:
    """ユーザー検索条件（None は未指定）"""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    is_admin: bool | None = None
