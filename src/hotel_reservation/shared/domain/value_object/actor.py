from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """リクエストを行った認証済みユーザー"""

    user_id: str
    is_admin: bool = False

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("Actor user_id cannot be empty")

    def can_access(self, owner_id: object) -> bool:
        """所有者本人または管理者であれば True"""
        return self.is_admin or self.user_id == str(owner_id)
