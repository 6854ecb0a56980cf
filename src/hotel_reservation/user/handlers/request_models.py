from pydantic import BaseModel, Field


class RegisterUserRequest(BaseModel):
    """ユーザー登録リクエストモデル

    文字数などの業務ルールは UserFactory でまとめて検証する。
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""


class AuthenticateRequest(BaseModel):
    """ログインリクエストモデル"""

    email: str
    password: str


class UpdateUserRequest(BaseModel):
    """ユーザー更新リクエストモデル（氏名のみ更新可能）"""

    first_name: str | None = None
    last_name: str | None = None


class ListUsersQuery(BaseModel):
    """ユーザー一覧のクエリパラメータ"""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    is_admin: bool | None = None
    page: int | None = Field(default=None, ge=0)
    limit: int | None = Field(default=None, ge=0)
