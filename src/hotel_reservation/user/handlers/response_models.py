from __future__ import annotations

from pydantic import BaseModel

from hotel_reservation.shared.domain import Page
from hotel_reservation.user.domain.entity import User


class UserData(BaseModel):
    """ユーザーデータのレスポンスモデル（パスワードは含めない）"""

    user_id: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: UserData


class AuthData(BaseModel):
    user: UserData
    token: str


class AuthResponse(BaseModel):
    """ログイン成功レスポンスモデル"""

    status: str = "success"
    data: AuthData


class UserListResponse(BaseModel):
    """ユーザー一覧レスポンスモデル"""

    status: str = "success"
    data: list[UserData]
    total: int
    page: int
    limit: int


def to_user_data(user: User) -> UserData:
    return UserData(
        user_id=str(user.id),
        first_name=user.first_name,
        last_name=user.last_name,
        email=str(user.email),
        is_admin=user.is_admin,
    )


def to_response(user: User) -> dict:
    """User エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_user_data(user)).model_dump(mode="json")


def to_auth_response(user: User, token: str) -> dict:
    return AuthResponse(
        data=AuthData(user=to_user_data(user), token=token)
    ).model_dump(mode="json")


def to_list_response(page: Page[User]) -> dict:
    return UserListResponse(
        data=[to_user_data(user) for user in page],
        total=page.total,
        page=page.page,
        limit=page.limit,
    ).model_dump(mode="json")
