import json
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# ハンドラーモジュールは import 時に設定を読み込むため、収集前に環境変数を用意する
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "hotel-reservation-test")

from hotel_reservation.booking.domain import (  # noqa: E402
    Booking,
    BookingId,
    BookingPeriod,
)
from hotel_reservation.hotel.domain import (  # noqa: E402
    Hotel,
    HotelId,
    Rating,
    Room,
    RoomId,
    RoomPrice,
    RoomSize,
)
from hotel_reservation.user.domain import Email, User, UserId  # noqa: E402

BASE_DATE = datetime(2030, 1, 1, tzinfo=timezone.utc)


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "test-request-id"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def api_event():
    """API Gateway プロキシイベントを生成する Factory fixture"""

    def _factory(
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
        user_id: str | None = "user-1",
        is_admin: bool = False,
    ) -> dict:
        authorizer = {}
        if user_id is not None:
            authorizer = {"user_id": user_id, "is_admin": str(is_admin).lower()}
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "httpMethod": "POST",
            "path": "/",
            "headers": {"Content-Type": "application/json"},
            "body": body,
            "isBase64Encoded": False,
            "pathParameters": path_parameters,
            "queryStringParameters": query,
            "requestContext": {"authorizer": authorizer},
        }

    return _factory


def at_day(n: int) -> datetime:
    """テスト用の基準日から n 日目の日時"""
    return BASE_DATE + timedelta(days=n)


@pytest.fixture
def create_user():
    """User を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        user_id: str = "user-1",
        first_name: str = "Kyrie",
        last_name: str = "Irving",
        email: str = "kyrie@example.org",
        encrypted_password: str = "digest",
        is_admin: bool = False,
    ) -> User:
        return User(
            id=UserId(value=user_id),
            first_name=first_name,
            last_name=last_name,
            email=Email(email),
            encrypted_password=encrypted_password,
            is_admin=is_admin,
        )

    return _factory


@pytest.fixture
def create_hotel():
    """Hotel を生成する Factory fixture"""

    def _factory(
        hotel_id: str = "hotel-1",
        name: str = "Grand Hotel",
        location: str = "Tokyo",
        rating: int = 4,
        rooms: list[str] | None = None,
    ) -> Hotel:
        return Hotel(
            id=HotelId(value=hotel_id),
            name=name,
            location=location,
            rating=Rating(rating),
            rooms=[RoomId(value=r) for r in rooms or []],
        )

    return _factory


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture"""

    def _factory(
        room_id: str = "room-1",
        hotel_id: str = "hotel-1",
        size: RoomSize = RoomSize.SMALL,
        seaside: bool = False,
        price: Decimal = Decimal("100"),
    ) -> Room:
        return Room(
            id=RoomId(value=room_id),
            hotel_id=HotelId(value=hotel_id),
            size=size,
            seaside=seaside,
            price=RoomPrice(price),
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking-1",
        user_id: str = "user-1",
        room_id: str = "room-1",
        num_persons: int = 2,
        from_day: int = 1,
        till_day: int = 8,
        canceled: bool = False,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=UserId(value=user_id),
            room_id=RoomId(value=room_id),
            num_persons=num_persons,
            period=BookingPeriod(at_day(from_day), at_day(till_day)),
            canceled=canceled,
        )

    return _factory


@pytest.fixture
def day():
    """基準日から n 日目の日時を返す関数"""
    return at_day
