"""開発用のシードデータを投入するスクリプト

    TABLE_NAME=<table> python scripts/seed.py --hotels 10 --bookings 20
"""

import argparse
import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from hotel_reservation.booking.applications import BookRoomService
from hotel_reservation.booking.domain.factory import BookingFactory, BookRoomParams
from hotel_reservation.booking.infrastructure import DynamoDBBookingRepository
from hotel_reservation.hotel.applications import AddRoomService, CreateHotelService
from hotel_reservation.hotel.domain.entity import Room
from hotel_reservation.hotel.domain.factory import HotelFactory
from hotel_reservation.hotel.infrastructure import (
    DynamoDBHotelRepository,
    DynamoDBRoomRepository,
)
from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import Actor, ConflictException
from hotel_reservation.shared.utils.logger import get_logger
from hotel_reservation.user.applications import RegisterUserService
from hotel_reservation.user.domain.entity import User
from hotel_reservation.user.domain.factory import UserFactory
from hotel_reservation.user.infrastructure import (
    BcryptPasswordHasher,
    DynamoDBUserRepository,
)

logger = get_logger("seed")

USERS = [
    ("Kyrie", "Irving", "kyrieirving@example.org", "uncle_drew11", False),
    ("Kevin", "Durant", "kevindurant@example.org", "kd_trey35", False),
    ("Admin", "Admin", "admin@example.org", "admin_password", True),
]
CITIES = ["Tokyo", "Osaka", "Kyoto", "Sapporo", "Fukuoka", "Naha"]
# (部屋サイズ, 価格の下限, 価格の上限)
ROOM_PRICES = [("small", 100, 500), ("medium", 500, 1000), ("large", 1000, 2000)]


def seed_users(settings: Settings) -> list[User]:
    service = RegisterUserService(
        repository=DynamoDBUserRepository(settings.table_name),
        factory=UserFactory(BcryptPasswordHasher(rounds=settings.bcrypt_rounds)),
    )
    users = []
    for first_name, last_name, email, password, is_admin in USERS:
        user = service.register(
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "password": password,
            },
            is_admin=is_admin,
        )
        logger.info("Seeded user", extra={"user_id": str(user.id), "email": email})
        users.append(user)
    return users


def seed_rooms(settings: Settings, hotel_count: int) -> list[Room]:
    hotel_repository = DynamoDBHotelRepository(settings.table_name)
    factory = HotelFactory()
    create_hotel = CreateHotelService(repository=hotel_repository, factory=factory)
    add_room = AddRoomService(
        hotel_repository=hotel_repository,
        room_repository=DynamoDBRoomRepository(settings.table_name),
        factory=factory,
    )

    rooms = []
    for i in range(hotel_count):
        hotel = create_hotel.create(
            {
                "name": f"Hotel {i + 1}",
                "location": random.choice(CITIES),
                "rating": random.randint(1, 5),
            }
        )
        for size, low, high in ROOM_PRICES:
            rooms.append(
                add_room.add(
                    hotel.id,
                    {
                        "size": size,
                        "seaside": random.choice([True, False]),
                        "price": Decimal(random.randint(low, high)),
                    },
                )
            )
        logger.info("Seeded hotel", extra={"hotel_id": str(hotel.id)})
    return rooms


def seed_bookings(
    settings: Settings, users: list[User], rooms: list[Room], booking_count: int
) -> None:
    service = BookRoomService(
        repository=DynamoDBBookingRepository(settings.table_name),
        factory=BookingFactory(),
        max_attempts=settings.booking_max_attempts,
    )
    guests = [user for user in users if not user.is_admin]

    booked = 0
    while booked < booking_count:
        from_date = datetime.now(timezone.utc) + timedelta(
            days=random.randint(1, 90), hours=random.randint(0, 23)
        )
        params: BookRoomParams = {
            "from_date": from_date,
            "till_date": from_date + timedelta(days=random.randint(3, 21)),
            "num_persons": random.randint(1, 4),
        }
        guest = random.choice(guests)
        try:
            booking = service.book(
                Actor(user_id=str(guest.id)), random.choice(rooms).id, params
            )
        except ConflictException:
            continue
        logger.info("Seeded booking", extra={"booking_id": str(booking.id)})
        booked += 1


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the hotel reservation table")
    parser.add_argument("--hotels", type=int, default=10)
    parser.add_argument("--bookings", type=int, default=20)
    args = parser.parse_args()

    settings = Settings.from_env()
    users = seed_users(settings)
    rooms = seed_rooms(settings, args.hotels)
    seed_bookings(settings, users, rooms, args.bookings)


if __name__ == "__main__":
    main()
