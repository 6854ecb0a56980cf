from .dynamodb_booking_repository import DynamoDBBookingRepository, build_booking_filter

__all__ = ["DynamoDBBookingRepository", "build_booking_filter"]
