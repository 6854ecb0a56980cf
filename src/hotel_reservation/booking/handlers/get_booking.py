from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.booking.applications import GetBookingService
from hotel_reservation.booking.domain.value_object import BookingId
from hotel_reservation.booking.handlers.response_models import to_booking_response
from hotel_reservation.booking.infrastructure import DynamoDBBookingRepository
from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException
from hotel_reservation.shared.utils import (
    actor_from_event,
    api_response,
    error_response,
    internal_error_response,
    path_param,
)

logger = Logger()

settings = Settings.from_env()
service = GetBookingService(repository=DynamoDBBookingRepository(settings.table_name))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約取得 Lambda Handler"""
    try:
        actor = actor_from_event(event)
        booking_id = BookingId(value=path_param(event, "booking_id"))
        logger.info("Fetching booking", extra={"booking_id": str(booking_id)})

        return api_response(200, to_booking_response(service.get(booking_id, actor)))

    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to get booking")
        return internal_error_response()
