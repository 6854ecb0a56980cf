from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_reservation.booking.applications import BookRoomService
from hotel_reservation.booking.domain.factory import BookingFactory, BookRoomParams
from hotel_reservation.booking.handlers.request_models import BookRoomRequest
from hotel_reservation.booking.handlers.response_models import to_booking_response
from hotel_reservation.booking.infrastructure import DynamoDBBookingRepository
from hotel_reservation.hotel.domain.value_object import RoomId
from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException
from hotel_reservation.shared.utils import (
    actor_from_event,
    api_response,
    error_response,
    internal_error_response,
    json_body,
    path_param,
    validation_error_response,
)

logger = Logger()

settings = Settings.from_env()
service = BookRoomService(
    repository=DynamoDBBookingRepository(settings.table_name),
    factory=BookingFactory(),
    max_attempts=settings.booking_max_attempts,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """部屋予約 Lambda Handler"""
    try:
        actor = actor_from_event(event)
        room_id = RoomId(value=path_param(event, "room_id"))
        logger.info(
            "Received book room request",
            extra={"room_id": str(room_id), "user_id": actor.user_id},
        )

        request = BookRoomRequest.model_validate(json_body(event))
        params: BookRoomParams = {
            "from_date": request.from_date,
            "till_date": request.till_date,
            "num_persons": request.num_persons,
        }
        booking = service.book(actor, room_id, params)
        logger.info("Room booked", extra={"booking_id": str(booking.id)})
        return api_response(201, to_booking_response(booking))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to book room")
        return internal_error_response()
