from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_reservation.hotel.applications import AddRoomService
from hotel_reservation.hotel.domain.factory import HotelFactory, RoomDetails
from hotel_reservation.hotel.domain.value_object import HotelId
from hotel_reservation.hotel.handlers.request_models import CreateRoomRequest
from hotel_reservation.hotel.handlers.response_models import to_room_response
from hotel_reservation.hotel.infrastructure import (
    DynamoDBHotelRepository,
    DynamoDBRoomRepository,
)
from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException
from hotel_reservation.shared.utils import (
    actor_from_event,
    api_response,
    error_response,
    internal_error_response,
    json_body,
    path_param,
    require_admin,
    validation_error_response,
)

logger = Logger()

settings = Settings.from_env()
service = AddRoomService(
    hotel_repository=DynamoDBHotelRepository(settings.table_name),
    room_repository=DynamoDBRoomRepository(settings.table_name),
    factory=HotelFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """部屋登録 Lambda Handler（管理者のみ）"""
    try:
        require_admin(actor_from_event(event))
        hotel_id = HotelId(value=path_param(event, "hotel_id"))
        logger.info("Received create room request", extra={"hotel_id": str(hotel_id)})

        request = CreateRoomRequest.model_validate(json_body(event))
        details: RoomDetails = {
            "size": request.size.value,
            "seaside": request.seaside,
            "price": request.price,
        }
        room = service.add(hotel_id, details)
        logger.info("Room created", extra={"room_id": str(room.id)})
        return api_response(201, to_room_response(room))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to create room")
        return internal_error_response()
