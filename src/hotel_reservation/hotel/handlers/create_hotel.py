from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_reservation.hotel.applications import CreateHotelService
from hotel_reservation.hotel.domain.factory import HotelDetails, HotelFactory
from hotel_reservation.hotel.handlers.request_models import CreateHotelRequest
from hotel_reservation.hotel.handlers.response_models import to_hotel_response
from hotel_reservation.hotel.infrastructure import DynamoDBHotelRepository
from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException
from hotel_reservation.shared.utils import (
    actor_from_event,
    api_response,
    error_response,
    internal_error_response,
    json_body,
    require_admin,
    validation_error_response,
)

logger = Logger()

settings = Settings.from_env()
service = CreateHotelService(
    repository=DynamoDBHotelRepository(settings.table_name),
    factory=HotelFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ホテル登録 Lambda Handler（管理者のみ）"""
    logger.info("Received create hotel request")

    try:
        require_admin(actor_from_event(event))
        request = CreateHotelRequest.model_validate(json_body(event))
        details: HotelDetails = {
            "name": request.name,
            "location": request.location,
            "rating": request.rating,
        }
        hotel = service.create(details)
        logger.info("Hotel created", extra={"hotel_id": str(hotel.id)})
        return api_response(201, to_hotel_response(hotel))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to create hotel")
        return internal_error_response()
