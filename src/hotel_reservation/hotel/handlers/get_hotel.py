from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.hotel.applications import QueryCatalogService
from hotel_reservation.hotel.domain.value_object import HotelId
from hotel_reservation.hotel.handlers.response_models import to_hotel_response
from hotel_reservation.hotel.infrastructure import (
    DynamoDBHotelRepository,
    DynamoDBRoomRepository,
)
from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException
from hotel_reservation.shared.utils import (
    api_response,
    error_response,
    internal_error_response,
    path_param,
)

logger = Logger()

settings = Settings.from_env()
service = QueryCatalogService(
    hotel_repository=DynamoDBHotelRepository(settings.table_name),
    room_repository=DynamoDBRoomRepository(settings.table_name),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ホテル取得 Lambda Handler"""
    try:
        hotel_id = HotelId(value=path_param(event, "hotel_id"))
        logger.info("Fetching hotel", extra={"hotel_id": str(hotel_id)})
        return api_response(200, to_hotel_response(service.get_hotel(hotel_id)))

    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to get hotel")
        return internal_error_response()
