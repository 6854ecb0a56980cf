from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_reservation.hotel.applications import QueryCatalogService
from hotel_reservation.hotel.domain.value_object import HotelId
from hotel_reservation.hotel.handlers.request_models import PageQuery
from hotel_reservation.hotel.handlers.response_models import to_room_list_response
from hotel_reservation.hotel.infrastructure import (
    DynamoDBHotelRepository,
    DynamoDBRoomRepository,
)
from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException, Pagination
from hotel_reservation.shared.utils import (
    api_response,
    error_response,
    internal_error_response,
    path_param,
    query_params,
    validation_error_response,
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
    """ホテルの部屋一覧 Lambda Handler"""
    try:
        hotel_id = HotelId(value=path_param(event, "hotel_id"))
        logger.info("Listing hotel rooms", extra={"hotel_id": str(hotel_id)})

        params = PageQuery.model_validate(query_params(event))
        pagination = Pagination.resolve(
            params.page, params.limit, settings.default_page, settings.default_limit
        )
        page = service.list_hotel_rooms(hotel_id, pagination)
        return api_response(200, to_room_list_response(page))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to list hotel rooms")
        return internal_error_response()
