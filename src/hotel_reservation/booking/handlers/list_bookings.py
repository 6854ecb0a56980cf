from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_reservation.booking.applications import ListBookingsService
from hotel_reservation.booking.domain.query import BookingQuery
from hotel_reservation.booking.handlers.request_models import ListBookingsQuery
from hotel_reservation.booking.handlers.response_models import (
    to_booking_list_response,
)
from hotel_reservation.booking.infrastructure import DynamoDBBookingRepository
from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException, Pagination
from hotel_reservation.shared.utils import (
    actor_from_event,
    api_response,
    error_response,
    internal_error_response,
    query_params,
    require_admin,
    validation_error_response,
)

logger = Logger()

settings = Settings.from_env()
service = ListBookingsService(
    repository=DynamoDBBookingRepository(settings.table_name)
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧 Lambda Handler（管理者のみ）"""
    logger.info("Listing bookings")

    try:
        require_admin(actor_from_event(event))
        params = ListBookingsQuery.model_validate(query_params(event))
        query = BookingQuery(
            user_id=params.user_id,
            room_id=params.room_id,
            num_persons=params.num_persons,
            from_date=params.from_date,
            till_date=params.till_date,
            canceled=params.canceled,
        )
        pagination = Pagination.resolve(
            params.page, params.limit, settings.default_page, settings.default_limit
        )
        page = service.list(query, pagination)
        return api_response(200, to_booking_list_response(page))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to list bookings")
        return internal_error_response()
