from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException
from hotel_reservation.shared.utils import (
    api_response,
    error_response,
    internal_error_response,
    path_param,
)
from hotel_reservation.user.applications.query_users import QueryUsersService
from hotel_reservation.user.domain.value_object import UserId
from hotel_reservation.user.handlers.response_models import to_response
from hotel_reservation.user.infrastructure import DynamoDBUserRepository

logger = Logger()

settings = Settings.from_env()
service = QueryUsersService(repository=DynamoDBUserRepository(settings.table_name))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー取得 Lambda Handler"""
    try:
        user_id = UserId(value=path_param(event, "user_id"))
        logger.info("Fetching user", extra={"user_id": str(user_id)})
        return api_response(200, to_response(service.get(user_id)))

    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch user")
        return internal_error_response()
