from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import DomainException, Pagination
from hotel_reservation.shared.utils import (
    api_response,
    error_response,
    internal_error_response,
    query_params,
    validation_error_response,
)
from hotel_reservation.user.applications.query_users import QueryUsersService
from hotel_reservation.user.domain.query import UserQuery
from hotel_reservation.user.handlers.request_models import ListUsersQuery
from hotel_reservation.user.handlers.response_models import to_list_response
from hotel_reservation.user.infrastructure import DynamoDBUserRepository

logger = Logger()

settings = Settings.from_env()
service = QueryUsersService(repository=DynamoDBUserRepository(settings.table_name))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー一覧 Lambda Handler"""
    logger.info("Listing users")

    try:
        params = ListUsersQuery.model_validate(query_params(event))
        query = UserQuery(
            first_name=params.first_name,
            last_name=params.last_name,
            email=params.email,
            is_admin=params.is_admin,
        )
        pagination = Pagination.resolve(
            params.page, params.limit, settings.default_page, settings.default_limit
        )
        return api_response(200, to_list_response(service.list(query, pagination)))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to list users")
        return internal_error_response()
