from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

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
from hotel_reservation.user.applications.manage_user import ManageUserService
from hotel_reservation.user.domain.value_object import UserId
from hotel_reservation.user.handlers.request_models import UpdateUserRequest
from hotel_reservation.user.handlers.response_models import to_response
from hotel_reservation.user.infrastructure import DynamoDBUserRepository

logger = Logger()

settings = Settings.from_env()
service = ManageUserService(repository=DynamoDBUserRepository(settings.table_name))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー更新 Lambda Handler"""
    try:
        actor = actor_from_event(event)
        user_id = UserId(value=path_param(event, "user_id"))
        logger.info("Received update user request", extra={"user_id": str(user_id)})

        request = UpdateUserRequest.model_validate(json_body(event))
        user = service.update(
            user_id,
            actor,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        return api_response(200, to_response(user))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to update user")
        return internal_error_response()
