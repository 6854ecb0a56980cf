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
    api_response,
    error_response,
    internal_error_response,
    json_body,
    validation_error_response,
)
from hotel_reservation.user.applications.register_user import RegisterUserService
from hotel_reservation.user.domain.factory import CreateUserParams, UserFactory
from hotel_reservation.user.handlers.request_models import RegisterUserRequest
from hotel_reservation.user.handlers.response_models import to_response
from hotel_reservation.user.infrastructure import (
    BcryptPasswordHasher,
    DynamoDBUserRepository,
)

logger = Logger()

settings = Settings.from_env()
repository = DynamoDBUserRepository(settings.table_name)
factory = UserFactory(BcryptPasswordHasher(rounds=settings.bcrypt_rounds))
service = RegisterUserService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ユーザー登録 Lambda Handler"""
    logger.info("Received register user request")

    try:
        request = RegisterUserRequest.model_validate(json_body(event))
        params: CreateUserParams = {
            "first_name": request.first_name,
            "last_name": request.last_name,
            "email": request.email,
            "password": request.password,
        }
        user = service.register(params)
        logger.info("User registered", extra={"user_id": str(user.id)})
        return api_response(201, to_response(user))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to register user")
        return internal_error_response()
