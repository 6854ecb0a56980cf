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
from hotel_reservation.user.applications.authenticate_user import (
    AuthenticateUserService,
)
from hotel_reservation.user.handlers.request_models import AuthenticateRequest
from hotel_reservation.user.handlers.response_models import to_auth_response
from hotel_reservation.user.infrastructure import (
    BcryptPasswordHasher,
    DynamoDBUserRepository,
    JoseTokenService,
)

logger = Logger()

settings = Settings.from_env()
service = AuthenticateUserService(
    repository=DynamoDBUserRepository(settings.table_name),
    password_hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
    token_service=JoseTokenService(settings.resolve_jwt_secret(), settings.token_ttl),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ログイン Lambda Handler"""
    logger.info("Received authenticate request")

    try:
        request = AuthenticateRequest.model_validate(json_body(event))
        result = service.authenticate(request.email, request.password)
        logger.info("User authenticated", extra={"user_id": str(result.user.id)})
        return api_response(200, to_auth_response(result.user, result.token))

    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to authenticate user")
        return internal_error_response()
