from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.shared.config import Settings
from hotel_reservation.shared.domain import UnauthorizedException
from hotel_reservation.user.domain.value_object import UserId
from hotel_reservation.user.infrastructure import (
    DynamoDBUserRepository,
    JoseTokenService,
)

logger = Logger()

settings = Settings.from_env()
repository = DynamoDBUserRepository(settings.table_name)
token_service = JoseTokenService(settings.resolve_jwt_secret(), settings.token_ttl)


def _api_resource_arn(method_arn: str) -> str:
    """同じ API・ステージの全メソッドを対象にした ARN を組み立てる"""
    arn_parts = method_arn.split(":")
    region = arn_parts[3]
    account_id = arn_parts[4]
    api_gw_arn = arn_parts[5]
    rest_api_id = api_gw_arn.split("/")[0]
    stage = api_gw_arn.split("/")[1]
    return f"arn:aws:execute-api:{region}:{account_id}:{rest_api_id}/{stage}/*/*"


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """X-Api-Token の JWT を検証する TOKEN Authorizer

    検証に失敗した場合は "Unauthorized" を送出し、API Gateway が 401 を返す。
    """
    token = event.get("authorizationToken") or ""

    try:
        claims = token_service.validate(token)
        user = repository.find_by_id(UserId(value=claims.user_id))
        if user is None:
            raise UnauthorizedException("User not found")
    except UnauthorizedException as e:
        logger.info("Authorization denied", extra={"reason": str(e)})
        raise Exception("Unauthorized") from e

    return {
        "principalId": str(user.id),
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": "execute-api:Invoke",
                    "Effect": "Allow",
                    "Resource": _api_resource_arn(event["methodArn"]),
                }
            ],
        },
        "context": {
            "user_id": str(user.id),
            "is_admin": "true" if user.is_admin else "false",
        },
    }
