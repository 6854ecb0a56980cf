import json

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from hotel_reservation.shared.domain import (
    Actor,
    ForbiddenException,
    UnauthorizedException,
    ValidationException,
)


def actor_from_event(event: APIGatewayProxyEvent) -> Actor:
    """Lambda Authorizer が付与したコンテキストから Actor を組み立てる"""
    request_context = event.raw_event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    user_id = authorizer.get("user_id")
    if not user_id:
        raise UnauthorizedException("Authentication required")
    is_admin = str(authorizer.get("is_admin", "false")).lower() == "true"
    return Actor(user_id=user_id, is_admin=is_admin)


def path_param(event: APIGatewayProxyEvent, name: str) -> str:
    """必須のパスパラメータを取得する"""
    value = (event.path_parameters or {}).get(name)
    if not value:
        raise ValidationException({name: f"{name} is required"})
    return value


def json_body(event: APIGatewayProxyEvent) -> dict:
    """リクエストボディを JSON として読み込む"""
    if not event.body:
        return {}
    try:
        body = json.loads(event.decoded_body)
    except json.JSONDecodeError as e:
        raise ValidationException({"body": "Failed to parse JSON data"}) from e
    if not isinstance(body, dict):
        raise ValidationException({"body": "JSON object expected"})
    return body


def query_params(event: APIGatewayProxyEvent) -> dict[str, str]:
    return dict(event.query_string_parameters or {})


def require_admin(actor: Actor) -> None:
    """管理者以外は ForbiddenException"""
    if not actor.is_admin:
        raise ForbiddenException("Admin access required")
