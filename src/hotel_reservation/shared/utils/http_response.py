import json

from pydantic import ValidationError

from hotel_reservation.shared.domain.exception import (
    BusinessRuleViolationException,
    ConflictException,
    DomainException,
    ForbiddenException,
    InvalidCredentialsException,
    ResourceNotFoundException,
    UnauthorizedException,
    ValidationException,
)

_ERROR_MAPPINGS: dict[type[DomainException], tuple[int, str]] = {
    ValidationException: (400, "VALIDATION_ERROR"),
    BusinessRuleViolationException: (400, "BUSINESS_RULE_ERROR"),
    InvalidCredentialsException: (400, "INVALID_CREDENTIALS"),
    UnauthorizedException: (401, "UNAUTHORIZED"),
    ForbiddenException: (403, "FORBIDDEN"),
    ResourceNotFoundException: (404, "NOT_FOUND"),
    ConflictException: (409, "CONFLICT"),
}


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def _error_body(error_code: str, message: str, details: object = None) -> dict:
    body: dict = {"status": "error", "error_code": error_code, "message": message}
    if details is not None:
        body["details"] = details
    return body


def error_response(exc: DomainException) -> dict:
    """ドメイン例外を HTTP ステータスとエラーコードに変換する"""
    for cls in type(exc).__mro__:
        if cls in _ERROR_MAPPINGS:
            status_code, error_code = _ERROR_MAPPINGS[cls]
            break
    else:
        status_code, error_code = 500, "INTERNAL_ERROR"

    details = exc.errors if isinstance(exc, ValidationException) else None
    return api_response(status_code, _error_body(error_code, str(exc), details))


def validation_error_response(exc: ValidationError) -> dict:
    """pydantic の検証エラーを 400 レスポンスに変換する"""
    details = [
        {"loc": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
    return api_response(
        400, _error_body("VALIDATION_ERROR", "Invalid request", details)
    )


def internal_error_response() -> dict:
    return api_response(500, _error_body("INTERNAL_ERROR", "Internal server error"))
