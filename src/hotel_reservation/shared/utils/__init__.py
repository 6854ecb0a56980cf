from .http_response import (
    api_response,
    error_response,
    internal_error_response,
    validation_error_response,
)
from .request import (
    actor_from_event,
    json_body,
    path_param,
    query_params,
    require_admin,
)

__all__ = [
    "api_response",
    "error_response",
    "internal_error_response",
    "validation_error_response",
    "actor_from_event",
    "json_body",
    "path_param",
    "query_params",
    "require_admin",
]
