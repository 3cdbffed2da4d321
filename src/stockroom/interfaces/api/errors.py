"""Error handlers - map domain errors to HTTP responses."""

import logging

import falcon
import falcon.asgi

from stockroom.domain.exceptions import (
    AuthorizationError,
    Conflict,
    NotFound,
    StockroomError,
    ValidationError,
)

logger = logging.getLogger("stockroom.api")

_STATUS_CODES = {
    NotFound: (falcon.HTTP_404, "not_found"),
    ValidationError: (falcon.HTTP_400, "validation_error"),
    Conflict: (falcon.HTTP_409, "conflict"),
}


def error_body(ex: StockroomError) -> tuple[str, dict]:
    """Status line and JSON body for a domain error."""
    if isinstance(ex, AuthorizationError):
        status = falcon.code_to_http_status(ex.status)
        body = {"error": ex.code, "message": str(ex)}
        if hasattr(ex, "missing"):
            body["missing"] = ex.missing
        return status, body
    for kind, (status, code) in _STATUS_CODES.items():
        if isinstance(ex, kind):
            return status, {"error": code, "message": str(ex)}
    return falcon.HTTP_500, {"error": "internal_error", "message": str(ex)}


async def handle_stockroom_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: StockroomError, params
) -> None:
    status, body = error_body(ex)
    if status == falcon.HTTP_500:
        logger.error("%s %s failed: %s", req.method, req.path, ex, exc_info=ex.__cause__)
    resp.status = status
    resp.media = body


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "internal_error", "message": "Internal server error"}
