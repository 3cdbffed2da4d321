"""Request helpers shared by the resources."""

from uuid import UUID

import falcon
import falcon.asgi

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.principal import PrincipalContext


def principal_context(
    req: falcon.asgi.Request,
    *,
    target_user_id: str | None = None,
    target_store_id: str | None = None,
) -> PrincipalContext:
    """Build the gate input for this request.

    Re-raises the authentication error stored by AuthMiddleware, so the
    caller sees expired and malformed tokens distinctly. The target store
    defaults to the ``store_id`` query parameter.
    """
    auth_error = getattr(req.context, "auth_error", None)
    if auth_error is not None:
        raise auth_error
    if target_store_id is None:
        target_store_id = req.get_param("store_id") or None
    return PrincipalContext(
        principal=getattr(req.context, "principal", None),
        method=req.method,
        target_user_id=target_user_id,
        target_store_id=target_store_id,
    )


async def read_body(req: falcon.asgi.Request) -> dict:
    """JSON object body, or ValidationError."""
    try:
        body = await req.get_media()
    except (falcon.MediaNotFoundError, falcon.MediaMalformedError) as e:
        raise ValidationError("Request body is not valid JSON") from e
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def parse_uuid(value: str, kind: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {kind} ID") from e


def optional_int(body: dict, key: str) -> int | None:
    value = body.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{key} must be an integer")
    return value


def optional_bool(body: dict, key: str) -> bool | None:
    value = body.get(key)
    if value is not None and not isinstance(value, bool):
        raise ValidationError(f"{key} must be a boolean")
    return value


def optional_str(body: dict, key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


def page_params(req: falcon.asgi.Request) -> tuple[int, int]:
    """``limit`` clamped to 1..100 (default 20) and a non-negative ``offset``."""
    limit = req.get_param_as_int("limit") or 20
    limit = min(max(limit, 1), 100)
    offset = req.get_param_as_int("offset", min_value=0) or 0
    return limit, offset
