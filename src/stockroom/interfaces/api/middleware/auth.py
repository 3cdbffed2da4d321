"""Auth middleware - turns the bearer token into a Principal."""

import logging

import falcon.asgi

from stockroom.application.authorization.decision import catalog_lookup
from stockroom.application.ports import TokenVerifier
from stockroom.domain.exceptions import (
    AuthorizationError,
    MalformedCredentials,
    MissingCredentials,
)
from stockroom.domain.principal import Principal

logger = logging.getLogger("stockroom.auth")


class AuthMiddleware:
    """Sets ``req.context.principal`` or ``req.context.auth_error``.

    Never raises; protected resources decide whether the stored error matters.
    """

    def __init__(self, token_verifier: TokenVerifier, unit_of_work_factory: type) -> None:
        self._verifier = token_verifier
        self._uow_factory = unit_of_work_factory

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.principal = None
        req.context.auth_error = None
        try:
            req.context.principal = await self._authenticate(req.get_header("Authorization"))
        except AuthorizationError as e:
            req.context.auth_error = e

    async def _authenticate(self, header: str | None) -> Principal:
        if not header:
            raise MissingCredentials("No token provided")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise MalformedCredentials("Authorization header must be 'Bearer <token>'")

        verified = self._verifier.verify(token.strip())
        with catalog_lookup("user record"):
            async with self._uow_factory() as uow:
                user = await uow.users.get_by_id(verified.subject)
        if user is None:
            logger.info("Token subject %s has no user record", verified.subject)
            raise MalformedCredentials("Token subject is not a known user")
        return Principal.from_user(user)
