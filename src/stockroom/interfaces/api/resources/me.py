"""Caller's own effective permissions."""

import falcon.asgi

from stockroom.application.authorization import AuthorizationFacade, Operation
from stockroom.application.use_cases.user.effective_permissions import (
    EffectivePermissionsUseCase,
)
from stockroom.interfaces.api.context import principal_context


class MePermissionsResource:
    """GET /v1/me/permissions."""

    def __init__(
        self,
        facade: AuthorizationFacade,
        effective_permissions: EffectivePermissionsUseCase,
    ) -> None:
        self._facade = facade
        self._effective_permissions = effective_permissions

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        principal = await self._facade.authorize(Operation.ME_PERMISSIONS, principal_context(req))
        resp.media = await self._effective_permissions.execute(principal)
        resp.status = falcon.HTTP_200
