"""Ad hoc authorization decisions for other services and the frontend."""

from dataclasses import replace

import falcon.asgi

from stockroom.application.authorization import AuthorizationFacade
from stockroom.domain.exceptions import ValidationError
from stockroom.interfaces.api.context import optional_str, principal_context, read_body


class AuthorizeResource:
    """POST /v1/authorize - may the caller perform an action on a resource?

    Body: ``resource`` plus either ``action`` (exact permission match) or
    ``method`` (verb-derived action, ``manage`` matches any verb). Optional
    ``store_id`` adds the store scope check. Denials are answered with
    ``allowed: false`` and the specific reason; an unmapped method is a 400.
    """

    def __init__(self, facade: AuthorizationFacade) -> None:
        self._facade = facade

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        context = principal_context(req)
        body = await read_body(req)
        resource = (optional_str(body, "resource") or "").strip()
        action = optional_str(body, "action")
        method = optional_str(body, "method")
        store_id = optional_str(body, "store_id")
        if not resource:
            raise ValidationError("resource is required")
        if (action is None) == (method is None):
            raise ValidationError("Exactly one of action or method is required")

        context = replace(
            context,
            method=method.upper() if method is not None else context.method,
            target_store_id=store_id or context.target_store_id,
        )

        pipeline = self._facade.for_resource(resource, action)
        decision = await self._facade.decide(pipeline, context, resource=resource)
        if decision.allowed:
            resp.media = {"allowed": True}
        else:
            resp.media = {
                "allowed": False,
                "error": decision.error.code,
                "message": str(decision.error),
            }
        resp.status = falcon.HTTP_200
