"""User account API resources."""

from dataclasses import replace

import falcon.asgi

from stockroom.application.authorization import AuthorizationFacade, Operation
from stockroom.application.use_cases.user.bulk_update_users import BulkUpdateUsersUseCase
from stockroom.application.use_cases.user.delete_user import DeleteUserUseCase
from stockroom.application.use_cases.user.save_user import (
    CreateUserUseCase,
    UpdateUserUseCase,
    UserInput,
)
from stockroom.application.use_cases.user.toggle_user_status import ToggleUserStatusUseCase
from stockroom.application.use_cases.user.user_stats import UserStatsUseCase
from stockroom.domain.exceptions import NotFound, ValidationError
from stockroom.interfaces.api.context import (
    optional_bool,
    optional_str,
    page_params,
    principal_context,
    read_body,
)
from stockroom.interfaces.api.serializers import user_to_dict


def _user_input(body: dict) -> UserInput:
    return UserInput(
        name=optional_str(body, "name"),
        email=optional_str(body, "email"),
        role=optional_str(body, "role"),
        store_id=optional_str(body, "store_id"),
        is_active=optional_bool(body, "is_active"),
    )


class UsersResource:
    """GET/POST /v1/users."""

    def __init__(
        self,
        facade: AuthorizationFacade,
        unit_of_work_factory: type,
        create_user: CreateUserUseCase,
    ) -> None:
        self._facade = facade
        self._uow_factory = unit_of_work_factory
        self._create_user = create_user

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List users; ``store_id`` is both a filter and the store scope target."""
        context = principal_context(req)
        await self._facade.authorize(Operation.USERS_LIST, context)
        limit, offset = page_params(req)

        async with self._uow_factory() as uow:
            users = await uow.users.list(
                store_id=context.target_store_id,
                role=req.get_param("role"),
                is_active=req.get_param_as_bool("is_active"),
                search=req.get_param("search"),
                limit=limit,
                offset=offset,
            )

        resp.media = {
            "items": [user_to_dict(u) for u in users],
            "limit": limit,
            "offset": offset,
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create a user record for an identity-provider subject (``id``)."""
        await self._facade.authorize(Operation.USERS_WRITE, principal_context(req))
        body = await read_body(req)
        user_id = body.get("id")
        if not user_id or not isinstance(user_id, str):
            raise ValidationError("id is required")
        user = await self._create_user.execute(user_id, _user_input(body))
        resp.media = user_to_dict(user)
        resp.status = falcon.HTTP_201


class UserStatsResource:
    """GET /v1/users/stats."""

    def __init__(self, facade: AuthorizationFacade, user_stats: UserStatsUseCase) -> None:
        self._facade = facade
        self._user_stats = user_stats

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        await self._facade.authorize(Operation.USERS_STATS, principal_context(req))
        resp.media = await self._user_stats.execute()
        resp.status = falcon.HTTP_200


class UserSearchResource:
    """GET /v1/users/search?q= - active users whose name or email contains ``q``."""

    def __init__(self, facade: AuthorizationFacade, unit_of_work_factory: type) -> None:
        self._facade = facade
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        context = principal_context(req)
        await self._facade.authorize(Operation.USERS_LIST, context)
        query = (req.get_param("q") or "").strip()
        if len(query) < 2:
            raise ValidationError("Search query must be at least 2 characters long")
        limit, _ = page_params(req)

        async with self._uow_factory() as uow:
            users = await uow.users.list(
                store_id=context.target_store_id,
                is_active=True,
                search=query,
                limit=limit,
            )

        resp.media = {"items": [user_to_dict(u) for u in users]}
        resp.status = falcon.HTTP_200


class UserResource:
    """GET/PUT/DELETE /v1/users/{user_id}."""

    def __init__(
        self,
        facade: AuthorizationFacade,
        unit_of_work_factory: type,
        update_user: UpdateUserUseCase,
        delete_user: DeleteUserUseCase,
    ) -> None:
        self._facade = facade
        self._uow_factory = unit_of_work_factory
        self._update_user = update_user
        self._delete_user = delete_user

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        await self._facade.authorize(
            Operation.USERS_READ, principal_context(req, target_user_id=user_id)
        )
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
        if not user:
            raise NotFound("User", user_id)

        resp.media = user_to_dict(user)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        await self._facade.authorize(
            Operation.USERS_WRITE, principal_context(req, target_user_id=user_id)
        )
        body = await read_body(req)
        user = await self._update_user.execute(user_id, _user_input(body))
        resp.media = user_to_dict(user)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        await self._facade.authorize(
            Operation.USERS_DELETE, principal_context(req, target_user_id=user_id)
        )
        await self._delete_user.execute(user_id)
        resp.status = falcon.HTTP_204


class UserToggleStatusResource:
    """PATCH /v1/users/{user_id}/toggle-status."""

    def __init__(
        self, facade: AuthorizationFacade, toggle_status: ToggleUserStatusUseCase
    ) -> None:
        self._facade = facade
        self._toggle_status = toggle_status

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        await self._facade.authorize(
            Operation.USERS_WRITE, principal_context(req, target_user_id=user_id)
        )
        user = await self._toggle_status.execute(user_id)
        resp.media = user_to_dict(user)
        resp.status = falcon.HTTP_200


class UserBulkUpdateResource:
    """PATCH /v1/users/bulk-update.

    Body: ``user_ids`` and ``updates`` (role, is_active, store_id). The store
    scope target is ``store_id`` from the body or query string.
    """

    def __init__(self, facade: AuthorizationFacade, bulk_update: BulkUpdateUsersUseCase) -> None:
        self._facade = facade
        self._bulk_update = bulk_update

    async def on_patch(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        context = principal_context(req)
        body = await read_body(req)
        user_ids = body.get("user_ids")
        updates = body.get("updates")
        if not isinstance(user_ids, list) or not all(isinstance(u, str) for u in user_ids):
            raise ValidationError("User IDs array is required")
        if not isinstance(updates, dict):
            raise ValidationError("Updates are required")
        store_id = optional_str(body, "store_id")

        await self._facade.authorize(
            Operation.USERS_BULK,
            replace(context, target_store_id=store_id or context.target_store_id),
            user_count=len(user_ids),
        )
        modified = await self._bulk_update.execute(user_ids, updates)
        resp.media = {"modified_count": modified}
        resp.status = falcon.HTTP_200
