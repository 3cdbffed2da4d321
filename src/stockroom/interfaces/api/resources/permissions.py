"""Permission catalog API resources."""

import falcon.asgi

from stockroom.application.authorization import AuthorizationFacade, Operation
from stockroom.application.dto.permission_dto import (
    PermissionCreateInput,
    PermissionUpdateInput,
    parse_category,
)
from stockroom.application.use_cases.permission.create_permission import (
    BulkCreatePermissionsUseCase,
    CreatePermissionUseCase,
)
from stockroom.application.use_cases.permission.delete_permission import (
    DeletePermissionUseCase,
)
from stockroom.application.use_cases.permission.permission_stats import (
    PermissionStatsUseCase,
)
from stockroom.application.use_cases.permission.update_permission import (
    UpdatePermissionUseCase,
)
from stockroom.domain.exceptions import NotFound, ValidationError
from stockroom.interfaces.api.context import (
    optional_bool,
    optional_int,
    optional_str,
    parse_uuid,
    principal_context,
    read_body,
)
from stockroom.interfaces.api.serializers import permission_to_dict


def _create_input(body: dict) -> PermissionCreateInput:
    level = optional_int(body, "level")
    return PermissionCreateInput(
        name=optional_str(body, "name") or "",
        category=optional_str(body, "category") or "",
        resource=optional_str(body, "resource") or "",
        action=optional_str(body, "action") or "",
        description=optional_str(body, "description"),
        level=1 if level is None else level,
    )


class PermissionsResource:
    """GET/POST /v1/permissions - list and create permissions."""

    def __init__(
        self,
        facade: AuthorizationFacade,
        unit_of_work_factory: type,
        create_permission: CreatePermissionUseCase,
    ) -> None:
        self._facade = facade
        self._uow_factory = unit_of_work_factory
        self._create_permission = create_permission

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List permissions filtered by category, resource and is_active."""
        await self._facade.authorize(Operation.PERMISSIONS_READ, principal_context(req))

        category = req.get_param("category")
        if category is not None:
            category = parse_category(category)
        async with self._uow_factory() as uow:
            permissions = await uow.permissions.list(
                category=category,
                resource=req.get_param("resource"),
                is_active=req.get_param_as_bool("is_active"),
            )

        resp.media = {"items": [permission_to_dict(p) for p in permissions]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        await self._facade.authorize(Operation.PERMISSIONS_WRITE, principal_context(req))
        body = await read_body(req)
        permission = await self._create_permission.execute(_create_input(body))
        resp.media = permission_to_dict(permission)
        resp.status = falcon.HTTP_201


class PermissionBulkResource:
    """POST /v1/permissions/bulk - create several permissions in one transaction."""

    def __init__(
        self, facade: AuthorizationFacade, bulk_create: BulkCreatePermissionsUseCase
    ) -> None:
        self._facade = facade
        self._bulk_create = bulk_create

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        await self._facade.authorize(
            Operation.PERMISSIONS_WRITE, principal_context(req), bulk=True
        )
        body = await read_body(req)
        items = body.get("permissions")
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            raise ValidationError("Permissions array is required")
        permissions = await self._bulk_create.execute([_create_input(i) for i in items])
        resp.media = {"items": [permission_to_dict(p) for p in permissions]}
        resp.status = falcon.HTTP_201


class PermissionStatsResource:
    """GET /v1/permissions/stats."""

    def __init__(
        self, facade: AuthorizationFacade, permission_stats: PermissionStatsUseCase
    ) -> None:
        self._facade = facade
        self._permission_stats = permission_stats

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        await self._facade.authorize(Operation.PERMISSIONS_STATS, principal_context(req))
        resp.media = await self._permission_stats.execute()
        resp.status = falcon.HTTP_200


class PermissionCategoryResource:
    """GET /v1/permissions/category/{category} - active permissions in a category."""

    def __init__(self, facade: AuthorizationFacade, unit_of_work_factory: type) -> None:
        self._facade = facade
        self._uow_factory = unit_of_work_factory

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, category: str
    ) -> None:
        await self._facade.authorize(Operation.PERMISSIONS_READ, principal_context(req))
        parsed = parse_category(category)
        async with self._uow_factory() as uow:
            permissions = await uow.permissions.list_by_category(parsed)

        resp.media = {"items": [permission_to_dict(p) for p in permissions]}
        resp.status = falcon.HTTP_200


class PermissionResource:
    """GET/PUT/DELETE /v1/permissions/{permission_id}."""

    def __init__(
        self,
        facade: AuthorizationFacade,
        unit_of_work_factory: type,
        update_permission: UpdatePermissionUseCase,
        delete_permission: DeletePermissionUseCase,
    ) -> None:
        self._facade = facade
        self._uow_factory = unit_of_work_factory
        self._update_permission = update_permission
        self._delete_permission = delete_permission

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        await self._facade.authorize(Operation.PERMISSIONS_READ, principal_context(req))
        pid = parse_uuid(permission_id, "permission")
        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(pid)
        if not permission:
            raise NotFound("Permission", permission_id)

        resp.media = permission_to_dict(permission)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        await self._facade.authorize(
            Operation.PERMISSIONS_WRITE, principal_context(req), permission_id=permission_id
        )
        pid = parse_uuid(permission_id, "permission")
        body = await read_body(req)
        data = PermissionUpdateInput(
            name=optional_str(body, "name"),
            description=optional_str(body, "description"),
            category=optional_str(body, "category"),
            resource=optional_str(body, "resource"),
            action=optional_str(body, "action"),
            level=optional_int(body, "level"),
            is_active=optional_bool(body, "is_active"),
        )
        permission = await self._update_permission.execute(pid, data)
        resp.media = permission_to_dict(permission)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        await self._facade.authorize(
            Operation.PERMISSIONS_WRITE, principal_context(req), permission_id=permission_id
        )
        await self._delete_permission.execute(parse_uuid(permission_id, "permission"))
        resp.status = falcon.HTTP_204
