"""Role catalog API resources."""

import falcon.asgi

from stockroom.application.authorization import AuthorizationFacade, Operation
from stockroom.application.dto.role_dto import RoleCreateInput, RoleUpdateInput
from stockroom.application.use_cases.role.clone_role import CloneRoleUseCase
from stockroom.application.use_cases.role.create_role import CreateRoleUseCase
from stockroom.application.use_cases.role.delete_role import DeleteRoleUseCase
from stockroom.application.use_cases.role.role_stats import RoleStatsUseCase
from stockroom.application.use_cases.role.update_role import UpdateRoleUseCase
from stockroom.domain.exceptions import NotFound, ValidationError
from stockroom.interfaces.api.context import (
    optional_bool,
    optional_int,
    optional_str,
    page_params,
    parse_uuid,
    principal_context,
    read_body,
)
from stockroom.interfaces.api.serializers import role_to_dict


def _permission_ids(body: dict, required: bool) -> list | None:
    raw = body.get("permission_ids")
    if raw is None:
        return [] if required else None
    if not isinstance(raw, list):
        raise ValidationError("permission_ids must be a list")
    return [parse_uuid(str(pid), "permission") for pid in raw]


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(
        self,
        facade: AuthorizationFacade,
        unit_of_work_factory: type,
        create_role: CreateRoleUseCase,
    ) -> None:
        self._facade = facade
        self._uow_factory = unit_of_work_factory
        self._create_role = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles. ``default=true`` or ``max_level=n`` narrow to active roles.

        The full catalog listing takes ``search`` (name or description) and
        ``limit``/``offset``.
        """
        await self._facade.authorize(Operation.ROLES_READ, principal_context(req))

        max_level = req.get_param_as_int("max_level", min_value=1, max_value=10)
        limit, offset = page_params(req)
        async with self._uow_factory() as uow:
            if req.get_param_as_bool("default"):
                roles = await uow.roles.list_default()
            elif max_level is not None:
                roles = await uow.roles.list_up_to_level(max_level)
            else:
                roles = await uow.roles.list_all(
                    search=req.get_param("search"), limit=limit, offset=offset
                )

        resp.media = {
            "items": [role_to_dict(r) for r in roles],
            "limit": limit,
            "offset": offset,
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        principal = await self._facade.authorize(Operation.ROLES_WRITE, principal_context(req))
        body = await read_body(req)
        level = optional_int(body, "level")
        data = RoleCreateInput(
            name=optional_str(body, "name") or "",
            description=optional_str(body, "description"),
            permission_ids=_permission_ids(body, required=True),
            level=1 if level is None else level,
            color=optional_str(body, "color"),
            is_default=bool(optional_bool(body, "is_default")),
        )
        role = await self._create_role.execute(principal.user_id, data)
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleStatsResource:
    """GET /v1/roles/stats."""

    def __init__(self, facade: AuthorizationFacade, role_stats: RoleStatsUseCase) -> None:
        self._facade = facade
        self._role_stats = role_stats

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        await self._facade.authorize(Operation.ROLES_STATS, principal_context(req))
        resp.media = await self._role_stats.execute()
        resp.status = falcon.HTTP_200


class RoleResource:
    """GET/PUT/DELETE /v1/roles/{role_id}."""

    def __init__(
        self,
        facade: AuthorizationFacade,
        unit_of_work_factory: type,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self._facade = facade
        self._uow_factory = unit_of_work_factory
        self._update_role = update_role
        self._delete_role = delete_role

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Role with its permissions populated."""
        await self._facade.authorize(Operation.ROLES_READ, principal_context(req))
        rid = parse_uuid(role_id, "role")
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(rid)
            if not role:
                raise NotFound("Role", role_id)
            permissions = await uow.permissions.list_for_role(role.id)

        resp.media = role_to_dict(role, permissions)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        await self._facade.authorize(
            Operation.ROLES_WRITE, principal_context(req), role_id=role_id
        )
        rid = parse_uuid(role_id, "role")
        body = await read_body(req)
        data = RoleUpdateInput(
            name=optional_str(body, "name"),
            description=optional_str(body, "description"),
            permission_ids=_permission_ids(body, required=False),
            level=optional_int(body, "level"),
            color=optional_str(body, "color"),
            is_active=optional_bool(body, "is_active"),
        )
        role = await self._update_role.execute(rid, data)
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        await self._facade.authorize(
            Operation.ROLES_DELETE, principal_context(req), role_id=role_id
        )
        await self._delete_role.execute(parse_uuid(role_id, "role"))
        resp.status = falcon.HTTP_204


class RoleCloneResource:
    """POST /v1/roles/{role_id}/clone."""

    def __init__(self, facade: AuthorizationFacade, clone_role: CloneRoleUseCase) -> None:
        self._facade = facade
        self._clone_role = clone_role

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        principal = await self._facade.authorize(
            Operation.ROLES_WRITE, principal_context(req), role_id=role_id
        )
        rid = parse_uuid(role_id, "role")
        body = await read_body(req)
        name = optional_str(body, "name")
        if not name:
            raise ValidationError("New role name is required")
        role = await self._clone_role.execute(
            principal.user_id, rid, name, description=optional_str(body, "description")
        )
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201
