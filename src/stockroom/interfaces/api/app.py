"""Falcon ASGI application."""

from collections.abc import Sequence

import falcon.asgi
from falcon.asgi import App

from stockroom.application.authorization import AuthorizationFacade
from stockroom.application.ports import AuditSink, TokenVerifier
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
from stockroom.application.use_cases.role.clone_role import CloneRoleUseCase
from stockroom.application.use_cases.role.create_role import CreateRoleUseCase
from stockroom.application.use_cases.role.delete_role import DeleteRoleUseCase
from stockroom.application.use_cases.role.role_stats import RoleStatsUseCase
from stockroom.application.use_cases.role.update_role import UpdateRoleUseCase
from stockroom.application.use_cases.user.bulk_update_users import BulkUpdateUsersUseCase
from stockroom.application.use_cases.user.delete_user import DeleteUserUseCase
from stockroom.application.use_cases.user.effective_permissions import (
    EffectivePermissionsUseCase,
)
from stockroom.application.use_cases.user.save_user import (
    CreateUserUseCase,
    UpdateUserUseCase,
)
from stockroom.application.use_cases.user.toggle_user_status import ToggleUserStatusUseCase
from stockroom.application.use_cases.user.user_stats import UserStatsUseCase
from stockroom.domain.exceptions import StockroomError
from stockroom.interfaces.api.errors import handle_stockroom_error, handle_unexpected_error
from stockroom.interfaces.api.middleware.auth import AuthMiddleware
from stockroom.interfaces.api.resources.authorize import AuthorizeResource
from stockroom.interfaces.api.resources.health import HealthResource
from stockroom.interfaces.api.resources.me import MePermissionsResource
from stockroom.interfaces.api.resources.permissions import (
    PermissionBulkResource,
    PermissionCategoryResource,
    PermissionResource,
    PermissionsResource,
    PermissionStatsResource,
)
from stockroom.interfaces.api.resources.roles import (
    RoleCloneResource,
    RoleResource,
    RolesResource,
    RoleStatsResource,
)
from stockroom.interfaces.api.resources.users import (
    UserBulkUpdateResource,
    UserResource,
    UserSearchResource,
    UsersResource,
    UserStatsResource,
    UserToggleStatusResource,
)


def create_app(
    unit_of_work_factory: type,
    token_verifier: TokenVerifier,
    audit_sink: AuditSink | None = None,
    middleware: Sequence[object] = (),
) -> App:
    """Create Falcon ASGI app with routes.

    ``middleware`` runs before authentication (CORS, pool lifespan).
    """
    uow = unit_of_work_factory
    facade = AuthorizationFacade(uow, audit_sink)

    app = falcon.asgi.App(
        middleware=[*middleware, AuthMiddleware(token_verifier, uow)],
    )
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(StockroomError, handle_stockroom_error)

    health = HealthResource(uow)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")

    app.add_route(
        "/v1/me/permissions",
        MePermissionsResource(facade, EffectivePermissionsUseCase(uow)),
    )
    app.add_route("/v1/authorize", AuthorizeResource(facade))

    app.add_route("/v1/roles", RolesResource(facade, uow, CreateRoleUseCase(uow)))
    app.add_route("/v1/roles/stats", RoleStatsResource(facade, RoleStatsUseCase(uow)))
    app.add_route(
        "/v1/roles/{role_id}",
        RoleResource(facade, uow, UpdateRoleUseCase(uow), DeleteRoleUseCase(uow)),
    )
    app.add_route("/v1/roles/{role_id}/clone", RoleCloneResource(facade, CloneRoleUseCase(uow)))

    app.add_route(
        "/v1/permissions",
        PermissionsResource(facade, uow, CreatePermissionUseCase(uow)),
    )
    app.add_route(
        "/v1/permissions/bulk",
        PermissionBulkResource(facade, BulkCreatePermissionsUseCase(uow)),
    )
    app.add_route(
        "/v1/permissions/stats",
        PermissionStatsResource(facade, PermissionStatsUseCase(uow)),
    )
    app.add_route(
        "/v1/permissions/category/{category}",
        PermissionCategoryResource(facade, uow),
    )
    app.add_route(
        "/v1/permissions/{permission_id}",
        PermissionResource(
            facade, uow, UpdatePermissionUseCase(uow), DeletePermissionUseCase(uow)
        ),
    )

    app.add_route("/v1/users", UsersResource(facade, uow, CreateUserUseCase(uow)))
    app.add_route("/v1/users/stats", UserStatsResource(facade, UserStatsUseCase(uow)))
    app.add_route("/v1/users/search", UserSearchResource(facade, uow))
    app.add_route(
        "/v1/users/bulk-update",
        UserBulkUpdateResource(facade, BulkUpdateUsersUseCase(uow)),
    )
    app.add_route(
        "/v1/users/{user_id}",
        UserResource(facade, uow, UpdateUserUseCase(uow), DeleteUserUseCase(uow)),
    )
    app.add_route(
        "/v1/users/{user_id}/toggle-status",
        UserToggleStatusResource(facade, ToggleUserStatusUseCase(uow)),
    )
    return app
