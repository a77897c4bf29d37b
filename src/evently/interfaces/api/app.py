"""Falcon ASGI application."""

from collections.abc import Sequence

import falcon.asgi
from falcon.asgi import App
from psycopg_pool import AsyncConnectionPool

from evently.application.ports import Clock
from evently.application.use_cases.authorization.authorize import AuthorizeUseCase
from evently.application.use_cases.permission.create_permission import CreatePermissionUseCase
from evently.application.use_cases.permission.delete_permission import DeletePermissionUseCase
from evently.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from evently.application.use_cases.permission.update_permission import UpdatePermissionUseCase
from evently.application.use_cases.role.assign_permission import AssignRolePermissionUseCase
from evently.application.use_cases.role.create_role import CreateRoleUseCase
from evently.application.use_cases.role.delete_role import DeleteRoleUseCase
from evently.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from evently.application.use_cases.role.revoke_permission import RevokeRolePermissionUseCase
from evently.application.use_cases.role.update_role import UpdateRoleUseCase
from evently.application.use_cases.user.assign_role import AssignUserRoleUseCase
from evently.application.use_cases.user.get_current_user import GetCurrentUserUseCase
from evently.application.use_cases.user_permission.grant_permission import (
    GrantUserPermissionUseCase,
)
from evently.application.use_cases.user_permission.list_overrides import (
    ListUserOverridesUseCase,
)
from evently.application.use_cases.user_permission.remove_permission import (
    RemoveUserPermissionUseCase,
)
from evently.application.use_cases.user_permission.revoke_permission import (
    RevokeUserPermissionUseCase,
)
from evently.infrastructure.permission.permission_resolver import EventlyPermissionResolver
from evently.interfaces.api.errors import register_error_handlers
from evently.interfaces.api.resources.health import HealthResource
from evently.interfaces.api.resources.me import MeResource
from evently.interfaces.api.resources.permissions import PermissionResource, PermissionsResource
from evently.interfaces.api.resources.roles import (
    RolePermissionResource,
    RolePermissionsResource,
    RoleResource,
    RolesResource,
)
from evently.interfaces.api.resources.users import (
    UserPermissionResource,
    UserPermissionsResource,
    UserRoleResource,
)


def create_app(
    unit_of_work_factory: type,
    clock: Clock,
    middleware: Sequence[object] = (),
    pool: AsyncConnectionPool | None = None,
) -> App:
    """Wire use cases into resources and routes."""
    uow_factory = unit_of_work_factory
    resolver = EventlyPermissionResolver(uow_factory, clock)
    authorize = AuthorizeUseCase(resolver)

    app = falcon.asgi.App(middleware=list(middleware))
    register_error_handlers(app)

    health = HealthResource(pool)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")

    app.add_route("/v1/me", MeResource(GetCurrentUserUseCase(uow_factory, resolver)))

    app.add_route(
        "/v1/roles",
        RolesResource(
            authorize,
            ListRolesUseCase(uow_factory),
            CreateRoleUseCase(uow_factory, clock),
        ),
    )
    app.add_route(
        "/v1/roles/{role_id}",
        RoleResource(
            authorize,
            GetRoleUseCase(uow_factory),
            UpdateRoleUseCase(uow_factory, clock),
            DeleteRoleUseCase(uow_factory),
        ),
    )
    app.add_route(
        "/v1/roles/{role_id}/permissions",
        RolePermissionsResource(authorize, AssignRolePermissionUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/roles/{role_id}/permissions/{permission_id}",
        RolePermissionResource(authorize, RevokeRolePermissionUseCase(uow_factory)),
    )

    app.add_route(
        "/v1/permissions",
        PermissionsResource(
            authorize,
            ListPermissionsUseCase(uow_factory),
            CreatePermissionUseCase(uow_factory, clock),
        ),
    )
    app.add_route(
        "/v1/permissions/{permission_id}",
        PermissionResource(
            authorize,
            UpdatePermissionUseCase(uow_factory),
            DeletePermissionUseCase(uow_factory),
        ),
    )

    app.add_route(
        "/v1/users/{user_id}/permissions",
        UserPermissionsResource(
            authorize,
            ListUserOverridesUseCase(uow_factory, resolver, clock),
            GrantUserPermissionUseCase(uow_factory, clock),
            RevokeUserPermissionUseCase(uow_factory, clock),
        ),
    )
    app.add_route(
        "/v1/users/{user_id}/permissions/{permission_id}",
        UserPermissionResource(authorize, RemoveUserPermissionUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/users/{user_id}/role",
        UserRoleResource(authorize, AssignUserRoleUseCase(uow_factory)),
    )
    return app
