"""Roles API resources."""

import falcon
import falcon.asgi

from evently.application.dto.permission_dto import PermissionRef
from evently.application.dto.role_dto import RoleCreateInput, RoleUpdate
from evently.application.use_cases.authorization.authorize import AuthorizeUseCase
from evently.application.use_cases.role.assign_permission import AssignRolePermissionUseCase
from evently.application.use_cases.role.create_role import CreateRoleUseCase
from evently.application.use_cases.role.delete_role import DeleteRoleUseCase
from evently.application.use_cases.role.get_role import GetRoleUseCase, ListRolesUseCase
from evently.application.use_cases.role.revoke_permission import RevokeRolePermissionUseCase
from evently.application.use_cases.role.update_role import UpdateRoleUseCase
from evently.domain.exceptions import ValidationError
from evently.interfaces.api.hooks import require_permission
from evently.interfaces.api.resources.parsing import (
    get_json_object,
    optional_str,
    parse_uuid,
    permission_ref_from,
)
from evently.interfaces.api.resources.serializers import (
    role_details_to_dict,
    role_summary_to_dict,
    role_to_dict,
)


def _optional_int(body: dict, key: str) -> int | None:
    value = body.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{key} must be an integer")
    return value


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        list_roles: ListRolesUseCase,
        create_role: CreateRoleUseCase,
    ) -> None:
        self.authorize = authorize
        self._list = list_roles
        self._create = create_role

    @falcon.before(require_permission("roles:view"))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        roles = await self._list.execute()
        resp.media = {"items": [role_summary_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission("roles:create"))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = await get_json_object(req)
        role = await self._create.execute(
            RoleCreateInput(
                name=optional_str(body, "name") or "",
                description=optional_str(body, "description"),
                priority=_optional_int(body, "priority") or 0,
            )
        )
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PATCH/DELETE /v1/roles/{role_id}."""

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        get_role: GetRoleUseCase,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
    ) -> None:
        self.authorize = authorize
        self._get = get_role
        self._update = update_role
        self._delete = delete_role

    @falcon.before(require_permission("roles:view"))
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        details = await self._get.execute(parse_uuid(role_id, "role ID"))
        resp.media = role_details_to_dict(details)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission("roles:update"))
    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        body = await get_json_object(req)
        role = await self._update.execute(
            parse_uuid(role_id, "role ID"),
            RoleUpdate(
                name=optional_str(body, "name"),
                description=optional_str(body, "description"),
                priority=_optional_int(body, "priority"),
            ),
        )
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission("roles:delete"))
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        await self._delete.execute(parse_uuid(role_id, "role ID"))
        resp.status = falcon.HTTP_204


class RolePermissionsResource:
    """POST /v1/roles/{role_id}/permissions - assign by permission_id or permission_code."""

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        assign_permission: AssignRolePermissionUseCase,
    ) -> None:
        self.authorize = authorize
        self._assign = assign_permission

    @falcon.before(require_permission("permissions:assign"))
    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        body = await get_json_object(req)
        details = await self._assign.execute(
            parse_uuid(role_id, "role ID"), permission_ref_from(body)
        )
        resp.media = role_details_to_dict(details)
        resp.status = falcon.HTTP_200


class RolePermissionResource:
    """DELETE /v1/roles/{role_id}/permissions/{permission_id} - revoke from role."""

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        revoke_permission: RevokeRolePermissionUseCase,
    ) -> None:
        self.authorize = authorize
        self._revoke = revoke_permission

    @falcon.before(require_permission("permissions:assign"))
    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
        permission_id: str,
    ) -> None:
        details = await self._revoke.execute(
            parse_uuid(role_id, "role ID"),
            PermissionRef(permission_id=parse_uuid(permission_id, "permission ID")),
        )
        resp.media = role_details_to_dict(details)
        resp.status = falcon.HTTP_200
