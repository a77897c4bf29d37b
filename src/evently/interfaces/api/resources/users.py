"""User permission and role assignment API resources."""

import falcon
import falcon.asgi

from evently.application.dto.permission_dto import OverrideInput, PermissionRef
from evently.application.use_cases.authorization.authorize import AuthorizeUseCase
from evently.application.use_cases.user.assign_role import AssignUserRoleUseCase
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
from evently.domain.exceptions import ValidationError
from evently.interfaces.api.hooks import current_user_id, require_permission
from evently.interfaces.api.resources.parsing import (
    get_json_object,
    optional_str,
    parse_datetime,
    parse_uuid,
    permission_ref_from,
)
from evently.interfaces.api.resources.serializers import effective_to_dict, override_to_dict


class UserPermissionsResource:
    """GET/POST /v1/users/{user_id}/permissions - list, grant or revoke overrides.

    POST body: `permission_id` or `permission_code`, `granted` (default true),
    optional `reason` and `expires_at` (ISO 8601 with offset).
    """

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        list_overrides: ListUserOverridesUseCase,
        grant_permission: GrantUserPermissionUseCase,
        revoke_permission: RevokeUserPermissionUseCase,
    ) -> None:
        self.authorize = authorize
        self._list = list_overrides
        self._grant = grant_permission
        self._revoke = revoke_permission

    @falcon.before(require_permission("users:view"))
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        out = await self._list.execute(user_id)
        resp.media = {
            "user_id": out.user_id,
            "overrides": [override_to_dict(row, active) for row, active in out.overrides],
            "effective": [effective_to_dict(p) for p in out.effective],
        }
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission("permissions:assign"))
    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        body = await get_json_object(req)
        granted = body.get("granted", True)
        if not isinstance(granted, bool):
            raise ValidationError("granted must be a boolean")

        input_data = OverrideInput(
            user_id=user_id,
            permission=permission_ref_from(body),
            granted_by=current_user_id(req),
            reason=optional_str(body, "reason"),
            expires_at=parse_datetime(body.get("expires_at"), "expires_at"),
        )
        use_case = self._grant if granted else self._revoke
        override = await use_case.execute(input_data)
        resp.media = override_to_dict(override)
        resp.status = falcon.HTTP_200


class UserPermissionResource:
    """DELETE /v1/users/{user_id}/permissions/{permission_id} - remove override."""

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        remove_permission: RemoveUserPermissionUseCase,
    ) -> None:
        self.authorize = authorize
        self._remove = remove_permission

    @falcon.before(require_permission("permissions:assign"))
    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        permission_id: str,
    ) -> None:
        await self._remove.execute(
            user_id, PermissionRef(permission_id=parse_uuid(permission_id, "permission ID"))
        )
        resp.status = falcon.HTTP_204


class UserRoleResource:
    """PUT /v1/users/{user_id}/role - replace the user's role."""

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        assign_role: AssignUserRoleUseCase,
    ) -> None:
        self.authorize = authorize
        self._assign = assign_role

    @falcon.before(require_permission("users:update"))
    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        body = await get_json_object(req)
        role = await self._assign.execute(user_id, parse_uuid(body.get("role_id"), "role_id"))
        resp.media = {"user_id": user_id, "role": {"id": str(role.role_id), "name": role.role_name}}
        resp.status = falcon.HTTP_200
