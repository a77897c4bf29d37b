"""Permission catalog API resources."""

import falcon
import falcon.asgi

from evently.application.dto.permission_dto import PermissionCreateInput
from evently.application.use_cases.authorization.authorize import AuthorizeUseCase
from evently.application.use_cases.permission.create_permission import CreatePermissionUseCase
from evently.application.use_cases.permission.delete_permission import DeletePermissionUseCase
from evently.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from evently.application.use_cases.permission.update_permission import UpdatePermissionUseCase
from evently.interfaces.api.hooks import require_permission
from evently.interfaces.api.resources.parsing import get_json_object, optional_str, parse_uuid
from evently.interfaces.api.resources.serializers import permission_to_dict


class PermissionsResource:
    """GET/POST /v1/permissions - list (filter by resource, category) and create."""

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        list_permissions: ListPermissionsUseCase,
        create_permission: CreatePermissionUseCase,
    ) -> None:
        self.authorize = authorize
        self._list = list_permissions
        self._create = create_permission

    @falcon.before(require_permission(["roles:view", "permissions:view"]))
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        permissions = await self._list.execute(
            resource=req.get_param("resource"),
            category=req.get_param("category"),
        )
        resp.media = {"items": [permission_to_dict(p) for p in permissions]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission("permissions:create"))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = await get_json_object(req)
        permission = await self._create.execute(
            PermissionCreateInput(
                resource=optional_str(body, "resource") or "",
                action=optional_str(body, "action") or "",
                description=optional_str(body, "description"),
                category=optional_str(body, "category"),
            )
        )
        resp.media = permission_to_dict(permission)
        resp.status = falcon.HTTP_201


class PermissionResource:
    """PATCH/DELETE /v1/permissions/{permission_id}."""

    def __init__(
        self,
        authorize: AuthorizeUseCase,
        update_permission: UpdatePermissionUseCase,
        delete_permission: DeletePermissionUseCase,
    ) -> None:
        self.authorize = authorize
        self._update = update_permission
        self._delete = delete_permission

    @falcon.before(require_permission("permissions:update"))
    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        body = await get_json_object(req)
        permission = await self._update.execute(
            parse_uuid(permission_id, "permission ID"),
            description=optional_str(body, "description"),
            category=optional_str(body, "category"),
        )
        resp.media = permission_to_dict(permission)
        resp.status = falcon.HTTP_200

    @falcon.before(require_permission("permissions:delete"))
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, permission_id: str
    ) -> None:
        await self._delete.execute(parse_uuid(permission_id, "permission ID"))
        resp.status = falcon.HTTP_204
