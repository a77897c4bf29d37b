"""Current user endpoint."""

import falcon
import falcon.asgi

from evently.application.use_cases.user.get_current_user import GetCurrentUserUseCase
from evently.interfaces.api.hooks import require_authentication
from evently.interfaces.api.resources.serializers import effective_to_dict


class MeResource:
    """GET /v1/me - the caller's profile, role and effective permissions."""

    def __init__(self, get_current_user: GetCurrentUserUseCase) -> None:
        self._get_current_user = get_current_user

    @falcon.before(require_authentication)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = req.context.user
        out = await self._get_current_user.execute(user.user_id, user.email, user.username)
        resp.media = {
            "id": out.user.id,
            "email": out.user.email,
            "username": out.user.username,
            "status": out.user.status.value,
            "role": (
                {"id": str(out.role.role_id), "name": out.role.role_name} if out.role else None
            ),
            "permissions": [effective_to_dict(p) for p in out.permissions],
        }
        resp.status = falcon.HTTP_200
