"""Remove user permission override use case."""

import logging

from evently.application.dto.permission_dto import PermissionRef
from evently.application.use_cases.permission.lookup import get_permission_or_raise

logger = logging.getLogger(__name__)


class RemoveUserPermissionUseCase:
    """Delete the override row so the user falls back to the role."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, ref: PermissionRef) -> None:
        async with self._uow_factory() as uow:
            permission = await get_permission_or_raise(uow, ref)
            await uow.user_permissions.delete(user_id, permission.id)

        logger.info(
            "User permission override removed: user_id=%s permission=%s",
            user_id,
            permission.code,
        )
