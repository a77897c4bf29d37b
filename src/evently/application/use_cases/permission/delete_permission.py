"""Delete catalog permission use case."""

import logging
from uuid import UUID

from evently.domain.exceptions import Conflict, NotFound

logger = logging.getLogger(__name__)


class DeletePermissionUseCase:
    """Remove a permission nobody references any more."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, permission_id: UUID) -> None:
        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(permission_id)
            if not permission:
                raise NotFound("Permission not found")
            if await uow.permissions.is_referenced(permission_id):
                raise Conflict(f"Permission {permission.code} is still in use")
            await uow.permissions.delete(permission_id)

        logger.info("Permission deleted: id=%s code=%s", permission_id, permission.code)
