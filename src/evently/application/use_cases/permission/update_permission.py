"""Update catalog permission use case."""

import logging
from dataclasses import replace
from uuid import UUID

from evently.domain.entities import Permission
from evently.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class UpdatePermissionUseCase:
    """Edit the descriptive fields of a permission. The code never changes."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        permission_id: UUID,
        description: str | None = None,
        category: str | None = None,
    ) -> Permission:
        async with self._uow_factory() as uow:
            permission = await uow.permissions.get_by_id(permission_id)
            if not permission:
                raise NotFound("Permission not found")

            updated = replace(
                permission,
                description=permission.description if description is None else description,
                category=permission.category if category is None else category,
            )
            await uow.permissions.update(updated)

        logger.info("Permission updated: id=%s code=%s", permission_id, updated.code)
        return updated
