"""Delete role use case."""

import logging
from uuid import UUID

from evently.application.use_cases.permission.lookup import get_role_or_raise
from evently.domain.exceptions import Conflict, Forbidden

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete a role. System roles and roles still held by users are kept."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID) -> None:
        async with self._uow_factory() as uow:
            role = await get_role_or_raise(uow, role_id)
            if role.is_system:
                raise Forbidden("Cannot delete system role")

            user_count = await uow.users.count_by_role(role_id)
            if user_count:
                raise Conflict(f"Role is assigned to {user_count} user(s)")

            await uow.roles.delete(role_id)

        logger.info("Role deleted: id=%s name=%s", role_id, role.name)
