"""Assign role to user use case."""

import logging
from uuid import UUID

from evently.application.use_cases.permission.lookup import get_role_or_raise
from evently.domain.entities import UserRole
from evently.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class AssignUserRoleUseCase:
    """Replace the single role held by a user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, role_id: UUID) -> UserRole:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User not found")
            role = await get_role_or_raise(uow, role_id)
            await uow.users.update_role(user_id, role.id)

        logger.info(
            "User role changed: user_id=%s from=%s to=%s", user_id, user.role_id, role.id
        )
        return UserRole(role_id=role.id, role_name=role.name)
