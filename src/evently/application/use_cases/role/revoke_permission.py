"""Revoke permission from role use case."""

import logging
from uuid import UUID

from evently.application.dto.permission_dto import PermissionRef
from evently.application.use_cases.permission.lookup import (
    get_permission_or_raise,
    get_role_or_raise,
)
from evently.domain.entities import RoleDetails

logger = logging.getLogger(__name__)


class RevokeRolePermissionUseCase:
    """Unlink a permission from a role. A missing link is not an error."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID, ref: PermissionRef) -> RoleDetails:
        async with self._uow_factory() as uow:
            role = await get_role_or_raise(uow, role_id)
            permission = await get_permission_or_raise(uow, ref)
            await uow.roles.remove_permission(role_id, permission.id)
            permissions = await uow.roles.list_permissions(role_id)

        logger.info(
            "Permission revoked from role: role_id=%s permission=%s",
            role_id,
            permission.code,
        )
        return RoleDetails(role=role, permissions=permissions)
