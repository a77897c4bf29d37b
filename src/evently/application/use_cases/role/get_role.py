"""Role query use cases."""

from uuid import UUID

from evently.application.use_cases.permission.lookup import get_role_or_raise
from evently.domain.entities import RoleDetails, RoleSummary


class GetRoleUseCase:
    """Role with its permissions."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, role_id: UUID) -> RoleDetails:
        async with self._uow_factory() as uow:
            role = await get_role_or_raise(uow, role_id)
            permissions = await uow.roles.list_permissions(role_id)
        return RoleDetails(role=role, permissions=permissions)


class ListRolesUseCase:
    """All roles, highest priority first, with user and permission counts."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> list[RoleSummary]:
        async with self._uow_factory() as uow:
            return await uow.roles.list_summaries()
