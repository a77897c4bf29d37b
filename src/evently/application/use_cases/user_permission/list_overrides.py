"""List user permission overrides use case."""

from evently.application.dto.user_dto import UserOverridesOutput
from evently.application.ports import Clock, PermissionResolver
from evently.domain.exceptions import NotFound


class ListUserOverridesUseCase:
    """Every override row of a user, flagged active or expired, plus the effective set."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
        clock: Clock,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver
        self._clock = clock

    async def execute(self, user_id: str) -> UserOverridesOutput:
        now = self._clock.now()
        async with self._uow_factory() as uow:
            if not await uow.users.get_by_id(user_id):
                raise NotFound("User not found")
            rows = await uow.user_permissions.list_for_user(user_id)

        effective = await self._resolver.resolve(user_id)
        return UserOverridesOutput(
            user_id=user_id,
            overrides=[(row, row.is_active(now)) for row in rows],
            effective=effective,
        )
