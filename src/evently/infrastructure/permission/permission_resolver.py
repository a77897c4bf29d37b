"""Permission resolver implementation - role grants overlaid by user overrides."""

from collections.abc import Mapping
from types import MappingProxyType

from evently.application.ports import Clock
from evently.domain.entities import EffectivePermission
from evently.domain.services.permission_merge import merge_effective_permissions
from evently.domain.value_objects import PermissionSource


class EventlyPermissionResolver:
    """Resolves effective permissions from the role and override tables.

    Reads the store on every call; nothing is cached between requests.
    An unknown user resolves to the empty set, whatever override rows carry
    their id. A known user without a role resolves to their overrides alone.
    """

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def resolve(self, user_id: str) -> list[EffectivePermission]:
        """Effective permissions with their source, sorted by code."""
        merged = await self._merge(user_id)
        return [EffectivePermission(code=code, source=merged[code]) for code in sorted(merged)]

    async def resolve_codes(self, user_id: str) -> frozenset[str]:
        """Effective permission codes only."""
        return frozenset(await self._merge(user_id))

    async def _merge(self, user_id: str) -> Mapping[str, PermissionSource]:
        as_of = self._clock.now()
        async with self._uow_factory() as uow:
            if await uow.users.get_by_id(user_id) is None:
                return MappingProxyType({})
            user_role = await uow.users.get_role(user_id)
            role_codes: set[str] = set()
            if user_role is not None:
                role_codes = await uow.roles.get_permission_codes(user_role.role_id)
            overrides = await uow.user_permissions.list_active_overrides(user_id, as_of)
        return merge_effective_permissions(role_codes, overrides)
