"""Permission resolver port - effective permissions of a user."""

from typing import Protocol

from evently.domain.entities import EffectivePermission


class PermissionResolver(Protocol):
    """Port for resolving a user's effective permissions."""

    async def resolve(self, user_id: str) -> list[EffectivePermission]: ...

    async def resolve_codes(self, user_id: str) -> frozenset[str]: ...
