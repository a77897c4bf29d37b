"""User permission override repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from evently.domain.entities import PermissionOverride, UserPermission


class UserPermissionRepository(Protocol):
    """Port for per-user permission overrides."""

    async def list_active_overrides(
        self, user_id: str, as_of: datetime
    ) -> list[PermissionOverride]: ...

    async def list_for_user(self, user_id: str) -> list[UserPermission]: ...

    async def upsert(self, override: UserPermission) -> UserPermission: ...

    async def delete(self, user_id: str, permission_id: UUID) -> None: ...
