"""Permission catalog repository port."""

from typing import Protocol
from uuid import UUID

from evently.domain.entities import Permission


class PermissionRepository(Protocol):
    """Port for permission catalog persistence."""

    async def get_by_id(self, permission_id: UUID) -> Permission | None: ...

    async def get_by_code(self, code: str) -> Permission | None: ...

    async def list(
        self,
        *,
        resource: str | None = None,
        category: str | None = None,
    ) -> list[Permission]: ...

    async def create(self, permission: Permission) -> Permission: ...

    async def update(self, permission: Permission) -> None: ...

    async def delete(self, permission_id: UUID) -> None: ...

    async def is_referenced(self, permission_id: UUID) -> bool: ...
