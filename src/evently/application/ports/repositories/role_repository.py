"""Role repository port."""

from typing import Protocol
from uuid import UUID

from evently.domain.entities import Permission, Role, RoleSummary


class RoleRepository(Protocol):
    """Port for role persistence and role-permission links."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str) -> Role | None: ...

    async def list_summaries(self) -> list[RoleSummary]: ...

    async def create(self, role: Role) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def delete(self, role_id: UUID) -> None: ...

    async def get_permission_codes(self, role_id: UUID) -> set[str]: ...

    async def list_permissions(self, role_id: UUID) -> list[Permission]: ...

    async def add_permission(self, role_id: UUID, permission_id: UUID) -> None: ...

    async def remove_permission(self, role_id: UUID, permission_id: UUID) -> None: ...
