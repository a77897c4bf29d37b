"""User repository port."""

from typing import Protocol
from uuid import UUID

from evently.domain.entities import User, UserRole


class UserRepository(Protocol):
    """Port for the subset of user data RBAC needs."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def create(self, user: User) -> User: ...

    async def get_role(self, user_id: str) -> UserRole | None: ...

    async def count_by_role(self, role_id: UUID) -> int: ...

    async def update_role(self, user_id: str, role_id: UUID | None) -> None: ...
