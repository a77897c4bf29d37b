"""Role entity for RBAC."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from evently.domain.entities.permission import Permission


@dataclass
class Role:
    """Role - named bundle of permissions assigned to users.

    `priority` orders roles for display only; it never affects resolution.
    System roles cannot be deleted.
    """

    id: UUID
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime
    priority: int = 0
    is_system: bool = False


@dataclass
class RoleSummary:
    """Role with usage counts, for listings."""

    role: Role
    user_count: int
    permission_count: int


@dataclass
class RoleDetails:
    """Role with its permission catalog entries."""

    role: Role
    permissions: list[Permission] = field(default_factory=list)
