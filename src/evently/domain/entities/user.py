"""User entity - owned by the user-management collaborator."""

from dataclasses import dataclass
from uuid import UUID

from evently.domain.value_objects import UserStatus


@dataclass
class User:
    """Platform user. `id` is the identity provider subject."""

    id: str
    role_id: UUID | None
    status: UserStatus = UserStatus.ACTIVE
    email: str | None = None
    username: str | None = None


@dataclass(frozen=True)
class UserRole:
    """Role assignment of a user."""

    role_id: UUID
    role_name: str
