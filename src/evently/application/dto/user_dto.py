"""User DTOs."""

from dataclasses import dataclass, field

from evently.domain.entities import EffectivePermission, User, UserPermission, UserRole


@dataclass
class CurrentUserOutput:
    """Profile of the calling user with the permissions in force."""

    user: User
    role: UserRole | None
    permissions: list[EffectivePermission] = field(default_factory=list)


@dataclass
class UserOverridesOutput:
    """All override rows of a user plus the resulting effective permissions."""

    user_id: str
    overrides: list[tuple[UserPermission, bool]]  # (row, active now)
    effective: list[EffectivePermission]
