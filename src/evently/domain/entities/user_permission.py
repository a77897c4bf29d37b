"""User permission override entities."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class UserPermission:
    """Per-user override of a role-derived permission.

    At most one row exists per (user_id, permission_id). `granted=True` adds
    the permission, `granted=False` removes it. `expires_at=None` never expires.
    """

    id: UUID
    user_id: str
    permission_id: UUID
    granted: bool
    created_at: datetime
    updated_at: datetime
    expires_at: datetime | None = None
    granted_by: str | None = None
    reason: str | None = None
    permission_code: str | None = None

    def is_active(self, as_of: datetime) -> bool:
        """Override is in force at `as_of`. Expiry is strict."""
        return self.expires_at is None or self.expires_at > as_of


@dataclass(frozen=True)
class PermissionOverride:
    """Active override as consumed by permission resolution."""

    permission_code: str
    granted: bool
