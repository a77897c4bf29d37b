"""Permission DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class PermissionRef:
    """Reference to a catalog permission by id or by code.

    When both are given the id wins.
    """

    permission_id: UUID | None = None
    permission_code: str | None = None


@dataclass
class PermissionCreateInput:
    """Input for creating a catalog permission."""

    resource: str
    action: str
    description: str | None = None
    category: str | None = None


@dataclass
class OverrideInput:
    """Input for granting or revoking a permission for one user."""

    user_id: str
    permission: PermissionRef
    granted_by: str | None = None
    reason: str | None = None
    expires_at: datetime | None = None
