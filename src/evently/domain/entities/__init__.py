"""Domain entities."""

from evently.domain.entities.effective_permission import EffectivePermission
from evently.domain.entities.permission import Permission
from evently.domain.entities.role import Role, RoleDetails, RoleSummary
from evently.domain.entities.user import User, UserRole
from evently.domain.entities.user_permission import PermissionOverride, UserPermission

__all__ = [
    "EffectivePermission",
    "Permission",
    "PermissionOverride",
    "Role",
    "RoleDetails",
    "RoleSummary",
    "User",
    "UserPermission",
    "UserRole",
]
