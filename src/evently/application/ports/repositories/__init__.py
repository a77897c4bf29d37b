"""Repository ports."""

from evently.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from evently.application.ports.repositories.role_repository import RoleRepository
from evently.application.ports.repositories.user_permission_repository import (
    UserPermissionRepository,
)
from evently.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "PermissionRepository",
    "RoleRepository",
    "UserPermissionRepository",
    "UserRepository",
]
