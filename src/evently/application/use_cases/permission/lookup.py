"""Shared lookups for use cases that reference roles and permissions."""

from uuid import UUID

from evently.application.dto.permission_dto import PermissionRef
from evently.application.ports import UnitOfWork
from evently.domain.entities import Permission, Role
from evently.domain.exceptions import NotFound, ValidationError


async def get_permission_or_raise(uow: UnitOfWork, ref: PermissionRef) -> Permission:
    """Resolve a permission reference, preferring the id over the code."""
    if ref.permission_id is None and not ref.permission_code:
        raise ValidationError("permission_id or permission_code is required")

    if ref.permission_id is not None:
        permission = await uow.permissions.get_by_id(ref.permission_id)
    else:
        permission = await uow.permissions.get_by_code(ref.permission_code)
    if not permission:
        raise NotFound("Permission not found")
    return permission


async def get_role_or_raise(uow: UnitOfWork, role_id: UUID) -> Role:
    role = await uow.roles.get_by_id(role_id)
    if not role:
        raise NotFound("Role not found")
    return role
