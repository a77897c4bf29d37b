"""Shared upsert of a user permission override."""

from datetime import datetime
from uuid import uuid4

from evently.application.dto.permission_dto import OverrideInput
from evently.application.ports import UnitOfWork
from evently.application.use_cases.permission.lookup import get_permission_or_raise
from evently.domain.entities import UserPermission
from evently.domain.exceptions import NotFound, ValidationError


async def upsert_override(
    uow: UnitOfWork,
    input_data: OverrideInput,
    granted: bool,
    now: datetime,
) -> UserPermission:
    """Insert or replace the single override row for (user, permission)."""
    expires_at = input_data.expires_at
    if expires_at is not None:
        if expires_at.tzinfo is None:
            raise ValidationError("expires_at must be timezone-aware")
        if expires_at <= now:
            raise ValidationError("expires_at must be in the future")

    if not await uow.users.get_by_id(input_data.user_id):
        raise NotFound("User not found")
    permission = await get_permission_or_raise(uow, input_data.permission)

    override = UserPermission(
        id=uuid4(),
        user_id=input_data.user_id,
        permission_id=permission.id,
        granted=granted,
        expires_at=expires_at,
        granted_by=input_data.granted_by,
        reason=input_data.reason,
        created_at=now,
        updated_at=now,
        permission_code=permission.code,
    )
    return await uow.user_permissions.upsert(override)
