"""Update role use case."""

import logging
from dataclasses import replace
from uuid import UUID

from evently.application.dto.role_dto import RoleUpdate
from evently.application.ports import Clock
from evently.application.use_cases.permission.lookup import get_role_or_raise
from evently.domain.entities import Role
from evently.domain.exceptions import Conflict, ValidationError

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Rename or re-describe a role. The system flag is not editable."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self, role_id: UUID, patch: RoleUpdate) -> Role:
        async with self._uow_factory() as uow:
            role = await get_role_or_raise(uow, role_id)
            changes: dict[str, object] = {}

            if patch.name is not None:
                name = patch.name.strip()
                if not name:
                    raise ValidationError("Role name is required")
                if name != role.name:
                    existing = await uow.roles.get_by_name(name)
                    if existing and existing.id != role_id:
                        raise Conflict("Role name already exists")
                    changes["name"] = name
            if patch.description is not None:
                changes["description"] = patch.description
            if patch.priority is not None:
                changes["priority"] = patch.priority

            if not changes:
                return role

            updated = replace(role, updated_at=self._clock.now(), **changes)
            await uow.roles.update(updated)

        logger.info("Role updated: id=%s fields=%s", role_id, sorted(changes))
        return updated
