"""Create role use case."""

import logging
from uuid import uuid4

from evently.application.dto.role_dto import RoleCreateInput
from evently.application.ports import Clock
from evently.domain.entities import Role
from evently.domain.exceptions import Conflict, ValidationError

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a non-system role with no permissions."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self, input_data: RoleCreateInput) -> Role:
        """Create role. Names are unique, compared exactly after trimming."""
        name = (input_data.name or "").strip()
        if not name:
            raise ValidationError("Role name is required")

        async with self._uow_factory() as uow:
            if await uow.roles.get_by_name(name):
                raise Conflict("Role name already exists")

            now = self._clock.now()
            role = Role(
                id=uuid4(),
                name=name,
                description=input_data.description,
                priority=input_data.priority,
                is_system=False,
                created_at=now,
                updated_at=now,
            )
            await uow.roles.create(role)

        logger.info("Role created: id=%s name=%s", role.id, role.name)
        return role
