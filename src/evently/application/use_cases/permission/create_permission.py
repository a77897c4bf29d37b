"""Create catalog permission use case."""

import logging
from uuid import uuid4

from evently.application.dto.permission_dto import PermissionCreateInput
from evently.application.ports import Clock
from evently.domain.entities import Permission
from evently.domain.exceptions import Conflict
from evently.domain.value_objects.permission_code import build_code, split_code

logger = logging.getLogger(__name__)


class CreatePermissionUseCase:
    """Add a `resource:action` permission to the catalog."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self, input_data: PermissionCreateInput) -> Permission:
        code = build_code(input_data.resource, input_data.action)
        resource, action = split_code(code)

        async with self._uow_factory() as uow:
            if await uow.permissions.get_by_code(code):
                raise Conflict(f"Permission {code} already exists")

            permission = Permission(
                id=uuid4(),
                resource=resource,
                action=action,
                code=code,
                description=input_data.description,
                category=input_data.category,
                created_at=self._clock.now(),
            )
            await uow.permissions.create(permission)

        logger.info("Permission created: id=%s code=%s", permission.id, code)
        return permission
