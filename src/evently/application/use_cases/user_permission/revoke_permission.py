"""Revoke permission from user use case."""

import logging

from evently.application.dto.permission_dto import OverrideInput
from evently.application.ports import Clock
from evently.application.use_cases.user_permission.override import upsert_override
from evently.domain.entities import UserPermission

logger = logging.getLogger(__name__)


class RevokeUserPermissionUseCase:
    """Take a permission away from one user even if their role grants it."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self, input_data: OverrideInput) -> UserPermission:
        async with self._uow_factory() as uow:
            override = await upsert_override(uow, input_data, False, self._clock.now())

        logger.info(
            "Permission revoked from user: user_id=%s permission=%s by=%s",
            override.user_id,
            override.permission_code,
            override.granted_by,
        )
        return override
