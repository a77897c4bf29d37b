"""Get current user use case."""

import logging

from evently.application.dto.user_dto import CurrentUserOutput
from evently.application.ports import PermissionResolver
from evently.domain.catalog import DEFAULT_ROLE_NAME
from evently.domain.entities import User

logger = logging.getLogger(__name__)


class GetCurrentUserUseCase:
    """Profile of the calling user with effective permissions and their source.

    An authenticated identity seen for the first time gets a user row holding
    the default role, as registration does.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = permission_resolver

    async def execute(
        self,
        user_id: str,
        email: str | None = None,
        username: str | None = None,
    ) -> CurrentUserOutput:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                default_role = await uow.roles.get_by_name(DEFAULT_ROLE_NAME)
                user = await uow.users.create(
                    User(
                        id=user_id,
                        role_id=default_role.id if default_role else None,
                        email=email,
                        username=username,
                    )
                )
                logger.info(
                    "User provisioned: user_id=%s role=%s",
                    user_id,
                    default_role.name if default_role else None,
                )
            role = await uow.users.get_role(user_id)

        permissions = await self._resolver.resolve(user_id)
        return CurrentUserOutput(user=user, role=role, permissions=permissions)
