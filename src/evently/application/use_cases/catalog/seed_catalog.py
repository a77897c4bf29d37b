"""Seed default permission catalog and roles."""

import logging
from dataclasses import dataclass
from uuid import uuid4

from evently.application.ports import Clock
from evently.domain.catalog import (
    DEFAULT_PERMISSIONS,
    DEFAULT_ROLES,
    SUPER_ADMIN_ROLE_NAME,
    CatalogPermission,
    CatalogRole,
)
from evently.domain.entities import Permission, Role, User

logger = logging.getLogger(__name__)


@dataclass
class SeedReport:
    permissions_created: int = 0
    roles_created: int = 0
    links_ensured: int = 0
    admin_assigned: bool = False


class SeedCatalogUseCase:
    """Create missing default permissions and roles and link them.

    Existing permissions and roles are left as they are; links are added
    with insert-or-ignore, so running the seed twice changes nothing.
    With `admin_user_id` set, that identity holds the super admin role
    afterwards, its user row created if missing.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        clock: Clock,
        permissions: tuple[CatalogPermission, ...] = DEFAULT_PERMISSIONS,
        roles: tuple[CatalogRole, ...] = DEFAULT_ROLES,
        admin_user_id: str | None = None,
        admin_email: str | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock
        self._permissions = permissions
        self._roles = roles
        self._admin_user_id = admin_user_id
        self._admin_email = admin_email

    async def execute(self) -> SeedReport:
        report = SeedReport()
        now = self._clock.now()
        async with self._uow_factory() as uow:
            by_code: dict[str, Permission] = {}
            for entry in self._permissions:
                permission = await uow.permissions.get_by_code(entry.code)
                if not permission:
                    permission = Permission(
                        id=uuid4(),
                        resource=entry.resource,
                        action=entry.action,
                        code=entry.code,
                        description=entry.description,
                        category=entry.category,
                        created_at=now,
                    )
                    await uow.permissions.create(permission)
                    report.permissions_created += 1
                by_code[entry.code] = permission

            for entry in self._roles:
                role = await uow.roles.get_by_name(entry.name)
                if not role:
                    role = Role(
                        id=uuid4(),
                        name=entry.name,
                        description=entry.description,
                        priority=entry.priority,
                        is_system=entry.is_system,
                        created_at=now,
                        updated_at=now,
                    )
                    await uow.roles.create(role)
                    report.roles_created += 1
                for code in entry.permission_codes:
                    await uow.roles.add_permission(role.id, by_code[code].id)
                    report.links_ensured += 1

            if self._admin_user_id:
                report.admin_assigned = await self._assign_admin(uow)

        logger.info(
            "Catalog seeded: permissions_created=%d roles_created=%d links=%d",
            report.permissions_created,
            report.roles_created,
            report.links_ensured,
        )
        return report

    async def _assign_admin(self, uow) -> bool:
        """Give the bootstrap identity the super admin role, creating its user row."""
        role = await uow.roles.get_by_name(SUPER_ADMIN_ROLE_NAME)
        if not role:
            logger.warning("Role %s missing; bootstrap admin not assigned", SUPER_ADMIN_ROLE_NAME)
            return False

        user = await uow.users.get_by_id(self._admin_user_id)
        if not user:
            await uow.users.create(
                User(id=self._admin_user_id, role_id=role.id, email=self._admin_email)
            )
        elif user.role_id != role.id:
            await uow.users.update_role(user.id, role.id)
        else:
            return False

        logger.info("Bootstrap admin assigned: user_id=%s role=%s", self._admin_user_id, role.name)
        return True
