"""Pytest fixtures for Evently tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from evently.domain.entities import (
    Permission,
    PermissionOverride,
    Role,
    RoleSummary,
    User,
    UserPermission,
    UserRole,
)
from evently.domain.value_objects.permission_code import split_code

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


# --- Fake clock ---


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, current: datetime = NOW) -> None:
        self.current = current
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += timedelta(**kwargs)


# --- Fake repositories ---


class FakePermissionRepository:
    """In-memory permission catalog."""

    def __init__(self, uow: FakeUnitOfWork) -> None:
        self._uow = uow
        self._by_id: dict[UUID, Permission] = {}

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        return self._by_id.get(permission_id)

    async def get_by_code(self, code: str) -> Permission | None:
        for p in self._by_id.values():
            if p.code == code:
                return p
        return None

    async def list(
        self,
        *,
        resource: str | None = None,
        category: str | None = None,
    ) -> list[Permission]:
        items = list(self._by_id.values())
        if resource:
            items = [p for p in items if p.resource == resource]
        if category:
            items = [p for p in items if p.category == category]
        return sorted(items, key=lambda p: (p.resource, p.action))

    async def create(self, permission: Permission) -> Permission:
        self._by_id[permission.id] = permission
        return permission

    async def update(self, permission: Permission) -> None:
        self._by_id[permission.id] = permission

    async def delete(self, permission_id: UUID) -> None:
        self._by_id.pop(permission_id, None)

    async def is_referenced(self, permission_id: UUID) -> bool:
        if any(permission_id in links for links in self._uow.roles._links.values()):
            return True
        return any(key[1] == permission_id for key in self._uow.user_permissions._rows)

    def add_permission(self, code: str, category: str | None = None) -> Permission:
        """Helper to add a catalog entry for tests."""
        resource, action = split_code(code)
        permission = Permission(
            id=uuid4(),
            resource=resource,
            action=action,
            code=code,
            category=category,
            created_at=NOW,
        )
        self._by_id[permission.id] = permission
        return permission


class FakeRoleRepository:
    """In-memory roles with role-permission links."""

    def __init__(self, uow: FakeUnitOfWork) -> None:
        self._uow = uow
        self._by_id: dict[UUID, Role] = {}
        self._links: dict[UUID, set[UUID]] = {}

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def get_by_name(self, name: str) -> Role | None:
        for r in self._by_id.values():
            if r.name == name:
                return r
        return None

    async def list_summaries(self) -> list[RoleSummary]:
        roles = sorted(self._by_id.values(), key=lambda r: (-r.priority, r.name))
        return [
            RoleSummary(
                role=r,
                user_count=await self._uow.users.count_by_role(r.id),
                permission_count=len(self._links.get(r.id, set())),
            )
            for r in roles
        ]

    async def create(self, role: Role) -> Role:
        self._by_id[role.id] = role
        self._links.setdefault(role.id, set())
        return role

    async def update(self, role: Role) -> None:
        self._by_id[role.id] = role

    async def delete(self, role_id: UUID) -> None:
        self._by_id.pop(role_id, None)
        self._links.pop(role_id, None)

    async def get_permission_codes(self, role_id: UUID) -> set[str]:
        return {p.code for p in await self.list_permissions(role_id)}

    async def list_permissions(self, role_id: UUID) -> list[Permission]:
        catalog = self._uow.permissions._by_id
        permissions = [catalog[pid] for pid in self._links.get(role_id, set()) if pid in catalog]
        return sorted(permissions, key=lambda p: (p.resource, p.action))

    async def add_permission(self, role_id: UUID, permission_id: UUID) -> None:
        self._links.setdefault(role_id, set()).add(permission_id)

    async def remove_permission(self, role_id: UUID, permission_id: UUID) -> None:
        self._links.get(role_id, set()).discard(permission_id)

    def add_role(
        self,
        name: str,
        permissions: list[Permission] | None = None,
        is_system: bool = False,
        priority: int = 0,
    ) -> Role:
        """Helper to add a role with linked permissions for tests."""
        role = Role(
            id=uuid4(),
            name=name,
            description=None,
            created_at=NOW,
            updated_at=NOW,
            priority=priority,
            is_system=is_system,
        )
        self._by_id[role.id] = role
        self._links[role.id] = {p.id for p in permissions or []}
        return role


class FakeUserRepository:
    """In-memory users."""

    def __init__(self, uow: FakeUnitOfWork) -> None:
        self._uow = uow
        self._by_id: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    async def create(self, user: User) -> User:
        return self._by_id.setdefault(user.id, user)

    async def get_role(self, user_id: str) -> UserRole | None:
        user = self._by_id.get(user_id)
        if not user or user.role_id is None:
            return None
        role = self._uow.roles._by_id.get(user.role_id)
        return UserRole(role_id=role.id, role_name=role.name) if role else None

    async def count_by_role(self, role_id: UUID) -> int:
        return sum(1 for u in self._by_id.values() if u.role_id == role_id)

    async def update_role(self, user_id: str, role_id: UUID | None) -> None:
        user = self._by_id.get(user_id)
        if user:
            self._by_id[user_id] = replace(user, role_id=role_id)

    def add_user(self, user_id: str, role: Role | None = None) -> User:
        """Helper to add a user for tests."""
        user = User(id=user_id, role_id=role.id if role else None, email=f"{user_id}@example.com")
        self._by_id[user_id] = user
        return user


class FakeUserPermissionRepository:
    """In-memory overrides keyed by (user_id, permission_id)."""

    def __init__(self, uow: FakeUnitOfWork) -> None:
        self._uow = uow
        self._rows: dict[tuple[str, UUID], UserPermission] = {}
        self.as_of_calls: list[datetime] = []

    async def list_active_overrides(
        self, user_id: str, as_of: datetime
    ) -> list[PermissionOverride]:
        self.as_of_calls.append(as_of)
        catalog = self._uow.permissions._by_id
        return [
            PermissionOverride(permission_code=catalog[pid].code, granted=row.granted)
            for (uid, pid), row in self._rows.items()
            if uid == user_id and row.is_active(as_of) and pid in catalog
        ]

    async def list_for_user(self, user_id: str) -> list[UserPermission]:
        rows = [row for (uid, _), row in self._rows.items() if uid == user_id]
        return sorted(rows, key=lambda r: r.permission_code or "")

    async def upsert(self, override: UserPermission) -> UserPermission:
        key = (override.user_id, override.permission_id)
        existing = self._rows.get(key)
        if existing:
            override = replace(override, id=existing.id, created_at=existing.created_at)
        self._rows[key] = override
        return override

    async def delete(self, user_id: str, permission_id: UUID) -> None:
        self._rows.pop((user_id, permission_id), None)

    def add_override(
        self,
        user_id: str,
        permission: Permission,
        granted: bool,
        expires_at: datetime | None = None,
    ) -> UserPermission:
        """Helper to store an override row directly, bypassing validation."""
        row = UserPermission(
            id=uuid4(),
            user_id=user_id,
            permission_id=permission.id,
            granted=granted,
            created_at=NOW,
            updated_at=NOW,
            expires_at=expires_at,
            permission_code=permission.code,
        )
        self._rows[(user_id, permission.id)] = row
        return row


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.permissions = FakePermissionRepository(self)
        self.roles = FakeRoleRepository(self)
        self.users = FakeUserRepository(self)
        self.user_permissions = FakeUserPermissionRepository(self)
        self.opened = 0

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        uow.opened += 1
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()
