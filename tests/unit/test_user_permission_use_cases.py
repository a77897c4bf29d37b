"""Unit tests for per-user permission overrides."""

from datetime import datetime, timedelta

import pytest

from evently.application.dto.permission_dto import OverrideInput, PermissionRef
from evently.application.use_cases.user_permission.grant_permission import (
    GrantUserPermissionUseCase,
)
from evently.application.use_cases.user_permission.list_overrides import (
    ListUserOverridesUseCase,
)
from evently.application.use_cases.user_permission.remove_permission import (
    RemoveUserPermissionUseCase,
)
from evently.application.use_cases.user_permission.revoke_permission import (
    RevokeUserPermissionUseCase,
)
from evently.domain.exceptions import NotFound, ValidationError
from evently.domain.value_objects import PermissionSource
from evently.infrastructure.permission.permission_resolver import EventlyPermissionResolver

from tests.conftest import FakeUnitOfWork


@pytest.fixture
def setup(fake_uow: FakeUnitOfWork):
    view = fake_uow.permissions.add_permission("posts:view")
    create = fake_uow.permissions.add_permission("posts:create")
    role = fake_uow.roles.add_role("User", [view])
    fake_uow.users.add_user("u1", role)
    return view, create


@pytest.mark.asyncio
async def test_grant_creates_override(fake_uow, uow_factory, clock, setup) -> None:
    _, create = setup
    override = await GrantUserPermissionUseCase(uow_factory, clock).execute(
        OverrideInput(
            user_id="u1",
            permission=PermissionRef(permission_code="posts:create"),
            granted_by="admin-1",
            reason="Guest author",
            expires_at=clock.current + timedelta(days=30),
        )
    )

    assert override.granted is True
    assert override.permission_id == create.id
    assert override.permission_code == "posts:create"
    assert override.granted_by == "admin-1"
    assert fake_uow.user_permissions._rows[("u1", create.id)] == override


@pytest.mark.asyncio
async def test_grant_then_revoke_leaves_single_row(fake_uow, uow_factory, clock, setup) -> None:
    view, _ = setup
    ref = PermissionRef(permission_id=view.id)
    first = await GrantUserPermissionUseCase(uow_factory, clock).execute(
        OverrideInput(user_id="u1", permission=ref)
    )
    clock.advance(minutes=1)
    second = await RevokeUserPermissionUseCase(uow_factory, clock).execute(
        OverrideInput(user_id="u1", permission=ref, reason="Suspended")
    )

    rows = await fake_uow.user_permissions.list_for_user("u1")
    assert len(rows) == 1
    assert rows[0].granted is False
    assert rows[0].reason == "Suspended"
    assert second.id == first.id
    assert second.created_at == first.created_at
    assert second.updated_at == clock.current


@pytest.mark.asyncio
async def test_grant_unknown_user_not_found(uow_factory, clock, setup) -> None:
    with pytest.raises(NotFound, match="User not found"):
        await GrantUserPermissionUseCase(uow_factory, clock).execute(
            OverrideInput(user_id="ghost", permission=PermissionRef(permission_code="posts:view"))
        )


@pytest.mark.asyncio
async def test_grant_unknown_permission_not_found(uow_factory, clock, setup) -> None:
    with pytest.raises(NotFound, match="Permission not found"):
        await GrantUserPermissionUseCase(uow_factory, clock).execute(
            OverrideInput(user_id="u1", permission=PermissionRef(permission_code="posts:burn"))
        )


@pytest.mark.asyncio
async def test_grant_past_expiry_rejected(uow_factory, clock, setup) -> None:
    with pytest.raises(ValidationError, match="future"):
        await GrantUserPermissionUseCase(uow_factory, clock).execute(
            OverrideInput(
                user_id="u1",
                permission=PermissionRef(permission_code="posts:create"),
                expires_at=clock.current,
            )
        )


@pytest.mark.asyncio
async def test_grant_naive_expiry_rejected(uow_factory, clock, setup) -> None:
    with pytest.raises(ValidationError, match="timezone"):
        await GrantUserPermissionUseCase(uow_factory, clock).execute(
            OverrideInput(
                user_id="u1",
                permission=PermissionRef(permission_code="posts:create"),
                expires_at=datetime(2030, 1, 1),
            )
        )


@pytest.mark.asyncio
async def test_remove_override_falls_back_to_role(fake_uow, uow_factory, clock, setup) -> None:
    view, _ = setup
    fake_uow.user_permissions.add_override("u1", view, granted=False)
    resolver = EventlyPermissionResolver(uow_factory, clock)
    assert await resolver.resolve_codes("u1") == frozenset()

    await RemoveUserPermissionUseCase(uow_factory).execute(
        "u1", PermissionRef(permission_id=view.id)
    )

    assert await fake_uow.user_permissions.list_for_user("u1") == []
    assert await resolver.resolve_codes("u1") == {"posts:view"}


@pytest.mark.asyncio
async def test_remove_missing_override_is_noop(fake_uow, uow_factory, setup) -> None:
    view, _ = setup
    await RemoveUserPermissionUseCase(uow_factory).execute(
        "u1", PermissionRef(permission_id=view.id)
    )
    assert await fake_uow.user_permissions.list_for_user("u1") == []


@pytest.mark.asyncio
async def test_list_overrides_flags_expired(fake_uow, uow_factory, clock, setup) -> None:
    view, create = setup
    fake_uow.user_permissions.add_override(
        "u1", create, granted=True, expires_at=clock.current - timedelta(days=1)
    )
    fake_uow.user_permissions.add_override("u1", view, granted=True)
    resolver = EventlyPermissionResolver(uow_factory, clock)

    out = await ListUserOverridesUseCase(uow_factory, resolver, clock).execute("u1")

    assert [(row.permission_code, active) for row, active in out.overrides] == [
        ("posts:create", False),
        ("posts:view", True),
    ]
    assert [(p.code, p.source) for p in out.effective] == [("posts:view", PermissionSource.USER)]


@pytest.mark.asyncio
async def test_list_overrides_unknown_user(uow_factory, clock) -> None:
    resolver = EventlyPermissionResolver(uow_factory, clock)
    with pytest.raises(NotFound):
        await ListUserOverridesUseCase(uow_factory, resolver, clock).execute("ghost")
