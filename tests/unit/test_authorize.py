"""Tests for the authorization gate."""

import pytest

from evently.application.use_cases.authorization.authorize import (
    AuthorizationDecision,
    AuthorizeUseCase,
    normalize_requirement,
)
from evently.domain.exceptions import AuthenticationRequired, InsufficientPermissions
from evently.domain.value_objects import DenialKind
from evently.infrastructure.permission.permission_resolver import EventlyPermissionResolver

from tests.conftest import FakeUnitOfWork


@pytest.fixture
def authorize(fake_uow: FakeUnitOfWork, uow_factory, clock) -> AuthorizeUseCase:
    approve = fake_uow.permissions.add_permission("invoices:approve")
    fake_uow.permissions.add_permission("invoices:pay")
    view = fake_uow.permissions.add_permission("invoices:view")
    role = fake_uow.roles.add_role("Accountant", [approve, view])
    fake_uow.users.add_user("acc", role)
    return AuthorizeUseCase(EventlyPermissionResolver(uow_factory, clock))


@pytest.mark.asyncio
async def test_single_code_allowed(authorize) -> None:
    decision = await authorize.execute("acc", "invoices:approve")
    assert decision == AuthorizationDecision(allowed=True)


@pytest.mark.asyncio
async def test_single_code_denied(authorize) -> None:
    decision = await authorize.execute("acc", "invoices:pay")
    assert not decision.allowed
    assert decision.denial is DenialKind.INSUFFICIENT_PERMISSIONS


@pytest.mark.asyncio
async def test_any_of_list_allows_when_one_held(authorize) -> None:
    decision = await authorize.execute("acc", ["invoices:approve", "invoices:pay"])
    assert decision.allowed


@pytest.mark.asyncio
async def test_require_all_denies_when_one_missing(authorize) -> None:
    decision = await authorize.execute(
        "acc", ["invoices:approve", "invoices:pay"], require_all=True
    )
    assert decision.denial is DenialKind.INSUFFICIENT_PERMISSIONS


@pytest.mark.asyncio
async def test_require_all_allows_when_all_held(authorize) -> None:
    decision = await authorize.execute(
        "acc", ["invoices:approve", "invoices:view"], require_all=True
    )
    assert decision.allowed


@pytest.mark.asyncio
async def test_missing_identity_is_authentication_required(fake_uow, authorize) -> None:
    decision = await authorize.execute(None, "invoices:approve")
    assert decision.denial is DenialKind.AUTHENTICATION_REQUIRED
    assert fake_uow.opened == 0


@pytest.mark.asyncio
async def test_empty_requirement_is_denied(authorize) -> None:
    decision = await authorize.execute("acc", [])
    assert decision.denial is DenialKind.INSUFFICIENT_PERMISSIONS


@pytest.mark.asyncio
async def test_unknown_user_is_insufficient_not_error(authorize) -> None:
    decision = await authorize.execute("ghost", "invoices:view")
    assert decision.denial is DenialKind.INSUFFICIENT_PERMISSIONS


@pytest.mark.asyncio
async def test_orphan_grant_override_does_not_admit_unknown_user(fake_uow, authorize) -> None:
    pay = await fake_uow.permissions.get_by_code("invoices:pay")
    fake_uow.user_permissions.add_override("ghost", pay, granted=True)

    decision = await authorize.execute("ghost", "invoices:pay")

    assert not decision.allowed
    assert decision.denial is DenialKind.INSUFFICIENT_PERMISSIONS


def test_raise_for_denial_maps_kinds() -> None:
    AuthorizationDecision.allow().raise_for_denial()
    with pytest.raises(AuthenticationRequired):
        AuthorizationDecision.deny(DenialKind.AUTHENTICATION_REQUIRED).raise_for_denial()
    with pytest.raises(InsufficientPermissions, match="Insufficient permissions"):
        AuthorizationDecision.deny(DenialKind.INSUFFICIENT_PERMISSIONS).raise_for_denial()


def test_normalize_requirement() -> None:
    assert normalize_requirement("posts:view") == ("posts:view",)
    assert normalize_requirement(["a:b", "c:d"]) == ("a:b", "c:d")
