"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from evently.interfaces.api.app import create_app
from evently.interfaces.api.middleware.auth import RequestUser
from evently.interfaces.api.middleware.cors import CORSMiddleware
from evently.interfaces.api.middleware.request_logging import RequestLoggingMiddleware

from tests.conftest import FakeUnitOfWork, FixedClock, make_uow_factory

CATALOG = [
    "users:view",
    "users:update",
    "roles:view",
    "roles:create",
    "roles:update",
    "roles:delete",
    "permissions:view",
    "permissions:create",
    "permissions:update",
    "permissions:delete",
    "permissions:assign",
    "posts:view",
    "posts:create",
    "invoices:approve",
    "invoices:pay",
]


class HeaderAuthMiddleware:
    """Sets context.user from the X-Test-User header instead of a bearer token."""

    async def process_request(self, req, resp):
        user_id = req.get_header("X-Test-User")
        req.context.user = RequestUser(user_id=user_id) if user_id else None


def as_user(user_id: str) -> dict[str, str]:
    return {"X-Test-User": user_id}


@pytest.fixture
def api_uow() -> FakeUnitOfWork:
    """Shared UoW with a small catalog, an admin and a regular member."""
    uow = FakeUnitOfWork()
    permissions = {code: uow.permissions.add_permission(code) for code in CATALOG}
    super_admin = uow.roles.add_role(
        "Super Admin", list(permissions.values()), is_system=True, priority=1000
    )
    member = uow.roles.add_role("User", [permissions["posts:view"]], is_system=True, priority=100)
    uow.users.add_user("admin", super_admin)
    uow.users.add_user("member", member)
    return uow


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def app(api_uow: FakeUnitOfWork, clock: FixedClock):
    """Falcon ASGI app wired to in-memory repositories."""
    return create_app(
        make_uow_factory(api_uow),
        clock,
        middleware=[
            RequestLoggingMiddleware(),
            CORSMiddleware(["http://localhost:5173"]),
            HeaderAuthMiddleware(),
        ],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
