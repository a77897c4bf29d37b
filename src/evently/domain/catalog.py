"""Default permission catalog and roles of the platform."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogPermission:
    resource: str
    action: str
    description: str
    category: str

    @property
    def code(self) -> str:
        return f"{self.resource}:{self.action}"


@dataclass(frozen=True)
class CatalogRole:
    name: str
    description: str
    priority: int
    is_system: bool
    permission_codes: tuple[str, ...]


def _crud(
    resource: str,
    category: str,
    label: str,
    extra: tuple[tuple[str, str], ...] = (),
) -> list[CatalogPermission]:
    actions = [
        ("view", f"Can view {label}"),
        ("create", f"Can create {label}"),
        ("update", f"Can update {label}"),
        ("delete", f"Can delete {label}"),
        *extra,
    ]
    return [CatalogPermission(resource, action, desc, category) for action, desc in actions]


DEFAULT_PERMISSIONS: tuple[CatalogPermission, ...] = tuple(
    _crud("users", "users", "users")
    + _crud("roles", "system", "roles")
    + [
        CatalogPermission("permissions", "view", "Can view the permission catalog", "system"),
        CatalogPermission("permissions", "create", "Can create permissions", "system"),
        CatalogPermission("permissions", "update", "Can update permissions", "system"),
        CatalogPermission("permissions", "delete", "Can delete permissions", "system"),
        CatalogPermission(
            "permissions", "assign", "Can assign permissions to roles and users", "system"
        ),
    ]
    + _crud(
        "rooms",
        "events",
        "event rooms",
        extra=(("join", "Can join event rooms"), ("publish", "Can publish event rooms")),
    )
    + _crud("assets", "assets", "assets", extra=(("assign", "Can assign assets to users"),))
    + _crud(
        "posts",
        "content",
        "blog posts",
        extra=(("publish", "Can publish blog posts"), ("unpublish", "Can unpublish blog posts")),
    )
    + [
        CatalogPermission("payments", "view", "Can view payments", "finance"),
        CatalogPermission("payments", "refund", "Can refund payments", "finance"),
        CatalogPermission("invoices", "view", "Can view invoices", "finance"),
        CatalogPermission("invoices", "approve", "Can approve invoices", "finance"),
        CatalogPermission("invoices", "pay", "Can pay invoices", "finance"),
        CatalogPermission("stats", "view", "Can view platform statistics", "reports"),
        CatalogPermission("logs", "view", "Can view user activity logs", "reports"),
    ]
)

_ALL_CODES = tuple(p.code for p in DEFAULT_PERMISSIONS)


def _codes(*prefixes: str, actions: tuple[str, ...] | None = None) -> tuple[str, ...]:
    out = []
    for code in _ALL_CODES:
        resource, _, action = code.partition(":")
        if resource in prefixes and (actions is None or action in actions):
            out.append(code)
    return tuple(out)


DEFAULT_ROLES: tuple[CatalogRole, ...] = (
    CatalogRole("Super Admin", "Full access to the platform", 1000, True, _ALL_CODES),
    CatalogRole(
        "Admin",
        "Administrative access except permission catalog changes",
        900,
        True,
        tuple(
            c
            for c in _ALL_CODES
            if c not in ("permissions:create", "permissions:update", "permissions:delete")
        ),
    ),
    CatalogRole(
        "Manager",
        "Manages events, content and users",
        500,
        False,
        _codes("rooms", "posts", "assets") + _codes("users", "stats", actions=("view",)),
    ),
    CatalogRole(
        "Editor",
        "Creates and publishes content",
        400,
        False,
        _codes("posts") + _codes("rooms", actions=("view", "create", "update")),
    ),
    CatalogRole(
        "Accountant",
        "Handles payments and invoices",
        300,
        False,
        _codes("payments", "invoices") + _codes("stats", actions=("view",)),
    ),
    CatalogRole(
        "User",
        "Default role for registered users",
        100,
        True,
        _codes("rooms", "posts", "assets", actions=("view", "join")),
    ),
)

SUPER_ADMIN_ROLE_NAME = "Super Admin"
DEFAULT_ROLE_NAME = "User"
