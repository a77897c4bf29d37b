"""PostgreSQL role repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from evently.domain.entities import Permission, Role, RoleSummary
from evently.domain.exceptions import Conflict

_COLUMNS = "id, name, description, priority, is_system, created_at, updated_at"


def _row_to_role(r) -> Role:
    return Role(
        id=r[0],
        name=r[1],
        description=r[2],
        priority=r[3],
        is_system=r[4],
        created_at=r[5],
        updated_at=r[6],
    )


class PostgresRoleRepository:
    """Role repository implementation, including role_permission links."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def get_by_name(self, name: str) -> Role | None:
        """Get role by exact (case-sensitive) name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def list_summaries(self) -> list[RoleSummary]:
        """List roles by priority, highest first, with usage counts."""
        cur = await self._conn.execute(
            "SELECT r.id, r.name, r.description, r.priority, r.is_system, "
            "r.created_at, r.updated_at, "
            "(SELECT COUNT(*) FROM app_user u WHERE u.role_id = r.id), "
            "(SELECT COUNT(*) FROM role_permission rp WHERE rp.role_id = r.id) "
            "FROM role r ORDER BY r.priority DESC, r.name"
        )
        rows = await cur.fetchall()
        return [
            RoleSummary(role=_row_to_role(r), user_count=r[7], permission_count=r[8])
            for r in rows
        ]

    async def create(self, role: Role) -> Role:
        """Insert role; a name taken by a concurrent insert raises Conflict."""
        try:
            await self._conn.execute(
                f"INSERT INTO role ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
                (
                    role.id,
                    role.name,
                    role.description,
                    role.priority,
                    role.is_system,
                    role.created_at,
                    role.updated_at,
                ),
            )
        except UniqueViolation:
            raise Conflict("Role name already exists") from None
        return role

    async def update(self, role: Role) -> None:
        """Update editable fields; a rename onto a taken name raises Conflict."""
        try:
            await self._conn.execute(
                "UPDATE role SET name=%s, description=%s, priority=%s, updated_at=%s "
                "WHERE id=%s",
                (role.name, role.description, role.priority, role.updated_at, role.id),
            )
        except UniqueViolation:
            raise Conflict("Role name already exists") from None

    async def delete(self, role_id: UUID) -> None:
        """Delete role; role_permission rows cascade."""
        await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))

    async def get_permission_codes(self, role_id: UUID) -> set[str]:
        cur = await self._conn.execute(
            "SELECT p.code FROM role_permission rp "
            "JOIN permission p ON p.id = rp.permission_id WHERE rp.role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}

    async def list_permissions(self, role_id: UUID) -> list[Permission]:
        cur = await self._conn.execute(
            "SELECT p.id, p.resource, p.action, p.code, p.description, p.category, p.created_at "
            "FROM role_permission rp JOIN permission p ON p.id = rp.permission_id "
            "WHERE rp.role_id = %s ORDER BY p.resource, p.action",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [
            Permission(
                id=r[0],
                resource=r[1],
                action=r[2],
                code=r[3],
                description=r[4],
                category=r[5],
                created_at=r[6],
            )
            for r in rows
        ]

    async def add_permission(self, role_id: UUID, permission_id: UUID) -> None:
        """Link permission to role (M:N), ignoring an existing link."""
        await self._conn.execute(
            "INSERT INTO role_permission (role_id, permission_id) VALUES (%s, %s) "
            "ON CONFLICT DO NOTHING",
            (role_id, permission_id),
        )

    async def remove_permission(self, role_id: UUID, permission_id: UUID) -> None:
        await self._conn.execute(
            "DELETE FROM role_permission WHERE role_id = %s AND permission_id = %s",
            (role_id, permission_id),
        )
