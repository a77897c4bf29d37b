"""PostgreSQL permission catalog repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from evently.domain.entities import Permission
from evently.domain.exceptions import Conflict

_COLUMNS = "id, resource, action, code, description, category, created_at"


def _row_to_permission(r) -> Permission:
    return Permission(
        id=r[0],
        resource=r[1],
        action=r[2],
        code=r[3],
        description=r[4],
        category=r[5],
        created_at=r[6],
    )


class PostgresPermissionRepository:
    """Permission catalog repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def get_by_code(self, code: str) -> Permission | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission WHERE code = %s",
            (code,),
        )
        r = await cur.fetchone()
        return _row_to_permission(r) if r else None

    async def list(
        self,
        *,
        resource: str | None = None,
        category: str | None = None,
    ) -> list[Permission]:
        """List permissions with optional filters, ordered by resource and action."""
        conditions = []
        params: list[object] = []
        if resource:
            conditions.append("resource = %s")
            params.append(resource)
        if category:
            conditions.append("category = %s")
            params.append(category)
        where = (" WHERE " + " AND ".join(conditions)) if conditions else ""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission{where} ORDER BY resource, action",
            params,
        )
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def create(self, permission: Permission) -> Permission:
        """Insert permission; a code taken by a concurrent insert raises Conflict."""
        try:
            await self._conn.execute(
                f"INSERT INTO permission ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
                (
                    permission.id,
                    permission.resource,
                    permission.action,
                    permission.code,
                    permission.description,
                    permission.category,
                    permission.created_at,
                ),
            )
        except UniqueViolation:
            raise Conflict(f"Permission {permission.code} already exists") from None
        return permission

    async def update(self, permission: Permission) -> None:
        """Update descriptive fields only."""
        await self._conn.execute(
            "UPDATE permission SET description=%s, category=%s WHERE id=%s",
            (permission.description, permission.category, permission.id),
        )

    async def delete(self, permission_id: UUID) -> None:
        await self._conn.execute("DELETE FROM permission WHERE id = %s", (permission_id,))

    async def is_referenced(self, permission_id: UUID) -> bool:
        """True if a role link or a user override points at the permission."""
        cur = await self._conn.execute(
            "SELECT EXISTS (SELECT 1 FROM role_permission WHERE permission_id = %s) "
            "OR EXISTS (SELECT 1 FROM user_permission WHERE permission_id = %s)",
            (permission_id, permission_id),
        )
        r = await cur.fetchone()
        return bool(r[0])
