"""PostgreSQL user permission override repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from evently.domain.entities import PermissionOverride, UserPermission

_SELECT = (
    "SELECT up.id, up.user_id, up.permission_id, up.granted, up.expires_at, "
    "up.granted_by, up.reason, up.created_at, up.updated_at, p.code "
    "FROM user_permission up JOIN permission p ON p.id = up.permission_id"
)


def _row_to_override(r) -> UserPermission:
    return UserPermission(
        id=r[0],
        user_id=r[1],
        permission_id=r[2],
        granted=r[3],
        expires_at=r[4],
        granted_by=r[5],
        reason=r[6],
        created_at=r[7],
        updated_at=r[8],
        permission_code=r[9],
    )


class PostgresUserPermissionRepository:
    """Override repository backed by a unique (user_id, permission_id) constraint."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_active_overrides(
        self, user_id: str, as_of: datetime
    ) -> list[PermissionOverride]:
        """Overrides in force at `as_of`; an override expiring exactly then is excluded."""
        cur = await self._conn.execute(
            "SELECT p.code, up.granted FROM user_permission up "
            "JOIN permission p ON p.id = up.permission_id "
            "WHERE up.user_id = %s AND (up.expires_at IS NULL OR up.expires_at > %s)",
            (user_id, as_of),
        )
        rows = await cur.fetchall()
        return [PermissionOverride(permission_code=r[0], granted=r[1]) for r in rows]

    async def list_for_user(self, user_id: str) -> list[UserPermission]:
        cur = await self._conn.execute(
            f"{_SELECT} WHERE up.user_id = %s ORDER BY up.created_at DESC",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    async def upsert(self, override: UserPermission) -> UserPermission:
        """Insert the override or replace the existing row for the same pair."""
        cur = await self._conn.execute(
            "INSERT INTO user_permission (id, user_id, permission_id, granted, expires_at, "
            "granted_by, reason, created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (user_id, permission_id) DO UPDATE SET "
            "granted = EXCLUDED.granted, expires_at = EXCLUDED.expires_at, "
            "granted_by = EXCLUDED.granted_by, reason = EXCLUDED.reason, "
            "updated_at = EXCLUDED.updated_at "
            "RETURNING id, created_at",
            (
                override.id,
                override.user_id,
                override.permission_id,
                override.granted,
                override.expires_at,
                override.granted_by,
                override.reason,
                override.created_at,
                override.updated_at,
            ),
        )
        r = await cur.fetchone()
        override.id = r[0]
        override.created_at = r[1]
        return override

    async def delete(self, user_id: str, permission_id: UUID) -> None:
        await self._conn.execute(
            "DELETE FROM user_permission WHERE user_id = %s AND permission_id = %s",
            (user_id, permission_id),
        )
