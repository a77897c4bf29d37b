"""PostgreSQL user repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from evently.domain.entities import User, UserRole
from evently.domain.value_objects import UserStatus


class PostgresUserRepository:
    """Reads and role assignment on the app_user table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> User | None:
        cur = await self._conn.execute(
            "SELECT id, role_id, status, email, username FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return User(
            id=r[0],
            role_id=r[1],
            status=UserStatus(r[2]),
            email=r[3],
            username=r[4],
        )

    async def create(self, user: User) -> User:
        """Insert user; if the id already exists the stored row wins and is returned."""
        await self._conn.execute(
            "INSERT INTO app_user (id, role_id, status, email, username) "
            "VALUES (%s, %s, %s, %s, %s) ON CONFLICT (id) DO NOTHING",
            (user.id, user.role_id, user.status.value, user.email, user.username),
        )
        return await self.get_by_id(user.id)

    async def get_role(self, user_id: str) -> UserRole | None:
        """Role id and name of the user, or None if user or role is missing."""
        cur = await self._conn.execute(
            "SELECT r.id, r.name FROM app_user u JOIN role r ON r.id = u.role_id "
            "WHERE u.id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return UserRole(role_id=r[0], role_name=r[1])

    async def count_by_role(self, role_id: UUID) -> int:
        cur = await self._conn.execute(
            "SELECT COUNT(*) FROM app_user WHERE role_id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return r[0]

    async def update_role(self, user_id: str, role_id: UUID | None) -> None:
        await self._conn.execute(
            "UPDATE app_user SET role_id = %s, updated_at = NOW() WHERE id = %s",
            (role_id, user_id),
        )
