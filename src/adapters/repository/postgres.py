"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness
----------
The domain checks ``exists_by_email`` before saving, but that check and
the INSERT are separate round-trips. The UNIQUE constraint on
``users.email`` is the real guard: a concurrent writer that loses the race
gets a UniqueViolation, which this adapter reports as EmailAlreadyExists.
A second INSERT for a stored id trips the primary key instead and is
reported as UserAlreadyExists.
"""

import logging
from pathlib import Path
from typing import Any, Optional
from uuid import UUID

from psycopg import errors
from psycopg_pool import ConnectionPool

from src.domain.exceptions import EmailAlreadyExists, UserAlreadyExists, UserNotFound
from src.domain.user import User

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, email, phone, birthday"
_EMAIL_CONSTRAINT = "users_email_unique"
_PRIMARY_KEY = "users_pkey"


def _row_to_user(row: tuple[Any, ...]) -> User:
    """Map a ``users`` row (in _COLUMNS order) back to the domain entity."""
    return User(id=row[0], name=row[1], email=row[2], phone=row[3], birthday=row[4])


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def save(self, user: User) -> User:
        """
        Insert a new user row.

        Raises:
            UserAlreadyExists: If a row with ``user.id`` is already stored
            EmailAlreadyExists: If the UNIQUE(email) constraint rejects the row
        """
        sql = f"""
            INSERT INTO users (id, name, email, phone, birthday)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING {_COLUMNS}
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    sql, (user.id, user.name, user.email, user.phone, user.birthday)
                )
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation as e:
            if e.diag.constraint_name == _PRIMARY_KEY:
                raise UserAlreadyExists(user.id) from e
            if e.diag.constraint_name != _EMAIL_CONSTRAINT:
                raise
            raise EmailAlreadyExists(user.email) from e

        return _row_to_user(row)

    def find_by_id(self, user_id: UUID) -> Optional[User]:
        sql = f"SELECT {_COLUMNS} FROM users WHERE id = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (user_id,))
            row = cursor.fetchone()

        return _row_to_user(row) if row is not None else None

    def find_all(self) -> list[User]:
        sql = f"SELECT {_COLUMNS} FROM users ORDER BY created_at, id"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql)
            rows = cursor.fetchall()

        return [_row_to_user(row) for row in rows]

    def update(self, user: User) -> User:
        """
        Overwrite name, email, phone and birthday of an existing row.

        Raises:
            UserNotFound: If no row has ``user.id`` (e.g. deleted concurrently)
            EmailAlreadyExists: If the new email belongs to another row
        """
        sql = f"""
            UPDATE users
            SET name = %s, email = %s, phone = %s, birthday = %s
            WHERE id = %s
            RETURNING {_COLUMNS}
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    sql, (user.name, user.email, user.phone, user.birthday, user.id)
                )
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation as e:
            if e.diag.constraint_name != _EMAIL_CONSTRAINT:
                raise
            raise EmailAlreadyExists(user.email) from e

        if row is None:
            raise UserNotFound(user.id)
        return _row_to_user(row)

    def delete_by_id(self, user_id: UUID) -> None:
        """
        Delete a row by primary key.

        Raises:
            UserNotFound: If no row has ``user_id``
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("DELETE FROM users WHERE id = %s", (user_id,))
            conn.commit()
            deleted = cursor.rowcount

        if deleted == 0:
            raise UserNotFound(user_id)

    def exists_by_email(self, email: str) -> bool:
        sql = "SELECT EXISTS (SELECT 1 FROM users WHERE email = %s)"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        return bool(row[0])


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
