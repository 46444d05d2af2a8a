"""
SQLite-backed storage for user records.

``UserRepository`` opens a short-lived connection per call, so each
operation is a single statement plus commit and is atomic on its own.
Nothing here enforces business rules: callers check existence and age
eligibility before writing.

Birth dates are stored as ISO-8601 text (``YYYY-MM-DD``), whose lexical
order matches calendar order, so range queries compare strings.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from datetime import date
from typing import List, Optional
from uuid import UUID

from users_api.app.core.db import get_connection
from users_api.app.schemas.user import UserRecord

logger = logging.getLogger(__name__)

_COLUMNS = "id, email, first_name, last_name, birth_date, address, phone"


class UserRepository:
    """Persist, fetch, search and delete ``UserRecord`` rows."""

    def __init__(self, database_path: Optional[str] = None):
        self.database_path = database_path

    def _connect(self) -> sqlite3.Connection:
        return get_connection(self.database_path)

    def save(self, record: UserRecord) -> UserRecord:
        """Insert or fully overwrite a record and return the stored copy.

        A record without ``id`` receives a freshly generated UUID and is
        inserted.  A record with ``id`` replaces every column of the row
        with that id (inserting it if absent).
        """
        stored = record.model_copy(update={"id": record.id or uuid.uuid4()})
        conn = self._connect()
        try:
            conn.execute(
                f"""
                INSERT INTO users ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    email = excluded.email,
                    first_name = excluded.first_name,
                    last_name = excluded.last_name,
                    birth_date = excluded.birth_date,
                    address = excluded.address,
                    phone = excluded.phone
                """,
                (
                    str(stored.id),
                    stored.email,
                    stored.first_name,
                    stored.last_name,
                    stored.birth_date.isoformat(),
                    stored.address,
                    stored.phone,
                ),
            )
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
        logger.debug("Saved user %s", stored.id)
        return stored

    def find_by_id(self, user_id: UUID) -> Optional[UserRecord]:
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM users WHERE id = ?",
                (str(user_id),),
            ).fetchone()
            return self._row_to_record(row) if row else None
        finally:
            conn.close()

    def find_by_birth_date_range(self, from_date: date, to_date: date) -> List[UserRecord]:
        """Return users with ``from_date <= birth_date <= to_date``."""
        conn = self._connect()
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM users "
                "WHERE birth_date >= ? AND birth_date <= ? "
                "ORDER BY birth_date ASC, id ASC",
                (from_date.isoformat(), to_date.isoformat()),
            ).fetchall()
            return [self._row_to_record(row) for row in rows]
        finally:
            conn.close()

    def delete_by_id(self, user_id: UUID) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM users WHERE id = ?", (str(user_id),))
            conn.commit()
        finally:
            conn.close()
        logger.debug("Deleted user %s", user_id)

    def count(self) -> int:
        conn = self._connect()
        try:
            row = conn.execute("SELECT COUNT(*) AS count FROM users").fetchone()
            return row["count"]
        finally:
            conn.close()

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> UserRecord:
        return UserRecord(
            id=UUID(row["id"]),
            email=row["email"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            birth_date=date.fromisoformat(row["birth_date"]),
            address=row["address"],
            phone=row["phone"],
        )
