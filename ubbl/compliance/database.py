"""CheckDatabase — SQLite-backed, append-only store of checks and reports.

Uses stdlib sqlite3 only.  Records are stored as JSON documents alongside
the indexed columns used for lookups.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path

from ubbl.compliance.models import CheckStatus, ComplianceCheck
from ubbl.errors import InvalidStateError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

_SCHEMA_SQL = """\
CREATE TABLE IF NOT EXISTS checks (
    seq         INTEGER PRIMARY KEY AUTOINCREMENT,
    id          TEXT    NOT NULL UNIQUE,
    project_id  TEXT    NOT NULL,
    check_date  TEXT    NOT NULL,
    status      TEXT    NOT NULL,
    document    TEXT    NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_checks_project ON checks(project_id);

CREATE TABLE IF NOT EXISTS reports (
    seq            INTEGER PRIMARY KEY AUTOINCREMENT,
    id             TEXT    NOT NULL UNIQUE,
    check_id       TEXT    NOT NULL REFERENCES checks(id),
    generated_date TEXT    NOT NULL,
    document       TEXT    NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_reports_check ON reports(check_id);

CREATE TRIGGER IF NOT EXISTS checks_completed_immutable
BEFORE UPDATE ON checks
WHEN old.status = 'completed'
BEGIN
    SELECT RAISE(ABORT, 'completed checks are immutable');
END;

CREATE TRIGGER IF NOT EXISTS reports_immutable
BEFORE UPDATE ON reports
BEGIN
    SELECT RAISE(ABORT, 'reports are immutable');
END;
"""


class CheckDatabase:
    """Persistence boundary for compliance checks and reports.

    A single connection is shared across threads and serialised with a
    lock, so concurrent evaluations may store their checks safely.

    Parameters
    ----------
    db_path:
        Path to the SQLite database file.  Use ``':memory:'`` for an
        ephemeral store (useful for testing).
    """

    def __init__(self, db_path: str | Path = ":memory:") -> None:
        self._db_path = str(db_path)
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.RLock()

    @property
    def conn(self) -> sqlite3.Connection:
        """Lazy-initialise and return the database connection."""
        if self._conn is None:
            try:
                self._conn = sqlite3.connect(self._db_path, check_same_thread=False)
                self._conn.row_factory = sqlite3.Row
                self._conn.execute("PRAGMA journal_mode=WAL")
                self._conn.execute("PRAGMA foreign_keys=ON")
                self._conn.executescript(_SCHEMA_SQL)
                self._conn.commit()
            except sqlite3.Error as exc:
                self._conn = None
                raise StorageError(f"Cannot open check database {self._db_path}: {exc}") from exc
        return self._conn

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    # -- Checks --------------------------------------------------------------

    def add_check(self, check: ComplianceCheck) -> None:
        """Insert a new check record."""
        with self._lock:
            try:
                self.conn.execute(
                    "INSERT INTO checks (id, project_id, check_date, status, document) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (
                        check.id,
                        check.project_id,
                        check.check_date.isoformat(),
                        check.status.value,
                        check.model_dump_json(),
                    ),
                )
                self.conn.commit()
            except sqlite3.Error as exc:
                raise StorageError(f"Cannot store check {check.id}: {exc}") from exc

    def update_check(self, check: ComplianceCheck) -> None:
        """Replace a stored check with its next state.

        Raises
        ------
        InvalidStateError
            If the stored check is already completed.
        """
        with self._lock:
            try:
                cur = self.conn.execute(
                    "UPDATE checks SET status = ?, document = ? WHERE id = ?",
                    (check.status.value, check.model_dump_json(), check.id),
                )
                self.conn.commit()
            except sqlite3.IntegrityError as exc:
                self.conn.rollback()
                raise InvalidStateError(f"Check {check.id} is completed and cannot change") from exc
            except sqlite3.Error as exc:
                self.conn.rollback()
                raise StorageError(f"Cannot update check {check.id}: {exc}") from exc
            if cur.rowcount == 0:
                raise NotFoundError(f"Check not found: {check.id}")

    def get_check(self, check_id: str) -> ComplianceCheck:
        """Fetch a check by id or raise :class:`NotFoundError`."""
        with self._lock:
            try:
                row = self.conn.execute(
                    "SELECT document FROM checks WHERE id = ?", (check_id,)
                ).fetchone()
            except sqlite3.Error as exc:
                raise StorageError(f"Cannot read check {check_id}: {exc}") from exc
        if row is None:
            raise NotFoundError(f"Check not found: {check_id}")
        return ComplianceCheck.model_validate_json(row["document"])

    def list_checks(
        self,
        project_id: str,
        *,
        status: CheckStatus | str | None = None,
    ) -> list[ComplianceCheck]:
        """Checks for *project_id*, newest first (insertion order breaks ties)."""
        sql = "SELECT document FROM checks WHERE project_id = ?"
        params: list[str] = [project_id]
        if status is not None:
            sql += " AND status = ?"
            params.append(CheckStatus(status).value)
        sql += " ORDER BY check_date DESC, seq DESC"

        with self._lock:
            try:
                rows = self.conn.execute(sql, params).fetchall()
            except sqlite3.Error as exc:
                raise StorageError(f"Cannot list checks for {project_id}: {exc}") from exc
        return [ComplianceCheck.model_validate_json(r["document"]) for r in rows]

    def count_checks(self) -> int:
        with self._lock:
            return self.conn.execute("SELECT COUNT(*) FROM checks").fetchone()[0]

    # -- Reports -------------------------------------------------------------

    def add_report(self, report_id: str, check_id: str, generated_date: str, document: str) -> None:
        """Insert a serialised report."""
        with self._lock:
            try:
                self.conn.execute(
                    "INSERT INTO reports (id, check_id, generated_date, document) "
                    "VALUES (?, ?, ?, ?)",
                    (report_id, check_id, generated_date, document),
                )
                self.conn.commit()
            except sqlite3.Error as exc:
                raise StorageError(f"Cannot store report {report_id}: {exc}") from exc

    def get_report(self, report_id: str) -> str:
        """Return the serialised report or raise :class:`NotFoundError`."""
        with self._lock:
            try:
                row = self.conn.execute(
                    "SELECT document FROM reports WHERE id = ?", (report_id,)
                ).fetchone()
            except sqlite3.Error as exc:
                raise StorageError(f"Cannot read report {report_id}: {exc}") from exc
        if row is None:
            raise NotFoundError(f"Report not found: {report_id}")
        return row["document"]

    def list_reports(self, check_id: str) -> list[str]:
        """Serialised reports generated from *check_id*, oldest first."""
        with self._lock:
            try:
                rows = self.conn.execute(
                    "SELECT document FROM reports WHERE check_id = ? ORDER BY seq",
                    (check_id,),
                ).fetchall()
            except sqlite3.Error as exc:
                raise StorageError(f"Cannot list reports for {check_id}: {exc}") from exc
        return [r["document"] for r in rows]
