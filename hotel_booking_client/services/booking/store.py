"""
Session store resolving opaque session ids to booking sessions.

Screens pass the session id between steps instead of re-serializing dates,
guests and card fields into navigation parameters. Sessions are persisted as
JSON snapshots in SQLite so an interrupted flow can be resumed.
"""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Callable, Optional

from ...config import Settings, get_settings
from ...core.exceptions import SessionNotFoundError
from ...core.models.booking import SessionSnapshot
from ...utils.logging import configure_logging, get_logger
from .session import BookingSession

logger = get_logger("hotel.store")


class SessionStore:
    """SQLite-backed store of in-progress booking sessions."""

    def __init__(
        self,
        db_path: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        self.settings = settings or get_settings()
        configure_logging(self.settings.log_level)
        self.db_path = db_path or self.settings.state_db_path
        self._today = today
        self._ensure_table()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _ensure_table(self) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS booking_sessions (
                    session_id TEXT PRIMARY KEY,
                    snapshot TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def create(self) -> BookingSession:
        """Start a new reservation and persist it."""
        session = BookingSession(settings=self.settings, today=self._today)
        self.save(session)
        logger.info(f"store: created session {session.session_id}")
        return session

    def save(self, session: BookingSession) -> None:
        """Persist the current state of ``session``."""
        payload = session.snapshot().model_dump_json()
        conn = self._connect()
        try:
            conn.execute(
                "INSERT OR REPLACE INTO booking_sessions (session_id, snapshot) VALUES (?, ?)",
                (session.session_id, payload),
            )
            conn.commit()
        finally:
            conn.close()

    def get(self, session_id: str) -> BookingSession:
        """Load a session by id. Raises SessionNotFoundError if unknown."""
        conn = self._connect()
        try:
            cur = conn.execute(
                "SELECT snapshot FROM booking_sessions WHERE session_id = ?",
                (session_id,),
            )
            row = cur.fetchone()
        finally:
            conn.close()

        if row is None:
            raise SessionNotFoundError(session_id)

        snapshot = SessionSnapshot.model_validate_json(row[0])
        return BookingSession.from_snapshot(
            snapshot, settings=self.settings, today=self._today
        )

    def exists(self, session_id: str) -> bool:
        conn = self._connect()
        try:
            cur = conn.execute(
                "SELECT 1 FROM booking_sessions WHERE session_id = ?", (session_id,)
            )
            return cur.fetchone() is not None
        finally:
            conn.close()

    def discard(self, session_id: str) -> None:
        """Drop a session after cancellation or an acknowledged completion."""
        conn = self._connect()
        try:
            conn.execute(
                "DELETE FROM booking_sessions WHERE session_id = ?", (session_id,)
            )
            conn.commit()
        finally:
            conn.close()
        logger.info(f"store: discarded session {session_id}")

    def cancel(self, session_id: str) -> BookingSession:
        """Cancel a stored session, remove it and return the cancelled session.

        Raises:
            SessionNotFoundError: If no session is stored under the id
        """
        session = self.get(session_id)
        session.cancel()
        self.discard(session_id)
        return session
