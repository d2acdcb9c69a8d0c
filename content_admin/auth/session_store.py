# content_admin/auth/session_store.py
"""
Session persistence keyed by the opaque value stored in the auth cookie.

The gate only talks to the ``SessionStore`` interface, so the process-local
store used in development can be replaced by the database-backed one without
touching the gate.
"""
import threading
from dataclasses import dataclass
from datetime import datetime, timezone

from content_admin.extensions import db
from content_admin.models import AuthSession


def _utcnow():
    return datetime.now(timezone.utc)


def _as_utc(value):
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class SessionRecord:
    account_id: int
    expires_at: datetime

    def is_expired(self, now=None):
        return _as_utc(self.expires_at) <= (now or _utcnow())


class SessionStore:
    def get(self, sid):
        raise NotImplementedError

    def set(self, sid, record):
        raise NotImplementedError

    def destroy(self, sid):
        raise NotImplementedError

    def destroy_for_account(self, account_id):
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    def __init__(self):
        self._records = {}
        self._lock = threading.Lock()

    def get(self, sid):
        with self._lock:
            record = self._records.get(sid)
            if record is not None and record.is_expired():
                del self._records[sid]
                return None
            return record

    def set(self, sid, record):
        with self._lock:
            self._records[sid] = record

    def destroy(self, sid):
        with self._lock:
            self._records.pop(sid, None)

    def destroy_for_account(self, account_id):
        with self._lock:
            for sid in [s for s, r in self._records.items() if r.account_id == account_id]:
                del self._records[sid]

    def __len__(self):
        return len(self._records)


class DatabaseSessionStore(SessionStore):
    """Sessions in the ``auth_sessions`` table. Storage errors propagate."""

    def get(self, sid):
        row = db.session.get(AuthSession, sid)
        if row is None:
            return None
        record = SessionRecord(account_id=row.account_id, expires_at=_as_utc(row.expires_at))
        if record.is_expired():
            db.session.delete(row)
            db.session.commit()
            return None
        return record

    def set(self, sid, record):
        row = db.session.get(AuthSession, sid)
        if row is None:
            row = AuthSession(sid=sid)
            db.session.add(row)
        row.account_id = record.account_id
        row.expires_at = record.expires_at
        db.session.commit()

    def destroy(self, sid):
        AuthSession.query.filter_by(sid=sid).delete()
        db.session.commit()

    def destroy_for_account(self, account_id):
        # Committed by the caller together with the account delete
        AuthSession.query.filter_by(account_id=account_id).delete()


def build_session_store(config):
    kind = (config.get("SESSION_STORE") or "memory").strip().lower()
    if kind == "memory":
        return MemorySessionStore()
    if kind == "database":
        return DatabaseSessionStore()
    raise RuntimeError(f"Unknown SESSION_STORE: {kind!r}")
