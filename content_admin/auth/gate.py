# content_admin/auth/gate.py
"""
Session gate: turns a (username, password) pair into a server-side session
and answers "who is making this request" for every later request.
"""
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from flask import current_app

from content_admin.errors import InvalidCredentials, Unauthenticated
from content_admin.extensions import db
from content_admin.models import Account

from . import passwords
from .session_store import SessionRecord

logger = logging.getLogger(__name__)

# Compared against when the username does not exist so that both failure
# paths hash a password.
_DUMMY_HASH = None


def _dummy_hash():
    global _DUMMY_HASH
    if _DUMMY_HASH is None:
        _DUMMY_HASH = passwords.hash_password(secrets.token_urlsafe(16))
    return _DUMMY_HASH


@dataclass(frozen=True)
class AuthContext:
    account_id: int
    username: str
    is_admin: bool

    @classmethod
    def from_account(cls, account):
        return cls(account_id=account.id, username=account.username, is_admin=bool(account.is_admin))


class SessionGate:
    def __init__(self, store, lifetime=timedelta(hours=24)):
        self.store = store
        self.lifetime = lifetime

    def authenticate(self, username, password):
        """Return ``(sid, account)`` or raise ``InvalidCredentials``."""
        account = Account.query.filter_by(username=username).first()
        if account is None:
            passwords.verify_password(password, _dummy_hash())
            logger.info("Login rejected for username=%s", username)
            raise InvalidCredentials()

        if not passwords.verify_password(password, account.password_hash):
            logger.info("Login rejected for username=%s", username)
            raise InvalidCredentials()

        sid = secrets.token_urlsafe(32)
        expires_at = datetime.now(timezone.utc) + self.lifetime
        self.store.set(sid, SessionRecord(account_id=account.id, expires_at=expires_at))
        logger.info("Login ok: %s (id=%s)", account.username, account.id)
        return sid, account

    def current_identity(self, sid):
        if not sid:
            raise Unauthenticated()

        record = self.store.get(sid)
        if record is None:
            raise Unauthenticated()

        account = db.session.get(Account, record.account_id)
        if account is None:
            # Account deleted while the session was alive
            self.store.destroy(sid)
            raise Unauthenticated()

        return AuthContext.from_account(account)

    def logout(self, sid):
        if sid:
            self.store.destroy(sid)

    def revoke_account(self, account_id):
        """Drop every session bound to ``account_id``."""
        self.store.destroy_for_account(account_id)


def get_gate():
    return current_app.extensions["session_gate"]
