from datetime import datetime, timezone

from content_admin.extensions import db


class AuthSession(db.Model):
    """Server-side login session, used by the database session store."""

    __tablename__ = "auth_sessions"

    sid = db.Column(db.String(128), primary_key=True)
    account_id = db.Column(db.Integer, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    expires_at = db.Column(db.DateTime, nullable=False)

    def __repr__(self):
        return f"<AuthSession account={self.account_id}>"
