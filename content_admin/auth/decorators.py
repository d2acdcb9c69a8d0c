# content_admin/auth/decorators.py
from functools import wraps

from flask import current_app, request

from content_admin.errors import Forbidden

from .gate import get_gate


def session_id():
    return request.cookies.get(current_app.config["AUTH_COOKIE_NAME"])


def login_required(f):
    """Resolve the session cookie and hand the view an ``auth`` keyword."""
    @wraps(f)
    def decorated(*args, **kwargs):
        auth = get_gate().current_identity(session_id())
        return f(*args, auth=auth, **kwargs)
    return decorated


def admin_required(f):
    """Stack under ``login_required``: 403 unless the identity is elevated."""
    @wraps(f)
    def decorated(*args, auth, **kwargs):
        if not auth.is_admin:
            raise Forbidden()
        return f(*args, auth=auth, **kwargs)
    return decorated
