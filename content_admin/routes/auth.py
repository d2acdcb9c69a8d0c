# content_admin/routes/auth.py
import logging

from flask import Blueprint, current_app, jsonify

from content_admin.auth.decorators import login_required, session_id
from content_admin.auth.gate import get_gate
from content_admin.extensions import db
from content_admin.models import Account
from content_admin.schemas import LoginRequest, load_payload

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
def login():
    payload = load_payload(LoginRequest)
    sid, account = get_gate().authenticate(payload.username, payload.password)

    config = current_app.config
    response = jsonify(account.to_dict())
    response.set_cookie(
        config["AUTH_COOKIE_NAME"],
        sid,
        max_age=int(config["SESSION_LIFETIME"].total_seconds()),
        httponly=True,
        secure=config["AUTH_COOKIE_SECURE"],
        samesite=config["AUTH_COOKIE_SAMESITE"],
    )
    return response, 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    get_gate().logout(session_id())

    response = jsonify({"message": "Logged out"})
    config = current_app.config
    response.delete_cookie(
        config["AUTH_COOKIE_NAME"],
        httponly=True,
        secure=config["AUTH_COOKIE_SECURE"],
        samesite=config["AUTH_COOKIE_SAMESITE"],
    )
    return response, 200


@auth_bp.route("/user", methods=["GET"])
@auth_bp.route("/me", methods=["GET"])
@login_required
def current_user(auth):
    account = db.session.get(Account, auth.account_id)
    return jsonify(account.to_dict()), 200
