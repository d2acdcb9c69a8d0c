# content_admin/routes/user_routes.py
import logging

from flask import Blueprint, jsonify

from content_admin.auth.decorators import admin_required, login_required
from content_admin.auth.gate import get_gate
from content_admin.auth.passwords import hash_password
from content_admin.errors import Conflict, NotFound, ValidationError
from content_admin.extensions import db
from content_admin.models import Account
from content_admin.schemas import AccountCreate, AccountUpdate, load_payload
from content_admin.utils.content import parse_id
from content_admin.utils.persistence import commit

logger = logging.getLogger(__name__)

user_bp = Blueprint("users", __name__)


def _get_account_or_404(raw_id):
    account_id = parse_id(raw_id)
    if account_id is None:
        raise ValidationError(f"Invalid id: {raw_id!r}")
    account = db.session.get(Account, account_id)
    if account is None:
        raise NotFound("User not found")
    return account


def _ensure_username_free(username, account_id=None):
    existing = Account.query.filter_by(username=username).first()
    if existing is not None and existing.id != account_id:
        raise Conflict("Username is already taken")


@user_bp.route("", methods=["GET"])
@login_required
@admin_required
def list_users(auth):
    accounts = Account.query.order_by(Account.username).all()
    return jsonify([a.to_dict() for a in accounts]), 200


@user_bp.route("", methods=["POST"])
@login_required
@admin_required
def create_user(auth):
    payload = load_payload(AccountCreate)
    _ensure_username_free(payload.username)

    account = Account(
        username=payload.username,
        password_hash=hash_password(payload.password),
        is_admin=payload.is_admin,
    )
    db.session.add(account)
    commit("create user", payload.username)
    logger.info("User %s created by %s (admin=%s)", account.username, auth.username, account.is_admin)
    return jsonify(account.to_dict()), 201


@user_bp.route("/<string:account_id>", methods=["PUT"])
@login_required
@admin_required
def update_user(account_id, auth):
    account = _get_account_or_404(account_id)
    payload = load_payload(AccountUpdate).check_id(account.id)
    changes = payload.changes()

    if "username" in changes:
        _ensure_username_free(payload.username, account.id)
        account.username = payload.username
    if "is_admin" in changes:
        account.is_admin = payload.is_admin
    # Empty password means "keep the current one"
    if payload.password:
        account.password_hash = hash_password(payload.password)

    commit("update user", account.id)
    logger.info("User id=%s updated by %s", account.id, auth.username)
    return jsonify(account.to_dict()), 200


@user_bp.route("/<string:account_id>", methods=["DELETE"])
@login_required
@admin_required
def delete_user(account_id, auth):
    account = _get_account_or_404(account_id)
    if account.id == auth.account_id:
        raise ValidationError("You cannot delete your own account")

    get_gate().revoke_account(account.id)
    db.session.delete(account)
    commit("delete user", account.id)
    logger.info("User id=%s deleted by %s", account.id, auth.username)
    return jsonify({"message": "User deleted successfully"}), 200
