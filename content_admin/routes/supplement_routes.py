# content_admin/routes/supplement_routes.py
import logging

from flask import Blueprint, jsonify

from content_admin.auth.decorators import admin_required, login_required
from content_admin.errors import NotFound, ValidationError
from content_admin.extensions import db
from content_admin.models import Supplement
from content_admin.schemas import SupplementCreate, SupplementUpdate, load_payload
from content_admin.utils.content import parse_id
from content_admin.utils.persistence import commit

logger = logging.getLogger(__name__)

supplement_bp = Blueprint("supplements", __name__)


def _get_supplement_or_404(raw_id):
    supplement_id = parse_id(raw_id)
    if supplement_id is None:
        raise ValidationError(f"Invalid id: {raw_id!r}")
    supplement = db.session.get(Supplement, supplement_id)
    if supplement is None:
        raise NotFound("Supplement not found")
    return supplement


@supplement_bp.route("", methods=["GET"])
@login_required
@admin_required
def list_supplements(auth):
    supplements = Supplement.query.order_by(Supplement.name).all()
    return jsonify([s.to_dict() for s in supplements]), 200


@supplement_bp.route("", methods=["POST"])
@login_required
@admin_required
def create_supplement(auth):
    payload = load_payload(SupplementCreate)
    supplement = Supplement(name=payload.name, category=payload.category)
    db.session.add(supplement)
    commit("create supplement", payload.name)
    logger.info("Supplement %r created (id=%s)", supplement.name, supplement.id)
    return jsonify(supplement.to_dict()), 201


@supplement_bp.route("/<string:supplement_id>", methods=["PUT"])
@login_required
@admin_required
def update_supplement(supplement_id, auth):
    supplement = _get_supplement_or_404(supplement_id)
    for field, value in load_payload(SupplementUpdate).check_id(supplement.id).changes().items():
        setattr(supplement, field, value)
    commit("update supplement", supplement.id)
    return jsonify(supplement.to_dict()), 200


@supplement_bp.route("/<string:supplement_id>", methods=["DELETE"])
@login_required
@admin_required
def delete_supplement(supplement_id, auth):
    supplement = _get_supplement_or_404(supplement_id)
    db.session.delete(supplement)
    commit("delete supplement", supplement.id)
    logger.info("Supplement id=%s deleted", supplement.id)
    return jsonify({"message": "Supplement deleted successfully"}), 200
