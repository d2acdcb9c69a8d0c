# content_admin/routes/content_routes.py
"""
Blog posts and research documents share one set of handlers: public reads
by id or slug, admin-only create/update/delete by numeric id.
"""
from flask import Blueprint, jsonify

from content_admin.auth.decorators import admin_required, login_required
from content_admin.errors import NotFound, ValidationError
from content_admin.models import BlogPost, ResearchDocument
from content_admin.schemas import (
    BlogPostCreate,
    BlogPostUpdate,
    ResearchDocumentCreate,
    ResearchDocumentUpdate,
    load_payload,
)
from content_admin.utils.content import (
    create_record,
    delete_record,
    parse_id,
    resolve,
    update_record,
)


def _record_id(raw):
    record_id = parse_id(raw)
    if record_id is None:
        raise ValidationError(f"Invalid id: {raw!r}")
    return record_id


def make_content_blueprint(name, segment, model, create_schema, update_schema, label,
                           track_author=False):
    bp = Blueprint(name, __name__)

    # 🟣 Listar (más recientes primero)
    @bp.route(f"/{segment}", methods=["GET"])
    def list_records():
        records = model.query.order_by(model.created_at.desc(), model.id.desc()).all()
        return jsonify([r.to_dict() for r in records]), 200

    # 🔵 Ver uno (por ID o slug)
    @bp.route(f"/{segment}/<string:identifier>", methods=["GET"])
    def get_record(identifier):
        return jsonify(resolve(identifier, model).to_dict()), 200

    # 🟢 Crear
    @bp.route(f"/admin/{segment}", methods=["POST"])
    @login_required
    @admin_required
    def create(auth):
        data = load_payload(create_schema).model_dump()
        if track_author:
            data["author_id"] = auth.account_id
        record = create_record(model, data)
        return jsonify(record.to_dict()), 201

    # 🟡 Editar
    @bp.route(f"/admin/{segment}/<string:record_id>", methods=["PUT"])
    @login_required
    @admin_required
    def update(record_id, auth):
        record_id = _record_id(record_id)
        changes = load_payload(update_schema).check_id(record_id).changes()
        record = update_record(model, record_id, changes)
        if record is None:
            raise NotFound(f"{label} not found")
        return jsonify(record.to_dict()), 200

    # 🔴 Borrar
    @bp.route(f"/admin/{segment}/<string:record_id>", methods=["DELETE"])
    @login_required
    @admin_required
    def delete(record_id, auth):
        record_id = _record_id(record_id)
        if not delete_record(model, record_id):
            raise NotFound(f"{label} not found")
        return jsonify({"message": f"{label} deleted successfully"}), 200

    return bp


blog_bp = make_content_blueprint(
    "blog", "blog", BlogPost, BlogPostCreate, BlogPostUpdate, "Post", track_author=True)
research_bp = make_content_blueprint(
    "research", "research", ResearchDocument, ResearchDocumentCreate, ResearchDocumentUpdate,
    "Research document")
